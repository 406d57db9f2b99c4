"""Command-line adapter for imports and aggregate reports.

Records are kept in the store selected by FUNDIFY_STORE; use
``FUNDIFY_STORE=sqlalchemy`` so successive commands share the same data.
"""

from decimal import Decimal
from pathlib import Path
from typing import Annotated, Optional

import typer

from fundify.domain.exceptions import ImportRejectedError, SubmissionError
from fundify.infrastructure.container import (
    build_cash_flow,
    build_dashboard,
    build_import_account_plan,
    build_import_transactions,
    build_record_store,
)
from fundify.infrastructure.logging.logger import get_usage_logger
from fundify.infrastructure.settings import ImportSettings


app = typer.Typer(help="Import financial records and print aggregates.")


def format_currency(value: Decimal) -> str:
    """Format an amount as Brazilian reais, e.g. ``R$ 1.234,56``."""
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {localized}"


def _load_store():
    settings = ImportSettings.from_env()
    if settings.store_backend == "memory":
        typer.echo(
            "Warning: in-memory store, records are not kept between runs.",
            err=True,
        )
    return settings, build_record_store(settings)


def _report_failure(exc: SubmissionError) -> None:
    typer.echo(f"Import failed: {exc}", err=True)
    for diagnostic in exc.diagnostics:
        typer.echo(f"  {diagnostic}", err=True)
    if isinstance(exc, ImportRejectedError):
        for payload in exc.debug_sample:
            typer.echo(f"  sample: {payload}", err=True)


@app.command("import-accounts")
def import_accounts(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
) -> None:
    """Replace the chart of accounts with an account-plan file."""
    get_usage_logger().info(f"import-accounts {path}")
    settings, store = _load_store()
    use_case = build_import_account_plan(store, settings)
    try:
        result = use_case.execute(path.read_bytes())
    except SubmissionError as exc:
        _report_failure(exc)
        raise typer.Exit(code=1)
    typer.echo(result.message)
    for note in result.notices:
        typer.echo(f"  {note}")


@app.command("import-transactions")
def import_transactions(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
    validate: Annotated[
        bool,
        typer.Option(
            "--validate/--no-validate",
            help="Reject rows whose Id_Item is not in the chart of accounts.",
        ),
    ] = True,
) -> None:
    """Import a transaction file."""
    get_usage_logger().info(f"import-transactions {path} validate={validate}")
    settings, store = _load_store()
    use_case = build_import_transactions(store, settings)
    try:
        result = use_case.execute(path.read_bytes(), validate=validate)
    except SubmissionError as exc:
        _report_failure(exc)
        raise typer.Exit(code=1)
    typer.echo(result.message)
    for diagnostic in result.diagnostics:
        typer.echo(f"  warning: {diagnostic}")


@app.command("dashboard")
def dashboard() -> None:
    """Print balance, monthly and category aggregates."""
    get_usage_logger().info("dashboard")
    _, store = _load_store()
    view = build_dashboard(store).execute()
    balance = view.balance
    typer.echo(f"Balance:  {format_currency(balance.total)}")
    typer.echo(f"Income:   {format_currency(balance.income)}")
    typer.echo(f"Expenses: {format_currency(balance.expenses)}")
    typer.echo(f"Savings:  {format_currency(balance.savings)}")
    for point in view.monthly:
        typer.echo(
            f"{point.key} {point.month}: "
            f"+{format_currency(point.income)} "
            f"-{format_currency(point.expenses)}"
        )
    for entry in view.categories:
        typer.echo(f"{entry.category}: {format_currency(entry.amount)}")


@app.command("cash-flow")
def cash_flow(
    year: Annotated[
        Optional[int],
        typer.Option(help="Calendar year; defaults to the current year."),
    ] = None,
) -> None:
    """Print the twelve-month cash-flow matrix."""
    get_usage_logger().info(f"cash-flow year={year}")
    _, store = _load_store()
    matrix = build_cash_flow(store).execute(year)
    typer.echo(f"Cash flow {matrix.year}")
    for month in matrix.months:
        typer.echo(
            f"{month.label}: opening={format_currency(month.opening)} "
            f"income={format_currency(month.income)} "
            f"expense={format_currency(month.expense)} "
            f"closing={format_currency(month.closing)}"
        )


def main() -> None:
    """Run the command-line application."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
