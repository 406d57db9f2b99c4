"""Row partitioning for a single import submission."""

from collections.abc import Sequence
from datetime import date

from fundify.domain.constants import DEFAULT_CATEGORY
from fundify.domain.models import (
    Accepted,
    Account,
    BatchPartition,
    ChartOfAccounts,
    ImportDiagnostic,
    RawAccountRow,
    Rejected,
    Transaction,
)
from fundify.domain.services.headers import (
    ACCOUNT_PLAN_SCHEMA,
    TRANSACTION_SCHEMA,
    build_account_row,
    build_transaction_row,
    is_blank_row,
    map_headers,
)
from fundify.domain.services.normalization import normalize_field
from fundify.domain.services.reconciliation import reconcile_transaction


def row_number_for(index: int) -> int:
    """Return the 1-based line number of a data row, header included."""
    return index + 2


def partition_rows(
    rows: Sequence[Sequence[str]],
    chart: ChartOfAccounts,
    validate: bool,
    today: date | None = None,
    default_category: str = DEFAULT_CATEGORY,
) -> BatchPartition:
    """Reconcile every data row of a tokenized transaction file.

    Rows are processed independently and their outcomes collected in row
    order. Blank rows are ignored; rows that cannot describe a transaction
    (fewer than two cells, or neither amount nor description) and rows
    failing reconciliation produce diagnostics.

    Args:
        rows: Tokenized rows, header first.
        chart: Chart of accounts keyed by account identifier.
        validate: Whether to reject unknown account identifiers.
        today: Fallback date for rows without a usable date.
        default_category: Category used when none can be resolved.

    Returns:
        BatchPartition: Accepted transactions (without ids), diagnostics
        and coercion notices.
    """
    if not rows:
        return BatchPartition()
    mapping = map_headers(rows[0], TRANSACTION_SCHEMA)
    accepted: list[Transaction] = []
    diagnostics: list[ImportDiagnostic] = []
    notices: list[str] = []
    data_rows = rows[1:]

    for index, values in enumerate(data_rows):
        if is_blank_row(values):
            continue
        row_number = row_number_for(index)
        payload = tuple(values)
        if len(values) < 2:
            diagnostics.append(
                ImportDiagnostic(
                    row_number,
                    f"too few columns ({len(values)})",
                    payload,
                )
            )
            continue
        raw = build_transaction_row(values, mapping)
        if not raw.has_amount and not raw.has_description:
            diagnostics.append(
                ImportDiagnostic(
                    row_number,
                    "no Valor nor Item/description",
                    payload,
                )
            )
            continue

        outcome = reconcile_transaction(
            raw,
            chart,
            validate,
            row_number,
            today=today,
            default_category=default_category,
            payload=payload,
        )
        if isinstance(outcome, Accepted):
            accepted.append(outcome.transaction)
            notices.extend(outcome.warnings)
        elif isinstance(outcome, Rejected):
            diagnostics.append(outcome.diagnostic)
        else:
            notices.append(
                f"Row {outcome.row_number}: skipped, {outcome.reason}"
            )

    return BatchPartition(
        accepted=accepted,
        diagnostics=diagnostics,
        notices=notices,
        row_count=len(data_rows),
    )


def parse_account_rows(
    rows: Sequence[Sequence[str]],
) -> tuple[list[Account], list[str]]:
    """Build chart-of-accounts entries from a tokenized account-plan file.

    Args:
        rows: Tokenized rows, header first.

    Returns:
        tuple[list[Account], list[str]]: Accounts in file order and notes
        about skipped rows.

    Raises:
        MissingColumnError: If the header row has no account id column.
    """
    if not rows:
        return [], []
    mapping = map_headers(rows[0], ACCOUNT_PLAN_SCHEMA)
    accounts: list[Account] = []
    notes: list[str] = []
    for index, values in enumerate(rows[1:]):
        if is_blank_row(values):
            continue
        row_number = row_number_for(index)
        raw = build_account_row(values, mapping)
        if raw.account_id is None:
            notes.append(f"Row {row_number}: skipped, not enough columns")
            continue
        if not raw.account_id:
            notes.append(f"Row {row_number}: skipped, empty ID_Conta")
            continue
        accounts.append(_account_from_row(raw))
    return accounts, notes


def _account_from_row(raw: RawAccountRow) -> Account:
    return Account(
        account_id=normalize_field(raw.account_id),
        nature=normalize_field(raw.nature),
        account_type=normalize_field(raw.account_type),
        category=normalize_field(raw.category),
        subcategory=normalize_field(raw.subcategory),
        name=normalize_field(raw.name),
    )


def build_chart(accounts: Sequence[Account]) -> ChartOfAccounts:
    """Index accounts by identifier; later duplicates replace earlier ones."""
    return {account.account_id: account for account in accounts}


__all__ = [
    "row_number_for",
    "partition_rows",
    "parse_account_rows",
    "build_chart",
]
