"""Domain services for dashboard and cash-flow aggregates."""

from collections.abc import Callable, Iterable
from decimal import Decimal
from logging import Logger

from fundify.domain.constants import INCOME, MONTH_LABELS
from fundify.domain.models import (
    AggregateView,
    Balance,
    CashFlowCategory,
    CashFlowItem,
    CashFlowMatrix,
    CashFlowMonth,
    CashFlowTotals,
    CategoryAmount,
    MonthlyPoint,
    Transaction,
)
from fundify.domain.services.validation import validate_transaction_sign


TransactionPredicate = Callable[[Transaction], bool]

_ZERO = Decimal("0")


def compute_balance(transactions: Iterable[Transaction]) -> Balance:
    """Compute income, expense and net totals.

    Args:
        transactions: Transactions to aggregate.

    Returns:
        Balance: Totals where savings equals the net balance.
    """
    income = _ZERO
    expenses = _ZERO
    for transaction in transactions:
        if transaction.entry_type == INCOME:
            income += abs(transaction.amount)
        else:
            expenses += abs(transaction.amount)
    total = income - expenses
    return Balance(total=total, income=income, expenses=expenses, savings=total)


def month_label(month_key: str) -> str:
    """Return the short month name of a ``YYYY-MM`` key."""
    month = month_key[5:7]
    if month.isdigit() and 1 <= int(month) <= 12:
        return MONTH_LABELS[int(month) - 1]
    return month_key


def compute_monthly_series(
    transactions: Iterable[Transaction],
) -> list[MonthlyPoint]:
    """Bucket transactions by year-month in chronological order."""
    buckets: dict[str, list[Decimal]] = {}
    for transaction in transactions:
        totals = buckets.setdefault(transaction.month_key, [_ZERO, _ZERO])
        if transaction.entry_type == INCOME:
            totals[0] += abs(transaction.amount)
        else:
            totals[1] += abs(transaction.amount)
    return [
        MonthlyPoint(
            key=key,
            month=month_label(key),
            income=income,
            expenses=expenses,
        )
        for key, (income, expenses) in sorted(buckets.items())
    ]


def compute_category_series(
    transactions: Iterable[Transaction],
) -> list[CategoryAmount]:
    """Sum expenses per category, largest first.

    Categories with equal totals keep their first-encounter order.
    """
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.entry_type == INCOME:
            continue
        totals[transaction.category] = (
            totals.get(transaction.category, _ZERO) + abs(transaction.amount)
        )
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in ordered
    ]


def compute_aggregates(
    transactions: Iterable[Transaction],
    predicate: TransactionPredicate | None = None,
    logger: Logger | None = None,
) -> AggregateView:
    """Compute the dashboard view of a committed transaction set.

    Args:
        transactions: Full committed set.
        predicate: Optional filter applied once before aggregating.
        logger: Logger warned about records violating the sign convention.

    Returns:
        AggregateView: Balance, monthly and category series, and the
        filtered transactions most recent first.
    """
    selected = [
        transaction
        for transaction in transactions
        if predicate is None or predicate(transaction)
    ]
    if logger is not None:
        for transaction in selected:
            validate_transaction_sign(transaction, logger)
    return AggregateView(
        balance=compute_balance(selected),
        monthly=compute_monthly_series(selected),
        categories=compute_category_series(selected),
        transactions=sorted(
            selected,
            key=lambda transaction: transaction.date,
            reverse=True,
        ),
    )


def available_years(transactions: Iterable[Transaction]) -> list[int]:
    """Return the distinct transaction years, most recent first."""
    years = {
        transaction.year
        for transaction in transactions
        if transaction.year is not None
    }
    return sorted(years, reverse=True)


def compute_cash_flow(
    transactions: Iterable[Transaction],
    year: int,
) -> CashFlowMatrix:
    """Compute the twelve-month cash-flow matrix of a year.

    January opens at zero and every month opens with the previous month's
    closing balance.

    Args:
        transactions: Full committed set.
        year: Calendar year to project.

    Returns:
        CashFlowMatrix: Monthly balances and category breakdowns.
    """
    in_year = [
        transaction
        for transaction in transactions
        if transaction.year == year and transaction.month is not None
        and 1 <= transaction.month <= 12
    ]
    income_by_month = [_ZERO] * 12
    expense_by_month = [_ZERO] * 12
    for transaction in in_year:
        slot = transaction.month - 1
        if transaction.entry_type == INCOME:
            income_by_month[slot] += abs(transaction.amount)
        else:
            expense_by_month[slot] += abs(transaction.amount)

    months: list[CashFlowMonth] = []
    opening = _ZERO
    for slot in range(12):
        month = CashFlowMonth(
            month=slot + 1,
            label=MONTH_LABELS[slot],
            opening=opening,
            income=income_by_month[slot],
            expense=expense_by_month[slot],
        )
        months.append(month)
        opening = month.closing

    totals = CashFlowTotals(
        income=sum(income_by_month, _ZERO),
        expense=sum(expense_by_month, _ZERO),
        operational=sum((month.operational for month in months), _ZERO),
        closing=months[-1].closing,
    )
    return CashFlowMatrix(
        year=year,
        months=months,
        income_categories=_breakdown(
            t for t in in_year if t.entry_type == INCOME
        ),
        expense_categories=_breakdown(
            t for t in in_year if t.entry_type != INCOME
        ),
        totals=totals,
    )


def _breakdown(transactions: Iterable[Transaction]) -> list[CashFlowCategory]:
    grouped: dict[str, dict[str, list[Transaction]]] = {}
    for transaction in transactions:
        category = transaction.origin.category or transaction.category
        items = grouped.setdefault(category, {})
        items.setdefault(transaction.description, []).append(transaction)

    categories: list[CashFlowCategory] = []
    for category, items in grouped.items():
        category_totals = [_ZERO] * 12
        rows: list[CashFlowItem] = []
        for description, members in items.items():
            values = [_ZERO] * 12
            item_code = ""
            for member in members:
                values[member.month - 1] += abs(member.amount)
                if not item_code and member.origin.item_id:
                    item_code = member.origin.item_id
            for slot, value in enumerate(values):
                category_totals[slot] += value
            rows.append(
                CashFlowItem(
                    description=description,
                    item_code=item_code,
                    monthly_values=tuple(values),
                )
            )
        categories.append(
            CashFlowCategory(
                category=category,
                monthly_totals=tuple(category_totals),
                items=rows,
            )
        )
    return categories


__all__ = [
    "TransactionPredicate",
    "compute_balance",
    "month_label",
    "compute_monthly_series",
    "compute_category_series",
    "compute_aggregates",
    "available_years",
    "compute_cash_flow",
]
