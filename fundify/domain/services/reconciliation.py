"""Reconciliation of raw transaction rows against the chart of accounts."""

from datetime import date
from decimal import Decimal

from fundify.domain.constants import (
    DEFAULT_CATEGORY,
    EXPENSE,
    INCOME,
    INCOME_VOCABULARY,
)
from fundify.domain.models import (
    Accepted,
    ChartOfAccounts,
    ImportDiagnostic,
    RawTransactionRow,
    ReconciliationOutcome,
    Rejected,
    Skipped,
    Transaction,
    TransactionOrigin,
)
from fundify.domain.services.normalization import (
    normalize_field,
    parse_amount,
    parse_date,
)


def is_income_label(value: str) -> bool:
    """Return True when a free-text label uses income vocabulary."""
    lowered = value.casefold()
    return any(word in lowered for word in INCOME_VOCABULARY)


def derive_entry_type(row: RawTransactionRow) -> str:
    """Return income or expense for a raw row.

    The first non-empty value among nature, operation and the legacy type
    column decides; rows without any of them are expenses.
    """
    for value in (row.nature, row.operation, row.entry_type):
        if value:
            return INCOME if is_income_label(value) else EXPENSE
    return EXPENSE


def signed_amount(amount: Decimal, entry_type: str) -> Decimal:
    """Return the amount with the sign implied by the entry type."""
    magnitude = abs(amount)
    return magnitude if entry_type == INCOME else -magnitude


def reconcile_transaction(
    row: RawTransactionRow,
    chart: ChartOfAccounts,
    validate: bool,
    row_number: int,
    today: date | None = None,
    default_category: str = DEFAULT_CATEGORY,
    payload: tuple[str, ...] | None = None,
) -> ReconciliationOutcome:
    """Validate a raw row against the chart and build its transaction.

    Args:
        row: Raw row with normalized cells.
        chart: Chart of accounts keyed by account identifier.
        validate: Whether unknown account identifiers reject the row.
        row_number: 1-based line number, header included.
        today: Fallback date for rows without a usable date.
        default_category: Category used when none can be resolved.
        payload: Raw cells attached to a rejection diagnostic.

    Returns:
        ReconciliationOutcome: Accepted, Rejected or Skipped.
    """
    item_id = normalize_field(row.item_id)
    if validate and item_id and item_id not in chart:
        return Rejected(
            ImportDiagnostic(
                row_number=row_number,
                reason=(
                    f'Id_Item "{item_id}" not found in the chart of accounts'
                ),
                payload=payload,
            )
        )

    raw_amount = row.amount or ""
    amount = parse_amount(raw_amount)
    if amount.value == 0:
        return Skipped(row_number, amount.warning or "amount is zero")

    warnings: list[str] = []
    if amount.warning:
        warnings.append(f"Row {row_number}: {amount.warning}")
    raw_date = row.date or ""
    parsed_date = parse_date(raw_date, today=today)
    if parsed_date.warning:
        warnings.append(f"Row {row_number}: {parsed_date.warning}")

    entry_type = derive_entry_type(row)
    category = normalize_field(row.category)
    account = chart.get(item_id) if item_id else None
    if not category and account is not None:
        category = account.category
    if not category:
        category = default_category

    transaction = Transaction(
        date=parsed_date.value,
        description=normalize_field(row.item or row.description),
        amount=signed_amount(amount.value, entry_type),
        entry_type=entry_type,
        category=category,
        origin=TransactionOrigin(
            item_id=item_id,
            nature=normalize_field(row.nature),
            account_type=normalize_field(row.account_type),
            category=normalize_field(row.category),
            subcategory=normalize_field(row.subcategory),
            operation=normalize_field(row.operation),
            origin_destination=normalize_field(row.origin_destination),
            item=normalize_field(row.item),
            raw_date=raw_date,
            raw_amount=raw_amount,
        ),
    )
    return Accepted(transaction, tuple(warnings))


__all__ = [
    "is_income_label",
    "derive_entry_type",
    "signed_amount",
    "reconcile_transaction",
]
