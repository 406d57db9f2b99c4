"""Domain models for financial transactions."""

from dataclasses import dataclass, field
from decimal import Decimal

from fundify.domain.constants import INCOME


@dataclass(frozen=True)
class TransactionOrigin:
    """Source-row fields kept for traceability."""

    item_id: str = ""
    nature: str = ""
    account_type: str = ""
    category: str = ""
    subcategory: str = ""
    operation: str = ""
    origin_destination: str = ""
    item: str = ""
    raw_date: str = ""
    raw_amount: str = ""


@dataclass(frozen=True)
class Transaction:
    """Reconciled transaction.

    The amount is negative for expenses and positive for income; its sign is
    always derived from ``entry_type``. ``id`` stays None until the record
    is committed to a store.
    """

    date: str
    description: str
    amount: Decimal
    entry_type: str
    category: str
    origin: TransactionOrigin = field(default_factory=TransactionOrigin)
    id: int | None = None

    @property
    def is_income(self) -> bool:
        return self.entry_type == INCOME

    @property
    def month_key(self) -> str:
        """Return the zero-padded ``YYYY-MM`` bucket key."""
        return self.date[:7]

    @property
    def year(self) -> int | None:
        head = self.date[:4]
        return int(head) if head.isdigit() else None

    @property
    def month(self) -> int | None:
        part = self.date[5:7]
        return int(part) if part.isdigit() else None


__all__ = ["Transaction", "TransactionOrigin"]
