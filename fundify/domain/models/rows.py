"""Intermediate records built from tokenized rows.

A raw row keeps every mapped cell as an optional string: None means the
column is absent from the file, an empty string means the cell is blank.
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class RawAccountRow:
    """Account-plan row after header mapping."""

    account_id: str | None = None
    nature: str | None = None
    account_type: str | None = None
    category: str | None = None
    subcategory: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class RawTransactionRow:
    """Transaction row after header mapping.

    ``description``, ``entry_type`` and the second spellings of ``category``,
    ``date`` and ``amount`` come from the legacy English layout.
    """

    item_id: str | None = None
    nature: str | None = None
    account_type: str | None = None
    category: str | None = None
    subcategory: str | None = None
    operation: str | None = None
    origin_destination: str | None = None
    item: str | None = None
    date: str | None = None
    amount: str | None = None
    description: str | None = None
    entry_type: str | None = None

    @property
    def has_amount(self) -> bool:
        return bool(self.amount)

    @property
    def has_description(self) -> bool:
        return bool(self.item or self.description)


def row_field_names(row_type) -> tuple[str, ...]:
    """Return the field names of a raw row dataclass."""
    return tuple(f.name for f in fields(row_type))


__all__ = ["RawAccountRow", "RawTransactionRow", "row_field_names"]
