"""Port for the persisted record store owned by the storage layer."""

from contextlib import AbstractContextManager
from typing import Protocol

from fundify.domain.models import Account, ChartOfAccounts, Transaction


class RecordStorePort(Protocol):
    """Port exposing the committed transactions and chart of accounts.

    Writers hold ``write_lock()`` across reading the chart, allocating
    identifiers and appending, so submissions against one store serialize.
    """

    def write_lock(self) -> AbstractContextManager:
        """Return a re-entrant context manager guarding writes."""

    def fetch_chart_of_accounts(self) -> ChartOfAccounts:
        """Return the chart of accounts keyed by account identifier."""

    def replace_chart_of_accounts(self, accounts: list[Account]) -> int:
        """Replace the whole chart with the provided accounts."""

    def clear_chart_of_accounts(self) -> None:
        """Remove every account from the chart."""

    def fetch_transactions(self) -> list[Transaction]:
        """Return committed transactions in commit order."""

    def allocate_transaction_ids(self, count: int) -> list[int]:
        """Reserve ``count`` fresh identifiers from the store counter."""

    def append_transactions(self, transactions: list[Transaction]) -> int:
        """Append transactions that already carry identifiers."""

    def clear_transactions(self) -> int:
        """Remove committed transactions and return how many were removed."""


__all__ = ["RecordStorePort"]
