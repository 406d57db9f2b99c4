"""In-process record store."""

from collections.abc import Iterable
from contextlib import AbstractContextManager
import threading

from fundify.application.ports.record_store import RecordStorePort
from fundify.domain.models import Account, ChartOfAccounts, Transaction
from fundify.domain.services.importing import build_chart


class InMemoryRecordStore(RecordStorePort):
    """Record store keeping the chart and transactions in memory.

    The identifier counter only moves forward, also across
    ``clear_transactions``.
    """

    def __init__(
        self,
        transactions: Iterable[Transaction] | None = None,
        accounts: Iterable[Account] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            transactions: Optional committed transactions carrying ids.
            accounts: Optional initial chart of accounts.
        """
        self._lock = threading.RLock()
        self._transactions: list[Transaction] = list(transactions or [])
        self._chart: ChartOfAccounts = build_chart(list(accounts or []))
        self._last_id = max(
            (t.id for t in self._transactions if t.id is not None),
            default=0,
        )

    def write_lock(self) -> AbstractContextManager:
        return self._lock

    def fetch_chart_of_accounts(self) -> ChartOfAccounts:
        with self._lock:
            return dict(self._chart)

    def replace_chart_of_accounts(self, accounts: list[Account]) -> int:
        with self._lock:
            self._chart = build_chart(accounts)
            return len(self._chart)

    def clear_chart_of_accounts(self) -> None:
        with self._lock:
            self._chart = {}

    def fetch_transactions(self) -> list[Transaction]:
        with self._lock:
            return list(self._transactions)

    def allocate_transaction_ids(self, count: int) -> list[int]:
        with self._lock:
            first = self._last_id + 1
            self._last_id += count
            return list(range(first, self._last_id + 1))

    def append_transactions(self, transactions: list[Transaction]) -> int:
        with self._lock:
            for transaction in transactions:
                if transaction.id is None:
                    raise ValueError("Transactions need an id to be stored")
            self._transactions.extend(transactions)
            return len(transactions)

    def clear_transactions(self) -> int:
        with self._lock:
            count = len(self._transactions)
            self._transactions = []
            return count


__all__ = ["InMemoryRecordStore"]
