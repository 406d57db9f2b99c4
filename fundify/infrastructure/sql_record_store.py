"""SQLAlchemy-backed record store."""

from contextlib import AbstractContextManager
import threading

from sqlalchemy import text

from fundify.application.ports.database import DatabaseEnginePort
from fundify.application.ports.record_store import RecordStorePort
from fundify.domain.models import (
    Account,
    ChartOfAccounts,
    Transaction,
    TransactionOrigin,
)
from fundify.domain.services.importing import build_chart
from fundify.utils.decimal_utils import coerce_decimal


CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS chart_of_accounts (
        account_id TEXT PRIMARY KEY,
        nature TEXT,
        account_type TEXT,
        category TEXT,
        subcategory TEXT,
        name TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id INTEGER PRIMARY KEY,
        date TEXT NOT NULL,
        description TEXT,
        amount TEXT NOT NULL,
        entry_type TEXT NOT NULL,
        category TEXT,
        item_id TEXT,
        nature TEXT,
        account_type TEXT,
        origin_category TEXT,
        subcategory TEXT,
        operation TEXT,
        origin_destination TEXT,
        item TEXT,
        raw_date TEXT,
        raw_amount TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS id_sequence (
        name TEXT PRIMARY KEY,
        counter INTEGER NOT NULL
    )
    """,
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT account_id, nature, account_type, category, subcategory, name
    FROM chart_of_accounts
    """
)

DELETE_ACCOUNTS_SQL = text("DELETE FROM chart_of_accounts")

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO chart_of_accounts (
        account_id, nature, account_type, category, subcategory, name
    )
    VALUES (
        :account_id, :nature, :account_type, :category, :subcategory, :name
    )
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, date, description, amount, entry_type, category, item_id,
           nature, account_type, origin_category, subcategory, operation,
           origin_destination, item, raw_date, raw_amount
    FROM transactions
    ORDER BY id
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id, date, description, amount, entry_type, category, item_id,
        nature, account_type, origin_category, subcategory, operation,
        origin_destination, item, raw_date, raw_amount
    )
    VALUES (
        :id, :date, :description, :amount, :entry_type, :category, :item_id,
        :nature, :account_type, :origin_category, :subcategory, :operation,
        :origin_destination, :item, :raw_date, :raw_amount
    )
    """
)

DELETE_TRANSACTIONS_SQL = text("DELETE FROM transactions")
COUNT_TRANSACTIONS_SQL = text("SELECT COUNT(*) FROM transactions")

SELECT_SEQUENCE_SQL = text(
    "SELECT counter FROM id_sequence WHERE name = :name"
)
INSERT_SEQUENCE_SQL = text(
    "INSERT INTO id_sequence (name, counter) VALUES (:name, :counter)"
)
UPDATE_SEQUENCE_SQL = text(
    "UPDATE id_sequence SET counter = :counter WHERE name = :name"
)

TRANSACTION_SEQUENCE = "transactions"


class SqlAlchemyRecordStore(RecordStorePort):
    """Record store persisting the chart and transactions through SQLAlchemy.

    Amounts are stored as text so Decimal values round-trip exactly.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store and create its tables when missing.

        Args:
            db_port: Port providing access to the record database engine.
        """
        self._db_port = db_port
        self._lock = threading.RLock()
        self._ensure_tables()

    def write_lock(self) -> AbstractContextManager:
        return self._lock

    def fetch_chart_of_accounts(self) -> ChartOfAccounts:
        with self._engine().connect() as conn:
            rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return build_chart(
            [
                Account(
                    account_id=row.account_id,
                    nature=row.nature or "",
                    account_type=row.account_type or "",
                    category=row.category or "",
                    subcategory=row.subcategory or "",
                    name=row.name or "",
                )
                for row in rows
            ]
        )

    def replace_chart_of_accounts(self, accounts: list[Account]) -> int:
        chart = build_chart(accounts)
        records = [
            {
                "account_id": account.account_id,
                "nature": account.nature,
                "account_type": account.account_type,
                "category": account.category,
                "subcategory": account.subcategory,
                "name": account.name,
            }
            for account in chart.values()
        ]
        with self._lock, self._engine().begin() as conn:
            conn.execute(DELETE_ACCOUNTS_SQL)
            if records:
                conn.execute(INSERT_ACCOUNT_SQL, records)
        return len(records)

    def clear_chart_of_accounts(self) -> None:
        with self._lock, self._engine().begin() as conn:
            conn.execute(DELETE_ACCOUNTS_SQL)

    def fetch_transactions(self) -> list[Transaction]:
        with self._engine().connect() as conn:
            rows = conn.execute(SELECT_TRANSACTIONS_SQL).all()
        return [self._to_transaction(row) for row in rows]

    def allocate_transaction_ids(self, count: int) -> list[int]:
        with self._lock, self._engine().begin() as conn:
            current = conn.execute(
                SELECT_SEQUENCE_SQL,
                {"name": TRANSACTION_SEQUENCE},
            ).scalar()
            if current is None:
                current = 0
                conn.execute(
                    INSERT_SEQUENCE_SQL,
                    {"name": TRANSACTION_SEQUENCE, "counter": count},
                )
            else:
                conn.execute(
                    UPDATE_SEQUENCE_SQL,
                    {"name": TRANSACTION_SEQUENCE, "counter": current + count},
                )
        return list(range(current + 1, current + count + 1))

    def append_transactions(self, transactions: list[Transaction]) -> int:
        records = [self._to_record(transaction) for transaction in transactions]
        with self._lock, self._engine().begin() as conn:
            if records:
                conn.execute(INSERT_TRANSACTION_SQL, records)
        return len(records)

    def clear_transactions(self) -> int:
        with self._lock, self._engine().begin() as conn:
            count = conn.execute(COUNT_TRANSACTIONS_SQL).scalar() or 0
            conn.execute(DELETE_TRANSACTIONS_SQL)
        return count

    def _engine(self):
        return self._db_port.get_engine()

    def _ensure_tables(self) -> None:
        with self._engine().begin() as conn:
            for statement in CREATE_TABLES_SQL:
                conn.exec_driver_sql(statement)

    @staticmethod
    def _to_record(transaction: Transaction) -> dict[str, object]:
        if transaction.id is None:
            raise ValueError("Transactions need an id to be stored")
        origin = transaction.origin
        return {
            "id": transaction.id,
            "date": transaction.date,
            "description": transaction.description,
            "amount": str(transaction.amount),
            "entry_type": transaction.entry_type,
            "category": transaction.category,
            "item_id": origin.item_id,
            "nature": origin.nature,
            "account_type": origin.account_type,
            "origin_category": origin.category,
            "subcategory": origin.subcategory,
            "operation": origin.operation,
            "origin_destination": origin.origin_destination,
            "item": origin.item,
            "raw_date": origin.raw_date,
            "raw_amount": origin.raw_amount,
        }

    @staticmethod
    def _to_transaction(row) -> Transaction:
        return Transaction(
            id=row.id,
            date=row.date,
            description=row.description or "",
            amount=coerce_decimal(row.amount),
            entry_type=row.entry_type,
            category=row.category or "",
            origin=TransactionOrigin(
                item_id=row.item_id or "",
                nature=row.nature or "",
                account_type=row.account_type or "",
                category=row.origin_category or "",
                subcategory=row.subcategory or "",
                operation=row.operation or "",
                origin_destination=row.origin_destination or "",
                item=row.item or "",
                raw_date=row.raw_date or "",
                raw_amount=row.raw_amount or "",
            ),
        )


__all__ = ["SqlAlchemyRecordStore"]
