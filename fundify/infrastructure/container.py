"""Composition root for wiring infrastructure adapters."""

from fundify.application.ports.database import DatabaseEnginePort
from fundify.application.ports.record_store import RecordStorePort
from fundify.application.use_cases.get_cash_flow import GetCashFlowUseCase
from fundify.application.use_cases.get_dashboard import GetDashboardUseCase
from fundify.application.use_cases.import_account_plan import (
    ImportAccountPlanUseCase,
)
from fundify.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from fundify.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from fundify.infrastructure.logging.logger import get_app_logger
from fundify.infrastructure.memory_record_store import InMemoryRecordStore
from fundify.infrastructure.settings import ImportSettings
from fundify.infrastructure.sql_record_store import SqlAlchemyRecordStore


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    settings: ImportSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> RecordStorePort:
    """Return the configured record store."""
    resolved = settings or ImportSettings.from_env()
    if resolved.store_backend == "sqlalchemy":
        return SqlAlchemyRecordStore(db_port or build_database_adapter())
    return InMemoryRecordStore()


def build_import_transactions(
    record_store: RecordStorePort,
    settings: ImportSettings | None = None,
) -> ImportTransactionsUseCase:
    """Return the transaction import use case bound to a store."""
    return ImportTransactionsUseCase(
        record_store,
        logger=get_app_logger(),
        settings=settings or ImportSettings.from_env(),
    )


def build_import_account_plan(
    record_store: RecordStorePort,
    settings: ImportSettings | None = None,
) -> ImportAccountPlanUseCase:
    """Return the account-plan import use case bound to a store."""
    return ImportAccountPlanUseCase(
        record_store,
        logger=get_app_logger(),
        settings=settings or ImportSettings.from_env(),
    )


def build_dashboard(record_store: RecordStorePort) -> GetDashboardUseCase:
    """Return the dashboard use case bound to a store."""
    return GetDashboardUseCase(record_store, logger=get_app_logger())


def build_cash_flow(record_store: RecordStorePort) -> GetCashFlowUseCase:
    """Return the cash-flow use case bound to a store."""
    return GetCashFlowUseCase(record_store, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_import_transactions",
    "build_import_account_plan",
    "build_dashboard",
    "build_cash_flow",
]
