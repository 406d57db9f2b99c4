"""Tests for the composition root."""

from unittest.mock import MagicMock

from fundify.application.use_cases.get_cash_flow import GetCashFlowUseCase
from fundify.application.use_cases.get_dashboard import GetDashboardUseCase
from fundify.application.use_cases.import_account_plan import (
    ImportAccountPlanUseCase,
)
from fundify.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from fundify.infrastructure import container
from fundify.infrastructure.db import (
    SqlAlchemyDatabaseEngineAdapter,
    create_memory_engine,
)
from fundify.infrastructure.memory_record_store import InMemoryRecordStore
from fundify.infrastructure.settings import ImportSettings
from fundify.infrastructure.sql_record_store import SqlAlchemyRecordStore


def test_build_record_store_defaults_to_memory() -> None:
    """The memory backend is the default store."""
    store = container.build_record_store(ImportSettings())

    assert isinstance(store, InMemoryRecordStore)


def test_build_record_store_uses_sqlalchemy_backend() -> None:
    """The sqlalchemy backend wraps the given database port."""
    db_port = SqlAlchemyDatabaseEngineAdapter(create_memory_engine())

    store = container.build_record_store(
        ImportSettings(store_backend="sqlalchemy"),
        db_port=db_port,
    )

    assert isinstance(store, SqlAlchemyRecordStore)


def test_builders_bind_use_cases_to_store() -> None:
    """Every use case builder returns a use case over the same store."""
    store = MagicMock()
    settings = ImportSettings()

    assert isinstance(
        container.build_import_transactions(store, settings),
        ImportTransactionsUseCase,
    )
    assert isinstance(
        container.build_import_account_plan(store, settings),
        ImportAccountPlanUseCase,
    )
    assert isinstance(container.build_dashboard(store), GetDashboardUseCase)
    assert isinstance(container.build_cash_flow(store), GetCashFlowUseCase)
