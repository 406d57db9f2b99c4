"""Tests for the GetCashFlowUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from fundify.application.use_cases.get_cash_flow import GetCashFlowUseCase
from fundify.domain.models import Transaction


TRANSACTIONS = [
    Transaction(
        date="2023-11-02",
        description="Salário",
        amount=Decimal("4000"),
        entry_type="income",
        category="Trabalho",
    ),
    Transaction(
        date="2024-03-02",
        description="Salário",
        amount=Decimal("5000"),
        entry_type="income",
        category="Trabalho",
    ),
    Transaction(
        date="2024-03-15",
        description="Aluguel",
        amount=Decimal("-1500"),
        entry_type="expense",
        category="Moradia",
    ),
]


def test_execute_defaults_to_current_year() -> None:
    """Without a year the clock's year is projected."""
    store = MagicMock()
    store.fetch_transactions.return_value = TRANSACTIONS
    use_case = GetCashFlowUseCase(
        store,
        logger=MagicMock(),
        clock=lambda: date(2024, 7, 1),
    )

    matrix = use_case.execute()

    assert matrix.year == 2024
    assert matrix.months[2].income == Decimal("5000")
    assert matrix.months[2].closing == Decimal("3500")
    assert matrix.months[3].opening == Decimal("3500")
    assert matrix.totals.closing == Decimal("3500")


def test_execute_for_explicit_year() -> None:
    """An explicit year ignores transactions of other years."""
    store = MagicMock()
    store.fetch_transactions.return_value = TRANSACTIONS

    matrix = GetCashFlowUseCase(store, logger=MagicMock()).execute(2023)

    assert matrix.totals.income == Decimal("4000")
    assert matrix.totals.expense == Decimal("0")


def test_available_years_lists_store_years() -> None:
    """Years are read from the committed set, newest first."""
    store = MagicMock()
    store.fetch_transactions.return_value = TRANSACTIONS

    years = GetCashFlowUseCase(store, logger=MagicMock()).available_years()

    assert years == [2024, 2023]
