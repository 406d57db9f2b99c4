"""Application use cases package."""

from .get_cash_flow import CashFlowMatrix, GetCashFlowUseCase
from .get_dashboard import AggregateView, GetDashboardUseCase
from .import_account_plan import (
    AccountPlanImportResult,
    ImportAccountPlanUseCase,
)
from .import_transactions import ImportBatchResult, ImportTransactionsUseCase

__all__ = [
    "ImportTransactionsUseCase",
    "ImportBatchResult",
    "ImportAccountPlanUseCase",
    "AccountPlanImportResult",
    "GetDashboardUseCase",
    "AggregateView",
    "GetCashFlowUseCase",
    "CashFlowMatrix",
]
