"""Domain models package."""

from .accounts import Account, ChartOfAccounts
from .finance import (
    AggregateView,
    Balance,
    CashFlowCategory,
    CashFlowItem,
    CashFlowMatrix,
    CashFlowMonth,
    CashFlowTotals,
    CategoryAmount,
    MonthlyPoint,
)
from .imports import (
    Accepted,
    AccountPlanImportResult,
    BatchPartition,
    Coerced,
    EncodingResolution,
    ImportBatchResult,
    ImportDiagnostic,
    ReconciliationOutcome,
    Rejected,
    Skipped,
)
from .rows import RawAccountRow, RawTransactionRow
from .transactions import Transaction, TransactionOrigin

__all__ = [
    "Account",
    "ChartOfAccounts",
    "Transaction",
    "TransactionOrigin",
    "RawAccountRow",
    "RawTransactionRow",
    "Coerced",
    "EncodingResolution",
    "ImportDiagnostic",
    "Accepted",
    "Rejected",
    "Skipped",
    "ReconciliationOutcome",
    "BatchPartition",
    "ImportBatchResult",
    "AccountPlanImportResult",
    "Balance",
    "MonthlyPoint",
    "CategoryAmount",
    "AggregateView",
    "CashFlowMonth",
    "CashFlowItem",
    "CashFlowCategory",
    "CashFlowTotals",
    "CashFlowMatrix",
]
