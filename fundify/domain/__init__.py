"""Domain package for import rules, aggregates and core models."""

from .constants import DEFAULT_CATEGORY, DEFAULT_ENCODINGS, EXPENSE, INCOME
from .exceptions import (
    EmptySubmissionError,
    ImportRejectedError,
    MissingColumnError,
    SubmissionError,
)
from .models import (
    Account,
    AggregateView,
    CashFlowMatrix,
    ImportBatchResult,
    ImportDiagnostic,
    Transaction,
    TransactionOrigin,
)
from .policies import should_reject_batch
from .services import (
    compute_aggregates,
    compute_cash_flow,
    map_headers,
    normalize_field,
    reconcile_transaction,
    resolve_encoding,
    tokenize,
)

__all__ = [
    "INCOME",
    "EXPENSE",
    "DEFAULT_CATEGORY",
    "DEFAULT_ENCODINGS",
    "SubmissionError",
    "EmptySubmissionError",
    "MissingColumnError",
    "ImportRejectedError",
    "Account",
    "Transaction",
    "TransactionOrigin",
    "ImportDiagnostic",
    "ImportBatchResult",
    "AggregateView",
    "CashFlowMatrix",
    "should_reject_batch",
    "resolve_encoding",
    "tokenize",
    "map_headers",
    "normalize_field",
    "reconcile_transaction",
    "compute_aggregates",
    "compute_cash_flow",
]
