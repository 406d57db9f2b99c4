"""Domain services package."""

from .encoding import decode_payload, resolve_encoding
from .finance import (
    available_years,
    compute_aggregates,
    compute_balance,
    compute_cash_flow,
    compute_category_series,
    compute_monthly_series,
)
from .headers import (
    ACCOUNT_PLAN_SCHEMA,
    TRANSACTION_SCHEMA,
    map_headers,
)
from .importing import build_chart, parse_account_rows, partition_rows
from .normalization import (
    normalize_field,
    normalize_text,
    parse_amount,
    parse_date,
)
from .reconciliation import derive_entry_type, reconcile_transaction
from .tokenizer import tokenize
from .validation import validate_transaction_sign

__all__ = [
    "resolve_encoding",
    "decode_payload",
    "tokenize",
    "ACCOUNT_PLAN_SCHEMA",
    "TRANSACTION_SCHEMA",
    "map_headers",
    "normalize_text",
    "normalize_field",
    "parse_amount",
    "parse_date",
    "derive_entry_type",
    "reconcile_transaction",
    "partition_rows",
    "parse_account_rows",
    "build_chart",
    "compute_balance",
    "compute_monthly_series",
    "compute_category_series",
    "compute_aggregates",
    "compute_cash_flow",
    "available_years",
    "validate_transaction_sign",
]
