"""Result types produced by the import pipeline."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from fundify.domain.models.accounts import Account
from fundify.domain.models.transactions import Transaction


T = TypeVar("T")


@dataclass(frozen=True)
class Coerced(Generic[T]):
    """Value produced by a tolerant coercion.

    Attributes:
        value: Coerced value, or the safe default when coercion failed.
        warning: Description of the substitution, None when the raw value
            was used as is.
    """

    value: T
    warning: str | None = None

    @property
    def substituted(self) -> bool:
        return self.warning is not None


@dataclass(frozen=True)
class EncodingResolution:
    """Outcome of decoding a raw payload."""

    text: str
    encoding: str
    replacement_count: int = 0
    bom: str | None = None


@dataclass(frozen=True)
class ImportDiagnostic:
    """Row-level problem found while importing.

    Attributes:
        row_number: 1-based line number, header included.
        reason: Human-readable explanation.
        payload: Raw cells of the offending row.
    """

    row_number: int
    reason: str
    payload: tuple[str, ...] | None = None

    def __str__(self) -> str:
        return f"Row {self.row_number}: {self.reason}"


@dataclass(frozen=True)
class Accepted:
    """Row reconciled into a transaction ready to commit."""

    transaction: Transaction
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class Rejected:
    """Row excluded by a validation failure."""

    diagnostic: ImportDiagnostic


@dataclass(frozen=True)
class Skipped:
    """Row that does not describe a transaction."""

    row_number: int
    reason: str


ReconciliationOutcome = Union[Accepted, Rejected, Skipped]


@dataclass(frozen=True)
class BatchPartition:
    """Rows of one submission split by reconciliation outcome."""

    accepted: list[Transaction] = field(default_factory=list)
    diagnostics: list[ImportDiagnostic] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)
    row_count: int = 0


@dataclass(frozen=True)
class ImportBatchResult:
    """Outcome of a committed transaction import.

    Attributes:
        committed: Transactions appended to the store, ids assigned.
        diagnostics: Rows excluded from the commit, reported as warnings.
        notices: Coercion substitutions applied to committed rows.
    """

    committed: list[Transaction]
    diagnostics: list[ImportDiagnostic] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        text = f"{len(self.committed)} transactions imported"
        if self.diagnostics:
            text += f", {len(self.diagnostics)} error(s) found"
        return text


@dataclass(frozen=True)
class AccountPlanImportResult:
    """Outcome of a chart-of-accounts import."""

    committed: list[Account]
    notices: list[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"{len(self.committed)} accounts imported into the chart"


__all__ = [
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
]
