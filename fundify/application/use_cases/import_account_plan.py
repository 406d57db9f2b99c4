"""Use case replacing the chart of accounts from an account-plan file."""

from collections.abc import Sequence

from fundify.application.ports.record_store import RecordStorePort
from fundify.domain.exceptions import EmptySubmissionError
from fundify.domain.models import AccountPlanImportResult
from fundify.domain.services.encoding import resolve_encoding
from fundify.domain.services.importing import parse_account_rows
from fundify.domain.services.tokenizer import tokenize
from fundify.infrastructure.logging.logger import get_app_logger
from fundify.infrastructure.settings import ImportSettings


class ImportAccountPlanUseCase:
    """Load a chart of accounts, replacing the previous one as a whole."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        settings: ImportSettings | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port holding the chart of accounts.
            logger: Optional logger compatible with logging.Logger-like API.
            settings: Optional import settings; defaults apply when omitted.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._settings = settings or ImportSettings()

    def execute(self, payload: bytes) -> AccountPlanImportResult:
        """Decode, tokenize and import an account-plan file.

        Args:
            payload: Raw uploaded bytes.

        Returns:
            AccountPlanImportResult: Accounts now forming the chart.

        Raises:
            EmptySubmissionError: If the file holds no valid account.
            MissingColumnError: If the ID_Conta column is missing.
        """
        if not payload:
            raise EmptySubmissionError("Empty file or invalid format")
        resolution = resolve_encoding(payload, self._settings.encodings)
        self._logger.info(
            f"Detected encoding {resolution.encoding} for account plan"
        )
        rows = tokenize(
            resolution.text,
            primary=self._settings.primary_delimiter,
            secondary=self._settings.secondary_delimiter,
        )
        return self.import_rows(rows)

    def import_rows(
        self,
        rows: Sequence[Sequence[str]],
    ) -> AccountPlanImportResult:
        """Import already tokenized account-plan rows, header first."""
        if len(rows) < 2:
            raise EmptySubmissionError("Empty file or invalid format")

        accounts, notes = parse_account_rows(rows)
        if not accounts:
            details = "; ".join(notes[:5])
            raise EmptySubmissionError(
                "No valid account found in the file"
                + (f". Details: {details}" if details else "")
            )

        with self._record_store.write_lock():
            stored = self._record_store.replace_chart_of_accounts(accounts)

        self._logger.info(
            f"Chart of accounts replaced with {stored} accounts "
            f"({len(notes)} rows skipped)"
        )
        return AccountPlanImportResult(committed=accounts, notices=notes)


__all__ = ["ImportAccountPlanUseCase", "AccountPlanImportResult"]
