"""Use case importing a delimited transaction file into the record store."""

from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import date

from fundify.application.ports.record_store import RecordStorePort
from fundify.domain.exceptions import EmptySubmissionError, ImportRejectedError
from fundify.domain.models import ImportBatchResult, Transaction
from fundify.domain.policies import should_reject_batch
from fundify.domain.services.encoding import resolve_encoding
from fundify.domain.services.importing import partition_rows
from fundify.domain.services.tokenizer import tokenize
from fundify.infrastructure.logging.logger import get_app_logger
from fundify.infrastructure.settings import ImportSettings


class ImportTransactionsUseCase:
    """Reconcile a transaction file and commit the accepted rows.

    Rows failing reconciliation are reported as diagnostics. The batch is
    committed when at least one row was accepted; otherwise it is rejected
    as a whole and nothing reaches the store.
    """

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        settings: ImportSettings | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port holding the chart and committed transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            settings: Optional import settings; defaults apply when omitted.
            clock: Optional callable returning today's date.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._settings = settings or ImportSettings()
        self._clock = clock or date.today

    def execute(self, payload: bytes, validate: bool = True) -> ImportBatchResult:
        """Decode, tokenize and import a raw file.

        Args:
            payload: Raw uploaded bytes.
            validate: Whether unknown account identifiers reject rows.

        Returns:
            ImportBatchResult: Committed transactions and warnings.

        Raises:
            EmptySubmissionError: If the file has no data rows.
            ImportRejectedError: If every reconciled row failed.
        """
        if not payload:
            raise EmptySubmissionError("Empty file or invalid format")
        resolution = resolve_encoding(payload, self._settings.encodings)
        self._logger.info(
            f"Detected encoding {resolution.encoding} with "
            f"{resolution.replacement_count} invalid characters"
        )
        rows = tokenize(
            resolution.text,
            primary=self._settings.primary_delimiter,
            secondary=self._settings.secondary_delimiter,
        )
        return self.import_rows(rows, validate=validate)

    def import_rows(
        self,
        rows: Sequence[Sequence[str]],
        validate: bool = True,
    ) -> ImportBatchResult:
        """Import already tokenized rows, header first.

        Args:
            rows: Tokenized rows including the header row.
            validate: Whether unknown account identifiers reject rows.

        Returns:
            ImportBatchResult: Committed transactions and warnings.
        """
        if len(rows) < 2:
            raise EmptySubmissionError("Empty file or invalid format")

        with self._record_store.write_lock():
            chart = self._record_store.fetch_chart_of_accounts()
            self._logger.info(
                f"Importing {len(rows) - 1} rows (validate={validate}, "
                f"chart={len(chart)} accounts)"
            )
            partition = partition_rows(
                rows,
                chart,
                validate,
                today=self._clock(),
                default_category=self._settings.default_category,
            )
            accepted = partition.accepted
            diagnostics = partition.diagnostics
            for diagnostic in diagnostics:
                self._logger.warning(str(diagnostic))

            if should_reject_batch(
                len(accepted),
                len(diagnostics),
                strict=self._settings.strict_import,
            ):
                sample = [
                    list(diagnostic.payload)
                    for diagnostic in diagnostics
                    if diagnostic.payload is not None
                ][: self._settings.debug_sample_size]
                self._logger.error(
                    f"Import rejected: {len(diagnostics)} invalid rows, "
                    f"{len(accepted)} valid"
                )
                raise ImportRejectedError(
                    "No valid transactions"
                    if not accepted
                    else f"{len(diagnostics)} invalid rows in strict mode",
                    diagnostics,
                    sample,
                    partition.row_count,
                )
            if not accepted:
                details = "; ".join(partition.notices[:10])
                raise EmptySubmissionError(
                    "No valid transactions found in the file"
                    + (f". Details: {details}" if details else "")
                )

            committed = self._commit(accepted)

        self._logger.info(
            f"Imported {len(committed)} transactions with "
            f"{len(diagnostics)} errors and {len(partition.notices)} notices"
        )
        return ImportBatchResult(
            committed=committed,
            diagnostics=diagnostics,
            notices=partition.notices,
        )

    def _commit(self, accepted: list[Transaction]) -> list[Transaction]:
        ids = self._record_store.allocate_transaction_ids(len(accepted))
        committed = [
            replace(transaction, id=transaction_id)
            for transaction, transaction_id in zip(accepted, ids)
        ]
        self._record_store.append_transactions(committed)
        return committed


__all__ = ["ImportTransactionsUseCase", "ImportBatchResult"]
