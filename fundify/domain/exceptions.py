"""Errors raised when a whole submission cannot be committed."""

from fundify.domain.models.imports import ImportDiagnostic


class SubmissionError(ValueError):
    """Base error for submissions rejected as a whole.

    Attributes:
        diagnostics: Row-level or structural diagnostics explaining the
            rejection.
    """

    def __init__(
        self,
        message: str,
        diagnostics: list[ImportDiagnostic] | None = None,
    ) -> None:
        super().__init__(message)
        self.diagnostics = list(diagnostics or [])


class EmptySubmissionError(SubmissionError):
    """Raised when a submission carries no usable rows."""


class MissingColumnError(SubmissionError):
    """Raised when a mandatory column is absent from the header row."""

    def __init__(self, column: str, headers: list[str]) -> None:
        seen = ", ".join(headers) if headers else "(none)"
        super().__init__(
            f"Column {column} not found. Available columns: {seen}"
        )
        self.column = column
        self.headers = list(headers)


class ImportRejectedError(SubmissionError):
    """Raised when the commit policy rejects a batch.

    Attributes:
        debug_sample: Raw payloads of the first offending rows.
        received_count: Number of data rows in the submission.
    """

    def __init__(
        self,
        message: str,
        diagnostics: list[ImportDiagnostic],
        debug_sample: list[list[str]],
        received_count: int,
    ) -> None:
        super().__init__(message, diagnostics)
        self.debug_sample = list(debug_sample)
        self.received_count = received_count


__all__ = [
    "SubmissionError",
    "EmptySubmissionError",
    "MissingColumnError",
    "ImportRejectedError",
]
