"""Use case computing the twelve-month cash-flow matrix."""

from collections.abc import Callable
from datetime import date

from fundify.application.ports.record_store import RecordStorePort
from fundify.domain.models import CashFlowMatrix
from fundify.domain.services.finance import available_years, compute_cash_flow
from fundify.infrastructure.logging.logger import get_app_logger


class GetCashFlowUseCase:
    """Project opening and closing balances month by month for a year."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing committed transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(self, year: int | None = None) -> CashFlowMatrix:
        """Return the cash-flow matrix of a year.

        Args:
            year: Calendar year; the current year when omitted.

        Returns:
            CashFlowMatrix: Twelve chained monthly buckets.
        """
        selected_year = year if year is not None else self._clock().year
        matrix = compute_cash_flow(
            self._record_store.fetch_transactions(),
            selected_year,
        )
        self._logger.info(
            f"Cash flow computed for {selected_year}: "
            f"closing={matrix.totals.closing}"
        )
        return matrix

    def available_years(self) -> list[int]:
        """Return the years present in the committed set, newest first."""
        return available_years(self._record_store.fetch_transactions())


__all__ = ["GetCashFlowUseCase", "CashFlowMatrix"]
