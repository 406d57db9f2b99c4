"""Use case computing dashboard aggregates from the committed set."""

from fundify.application.ports.record_store import RecordStorePort
from fundify.domain.models import AggregateView
from fundify.domain.services.finance import (
    TransactionPredicate,
    compute_aggregates,
)
from fundify.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Compute balance, monthly and category series on demand."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing committed transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        predicate: TransactionPredicate | None = None,
    ) -> AggregateView:
        """Return aggregates of the committed transactions.

        Args:
            predicate: Optional filter, such as a date window.

        Returns:
            AggregateView: Recomputed dashboard aggregates.
        """
        transactions = self._record_store.fetch_transactions()
        view = compute_aggregates(
            transactions,
            predicate=predicate,
            logger=self._logger,
        )
        self._logger.info(
            f"Dashboard computed over {len(view.transactions)} transactions: "
            f"income={view.balance.income}, expenses={view.balance.expenses}"
        )
        return view


__all__ = ["GetDashboardUseCase", "AggregateView"]
