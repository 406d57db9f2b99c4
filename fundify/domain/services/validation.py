"""Domain validation helpers."""

from logging import Logger

from fundify.domain.constants import INCOME
from fundify.domain.models import Transaction
from fundify.utils.decimal_utils import sign_of


def has_consistent_sign(transaction: Transaction) -> bool:
    """Return True when the amount sign agrees with the entry type."""
    expected = 1 if transaction.entry_type == INCOME else -1
    return sign_of(transaction.amount) == expected


def validate_transaction_sign(transaction: Transaction, logger: Logger) -> None:
    """Warn when a stored transaction violates the sign convention.

    Args:
        transaction: Transaction read from a record store.
        logger: Logger used for warnings.
    """
    if not has_consistent_sign(transaction):
        logger.warning(
            f"Transaction id={transaction.id} has amount={transaction.amount} "
            f"inconsistent with type={transaction.entry_type}"
        )


__all__ = ["has_consistent_sign", "validate_transaction_sign"]
