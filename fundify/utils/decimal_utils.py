"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a record store or adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def sign_of(value: Decimal) -> int:
    """Return -1, 0 or 1 according to the sign of the value."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


__all__ = ["coerce_decimal", "sign_of"]
