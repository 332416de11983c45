"""
Currency-safe arithmetic.

Every monetary value that is stored or compared goes through ``round2`` so
that many small transactions never accumulate floating-point drift.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

CENT = Decimal('0.01')
ZERO = Decimal('0.00')


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        return Decimal(str(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"Not a monetary amount: {value!r}")


def round2(value) -> Decimal:
    """
    Round an amount to cents, halves away from zero.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal with exactly two decimal places
    """
    return _as_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def to_money(value) -> Decimal:
    """Like ``round2`` but treats ``None`` as zero."""
    if value is None:
        return ZERO
    return round2(value)
