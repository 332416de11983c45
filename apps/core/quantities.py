"""
Unit counts.

Stock moves in whole units; a fractional or non-numeric count is rejected
rather than truncated.
"""

from decimal import Decimal, InvalidOperation

from apps.core.exceptions import InvalidInputError


def positive_count(value, *, label: str = 'Quantity') -> int:
    """
    Coerce ``value`` to a whole number of units greater than zero.

    Accepts ints, integral floats/Decimals and numeric strings such as
    ``"3"``. Booleans are not counts.

    Args:
        value: Caller-supplied count
        label: Name used in the error message

    Returns:
        The count as an int

    Raises:
        InvalidInputError: If value is missing, not a whole number, or <= 0
    """
    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"{label} must be a whole number")

    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidInputError(f"{label} must be a whole number")

    if not number.is_finite() or number != number.to_integral_value():
        raise InvalidInputError(f"{label} must be a whole number")

    count = int(number)
    if count <= 0:
        raise InvalidInputError(f"{label} must be greater than 0")
    return count
