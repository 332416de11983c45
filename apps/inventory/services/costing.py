"""
Weighted-average costing.

Pure functions; no database access.
"""

from decimal import Decimal

from apps.core.exceptions import InvalidInputError
from apps.core.money import round2


def batch_unit_cost(total_cost, units_produced: int) -> Decimal:
    """
    Per-unit cost of a production batch, rounded to cents.

    Raises:
        InvalidInputError: If units_produced is not positive
    """
    if units_produced <= 0:
        raise InvalidInputError("Units produced must be greater than 0")
    return round2(round2(total_cost) / units_produced)


def weighted_average_cost(
    existing_quantity: int,
    existing_average: Decimal,
    units: int,
    unit_cost: Decimal,
) -> Decimal:
    """
    New average unit cost after absorbing ``units`` at ``unit_cost``.

    Empty stock takes the incoming unit cost as-is.

    Example:
        >>> weighted_average_cost(20, Decimal('5.00'), 18, Decimal('7.00'))
        Decimal('5.95')
    """
    if existing_quantity <= 0:
        return round2(unit_cost)

    existing_value = existing_quantity * Decimal(existing_average)
    incoming_value = units * Decimal(unit_cost)
    return round2((existing_value + incoming_value) / (existing_quantity + units))
