"""
Stock debits and inventory reads.

Each debit is a self-contained read-verify-write on the locked inventory
row, so concurrent sales of the same product never oversell.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.core.exceptions import InsufficientStockError, storage_guard
from apps.core.quantities import positive_count
from apps.inventory.models import InventoryRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DebitResult:
    """Outcome of a successful debit."""

    unit_cost_at_debit: Decimal
    remaining_quantity: int


@storage_guard()
@transaction.atomic
def debit_inventory(*, product_id: UUID, quantity: int) -> DebitResult:
    """
    Remove ``quantity`` units from a product's stock.

    Args:
        product_id: UUID of the product
        quantity: Units to remove (> 0)

    Returns:
        DebitResult with the pre-debit average cost (to snapshot into the
        sale) and the quantity left

    Raises:
        InvalidInputError: If quantity is not a whole number > 0
        InsufficientStockError: If the product has fewer units on hand
            (including no inventory record at all)
    """
    quantity = positive_count(quantity)

    try:
        record = (
            InventoryRecord.objects
            .select_for_update()
            .get(product_id=product_id)
        )
    except InventoryRecord.DoesNotExist:
        logger.warning("Debit of %s rejected: product %s has no stock", quantity, product_id)
        raise InsufficientStockError(product_id=product_id, requested=quantity, available=0)

    if quantity > record.quantity:
        logger.warning(
            "Debit of %s rejected: product %s has %s units",
            quantity, product_id, record.quantity,
        )
        raise InsufficientStockError(
            product_id=product_id,
            requested=quantity,
            available=record.quantity,
        )

    unit_cost = record.average_cost
    record.quantity -= quantity
    record.save(update_fields=['quantity', 'updated_at'])

    return DebitResult(unit_cost_at_debit=unit_cost, remaining_quantity=record.quantity)


def get_inventory(*, product_id: UUID) -> Optional[InventoryRecord]:
    """Inventory record for a product, or None if it was never stocked."""
    return (
        InventoryRecord.objects
        .select_related('product')
        .filter(product_id=product_id)
        .first()
    )


def list_inventory() -> QuerySet[InventoryRecord]:
    """All inventory records with their products, by product name."""
    return InventoryRecord.objects.select_related('product').order_by('product__name')
