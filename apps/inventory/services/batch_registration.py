"""
Production batch registration.

A batch and the inventory record it feeds are written in one transaction:
a partial write would corrupt the weighted-average cost.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.catalog.models import Product
from apps.core.exceptions import InvalidInputError, NotFoundError, storage_guard
from apps.core.money import round2
from apps.core.quantities import positive_count
from apps.inventory.models import InventoryRecord, ProductionBatch

from .costing import batch_unit_cost, weighted_average_cost

logger = logging.getLogger(__name__)


@storage_guard()
@transaction.atomic
def register_batch(
    *,
    product_id: UUID,
    total_cost,
    units_produced: int,
    notes: str = ''
) -> ProductionBatch:
    """
    Register a production batch and absorb it into inventory.

    Locks the product row first so that concurrent first batches for the
    same product cannot both create its inventory record, then locks the
    inventory record for the read-modify-write of quantity and cost.

    Args:
        product_id: UUID of the product produced
        total_cost: Total input cost of the batch (>= 0)
        units_produced: Units that came out of the batch (> 0)
        notes: Optional free text

    Returns:
        Created ProductionBatch instance

    Raises:
        InvalidInputError: If units_produced is not a whole number > 0
            or total_cost < 0
        NotFoundError: If product doesn't exist
    """
    units_produced = positive_count(units_produced, label="Units produced")

    total_cost = round2(total_cost)
    if total_cost < 0:
        raise InvalidInputError("Total cost cannot be negative")

    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise NotFoundError(f"Product with ID {product_id} not found")

    unit_cost = batch_unit_cost(total_cost, units_produced)

    record, _ = (
        InventoryRecord.objects
        .select_for_update()
        .get_or_create(product=product)
    )

    record.average_cost = weighted_average_cost(
        record.quantity, record.average_cost, units_produced, unit_cost
    )
    record.quantity += units_produced
    record.save()

    batch = ProductionBatch.objects.create(
        product=product,
        total_cost=total_cost,
        units_produced=units_produced,
        unit_cost=unit_cost,
        notes=(notes or '').strip(),
    )

    logger.info(
        "Batch registered for %s: %s units @ %s (stock %s, avg cost %s)",
        product.name, units_produced, unit_cost, record.quantity, record.average_cost,
    )
    return batch


def list_batches(*, product_id: Optional[UUID] = None) -> QuerySet[ProductionBatch]:
    """Production batches, newest first, optionally for one product."""
    queryset = ProductionBatch.objects.select_related('product')
    if product_id is not None:
        queryset = queryset.filter(product_id=product_id)
    return queryset.order_by('-created_at')
