"""
Product management service.

Products are soft-deleted through the ``is_active`` flag; a hard delete is
only allowed while nothing in the ledger references the product.
"""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import ProtectedError, QuerySet

from apps.catalog.models import Product, HEX_COLOR_VALIDATOR, DEFAULT_COLOR
from apps.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    ProductInUseError,
    storage_guard,
)

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = (name or '').strip()
    if not name:
        raise InvalidInputError("Product name cannot be empty")
    return name


def _clean_color(color: str) -> str:
    try:
        HEX_COLOR_VALIDATOR(color)
    except ValidationError:
        raise InvalidInputError(f"Invalid color: {color}")
    return color.upper()


def get_product(*, product_id: UUID) -> Product:
    """
    Get a product by ID.

    Raises:
        NotFoundError: If product doesn't exist
    """
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise NotFoundError(f"Product with ID {product_id} not found")


def list_products(*, include_inactive: bool = False) -> QuerySet[Product]:
    """Products ordered by name; active only unless asked otherwise."""
    queryset = Product.objects.all()
    if not include_inactive:
        queryset = queryset.filter(is_active=True)
    return queryset.order_by('name')


@storage_guard()
def create_product(*, name: str, emoji: str = '', color: str = DEFAULT_COLOR) -> Product:
    """
    Create a new active product.

    Args:
        name: Display name (trimmed, non-empty)
        emoji: Display icon
        color: Hex color ``#RRGGBB``

    Returns:
        Created Product instance

    Raises:
        InvalidInputError: If name is empty or color is malformed
    """
    product = Product.objects.create(
        name=_clean_name(name),
        emoji=(emoji or '').strip(),
        color=_clean_color(color),
    )
    logger.info("Product created: %s", product.name)
    return product


@storage_guard()
@transaction.atomic
def update_product(
    *,
    product_id: UUID,
    name: Optional[str] = None,
    emoji: Optional[str] = None,
    color: Optional[str] = None
) -> Product:
    """
    Update display attributes of a product.

    Raises:
        NotFoundError: If product doesn't exist
        InvalidInputError: If a provided value is invalid
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise NotFoundError(f"Product with ID {product_id} not found")

    if name is not None:
        product.name = _clean_name(name)
    if emoji is not None:
        product.emoji = emoji.strip()
    if color is not None:
        product.color = _clean_color(color)

    product.save()
    return product


def _set_active(product_id: UUID, is_active: bool) -> Product:
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise NotFoundError(f"Product with ID {product_id} not found")

    product.is_active = is_active
    product.save(update_fields=['is_active'])
    return product


@storage_guard()
@transaction.atomic
def deactivate_product(*, product_id: UUID) -> Product:
    """Hide a product from the catalog without touching its ledger history."""
    product = _set_active(product_id, False)
    logger.info("Product deactivated: %s", product.name)
    return product


@storage_guard()
@transaction.atomic
def reactivate_product(*, product_id: UUID) -> Product:
    """Make a deactivated product visible again."""
    product = _set_active(product_id, True)
    logger.info("Product reactivated: %s", product.name)
    return product


@storage_guard()
@transaction.atomic
def delete_product(*, product_id: UUID) -> None:
    """
    Permanently delete a product.

    Raises:
        NotFoundError: If product doesn't exist
        ProductInUseError: If batches, inventory or sales reference it
    """
    product = get_product(product_id=product_id)
    try:
        with transaction.atomic():
            product.delete()
    except ProtectedError:
        raise ProductInUseError(product_id=str(product_id))
    logger.info("Product deleted permanently: %s", product.name)
