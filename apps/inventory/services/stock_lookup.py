"""
Read-through cache of the product + stock view used while entering sales.

Entries are invalidated by signal receivers whenever a product or its
inventory record is saved. Debits never read from here; they lock and
re-read the live inventory row.
"""

from decimal import Decimal
from uuid import UUID

from django.core.cache import cache

from apps.catalog.services import get_product, list_products
from apps.core.money import to_money
from apps.inventory.models import InventoryRecord

STOCK_VIEW_KEY = 'inventory:stock-view:{product_id}'


def _cache_key(product_id) -> str:
    return STOCK_VIEW_KEY.format(product_id=str(product_id))


def _build_stock_view(product_id: UUID) -> dict:
    product = get_product(product_id=product_id)
    record = InventoryRecord.objects.filter(product_id=product.id).first()
    return {
        'product_id': str(product.id),
        'name': product.name,
        'emoji': product.emoji,
        'color': product.color,
        'is_active': product.is_active,
        'quantity': record.quantity if record else 0,
        'average_cost': to_money(record.average_cost if record else Decimal('0')),
    }


def get_stock_view(*, product_id: UUID) -> dict:
    """
    Product display data with current stock, served from cache when warm.

    Raises:
        NotFoundError: If product doesn't exist
    """
    key = _cache_key(product_id)
    view = cache.get(key)
    if view is None:
        view = _build_stock_view(product_id)
        cache.set(key, view)
    return view


def list_stock_views(*, include_inactive: bool = False) -> list:
    """Stock views for the catalog, by product name."""
    return [
        get_stock_view(product_id=product.id)
        for product in list_products(include_inactive=include_inactive)
    ]


def invalidate_stock_view(product_id) -> None:
    cache.delete(_cache_key(product_id))
