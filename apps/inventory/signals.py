"""
Signal handlers for inventory app.

Keep the cached stock views in step with products and inventory records.
"""

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from apps.catalog.models import Product
from apps.inventory.models import InventoryRecord
from apps.inventory.services.stock_lookup import invalidate_stock_view


def _invalidate(product_id):
    invalidate_stock_view(product_id)
    # A reader may repopulate the entry before this transaction commits
    transaction.on_commit(lambda: invalidate_stock_view(product_id))


@receiver(post_save, sender=Product)
@receiver(post_delete, sender=Product)
def invalidate_product_stock_view(sender, instance, **kwargs):
    _invalidate(instance.pk)


@receiver(post_save, sender=InventoryRecord)
@receiver(post_delete, sender=InventoryRecord)
def invalidate_inventory_stock_view(sender, instance, **kwargs):
    _invalidate(instance.product_id)
