"""
Inventory app services layer.

All state-changing operations use transactions and row locks.
"""

from .costing import batch_unit_cost, weighted_average_cost
from .batch_registration import register_batch, list_batches
from .stock import DebitResult, debit_inventory, get_inventory, list_inventory
from .stock_lookup import get_stock_view, list_stock_views, invalidate_stock_view


__all__ = [
    # Costing
    'batch_unit_cost',
    'weighted_average_cost',

    # Batches
    'register_batch',
    'list_batches',

    # Stock
    'DebitResult',
    'debit_inventory',
    'get_inventory',
    'list_inventory',

    # Cached lookups
    'get_stock_view',
    'list_stock_views',
    'invalidate_stock_view',
]
