"""
Sales app services layer.

``process_sale`` is the only way a sale is written.
"""

from .sale_processing import SaleOutcome, process_sale, list_sales
from .checkout import CheckoutResult, LineFailure, checkout_cart


__all__ = [
    'SaleOutcome',
    'process_sale',
    'list_sales',
    'CheckoutResult',
    'LineFailure',
    'checkout_cart',
]
