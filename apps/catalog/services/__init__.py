"""
Catalog app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .product_management import (
    create_product,
    update_product,
    deactivate_product,
    reactivate_product,
    delete_product,
    get_product,
    list_products,
)


__all__ = [
    'create_product',
    'update_product',
    'deactivate_product',
    'reactivate_product',
    'delete_product',
    'get_product',
    'list_products',
]
