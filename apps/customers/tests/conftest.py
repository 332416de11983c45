import pytest
from decimal import Decimal

from apps.catalog.models import Product
from apps.customers.models import Customer
from apps.inventory.services import register_batch


@pytest.fixture
def customer(db):
    """Create and return a customer with no debt."""
    return Customer.objects.create(name='Don Pepe', phone='5512345678')


@pytest.fixture
def debtor(db):
    """Create and return a customer who owes 50.00."""
    return Customer.objects.create(name='Doña Lupita', balance=Decimal('50.00'))


@pytest.fixture
def stocked_product(db):
    """Product with 20 units at 5.00 each."""
    product = Product.objects.create(name='Cacahuate Japonés')
    register_batch(product_id=product.id, total_cost=Decimal('100'), units_produced=20)
    return product
