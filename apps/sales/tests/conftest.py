import pytest
from decimal import Decimal

from apps.catalog.models import Product
from apps.configuration.services import load_business_config
from apps.customers.models import Customer
from apps.inventory.services import register_batch


@pytest.fixture
def config(db):
    """Business configuration with the default price of 10.00."""
    return load_business_config()


@pytest.fixture
def product(db):
    """Product with 10 units at 4.00 each."""
    product = Product.objects.create(name='Cacahuate Japonés')
    register_batch(product_id=product.id, total_cost=Decimal('40'), units_produced=10)
    return product


@pytest.fixture
def other_product(db):
    """Product with 2 units at 6.00 each."""
    product = Product.objects.create(name='Cacahuate Enchilado')
    register_batch(product_id=product.id, total_cost=Decimal('12'), units_produced=2)
    return product


@pytest.fixture
def customer(db):
    """Create and return a customer with no debt."""
    return Customer.objects.create(name='Don Pepe')
