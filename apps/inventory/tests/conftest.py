import pytest

from apps.catalog.models import Product


@pytest.fixture
def product(db):
    """Create and return an active product with no stock."""
    return Product.objects.create(name='Cacahuate Japonés', emoji='🥜')


@pytest.fixture
def other_product(db):
    """Create and return a second product."""
    return Product.objects.create(name='Cacahuate Enchilado', emoji='🌶️')
