import pytest

from apps.catalog.models import Product


@pytest.fixture
def product(db):
    """Create and return an active product."""
    return Product.objects.create(name='Cacahuate Japonés', emoji='🥜', color='#F59E0B')


@pytest.fixture
def inactive_product(db):
    """Create and return a deactivated product."""
    return Product.objects.create(name='Habas Enchiladas', is_active=False)
