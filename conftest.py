import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken


@pytest.fixture(autouse=True)
def clear_cache():
    """Stock lookups are cached; start every test cold."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def operator(db):
    """Create and return the shop operator account."""
    return get_user_model().objects.create_user(
        username='operator',
        password='TestPass123!',
    )


@pytest.fixture
def operator_client(api_client, operator):
    """Return API client authenticated as the operator."""
    refresh = RefreshToken.for_user(operator)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
