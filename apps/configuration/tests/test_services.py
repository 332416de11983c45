"""
Service and API tests for the business configuration.
"""

import pytest
from decimal import Decimal

from django.test import override_settings
from django.urls import reverse
from rest_framework import status

from apps.configuration.models import BusinessSettings
from apps.configuration.services import (
    BusinessConfig,
    load_business_config,
    update_business_config,
)
from apps.core.exceptions import InvalidInputError


@pytest.mark.django_db
class TestLoadBusinessConfig:
    """Tests for load_business_config()."""

    def test_creates_defaults_on_first_load(self):
        config = load_business_config()

        assert isinstance(config, BusinessConfig)
        assert config.business_name == 'Control Cacahuate'
        assert config.default_sale_price == Decimal('10.00')
        assert config.currency == 'MXN'
        assert BusinessSettings.objects.count() == 1

    @override_settings(SHOP_DEFAULTS={
        'BUSINESS_NAME': 'La Tiendita',
        'DEFAULT_SALE_PRICE': Decimal('12.5'),
        'CURRENCY': 'MXN',
    })
    def test_defaults_come_from_settings(self):
        config = load_business_config()

        assert config.business_name == 'La Tiendita'
        assert config.default_sale_price == Decimal('12.50')

    def test_loading_twice_keeps_one_row(self):
        load_business_config()
        load_business_config()

        assert BusinessSettings.objects.count() == 1

    def test_config_is_immutable(self):
        config = load_business_config()

        with pytest.raises(AttributeError):
            config.default_sale_price = Decimal('1.00')


@pytest.mark.django_db
class TestUpdateBusinessConfig:
    """Tests for update_business_config()."""

    def test_update_price(self):
        config = update_business_config(default_sale_price=Decimal('15'))

        assert config.default_sale_price == Decimal('15.00')
        assert load_business_config().default_sale_price == Decimal('15.00')

    def test_update_name_is_trimmed(self):
        config = update_business_config(business_name='  Cacahuates Don Juan  ')

        assert config.business_name == 'Cacahuates Don Juan'

    @pytest.mark.parametrize('price', [Decimal('0'), Decimal('-3')])
    def test_rejects_non_positive_price(self, price):
        with pytest.raises(InvalidInputError):
            update_business_config(default_sale_price=price)

    def test_rejects_empty_name(self):
        with pytest.raises(InvalidInputError):
            update_business_config(business_name='   ')

    def test_failed_update_changes_nothing(self):
        load_business_config()

        with pytest.raises(InvalidInputError):
            update_business_config(business_name='New Name', default_sale_price=Decimal('0'))

        assert load_business_config().business_name == 'Control Cacahuate'


@pytest.mark.django_db
class TestBusinessSettingsAPI:
    """Tests for /api/settings/"""

    def test_get_settings(self, operator_client):
        response = operator_client.get(reverse('configuration:business-settings'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['default_sale_price'] == '10.00'

    def test_patch_settings(self, operator_client):
        response = operator_client.patch(
            reverse('configuration:business-settings'),
            {'default_sale_price': '14.00'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['default_sale_price'] == '14.00'

    def test_patch_rejects_zero_price(self, operator_client):
        response = operator_client.patch(
            reverse('configuration:business-settings'),
            {'default_sale_price': '0'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'invalid_input'

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('configuration:business-settings'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
