"""
API tests for /api/inventory/
"""

import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.inventory.services import register_batch


@pytest.mark.django_db
class TestBatchAPI:

    def test_register_batch(self, operator_client, product):
        response = operator_client.post(
            reverse('inventory:batches'),
            {'product_id': str(product.id), 'total_cost': '100.00', 'units_produced': 20},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['unit_cost'] == '5.00'

    def test_register_batch_zero_units(self, operator_client, product):
        response = operator_client.post(
            reverse('inventory:batches'),
            {'product_id': str(product.id), 'total_cost': '100.00', 'units_produced': 0},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'invalid_input'

    def test_list_batches_for_product(self, operator_client, product, other_product):
        register_batch(product_id=product.id, total_cost=Decimal('100'), units_produced=20)
        register_batch(product_id=other_product.id, total_cost=Decimal('60'), units_produced=10)

        response = operator_client.get(reverse('inventory:batches'), {'product': str(product.id)})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['product_name'] == product.name


@pytest.mark.django_db
class TestStockAPI:

    def test_inventory_list(self, operator_client, product):
        register_batch(product_id=product.id, total_cost=Decimal('100'), units_produced=20)

        response = operator_client.get(reverse('inventory:inventory-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['quantity'] == 20
        assert response.data[0]['stock_value'] == '100.00'

    def test_stock_detail(self, operator_client, product):
        register_batch(product_id=product.id, total_cost=Decimal('126'), units_produced=18)

        response = operator_client.get(reverse('inventory:stock-detail', args=[product.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['quantity'] == 18
        assert response.data['average_cost'] == '7.00'

    def test_stock_list_only_active(self, operator_client, product, other_product):
        other_product.is_active = False
        other_product.save()

        response = operator_client.get(reverse('inventory:stock-list'))

        assert [item['name'] for item in response.data] == [product.name]

    def test_unknown_product(self, operator_client, db):
        response = operator_client.get(
            reverse('inventory:stock-detail', args=['00000000-0000-0000-0000-000000000000'])
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
