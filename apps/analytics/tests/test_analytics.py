"""
Tests for the dashboard queries and calculation helpers.
"""

import pytest
from datetime import timedelta
from decimal import Decimal
from types import SimpleNamespace

from django.urls import reverse
from rest_framework import status

from apps.analytics.analytics import (
    DashboardQueries,
    average_yield,
    inventory_value,
    margin_percent,
    sale_profit,
)
from apps.catalog.models import Product
from apps.configuration.services import load_business_config
from apps.core.dates import business_today
from apps.customers.models import Customer
from apps.customers.services import record_payment
from apps.inventory.services import register_batch
from apps.sales.services import process_sale


class TestHelpers:

    def test_inventory_value(self):
        records = [
            SimpleNamespace(quantity=20, average_cost=Decimal('5.00')),
            SimpleNamespace(quantity=3, average_cost=Decimal('5.95')),
        ]

        assert inventory_value(records) == Decimal('117.85')

    def test_inventory_value_empty(self):
        assert inventory_value([]) == Decimal('0.00')

    def test_average_yield(self):
        batches = [SimpleNamespace(units_produced=n) for n in (20, 18, 19)]

        assert average_yield(batches) == Decimal('19.0')

    def test_average_yield_rounds_to_one_decimal(self):
        batches = [SimpleNamespace(units_produced=n) for n in (20, 19, 19)]

        assert average_yield(batches) == Decimal('19.3')

    def test_average_yield_without_batches(self):
        assert average_yield([]) == Decimal('0.0')

    @pytest.mark.parametrize('cost, price, expected', [
        ('4.00', '10.00', 60),
        ('5.95', '10.00', 41),
        ('12.00', '10.00', -20),
        ('4.00', '0', 0),
    ])
    def test_margin_percent(self, cost, price, expected):
        assert margin_percent(Decimal(cost), Decimal(price)) == expected

    def test_sale_profit(self):
        assert sale_profit(Decimal('10'), Decimal('5.95'), 3) == Decimal('12.15')


@pytest.fixture
def shop(db):
    """Two stocked products, one cash sale, one credit sale and a payment."""
    config = load_business_config()
    japones = Product.objects.create(name='Japonés')
    enchilado = Product.objects.create(name='Enchilado')
    register_batch(product_id=japones.id, total_cost=Decimal('100'), units_produced=20)
    register_batch(product_id=enchilado.id, total_cost=Decimal('72'), units_produced=18)

    customer = Customer.objects.create(name='Doña Lupita')
    process_sale(product_id=japones.id, quantity=2, payment_mode='cash', config=config)
    process_sale(
        product_id=enchilado.id,
        quantity=3,
        payment_mode='credit',
        config=config,
        customer_id=customer.id,
    )
    record_payment(customer_id=customer.id, amount=Decimal('5'))
    return customer


@pytest.mark.django_db
class TestDashboardQueries:

    def test_summary(self, shop):
        summary = DashboardQueries.summary()

        assert summary['cash_sales_today'] == Decimal('20.00')
        assert summary['payments_today'] == Decimal('5.00')
        assert summary['cash_today'] == Decimal('25.00')
        assert summary['credit_sales_today'] == Decimal('30.00')
        assert summary['cost_of_goods_sold_today'] == Decimal('22.00')
        assert summary['profit_today'] == Decimal('-2.00')
        assert summary['units_in_stock'] == 33
        assert summary['inventory_value'] == Decimal('150.00')
        assert summary['money_on_the_street'] == Decimal('25.00')
        assert summary['customers_with_debt'] == 1
        assert summary['average_yield'] == Decimal('19.0')
        assert summary['best_yield'] == 20
        assert summary['worst_yield'] == 18

    def test_summary_for_quiet_day(self, shop):
        summary = DashboardQueries.summary(business_today() - timedelta(days=1))

        assert summary['cash_today'] == Decimal('0.00')
        assert summary['money_on_the_street'] == Decimal('25.00')

    def test_empty_shop(self, db):
        summary = DashboardQueries.summary()

        assert summary['inventory_value'] == Decimal('0.00')
        assert summary['units_in_stock'] == 0
        assert summary['customers_with_debt'] == 0
        assert summary['best_yield'] == 0


@pytest.mark.django_db
class TestDashboardAPI:

    def test_dashboard(self, operator_client, shop):
        response = operator_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['cash_today'] == '25.00'
        assert response.data['average_yield'] == '19.0'

    def test_requires_authentication(self, api_client, db):
        response = api_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
