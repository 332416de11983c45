"""
Tests for the seed_shop management command.
"""

import pytest
from decimal import Decimal
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command

from apps.cashregister.services import get_day
from apps.catalog.models import Product
from apps.customers.services import total_outstanding
from apps.sales.models import Sale


@pytest.mark.django_db
class TestSeedShop:

    def test_creates_sample_ledger(self):
        out = StringIO()
        call_command('seed_shop', stdout=out)

        assert 'successfully' in out.getvalue()
        assert Product.objects.count() == 4
        assert Sale.objects.count() == 5
        assert get_user_model().objects.filter(username='operator').exists()

        day = get_day()
        assert day.cash_sales == Decimal('60.00')
        assert day.cash_payments == Decimal('15.00')
        assert day.credit_sales == Decimal('64.00')
        assert total_outstanding() == Decimal('49.00')

    def test_clear_replaces_data(self):
        call_command('seed_shop', stdout=StringIO())
        call_command('seed_shop', '--clear', stdout=StringIO())

        assert Product.objects.count() == 4
        assert Sale.objects.count() == 5
