"""
API tests for /api/cash/
"""

import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.cashregister.services import close_day, post_sale
from apps.core.dates import business_today


@pytest.mark.django_db
class TestCashAPI:

    def test_today_empty(self, operator_client):
        response = operator_client.get(reverse('cashregister:today'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['day']['total_cash'] == '0.00'
        assert response.data['day']['date'] == business_today().isoformat()
        assert response.data['cash_out'] is None

    def test_day_detail(self, operator_client):
        post_sale(payment_mode='cash', revenue=Decimal('20'), cost=Decimal('8'))

        response = operator_client.get(
            reverse('cashregister:day-detail', args=[business_today().isoformat()])
        )

        assert response.data['day']['cash_sales'] == '20.00'
        assert response.data['profit'] == '12.00'

    def test_day_detail_bad_date(self, operator_client):
        response = operator_client.get(reverse('cashregister:day-detail', args=['yesterday']))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'invalid_input'

    def test_close(self, operator_client):
        post_sale(payment_mode='cash', revenue=Decimal('500'), cost=Decimal('0'))

        response = operator_client.post(
            reverse('cashregister:close'),
            {'counted_cash': '480.00', 'amount_withdrawn': '400.00'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['variance'] == '-20.00'
        assert response.data['next_day_float'] == '80.00'

    def test_close_twice_conflicts(self, operator_client):
        close_day(counted_cash=Decimal('0'), amount_withdrawn=Decimal('0'))

        response = operator_client.post(
            reverse('cashregister:close'),
            {'counted_cash': '0', 'amount_withdrawn': '0'},
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'already_closed'

    def test_close_invalid_withdrawal(self, operator_client):
        response = operator_client.post(
            reverse('cashregister:close'),
            {'counted_cash': '10', 'amount_withdrawn': '20'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'invalid_withdrawal'

    def test_closings(self, operator_client):
        close_day(counted_cash=Decimal('0'), amount_withdrawn=Decimal('0'))

        response = operator_client.get(reverse('cashregister:closings'), {'limit': 3})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
