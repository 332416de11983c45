"""
API tests for /api/customers/
"""

import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.customers.services import record_payment


@pytest.mark.django_db
class TestCustomerAPI:

    def test_create_and_list(self, operator_client):
        response = operator_client.post(
            reverse('customers:customer-list'),
            {'name': 'Chuy', 'phone': '5599'},
            format='json',
        )
        assert response.status_code == status.HTTP_201_CREATED

        response = operator_client.get(reverse('customers:customer-list'))
        assert [c['name'] for c in response.data] == ['Chuy']

    def test_delete_debtor_conflicts(self, operator_client, debtor):
        response = operator_client.delete(reverse('customers:customer-detail', args=[debtor.id]))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'has_outstanding_balance'

    def test_record_payment(self, operator_client, debtor):
        response = operator_client.post(
            reverse('customers:customer-payments', args=[debtor.id]),
            {'amount': '30.00'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['amount'] == '30.00'

    def test_overpayment_conflicts(self, operator_client, debtor):
        response = operator_client.post(
            reverse('customers:customer-payments', args=[debtor.id]),
            {'amount': '50.01'},
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['code'] == 'exceeds_balance'
        assert response.data['error']['details']['balance'] == '50.00'

    def test_list_payments(self, operator_client, debtor):
        record_payment(customer_id=debtor.id, amount=Decimal('10'))

        response = operator_client.get(reverse('customers:customer-payments', args=[debtor.id]))

        assert len(response.data) == 1

    def test_promise_and_debtors(self, operator_client, debtor):
        response = operator_client.post(
            reverse('customers:customer-promise', args=[debtor.id]),
            {'promised_date': '2020-01-01'},
            format='json',
        )
        assert response.status_code == status.HTTP_200_OK

        response = operator_client.get(reverse('customers:customer-debtors'))
        assert response.data[0]['is_overdue'] is True

    def test_statement(self, operator_client, debtor):
        record_payment(customer_id=debtor.id, amount=Decimal('10'))

        response = operator_client.get(reverse('customers:customer-statement', args=[debtor.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['kind'] == 'payment'

    def test_reconcile(self, operator_client, debtor):
        response = operator_client.post(reverse('customers:customer-reconcile', args=[debtor.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['balance'] == '0.00'
