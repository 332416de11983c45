"""
Tests for ledger error rendering and the storage guard.
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from django.db import OperationalError
from rest_framework import status
from rest_framework.exceptions import ValidationError

from apps.core.exception_handler import ledger_exception_handler
from apps.core.exceptions import (
    InsufficientStockError,
    ExceedsBalanceError,
    MissingCustomerError,
    NotFoundError,
    AlreadyClosedError,
    StorageUnavailableError,
    storage_guard,
)


class TestLedgerExceptionHandler:
    """Tests for ledger_exception_handler()."""

    def test_insufficient_stock_reports_available_quantity(self):
        product_id = uuid4()
        exc = InsufficientStockError(product_id=product_id, requested=6, available=5)

        response = ledger_exception_handler(exc, {})

        assert response.status_code == status.HTTP_409_CONFLICT
        error = response.data['error']
        assert error['code'] == 'insufficient_stock'
        assert error['details'] == {
            'product_id': str(product_id),
            'requested': 6,
            'available': 5,
        }

    def test_exceeds_balance_reports_both_values(self):
        exc = ExceedsBalanceError(
            customer_id=uuid4(), amount=Decimal('30.00'), balance=Decimal('20.00')
        )

        response = ledger_exception_handler(exc, {})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error']['details']['amount'] == '30.00'
        assert response.data['error']['details']['balance'] == '20.00'

    @pytest.mark.parametrize('exc, expected_status', [
        (MissingCustomerError(), status.HTTP_400_BAD_REQUEST),
        (NotFoundError('Customer not found'), status.HTTP_404_NOT_FOUND),
        (AlreadyClosedError(), status.HTTP_409_CONFLICT),
        (StorageUnavailableError(), status.HTTP_503_SERVICE_UNAVAILABLE),
    ])
    def test_status_codes(self, exc, expected_status):
        response = ledger_exception_handler(exc, {})

        assert response.status_code == expected_status
        assert response.data['error']['code'] == exc.code

    def test_non_ledger_errors_use_drf_default(self):
        response = ledger_exception_handler(ValidationError({'quantity': ['bad']}), {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'quantity' in response.data


class TestStorageGuard:
    """Tests for storage_guard()."""

    def test_operational_error_becomes_storage_unavailable(self):
        with pytest.raises(StorageUnavailableError):
            with storage_guard():
                raise OperationalError('could not connect to server')

    def test_works_as_decorator(self):
        @storage_guard()
        def flaky():
            raise OperationalError('connection reset')

        with pytest.raises(StorageUnavailableError):
            flaky()

    def test_business_errors_pass_through(self):
        with pytest.raises(NotFoundError):
            with storage_guard():
                raise NotFoundError()
