"""
DRF exception handler rendering ledger errors as typed API failures.

Response body::

    {"error": {"code": "insufficient_stock",
               "message": "Only 5 units left in stock (requested 6)",
               "details": {"product_id": "...", "requested": 6, "available": 5}}}
"""

import logging
from decimal import Decimal
from uuid import UUID

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import (
    LedgerError,
    InvalidInputError,
    NotFoundError,
    InsufficientStockError,
    ExceedsBalanceError,
    HasOutstandingBalanceError,
    AlreadyClosedError,
    DayClosedError,
    InvalidWithdrawalError,
    ProductInUseError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

# Checked in order; subclasses before their parents.
STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InsufficientStockError, status.HTTP_409_CONFLICT),
    (ExceedsBalanceError, status.HTTP_409_CONFLICT),
    (HasOutstandingBalanceError, status.HTTP_409_CONFLICT),
    (AlreadyClosedError, status.HTTP_409_CONFLICT),
    (DayClosedError, status.HTTP_409_CONFLICT),
    (ProductInUseError, status.HTTP_409_CONFLICT),
    (InvalidWithdrawalError, status.HTTP_400_BAD_REQUEST),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: LedgerError) -> int:
    for error_class, http_status in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return http_status
    return status.HTTP_400_BAD_REQUEST


def _jsonable(value):
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    return value


def ledger_error_payload(exc: LedgerError) -> dict:
    return {
        'code': exc.code,
        'message': exc.message,
        'details': {key: _jsonable(value) for key, value in exc.details.items()},
    }


def ledger_exception_handler(exc, context):
    """Render ``LedgerError`` subclasses; defer everything else to DRF."""
    if isinstance(exc, LedgerError):
        http_status = status_for(exc)
        if http_status >= 500:
            logger.error("Ledger storage failure: %s", exc.message)
        return Response({'error': ledger_error_payload(exc)}, status=http_status)

    return exception_handler(exc, context)
