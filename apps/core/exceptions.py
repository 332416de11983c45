"""
Domain exceptions shared by every ledger app.

These exceptions represent business rule violations (and the one
infrastructure failure callers may retry) and are raised by the services
layer. They carry a stable ``code`` and a ``details`` dict so the API layer
can render them as typed failures.

Exception Hierarchy:
    LedgerError (base)
    ├── InvalidInputError
    │   └── MissingCustomerError
    ├── NotFoundError
    ├── InsufficientStockError
    ├── ExceedsBalanceError
    ├── HasOutstandingBalanceError
    ├── AlreadyClosedError
    ├── DayClosedError
    ├── InvalidWithdrawalError
    ├── ProductInUseError
    └── StorageUnavailableError

Usage:
    from apps.core.exceptions import InsufficientStockError

    if quantity > record.quantity:
        raise InsufficientStockError(
            product_id=product_id,
            requested=quantity,
            available=record.quantity,
        )
"""

from contextlib import contextmanager

from django.db import InterfaceError, OperationalError


class LedgerError(Exception):
    """Base exception for all ledger service errors."""

    code = 'ledger_error'
    default_message = 'Ledger operation failed.'

    def __init__(self, message=None, **details):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class InvalidInputError(LedgerError):
    """Raised when a caller-supplied value fails a precondition."""

    code = 'invalid_input'
    default_message = 'Invalid input.'


class MissingCustomerError(InvalidInputError):
    """Raised when a credit sale has no customer."""

    code = 'missing_customer'
    default_message = 'A customer is required for credit sales.'


class NotFoundError(LedgerError):
    """Raised when a referenced product or customer does not exist."""

    code = 'not_found'
    default_message = 'Not found.'


class InsufficientStockError(LedgerError):
    """Raised when a debit exceeds the quantity on hand."""

    code = 'insufficient_stock'

    def __init__(self, *, product_id, requested, available):
        super().__init__(
            f"Only {available} units left in stock (requested {requested})",
            product_id=str(product_id),
            requested=requested,
            available=available,
        )

    @property
    def available(self):
        return self.details['available']


class ExceedsBalanceError(LedgerError):
    """Raised when a payment is larger than the customer's balance."""

    code = 'exceeds_balance'

    def __init__(self, *, customer_id, amount, balance):
        super().__init__(
            f"Payment ({amount}) exceeds outstanding balance ({balance})",
            customer_id=str(customer_id),
            amount=amount,
            balance=balance,
        )

    @property
    def amount(self):
        return self.details['amount']

    @property
    def balance(self):
        return self.details['balance']


class HasOutstandingBalanceError(LedgerError):
    """Raised when deleting a customer who still owes money."""

    code = 'has_outstanding_balance'
    default_message = 'Cannot delete a customer with an outstanding balance.'


class AlreadyClosedError(LedgerError):
    """Raised when a cash-out is attempted twice for the same day."""

    code = 'already_closed'
    default_message = 'The cash register for this day is already closed.'


class DayClosedError(LedgerError):
    """Raised when a sale or payment lands on a day that was cashed out."""

    code = 'day_closed'
    default_message = 'The cash register for this day is closed.'


class InvalidWithdrawalError(LedgerError):
    """Raised when more cash is withdrawn than was counted."""

    code = 'invalid_withdrawal'

    def __init__(self, *, amount_withdrawn, counted_cash):
        super().__init__(
            f"Cannot withdraw {amount_withdrawn}; only {counted_cash} was counted",
            amount_withdrawn=amount_withdrawn,
            counted_cash=counted_cash,
        )


class ProductInUseError(LedgerError):
    """Raised when deleting a product that has ledger history."""

    code = 'product_in_use'
    default_message = 'Product has stock or sales history; deactivate it instead.'


class StorageUnavailableError(LedgerError):
    """Raised when the database cannot be reached. Safe to retry by the caller."""

    code = 'storage_unavailable'
    default_message = 'Storage is unavailable. Try again.'


@contextmanager
def storage_guard():
    """
    Translate connectivity failures into ``StorageUnavailableError``.

    Works as a context manager or, when called, as a decorator::

        @storage_guard()
        @transaction.atomic
        def register_batch(...):
            ...
    """
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        raise StorageUnavailableError(str(exc) or None) from exc
