"""
Customer management service.

Handles the customer directory: create, update, promise dates and deletion.
Balances are never written here; see ``debt_ledger``.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.core.exceptions import (
    HasOutstandingBalanceError,
    InvalidInputError,
    NotFoundError,
    storage_guard,
)
from apps.customers.models import Customer

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = (name or '').strip()
    if not name:
        raise InvalidInputError("Customer name cannot be empty")
    return name


def _lock_customer(customer_id: UUID) -> Customer:
    try:
        return Customer.objects.select_for_update().get(id=customer_id)
    except Customer.DoesNotExist:
        raise NotFoundError(f"Customer with ID {customer_id} not found")


def get_customer(*, customer_id: UUID) -> Customer:
    """
    Get a customer by ID.

    Raises:
        NotFoundError: If customer doesn't exist
    """
    try:
        return Customer.objects.get(id=customer_id)
    except Customer.DoesNotExist:
        raise NotFoundError(f"Customer with ID {customer_id} not found")


def list_customers() -> QuerySet[Customer]:
    """All customers ordered by name."""
    return Customer.objects.order_by('name')


@storage_guard()
def create_customer(*, name: str, phone: str = '', notes: str = '') -> Customer:
    """
    Create a customer with a zero balance.

    Raises:
        InvalidInputError: If name is empty
    """
    customer = Customer.objects.create(
        name=_clean_name(name),
        phone=(phone or '').strip(),
        notes=(notes or '').strip(),
    )
    logger.info("Customer created: %s", customer.name)
    return customer


@storage_guard()
@transaction.atomic
def update_customer(
    *,
    customer_id: UUID,
    name: Optional[str] = None,
    phone: Optional[str] = None,
    notes: Optional[str] = None
) -> Customer:
    """
    Update a customer's contact details.

    Raises:
        NotFoundError: If customer doesn't exist
        InvalidInputError: If name is provided but empty
    """
    customer = _lock_customer(customer_id)

    if name is not None:
        customer.name = _clean_name(name)
    if phone is not None:
        customer.phone = phone.strip()
    if notes is not None:
        customer.notes = notes.strip()

    customer.save(update_fields=['name', 'phone', 'notes', 'updated_at'])
    return customer


@storage_guard()
@transaction.atomic
def set_promised_payment_date(
    *,
    customer_id: UUID,
    promised_date: Optional[date]
) -> Customer:
    """Record (or clear, with ``None``) the date the customer promised to pay."""
    customer = _lock_customer(customer_id)
    customer.promised_payment_date = promised_date
    customer.save(update_fields=['promised_payment_date', 'updated_at'])
    return customer


@storage_guard()
@transaction.atomic
def delete_customer(*, customer_id: UUID) -> None:
    """
    Delete a customer who owes nothing.

    Past sales and payments keep their customer name snapshot.

    Raises:
        NotFoundError: If customer doesn't exist
        HasOutstandingBalanceError: If the balance is above zero
    """
    customer = _lock_customer(customer_id)

    if customer.balance > 0:
        logger.warning(
            "Refused to delete customer %s with balance %s",
            customer.name, customer.balance,
        )
        raise HasOutstandingBalanceError(
            customer_id=str(customer.id),
            balance=customer.balance,
        )

    customer.delete()
    logger.info("Customer deleted: %s", customer.name)
