"""
Customer debt ledger.

Credit sales raise a customer's balance; payments lower it. A payment is
cash in the drawer, so it is posted to today's cash register aggregate in
the same transaction.

Lock order follows the rest of the ledger: customer row, then cash day.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import DecimalField, ExpressionWrapper, F, QuerySet, Sum

from apps.cashregister.services import ensure_day_open, post_payment
from apps.core.dates import business_today, days_overdue, is_overdue
from apps.core.exceptions import ExceedsBalanceError, InvalidInputError, storage_guard
from apps.core.money import round2, to_money
from apps.customers.models import Customer, Payment
from apps.sales.models import Sale, PaymentMode

from .customer_management import _lock_customer

logger = logging.getLogger(__name__)


@storage_guard()
@transaction.atomic
def charge_debt(*, customer_id: UUID, amount) -> Customer:
    """
    Add a credit sale amount to the customer's balance.

    Called by the sale orchestrator inside its own transaction.

    Raises:
        NotFoundError: If customer doesn't exist
        InvalidInputError: If amount is negative
    """
    amount = round2(amount)
    if amount < 0:
        raise InvalidInputError("Charge amount cannot be negative")

    customer = _lock_customer(customer_id)
    customer.balance = round2(customer.balance + amount)
    customer.save(update_fields=['balance', 'updated_at'])

    logger.info("Debt charged to %s: +%s (balance %s)", customer.name, amount, customer.balance)
    return customer


@storage_guard()
@transaction.atomic
def record_payment(*, customer_id: UUID, amount, notes: str = '') -> Payment:
    """
    Record a payment against a customer's balance.

    Args:
        customer_id: UUID of the paying customer
        amount: Amount received (> 0, at most the balance)
        notes: Optional free text

    Returns:
        Created Payment instance

    Raises:
        InvalidInputError: If amount <= 0
        NotFoundError: If customer doesn't exist
        ExceedsBalanceError: If amount is larger than the balance
        DayClosedError: If today's cash register is already closed
    """
    amount = round2(amount)
    if amount <= 0:
        raise InvalidInputError("Payment amount must be greater than 0")

    today = business_today()
    ensure_day_open(today)

    customer = _lock_customer(customer_id)

    if amount > customer.balance:
        logger.warning(
            "Payment of %s rejected for %s: balance is %s",
            amount, customer.name, customer.balance,
        )
        raise ExceedsBalanceError(
            customer_id=customer.id,
            amount=amount,
            balance=customer.balance,
        )

    payment = Payment.objects.create(
        customer=customer,
        customer_name=customer.name,
        amount=amount,
        notes=(notes or '').strip(),
        business_date=today,
    )

    customer.balance = round2(customer.balance - amount)
    customer.save(update_fields=['balance', 'updated_at'])

    post_payment(amount=amount, business_date=today)

    logger.info("Payment recorded for %s: %s (balance %s)", customer.name, amount, customer.balance)
    return payment


def _credit_sales_total(customer_id: UUID) -> Decimal:
    revenue = ExpressionWrapper(
        F('quantity') * F('unit_price'),
        output_field=DecimalField(max_digits=14, decimal_places=2),
    )
    total = (
        Sale.objects
        .filter(customer_id=customer_id, payment_mode=PaymentMode.CREDIT)
        .aggregate(total=Sum(revenue))['total']
    )
    return to_money(total)


@storage_guard()
@transaction.atomic
def reconcile_balance(*, customer_id: UUID) -> Customer:
    """
    Recompute the cached balance from the customer's history.

    balance = sum of credit sale revenue - sum of payments

    Raises:
        NotFoundError: If customer doesn't exist
    """
    customer = _lock_customer(customer_id)

    paid = to_money(customer.payments.aggregate(total=Sum('amount'))['total'])
    recomputed = max(round2(_credit_sales_total(customer.id) - paid), Decimal('0.00'))

    if recomputed != customer.balance:
        logger.warning(
            "Balance of %s corrected from %s to %s",
            customer.name, customer.balance, recomputed,
        )
        customer.balance = recomputed
        customer.save(update_fields=['balance', 'updated_at'])

    return customer


def total_outstanding() -> Decimal:
    """Money on the street: the sum of every customer balance."""
    return to_money(Customer.objects.aggregate(total=Sum('balance'))['total'])


def list_payments(*, customer_id: UUID) -> QuerySet[Payment]:
    """A customer's payments, newest first."""
    return Payment.objects.filter(customer_id=customer_id).order_by('-created_at')


def list_debtors(today: Optional[date] = None) -> List[Customer]:
    """
    Customers who owe money, overdue promises first then largest balance.

    Each customer is annotated with ``is_overdue`` and ``days_overdue``.
    """
    today = today or business_today()
    debtors = list(Customer.objects.filter(balance__gt=0))

    for customer in debtors:
        customer.is_overdue = is_overdue(customer.promised_payment_date, today)
        customer.days_overdue = days_overdue(customer.promised_payment_date, today)

    debtors.sort(key=lambda c: (not c.is_overdue, -c.balance))
    return debtors
