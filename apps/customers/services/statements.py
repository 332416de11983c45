"""
Customer account statements.

Merges credit sales (charges) and payments into one chronological history
with a running balance.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List
from uuid import UUID

from apps.core.money import ZERO, round2
from apps.customers.models import Payment
from apps.sales.models import Sale, PaymentMode

from .customer_management import get_customer

CHARGE = 'charge'
PAYMENT = 'payment'


@dataclass(frozen=True)
class StatementLine:
    """One movement on a customer's account."""

    id: UUID
    created_at: datetime
    kind: str
    description: str
    amount: Decimal
    running_balance: Decimal


def get_account_statement(*, customer_id: UUID) -> List[StatementLine]:
    """
    Account statement for a customer, newest first.

    The running balance is accumulated oldest to newest and rounded to cents
    at every step.

    Raises:
        NotFoundError: If customer doesn't exist
    """
    customer = get_customer(customer_id=customer_id)

    movements = []
    credit_sales = Sale.objects.filter(customer=customer, payment_mode=PaymentMode.CREDIT)
    for sale in credit_sales:
        movements.append((
            sale.created_at, sale.id, CHARGE,
            f"Sale: {sale.quantity}x {sale.product_name}",
            sale.revenue,
        ))

    for payment in Payment.objects.filter(customer=customer):
        movements.append((
            payment.created_at, payment.id, PAYMENT,
            payment.notes or 'Payment on account',
            payment.amount,
        ))

    movements.sort(key=lambda movement: movement[0])

    lines = []
    balance = ZERO
    for created_at, movement_id, kind, description, amount in movements:
        if kind == CHARGE:
            balance = round2(balance + amount)
        else:
            balance = round2(balance - amount)
        lines.append(StatementLine(
            id=movement_id,
            created_at=created_at,
            kind=kind,
            description=description,
            amount=amount,
            running_balance=balance,
        ))

    lines.reverse()
    return lines
