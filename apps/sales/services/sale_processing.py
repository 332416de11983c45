"""
Sale orchestration.

A sale touches three ledgers: it debits inventory, charges the customer on
credit sales, and posts to the day's cash register. All of it happens in
one transaction, so a failure after the debit rolls the debit back too and
no ledger is left half-written.

Lock order: inventory row, customer row, cash register day.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.cashregister.services import ensure_day_open, post_sale
from apps.catalog.services import get_product
from apps.configuration.services import BusinessConfig
from apps.core.dates import business_today
from apps.core.exceptions import InvalidInputError, MissingCustomerError, storage_guard
from apps.core.money import round2
from apps.core.quantities import positive_count
from apps.customers.services import charge_debt, get_customer
from apps.inventory.services import debit_inventory
from apps.sales.models import PaymentMode, Sale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaleOutcome:
    """A committed sale and its figures."""

    sale: Sale
    revenue: Decimal
    cost: Decimal
    profit: Decimal
    remaining_quantity: int


def _resolve_price(config: BusinessConfig, override_price) -> Decimal:
    if override_price is None:
        return config.default_sale_price
    price = round2(override_price)
    if price <= 0:
        raise InvalidInputError("Sale price must be greater than 0")
    return price


@storage_guard()
def process_sale(
    *,
    product_id: UUID,
    quantity: int,
    payment_mode: str,
    config: BusinessConfig,
    customer_id: Optional[UUID] = None,
    override_price=None
) -> SaleOutcome:
    """
    Sell ``quantity`` units of a product.

    Args:
        product_id: UUID of the product sold
        quantity: Units sold (> 0)
        payment_mode: 'cash' or 'credit'
        config: Business configuration supplying the default price
        customer_id: Required for credit sales
        override_price: Unit price for this sale instead of the default

    Returns:
        SaleOutcome with the sale, revenue, cost, profit and remaining stock

    Raises:
        InvalidInputError: If quantity, price or payment mode is invalid
        MissingCustomerError: If a credit sale has no customer
        NotFoundError: If product or customer doesn't exist
        InsufficientStockError: If stock is short (nothing is written)
        DayClosedError: If today's cash register is closed
    """
    quantity = positive_count(quantity)

    if payment_mode not in PaymentMode.values:
        raise InvalidInputError(f"Unknown payment mode: {payment_mode}")

    is_credit = payment_mode == PaymentMode.CREDIT
    if is_credit and not customer_id:
        raise MissingCustomerError()

    unit_price = _resolve_price(config, override_price)
    product = get_product(product_id=product_id)
    customer = get_customer(customer_id=customer_id) if is_credit else None

    debited = False
    try:
        with transaction.atomic():
            today = business_today()
            ensure_day_open(today)

            debit = debit_inventory(product_id=product.id, quantity=quantity)
            debited = True

            revenue = round2(quantity * unit_price)
            cost = round2(quantity * debit.unit_cost_at_debit)

            sale = Sale.objects.create(
                product=product,
                product_name=product.name,
                quantity=quantity,
                unit_price=unit_price,
                unit_cost=debit.unit_cost_at_debit,
                payment_mode=payment_mode,
                customer=customer,
                customer_name=customer.name if customer else '',
                business_date=today,
            )

            if is_credit:
                charge_debt(customer_id=customer.id, amount=revenue)

            post_sale(
                payment_mode=payment_mode,
                revenue=revenue,
                cost=cost,
                business_date=today,
            )
    except Exception:
        if debited:
            logger.error(
                "Sale of %s x %s rolled back after the stock debit",
                quantity, product.name, exc_info=True,
            )
        raise

    logger.info(
        "Sale processed: %s x %s (%s) revenue %s cost %s",
        quantity, product.name, payment_mode, revenue, cost,
    )
    return SaleOutcome(
        sale=sale,
        revenue=revenue,
        cost=cost,
        profit=round2(revenue - cost),
        remaining_quantity=debit.remaining_quantity,
    )


def list_sales(
    *,
    business_date: Optional[date] = None,
    customer_id: Optional[UUID] = None
) -> QuerySet[Sale]:
    """Sales newest first, optionally for one day and/or one customer."""
    queryset = Sale.objects.select_related('product', 'customer')
    if business_date is not None:
        queryset = queryset.filter(business_date=business_date)
    if customer_id is not None:
        queryset = queryset.filter(customer_id=customer_id)
    return queryset.order_by('-created_at')
