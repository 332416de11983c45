"""
Daily cash register aggregate.

One row per business date accumulates cash sales, cash payments, credit
sales and cost of goods sold. Postings only ever add; a closed day accepts
no more postings.
"""

import logging
from datetime import date
from typing import Optional

from django.db import transaction

from apps.cashregister.models import CashRegisterDay
from apps.core.dates import business_today, date_key
from apps.core.exceptions import DayClosedError, InvalidInputError, storage_guard
from apps.core.money import round2

logger = logging.getLogger(__name__)

CASH = 'cash'
CREDIT = 'credit'


def _lock_day(business_date: date) -> CashRegisterDay:
    day, _ = (
        CashRegisterDay.objects
        .select_for_update()
        .get_or_create(business_date=business_date)
    )
    return day


def _lock_open_day(business_date: date) -> CashRegisterDay:
    day = _lock_day(business_date)
    if day.is_closed:
        logger.warning("Posting rejected: day %s is closed", date_key(business_date))
        raise DayClosedError(business_date=date_key(business_date))
    return day


def ensure_day_open(business_date: Optional[date] = None) -> None:
    """
    Fail fast if the day was already cashed out.

    Non-locking; the postings re-check under the row lock.

    Raises:
        DayClosedError: If the day is closed
    """
    business_date = business_date or business_today()
    if CashRegisterDay.objects.filter(business_date=business_date, is_closed=True).exists():
        raise DayClosedError(business_date=date_key(business_date))


@storage_guard()
@transaction.atomic
def post_sale(
    *,
    payment_mode: str,
    revenue,
    cost,
    business_date: Optional[date] = None
) -> CashRegisterDay:
    """
    Add a sale to the day's totals.

    Cash sales add to ``cash_sales`` (and so ``total_cash``); credit sales
    add to ``credit_sales``. Both add their cost to ``cost_of_goods_sold``.

    Raises:
        InvalidInputError: If payment_mode is unknown or an amount is negative
        DayClosedError: If the day is closed
    """
    if payment_mode not in (CASH, CREDIT):
        raise InvalidInputError(f"Unknown payment mode: {payment_mode}")

    revenue = round2(revenue)
    cost = round2(cost)
    if revenue < 0 or cost < 0:
        raise InvalidInputError("Sale amounts cannot be negative")

    day = _lock_open_day(business_date or business_today())

    if payment_mode == CASH:
        day.cash_sales = round2(day.cash_sales + revenue)
    else:
        day.credit_sales = round2(day.credit_sales + revenue)
    day.cost_of_goods_sold = round2(day.cost_of_goods_sold + cost)
    day.save()

    return day


@storage_guard()
@transaction.atomic
def post_payment(*, amount, business_date: Optional[date] = None) -> CashRegisterDay:
    """
    Add a customer payment to the day's cash.

    Raises:
        InvalidInputError: If amount is negative
        DayClosedError: If the day is closed
    """
    amount = round2(amount)
    if amount < 0:
        raise InvalidInputError("Payment amount cannot be negative")

    day = _lock_open_day(business_date or business_today())
    day.cash_payments = round2(day.cash_payments + amount)
    day.save()

    return day


def get_day(business_date: Optional[date] = None) -> CashRegisterDay:
    """The day's aggregate; an unsaved all-zero day if nothing was posted."""
    business_date = business_date or business_today()
    day = CashRegisterDay.objects.filter(business_date=business_date).first()
    return day or CashRegisterDay(business_date=business_date)
