"""
End-of-day cash-out.

Compares counted cash against what the register says should be in the
drawer, records the withdrawal and the float left for tomorrow, and closes
the day.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.cashregister.models import CashOut, CashRegisterDay
from apps.core.dates import business_today
from apps.core.exceptions import (
    AlreadyClosedError,
    InvalidInputError,
    InvalidWithdrawalError,
    storage_guard,
)
from apps.core.money import ZERO, round2

from .daily_aggregate import _lock_day, get_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySummary:
    """A day's totals with the figures derived from them."""

    day: CashRegisterDay
    profit: Decimal
    opening_float: Decimal
    cash_out: Optional[CashOut]


@storage_guard()
@transaction.atomic
def close_day(
    *,
    counted_cash,
    amount_withdrawn,
    notes: str = '',
    business_date: Optional[date] = None
) -> CashOut:
    """
    Reconcile and close a business day.

    Args:
        counted_cash: Cash physically counted in the drawer (>= 0)
        amount_withdrawn: Cash taken out of the drawer (0..counted_cash)
        notes: Optional free text
        business_date: Day to close (defaults to today)

    Returns:
        Created CashOut instance

    Raises:
        InvalidInputError: If an amount is negative
        InvalidWithdrawalError: If more is withdrawn than was counted
        AlreadyClosedError: If the day already has a cash-out
    """
    counted_cash = round2(counted_cash)
    amount_withdrawn = round2(amount_withdrawn)

    if counted_cash < 0:
        raise InvalidInputError("Counted cash cannot be negative")
    if amount_withdrawn < 0:
        raise InvalidInputError("Amount withdrawn cannot be negative")
    if amount_withdrawn > counted_cash:
        raise InvalidWithdrawalError(amount_withdrawn=amount_withdrawn, counted_cash=counted_cash)

    business_date = business_date or business_today()
    day = _lock_day(business_date)

    if day.is_closed:
        logger.warning("Cash-out rejected: day %s is already closed", day.date_key)
        raise AlreadyClosedError(business_date=day.date_key)

    expected_cash = day.total_cash
    cash_out = CashOut.objects.create(
        day=day,
        expected_cash=expected_cash,
        counted_cash=counted_cash,
        variance=round2(counted_cash - expected_cash),
        amount_withdrawn=amount_withdrawn,
        next_day_float=max(ZERO, round2(counted_cash - amount_withdrawn)),
        notes=(notes or '').strip(),
    )

    day.is_closed = True
    day.save()

    logger.info(
        "Day %s closed: expected %s, counted %s, variance %s, float %s",
        day.date_key, expected_cash, counted_cash, cash_out.variance, cash_out.next_day_float,
    )
    return cash_out


def opening_float(business_date: date) -> Decimal:
    """Float left by the most recent closed day before ``business_date``."""
    previous = (
        CashOut.objects
        .filter(day__business_date__lt=business_date)
        .order_by('-day__business_date')
        .first()
    )
    return previous.next_day_float if previous else ZERO


def get_day_summary(business_date: Optional[date] = None) -> DaySummary:
    """Totals for a day plus profit, opening float and its cash-out if closed."""
    day = get_day(business_date)
    cash_out = CashOut.objects.filter(day_id=day.business_date).first() if day.is_closed else None
    return DaySummary(
        day=day,
        profit=round2(day.cash_sales - day.cost_of_goods_sold),
        opening_float=opening_float(day.business_date),
        cash_out=cash_out,
    )


def list_cash_outs(limit: int = 7) -> QuerySet[CashOut]:
    """Most recent cash-outs, newest day first."""
    if limit <= 0:
        raise InvalidInputError("Limit must be greater than 0")
    return CashOut.objects.select_related('day').order_by('-day__business_date')[:limit]
