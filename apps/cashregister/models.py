from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.core.dates import date_key
from apps.core.money import round2


MONEY = dict(max_digits=12, decimal_places=2)


class CashRegisterDay(models.Model):
    """
    Running totals of one business day.

    Totals only ever grow; ``total_cash`` is derived on every save.
    """

    business_date = models.DateField(primary_key=True)
    cash_sales = models.DecimalField(**MONEY, default=Decimal('0.00'))
    cash_payments = models.DecimalField(**MONEY, default=Decimal('0.00'))
    total_cash = models.DecimalField(**MONEY, default=Decimal('0.00'))
    credit_sales = models.DecimalField(**MONEY, default=Decimal('0.00'))
    cost_of_goods_sold = models.DecimalField(**MONEY, default=Decimal('0.00'))
    is_closed = models.BooleanField(default=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cash_register_days'
        ordering = ['-business_date']
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(cash_sales__gte=0)
                    & models.Q(cash_payments__gte=0)
                    & models.Q(credit_sales__gte=0)
                    & models.Q(cost_of_goods_sold__gte=0)
                ),
                name='cash_day_totals_non_negative',
            ),
        ]

    def __str__(self):
        state = 'closed' if self.is_closed else 'open'
        return f"{self.date_key} ({state}): {self.total_cash}"

    @property
    def date_key(self):
        return date_key(self.business_date)

    def save(self, *args, **kwargs):
        self.total_cash = round2(self.cash_sales + self.cash_payments)
        super().save(*args, **kwargs)


class CashOut(models.Model):
    """End-of-day reconciliation of counted cash. One per day, immutable."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    day = models.OneToOneField(
        CashRegisterDay,
        on_delete=models.PROTECT,
        related_name='cash_out'
    )
    expected_cash = models.DecimalField(**MONEY)
    counted_cash = models.DecimalField(**MONEY, validators=[MinValueValidator(Decimal('0.00'))])
    variance = models.DecimalField(**MONEY)
    amount_withdrawn = models.DecimalField(**MONEY, validators=[MinValueValidator(Decimal('0.00'))])
    next_day_float = models.DecimalField(**MONEY, validators=[MinValueValidator(Decimal('0.00'))])
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'cash_outs'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount_withdrawn__lte=models.F('counted_cash')),
                name='cash_out_withdrawal_within_count',
            ),
        ]

    def __str__(self):
        return f"Cash-out {self.day_id}: variance {self.variance}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Cash-outs are immutable")
        super().save(*args, **kwargs)
