from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.core.money import round2


class PaymentMode(models.TextChoices):
    CASH = 'cash', 'Cash'
    CREDIT = 'credit', 'Credit'


class Sale(models.Model):
    """
    A completed sale of one product. Immutable.

    Price, cost and names are snapshots taken at the moment of sale.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.PROTECT,
        related_name='sales'
    )
    product_name = models.CharField(max_length=100)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    unit_cost = models.DecimalField(max_digits=12, decimal_places=2)
    payment_mode = models.CharField(max_length=10, choices=PaymentMode.choices)
    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales'
    )
    customer_name = models.CharField(max_length=100, blank=True)
    business_date = models.DateField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'sales'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name='sale_quantity_positive',
            ),
            models.CheckConstraint(
                condition=models.Q(unit_price__gt=0),
                name='sale_unit_price_positive',
            ),
            models.CheckConstraint(
                condition=models.Q(payment_mode='credit') | models.Q(customer__isnull=True),
                name='sale_cash_has_no_customer',
            ),
        ]

    def __str__(self):
        return f"{self.quantity}x {self.product_name} ({self.payment_mode})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Sales are immutable")
        super().save(*args, **kwargs)

    @property
    def revenue(self):
        return round2(self.quantity * self.unit_price)

    @property
    def cost(self):
        return round2(self.quantity * self.unit_cost)

    @property
    def profit(self):
        return round2(self.revenue - self.cost)
