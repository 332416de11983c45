from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Customer(models.Model):
    """
    A customer who may buy on credit.

    ``balance`` is a cached value; the payment records and credit sales are
    the source of truth (see ``reconcile_balance``).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=30, blank=True)
    notes = models.TextField(blank=True)
    balance = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    promised_payment_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        ordering = ['name']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(balance__gte=0),
                name='customer_balance_non_negative',
            ),
        ]

    def __str__(self):
        return self.name

    @property
    def has_debt(self):
        return self.balance > 0


class Payment(models.Model):
    """
    Money received from a customer against their balance. Immutable.

    The customer link is cleared if the customer is deleted; the name
    snapshot keeps the cash history readable.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.ForeignKey(
        Customer,
        on_delete=models.SET_NULL,
        null=True,
        related_name='payments'
    )
    customer_name = models.CharField(max_length=100)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    notes = models.TextField(blank=True)
    business_date = models.DateField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'payments'
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(amount__gt=0),
                name='payment_amount_positive',
            ),
        ]

    def __str__(self):
        return f"{self.customer_name}: {self.amount}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Payments are immutable")
        super().save(*args, **kwargs)
