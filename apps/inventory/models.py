from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class InventoryRecord(models.Model):
    """
    Quantity on hand and weighted-average unit cost for one product.

    Created lazily by the first production batch; changed only by batch
    registration (increase) and sale debits (decrease).
    """

    product = models.OneToOneField(
        'catalog.Product',
        on_delete=models.PROTECT,
        primary_key=True,
        related_name='inventory'
    )
    quantity = models.PositiveIntegerField(default=0)
    average_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inventory_records'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name='inventory_quantity_non_negative',
            ),
            models.CheckConstraint(
                condition=models.Q(average_cost__gte=0),
                name='inventory_average_cost_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.product.name}: {self.quantity} @ {self.average_cost}"

    @property
    def stock_value(self):
        return self.quantity * self.average_cost


class ProductionBatch(models.Model):
    """A production run that added stock. Immutable once created."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.PROTECT,
        related_name='batches'
    )
    total_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    units_produced = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_cost = models.DecimalField(max_digits=12, decimal_places=2)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'production_batches'
        ordering = ['-created_at']
        verbose_name_plural = 'production batches'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(units_produced__gt=0),
                name='batch_units_positive',
            ),
        ]

    def __str__(self):
        return f"{self.product.name}: {self.units_produced} units @ {self.unit_cost}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Production batches are immutable")
        super().save(*args, **kwargs)
