from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class BusinessSettings(models.Model):
    """Single-row business configuration (pk is always 1)."""

    SINGLETON_PK = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_PK, editable=False)
    business_name = models.CharField(max_length=120)
    default_sale_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    currency = models.CharField(max_length=3, default='MXN')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'business_settings'
        verbose_name_plural = 'business settings'

    def __str__(self):
        return f"{self.business_name} ({self.default_sale_price} {self.currency})"

    def save(self, *args, **kwargs):
        self.id = self.SINGLETON_PK
        super().save(*args, **kwargs)
