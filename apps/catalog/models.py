from django.db import models
from django.core.validators import RegexValidator
import uuid


HEX_COLOR_VALIDATOR = RegexValidator(
    regex=r'^#[0-9A-Fa-f]{6}$',
    message='Color must be a hex value like #F59E0B',
)

SUGGESTED_COLORS = [
    '#EF4444', '#F59E0B', '#F97316', '#EAB308', '#84CC16', '#22C55E',
    '#10B981', '#14B8A6', '#06B6D4', '#0EA5E9', '#3B82F6', '#6366F1',
    '#8B5CF6', '#A855F7', '#D946EF', '#EC4899', '#F43F5E', '#6B7280',
]

SUGGESTED_EMOJIS = [
    '🥜', '🌶️', '🧂', '🍯', '🔥', '🌿', '🍋', '🧀', '🥓', '🌽', '🥕', '🍫',
    '🍬', '☀️', '🌙', '⭐', '💛', '❤️', '💚', '💙', '🟠', '🟡', '🟢', '🔴',
]

DEFAULT_COLOR = '#6B7280'


class Product(models.Model):
    """A sellable product (flavor). Inactive products are hidden from the sale screen."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    emoji = models.CharField(max_length=16, blank=True)
    color = models.CharField(max_length=7, default=DEFAULT_COLOR, validators=[HEX_COLOR_VALIDATOR])
    is_active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'products'
        ordering = ['name']

    def __str__(self):
        return f"{self.emoji} {self.name}".strip()
