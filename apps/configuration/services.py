"""
Business configuration service.

The configuration is loaded explicitly and handed to the operations that
need it (the sale orchestrator takes a ``BusinessConfig`` argument), so no
transaction reads ambient global state.

Example:
    Loading once and passing it along::

        from apps.configuration.services import load_business_config
        from apps.sales.services import process_sale

        config = load_business_config()
        outcome = process_sale(
            product_id=product.id,
            quantity=2,
            payment_mode='cash',
            config=config,
        )
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.db import transaction

from apps.core.exceptions import InvalidInputError, storage_guard
from apps.core.money import round2

from .models import BusinessSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BusinessConfig:
    """Immutable snapshot of the business settings."""

    business_name: str
    default_sale_price: Decimal
    currency: str

    @classmethod
    def from_model(cls, row: BusinessSettings) -> 'BusinessConfig':
        return cls(
            business_name=row.business_name,
            default_sale_price=round2(row.default_sale_price),
            currency=row.currency,
        )


def _defaults() -> dict:
    shop = settings.SHOP_DEFAULTS
    return {
        'business_name': shop['BUSINESS_NAME'],
        'default_sale_price': round2(shop['DEFAULT_SALE_PRICE']),
        'currency': shop['CURRENCY'],
    }


@storage_guard()
def load_business_config() -> BusinessConfig:
    """
    Load the business configuration, creating it with defaults on first use.

    Returns:
        BusinessConfig snapshot
    """
    row, created = BusinessSettings.objects.get_or_create(
        pk=BusinessSettings.SINGLETON_PK,
        defaults=_defaults(),
    )
    if created:
        logger.info("Created default business settings for %s", row.business_name)
    return BusinessConfig.from_model(row)


@storage_guard()
@transaction.atomic
def update_business_config(
    *,
    business_name: Optional[str] = None,
    default_sale_price=None,
    currency: Optional[str] = None,
) -> BusinessConfig:
    """
    Update one or more configuration values.

    Args:
        business_name: New display name (trimmed, non-empty)
        default_sale_price: New default unit price (> 0)
        currency: Informational currency code

    Returns:
        The refreshed BusinessConfig

    Raises:
        InvalidInputError: If the price is not positive or the name is empty
    """
    row, _ = BusinessSettings.objects.select_for_update().get_or_create(
        pk=BusinessSettings.SINGLETON_PK,
        defaults=_defaults(),
    )

    if business_name is not None:
        business_name = business_name.strip()
        if not business_name:
            raise InvalidInputError("Business name cannot be empty")
        row.business_name = business_name

    if default_sale_price is not None:
        price = round2(default_sale_price)
        if price <= 0:
            raise InvalidInputError("Default sale price must be greater than 0")
        row.default_sale_price = price

    if currency is not None:
        currency = currency.strip().upper()
        if len(currency) != 3:
            raise InvalidInputError("Currency must be a 3-letter code")
        row.currency = currency

    row.save()
    logger.info(
        "Business settings updated: name=%s price=%s",
        row.business_name, row.default_sale_price,
    )
    return BusinessConfig.from_model(row)
