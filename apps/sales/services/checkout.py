"""
Cart checkout.

Each cart line becomes its own sale. A line that fails is reported and
skipped; lines already sold stay sold.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from apps.configuration.services import BusinessConfig
from apps.core.exceptions import InvalidInputError, LedgerError
from apps.sales.cart import Cart, CartLine

from .sale_processing import SaleOutcome, process_sale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineFailure:
    """A cart line that could not be sold."""

    line: CartLine
    error: LedgerError


@dataclass
class CheckoutResult:
    outcomes: List[SaleOutcome] = field(default_factory=list)
    failures: List[LineFailure] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return not self.failures


def checkout_cart(
    *,
    cart: Cart,
    payment_mode: str,
    config: BusinessConfig,
    customer_id: Optional[UUID] = None
) -> CheckoutResult:
    """
    Sell every line of a cart.

    Raises:
        InvalidInputError: If the cart is empty
    """
    if cart.is_empty:
        raise InvalidInputError("The cart is empty")

    result = CheckoutResult()
    for line in cart:
        try:
            outcome = process_sale(
                product_id=line.product_id,
                quantity=line.quantity,
                payment_mode=payment_mode,
                config=config,
                customer_id=customer_id,
                override_price=line.unit_price,
            )
        except LedgerError as exc:
            logger.warning("Checkout line %s failed: %s", line.product_name, exc.message)
            result.failures.append(LineFailure(line=line, error=exc))
        else:
            result.outcomes.append(outcome)

    logger.info(
        "Checkout finished: %s sold, %s failed",
        len(result.outcomes), len(result.failures),
    )
    return result
