"""
Shopping cart for the sale screen.

A cart is a plain value object: it never touches the database and holds
at most the stock that was available when each unit was added. Checkout
turns every line into its own sale (see ``services.checkout``).

Example:
    >>> cart = Cart()
    >>> cart.add(product_id, 'Japonés', Decimal('10.00'), available=3)
    True
    >>> cart.total
    Decimal('10.00')
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Optional

from apps.core.money import ZERO, round2
from apps.core.quantities import positive_count


@dataclass
class CartLine:
    """One product in the cart."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return round2(self.quantity * self.unit_price)


class Cart:
    """Ordered collection of cart lines, one per product."""

    def __init__(self, lines: Optional[List[CartLine]] = None):
        self._lines: List[CartLine] = list(lines or [])

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def _find(self, product_id) -> Optional[CartLine]:
        product_id = str(product_id)
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total(self) -> Decimal:
        return round2(sum((line.subtotal for line in self._lines), ZERO))

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def quantity_of(self, product_id) -> int:
        line = self._find(product_id)
        return line.quantity if line else 0

    def add(self, product_id, name: str, unit_price, available: int) -> bool:
        """
        Add one unit of a product.

        Args:
            product_id: Product UUID
            name: Display name for the line
            unit_price: Price per unit for this line
            available: Units currently in stock

        Returns:
            False (cart unchanged) if the cart already holds every available unit
        """
        line = self._find(product_id)
        if (line.quantity if line else 0) >= available:
            return False

        if line:
            line.quantity += 1
        else:
            self._lines.append(CartLine(
                product_id=str(product_id),
                product_name=name,
                quantity=1,
                unit_price=round2(unit_price),
            ))
        return True

    def remove_one(self, product_id) -> None:
        """Remove one unit; the line disappears when it reaches zero."""
        line = self._find(product_id)
        if line is None:
            return
        if line.quantity > 1:
            line.quantity -= 1
        else:
            self._lines.remove(line)

    def clear(self) -> None:
        self._lines = []

    def to_dict(self) -> dict:
        return {
            'lines': [
                {
                    'product_id': line.product_id,
                    'product_name': line.product_name,
                    'quantity': line.quantity,
                    'unit_price': str(line.unit_price),
                }
                for line in self._lines
            ]
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Cart':
        return cls([
            CartLine(
                product_id=str(item['product_id']),
                product_name=item.get('product_name', ''),
                quantity=positive_count(item['quantity']),
                unit_price=round2(item['unit_price']),
            )
            for item in data.get('lines', [])
        ])
