"""
Tests for the Cart value object.
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from apps.core.exceptions import InvalidInputError
from apps.sales.cart import Cart


PRODUCT_ID = str(uuid4())
OTHER_ID = str(uuid4())


class TestCart:

    def test_add_accumulates_quantity(self):
        cart = Cart()
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)

        assert cart.quantity_of(PRODUCT_ID) == 2
        assert len(cart) == 1

    def test_add_never_exceeds_available(self):
        cart = Cart()

        assert cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=1) is True
        assert cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=1) is False
        assert cart.quantity_of(PRODUCT_ID) == 1

    def test_add_out_of_stock(self):
        cart = Cart()

        assert cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=0) is False
        assert cart.is_empty

    def test_totals(self):
        cart = Cart()
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)
        cart.add(OTHER_ID, 'Enchilado', Decimal('12.50'), available=5)

        assert cart.total == Decimal('32.50')
        assert cart.item_count == 3

    def test_remove_one_drops_empty_line(self):
        cart = Cart()
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)

        cart.remove_one(PRODUCT_ID)
        assert cart.quantity_of(PRODUCT_ID) == 1

        cart.remove_one(PRODUCT_ID)
        assert cart.is_empty

    def test_remove_unknown_product_is_noop(self):
        cart = Cart()
        cart.remove_one(PRODUCT_ID)

        assert cart.is_empty

    def test_clear(self):
        cart = Cart()
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)
        cart.clear()

        assert cart.total == Decimal('0.00')

    def test_restored_cart_keeps_lines(self):
        cart = Cart()
        cart.add(PRODUCT_ID, 'Japonés', Decimal('10'), available=5)
        cart.add(OTHER_ID, 'Enchilado', Decimal('12.5'), available=5)

        restored = Cart.from_dict(cart.to_dict())

        assert restored.lines == cart.lines
        assert restored.total == Decimal('22.50')

    def test_restoring_fractional_quantity_fails(self):
        data = {'lines': [{'product_id': PRODUCT_ID, 'quantity': 1.5, 'unit_price': '10'}]}

        with pytest.raises(InvalidInputError):
            Cart.from_dict(data)
