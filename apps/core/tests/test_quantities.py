"""
Unit tests for whole-unit count coercion.
"""

import pytest
from decimal import Decimal

from apps.core.exceptions import InvalidInputError
from apps.core.quantities import positive_count


class TestPositiveCount:
    """Tests for positive_count()."""

    @pytest.mark.parametrize('value, expected', [
        (3, 3),
        (3.0, 3),
        (Decimal('4'), 4),
        (Decimal('4.00'), 4),
        ('5', 5),
        (' 6 ', 6),
    ])
    def test_whole_numbers(self, value, expected):
        assert positive_count(value) == expected

    @pytest.mark.parametrize('value', [
        2.5,
        2.9,
        Decimal('0.5'),
        '2.5',
        'abc',
        '',
        None,
        True,
        False,
        float('inf'),
        float('nan'),
        [1],
    ])
    def test_rejects_non_whole_numbers(self, value):
        with pytest.raises(InvalidInputError, match='whole number'):
            positive_count(value)

    @pytest.mark.parametrize('value', [0, -1, '-3', Decimal('0')])
    def test_rejects_non_positive(self, value):
        with pytest.raises(InvalidInputError, match='greater than 0'):
            positive_count(value)

    def test_label_in_message(self):
        with pytest.raises(InvalidInputError, match='Units produced'):
            positive_count(1.5, label='Units produced')
