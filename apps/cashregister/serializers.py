from rest_framework import serializers
from .models import CashOut, CashRegisterDay


# =============================================================================
# Input Serializers
# =============================================================================

class CloseDayInputSerializer(serializers.Serializer):
    """Validate input for the end-of-day cash-out."""

    counted_cash = serializers.DecimalField(max_digits=12, decimal_places=2)
    amount_withdrawn = serializers.DecimalField(max_digits=12, decimal_places=2)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class ClosingsFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for cash-out history.

    Query Parameters:
        limit (int): Number of cash-outs to return (default 7)
    """

    limit = serializers.IntegerField(required=False, default=7, min_value=1, max_value=365)


# =============================================================================
# Output Serializers
# =============================================================================

class CashRegisterDaySerializer(serializers.ModelSerializer):
    """Serializer for a day's running totals."""

    date = serializers.CharField(source='date_key', read_only=True)

    class Meta:
        model = CashRegisterDay
        fields = [
            'date', 'cash_sales', 'cash_payments', 'total_cash',
            'credit_sales', 'cost_of_goods_sold', 'is_closed'
        ]
        read_only_fields = fields


class CashOutSerializer(serializers.ModelSerializer):
    """Serializer for cash-outs."""

    date = serializers.CharField(source='day.date_key', read_only=True)

    class Meta:
        model = CashOut
        fields = [
            'id', 'date', 'expected_cash', 'counted_cash', 'variance',
            'amount_withdrawn', 'next_day_float', 'notes', 'created_at'
        ]
        read_only_fields = fields


class DaySummarySerializer(serializers.Serializer):
    """A day's totals with profit, opening float and cash-out."""

    day = CashRegisterDaySerializer()
    profit = serializers.DecimalField(max_digits=12, decimal_places=2)
    opening_float = serializers.DecimalField(max_digits=12, decimal_places=2)
    cash_out = CashOutSerializer(allow_null=True)
