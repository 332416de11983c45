from rest_framework import serializers

from apps.core.exception_handler import ledger_error_payload

from .models import PaymentMode, Sale


# =============================================================================
# Input Serializers
# =============================================================================

class SaleInputSerializer(serializers.Serializer):
    """Validate input for a single sale."""

    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField()
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices)
    customer_id = serializers.UUIDField(required=False, allow_null=True)
    override_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        required=False,
        allow_null=True
    )


class CartLineInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    product_name = serializers.CharField(required=False, allow_blank=True, default='')
    quantity = serializers.IntegerField(min_value=1)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2)


class CheckoutInputSerializer(serializers.Serializer):
    """Validate a cart checkout."""

    lines = CartLineInputSerializer(many=True, allow_empty=False)
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices)
    customer_id = serializers.UUIDField(required=False, allow_null=True)


class SaleFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for sale listing.

    Query Parameters:
        date (YYYY-MM-DD): Business day
        customer (uuid): Only sales to this customer
    """

    date = serializers.DateField(required=False)
    customer = serializers.UUIDField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class SaleSerializer(serializers.ModelSerializer):
    """Serializer for sales."""

    revenue = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    cost = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    profit = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = Sale
        fields = [
            'id', 'product', 'product_name', 'quantity', 'unit_price',
            'unit_cost', 'payment_mode', 'customer', 'customer_name',
            'business_date', 'created_at', 'revenue', 'cost', 'profit'
        ]
        read_only_fields = fields


class SaleOutcomeSerializer(serializers.Serializer):
    """A committed sale with its figures and the stock left."""

    sale = SaleSerializer()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    cost = serializers.DecimalField(max_digits=14, decimal_places=2)
    profit = serializers.DecimalField(max_digits=14, decimal_places=2)
    remaining_quantity = serializers.IntegerField()


class LineFailureSerializer(serializers.Serializer):
    product_id = serializers.CharField(source='line.product_id')
    product_name = serializers.CharField(source='line.product_name')
    quantity = serializers.IntegerField(source='line.quantity')
    error = serializers.SerializerMethodField()

    def get_error(self, obj) -> dict:
        return ledger_error_payload(obj.error)


class CheckoutResultSerializer(serializers.Serializer):
    outcomes = SaleOutcomeSerializer(many=True)
    failures = LineFailureSerializer(many=True)
