from rest_framework import serializers
from .models import Customer, Payment


# =============================================================================
# Input Serializers
# =============================================================================

class CustomerInputSerializer(serializers.Serializer):
    """Validate input for creating or updating a customer."""

    name = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)


class PaymentInputSerializer(serializers.Serializer):
    """Validate input for recording a payment."""

    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class PromiseInputSerializer(serializers.Serializer):
    """Promised payment date; ``null`` clears it."""

    promised_date = serializers.DateField(allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class CustomerSerializer(serializers.ModelSerializer):
    """Serializer for customers."""

    class Meta:
        model = Customer
        fields = [
            'id', 'name', 'phone', 'notes', 'balance',
            'promised_payment_date', 'created_at'
        ]
        read_only_fields = fields


class DebtorSerializer(CustomerSerializer):
    """Customer with debt, annotated with promise status."""

    is_overdue = serializers.BooleanField(read_only=True)
    days_overdue = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta(CustomerSerializer.Meta):
        fields = CustomerSerializer.Meta.fields + ['is_overdue', 'days_overdue']
        read_only_fields = fields


class PaymentSerializer(serializers.ModelSerializer):
    """Serializer for payments."""

    class Meta:
        model = Payment
        fields = ['id', 'customer', 'customer_name', 'amount', 'notes', 'business_date', 'created_at']
        read_only_fields = fields


class StatementLineSerializer(serializers.Serializer):
    """One line of an account statement."""

    id = serializers.UUIDField()
    created_at = serializers.DateTimeField()
    kind = serializers.CharField()
    description = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    running_balance = serializers.DecimalField(max_digits=12, decimal_places=2)
