from rest_framework import serializers


class BusinessConfigSerializer(serializers.Serializer):
    """Output serializer for BusinessConfig."""

    business_name = serializers.CharField()
    default_sale_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    currency = serializers.CharField()


class BusinessConfigUpdateSerializer(serializers.Serializer):
    """
    Validate input for updating the business configuration.

    All fields are optional; only the provided ones change.
    """

    business_name = serializers.CharField(max_length=120, required=False)
    default_sale_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        required=False
    )
    currency = serializers.CharField(max_length=3, required=False)
