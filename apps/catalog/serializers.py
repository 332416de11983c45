from rest_framework import serializers
from .models import Product


# =============================================================================
# Input Serializers
# =============================================================================

class ProductFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for product listing.

    Query Parameters:
        include_inactive (bool): Include deactivated products
    """

    include_inactive = serializers.BooleanField(required=False, default=False)


class ProductInputSerializer(serializers.Serializer):
    """Validate input for creating or updating a product."""

    name = serializers.CharField(max_length=100)
    emoji = serializers.CharField(max_length=16, required=False, allow_blank=True)
    color = serializers.CharField(max_length=7, required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    """Serializer for products."""

    class Meta:
        model = Product
        fields = ['id', 'name', 'emoji', 'color', 'is_active', 'created_at']
        read_only_fields = fields
