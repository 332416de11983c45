from rest_framework import serializers
from .models import InventoryRecord, ProductionBatch


# =============================================================================
# Input Serializers
# =============================================================================

class BatchInputSerializer(serializers.Serializer):
    """Validate input for registering a production batch."""

    product_id = serializers.UUIDField()
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
    units_produced = serializers.IntegerField()
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class BatchFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for batch listing.

    Query Parameters:
        product (uuid): Only batches of this product
    """

    product = serializers.UUIDField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class InventoryRecordSerializer(serializers.ModelSerializer):
    """Serializer for a product's stock position."""

    product_id = serializers.UUIDField(source='product.id', read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)
    stock_value = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = InventoryRecord
        fields = [
            'product_id', 'product_name', 'quantity',
            'average_cost', 'stock_value', 'updated_at'
        ]
        read_only_fields = fields


class ProductionBatchSerializer(serializers.ModelSerializer):
    """Serializer for production batches."""

    product_id = serializers.UUIDField(source='product.id', read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)

    class Meta:
        model = ProductionBatch
        fields = [
            'id', 'product_id', 'product_name', 'total_cost',
            'units_produced', 'unit_cost', 'notes', 'created_at'
        ]
        read_only_fields = fields


class StockViewSerializer(serializers.Serializer):
    """Cached product + stock view used by the sale screen."""

    product_id = serializers.UUIDField()
    name = serializers.CharField()
    emoji = serializers.CharField()
    color = serializers.CharField()
    is_active = serializers.BooleanField()
    quantity = serializers.IntegerField()
    average_cost = serializers.DecimalField(max_digits=12, decimal_places=2)
