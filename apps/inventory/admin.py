from django.contrib import admin

from apps.core.admin import ReadOnlyLedgerAdmin
from .models import InventoryRecord, ProductionBatch


@admin.register(InventoryRecord)
class InventoryRecordAdmin(ReadOnlyLedgerAdmin):
    list_display = ['product', 'quantity', 'average_cost', 'updated_at']
    search_fields = ['product__name']


@admin.register(ProductionBatch)
class ProductionBatchAdmin(ReadOnlyLedgerAdmin):
    list_display = ['product', 'units_produced', 'total_cost', 'unit_cost', 'created_at']
    list_filter = ['product']
    date_hierarchy = 'created_at'
