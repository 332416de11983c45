from django.contrib import admin

from apps.core.admin import ReadOnlyLedgerAdmin
from .models import Sale


@admin.register(Sale)
class SaleAdmin(ReadOnlyLedgerAdmin):
    list_display = [
        'product_name', 'quantity', 'unit_price', 'unit_cost',
        'payment_mode', 'customer_name', 'business_date', 'created_at'
    ]
    list_filter = ['payment_mode', 'business_date']
    search_fields = ['product_name', 'customer_name']
    date_hierarchy = 'created_at'
