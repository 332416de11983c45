from django.contrib import admin

from apps.core.admin import ReadOnlyLedgerAdmin
from .models import Customer, Payment


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['name', 'phone', 'balance', 'promised_payment_date', 'created_at']
    search_fields = ['name', 'phone']
    readonly_fields = ['balance']


@admin.register(Payment)
class PaymentAdmin(ReadOnlyLedgerAdmin):
    list_display = ['customer_name', 'amount', 'business_date', 'created_at']
    search_fields = ['customer_name']
    date_hierarchy = 'created_at'
