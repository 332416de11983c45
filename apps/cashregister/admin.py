from django.contrib import admin

from apps.core.admin import ReadOnlyLedgerAdmin
from .models import CashOut, CashRegisterDay


@admin.register(CashRegisterDay)
class CashRegisterDayAdmin(ReadOnlyLedgerAdmin):
    list_display = [
        'business_date', 'cash_sales', 'cash_payments', 'total_cash',
        'credit_sales', 'cost_of_goods_sold', 'is_closed'
    ]
    list_filter = ['is_closed']
    date_hierarchy = 'business_date'


@admin.register(CashOut)
class CashOutAdmin(ReadOnlyLedgerAdmin):
    list_display = ['day', 'expected_cash', 'counted_cash', 'variance', 'next_day_float']
