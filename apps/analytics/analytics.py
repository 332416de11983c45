"""
Analytics Module
=================

Read-only figures for the shop dashboard: today's cash and profit, the
value of the stock on the shelf, money owed by customers and production
yields.

Classes:
    DashboardQueries: Static methods aggregating the ledgers.

Functions:
    inventory_value: Stock value of a set of inventory records.
    average_yield: Mean units produced per batch.
    margin_percent: Gross margin of a price over a unit cost.
    sale_profit: Profit of selling some units at a price.

Example:
    Getting the dashboard figures::

        from apps.analytics.analytics import DashboardQueries

        summary = DashboardQueries.summary()
        print(f"Cash today: {summary['cash_today']}")
        print(f"Money on the street: {summary['money_on_the_street']}")

Note:
    This module never writes. All amounts are rounded to cents.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from django.db.models import Count, Max, Min, Sum

from apps.cashregister.services import get_day
from apps.core.dates import business_today
from apps.core.money import ZERO, round2, to_money
from apps.customers.models import Customer
from apps.inventory.models import InventoryRecord, ProductionBatch


def inventory_value(records: Iterable[InventoryRecord]) -> Decimal:
    """Sum of quantity x average cost over the records."""
    return round2(sum((record.quantity * record.average_cost for record in records), ZERO))


def average_yield(batches: Iterable[ProductionBatch]) -> Decimal:
    """Mean units produced per batch, to one decimal; 0 with no batches."""
    units = [batch.units_produced for batch in batches]
    if not units:
        return Decimal('0.0')
    return (Decimal(sum(units)) / len(units)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)


def margin_percent(unit_cost, price) -> int:
    """
    Gross margin as a whole percentage of the price.

    Example:
        >>> margin_percent(Decimal('4.00'), Decimal('10.00'))
        60
    """
    price = Decimal(price)
    if price <= 0:
        return 0
    ratio = (price - Decimal(unit_cost)) / price * 100
    return int(ratio.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def sale_profit(price, unit_cost, quantity: int = 1) -> Decimal:
    """Revenue minus cost of ``quantity`` units."""
    return round2(quantity * Decimal(price) - quantity * Decimal(unit_cost))


class DashboardQueries:
    """
    Aggregations behind the dashboard endpoint.

    Methods:
        summary: Every dashboard figure in one dictionary.
        stock: Inventory value and units on hand.
        debt: Money on the street and how many customers owe it.
        yields: Average, best and worst batch yield.

    Note:
        All methods return plain dictionaries, suitable for the response
        serializer as-is.
    """

    @staticmethod
    def stock():
        totals = InventoryRecord.objects.aggregate(units=Sum('quantity'))
        return {
            'inventory_value': inventory_value(InventoryRecord.objects.all()),
            'units_in_stock': totals['units'] or 0,
        }

    @staticmethod
    def debt():
        totals = Customer.objects.filter(balance__gt=0).aggregate(
            total=Sum('balance'),
            customers=Count('id'),
        )
        return {
            'money_on_the_street': to_money(totals['total']),
            'customers_with_debt': totals['customers'],
        }

    @staticmethod
    def yields():
        totals = ProductionBatch.objects.aggregate(
            best=Max('units_produced'),
            worst=Min('units_produced'),
        )
        return {
            'average_yield': average_yield(ProductionBatch.objects.only('units_produced')),
            'best_yield': totals['best'] or 0,
            'worst_yield': totals['worst'] or 0,
        }

    @staticmethod
    def summary(today: Optional[date] = None):
        """
        Every dashboard figure for a business day.

        Args:
            today (date, optional): Business day; defaults to today.

        Returns:
            dict: A dictionary containing:
                - cash_today (Decimal): Cash that should be in the drawer.
                - profit_today (Decimal): Cash sales minus cost of goods sold.
                - cash_sales_today, credit_sales_today, payments_today,
                  cost_of_goods_sold_today (Decimal): The day's totals.
                - inventory_value (Decimal), units_in_stock (int)
                - money_on_the_street (Decimal), customers_with_debt (int)
                - average_yield (Decimal), best_yield (int), worst_yield (int)
        """
        day = get_day(today or business_today())

        data = {
            'date': day.date_key,
            'cash_today': to_money(day.total_cash),
            'profit_today': round2(day.cash_sales - day.cost_of_goods_sold),
            'cash_sales_today': to_money(day.cash_sales),
            'credit_sales_today': to_money(day.credit_sales),
            'payments_today': to_money(day.cash_payments),
            'cost_of_goods_sold_today': to_money(day.cost_of_goods_sold),
        }
        data.update(DashboardQueries.stock())
        data.update(DashboardQueries.debt())
        data.update(DashboardQueries.yields())
        return data
