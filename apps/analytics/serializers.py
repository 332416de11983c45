from rest_framework import serializers


class DashboardQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for the dashboard.

    Query Parameters:
        date (YYYY-MM-DD): Business day (defaults to today)
    """

    date = serializers.DateField(required=False)


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for the dashboard summary."""

    date = serializers.CharField()
    cash_today = serializers.DecimalField(max_digits=14, decimal_places=2)
    profit_today = serializers.DecimalField(max_digits=14, decimal_places=2)
    cash_sales_today = serializers.DecimalField(max_digits=14, decimal_places=2)
    credit_sales_today = serializers.DecimalField(max_digits=14, decimal_places=2)
    payments_today = serializers.DecimalField(max_digits=14, decimal_places=2)
    cost_of_goods_sold_today = serializers.DecimalField(max_digits=14, decimal_places=2)
    inventory_value = serializers.DecimalField(max_digits=14, decimal_places=2)
    units_in_stock = serializers.IntegerField()
    money_on_the_street = serializers.DecimalField(max_digits=14, decimal_places=2)
    customers_with_debt = serializers.IntegerField()
    average_yield = serializers.DecimalField(max_digits=8, decimal_places=1)
    best_yield = serializers.IntegerField()
    worst_yield = serializers.IntegerField()
