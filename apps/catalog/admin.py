from django.contrib import admin
from .models import Product
from .services import deactivate_product, reactivate_product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'emoji', 'color', 'is_active', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name']
    actions = ['deactivate', 'reactivate']

    @admin.action(description='Deactivate selected products')
    def deactivate(self, request, queryset):
        for product in queryset:
            deactivate_product(product_id=product.id)

    @admin.action(description='Reactivate selected products')
    def reactivate(self, request, queryset):
        for product in queryset:
            reactivate_product(product_id=product.id)
