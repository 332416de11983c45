from django.contrib import admin
from .models import BusinessSettings


@admin.register(BusinessSettings)
class BusinessSettingsAdmin(admin.ModelAdmin):
    list_display = ['business_name', 'default_sale_price', 'currency', 'updated_at']
    readonly_fields = ['updated_at']

    def has_add_permission(self, request):
        """Only one settings row exists; it is created on first load."""
        return not BusinessSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
