from django.contrib import admin


class ReadOnlyLedgerAdmin(admin.ModelAdmin):
    """Ledger rows change only through the services layer."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
