from django.apps import AppConfig


class CashRegisterConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.cashregister'
    verbose_name = 'Cash register'
