from django.urls import path
from . import views

app_name = 'sales'

urlpatterns = [
    # GET  /api/sales/?date=YYYY-MM-DD   - List sales
    # POST /api/sales/                   - Process a sale
    path('', views.sales, name='sales'),

    # POST /api/sales/checkout/          - Check out a cart
    path('checkout/', views.checkout, name='checkout'),
]
