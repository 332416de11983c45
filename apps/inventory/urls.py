from django.urls import path
from . import views

app_name = 'inventory'

urlpatterns = [
    # GET  /api/inventory/                    - Stock records
    path('', views.inventory_list, name='inventory-list'),

    # GET  /api/inventory/batches/            - Batch history
    # POST /api/inventory/batches/            - Register batch
    path('batches/', views.batches, name='batches'),

    # GET  /api/inventory/stock/              - Sale-screen stock views
    path('stock/', views.stock_list, name='stock-list'),

    # GET  /api/inventory/{product_id}/       - One product's stock view
    path('<uuid:product_id>/', views.stock_detail, name='stock-detail'),
]
