from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'products', views.ProductViewSet, basename='product')

urlpatterns = [
    # GET    /api/catalog/products/                  - List products
    # POST   /api/catalog/products/                  - Create product
    # GET    /api/catalog/products/{id}/             - Product detail
    # PATCH  /api/catalog/products/{id}/             - Update product
    # DELETE /api/catalog/products/{id}/             - Delete product
    # POST   /api/catalog/products/{id}/deactivate/  - Soft delete
    # POST   /api/catalog/products/{id}/reactivate/  - Undo soft delete
    path('', include(router.urls)),
]
