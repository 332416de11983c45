from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'customers'

router = SimpleRouter()
router.register(r'', views.CustomerViewSet, basename='customer')

urlpatterns = [
    # GET    /api/customers/                    - List customers
    # POST   /api/customers/                    - Create customer
    # GET    /api/customers/debtors/            - Customers with debt
    # GET    /api/customers/{id}/               - Customer detail
    # PATCH  /api/customers/{id}/               - Update customer
    # DELETE /api/customers/{id}/               - Delete customer
    # GET    /api/customers/{id}/payments/      - Payment history
    # POST   /api/customers/{id}/payments/      - Record payment
    # GET    /api/customers/{id}/statement/     - Account statement
    # POST   /api/customers/{id}/promise/       - Set promised payment date
    # POST   /api/customers/{id}/reconcile/     - Recompute balance
    path('', include(router.urls)),
]
