from django.urls import path
from . import views

app_name = 'configuration'

urlpatterns = [
    # GET   /api/settings/  - Current business configuration
    # PATCH /api/settings/  - Update name / default price / currency
    path('', views.business_settings, name='business-settings'),
]
