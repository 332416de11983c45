from django.urls import path
from . import views

app_name = 'cashregister'

urlpatterns = [
    # GET  /api/cash/today/              - Today's totals
    path('today/', views.today, name='today'),

    # GET  /api/cash/days/{YYYY-MM-DD}/  - A day's totals
    path('days/<str:day>/', views.day_detail, name='day-detail'),

    # POST /api/cash/close/              - End-of-day cash-out
    path('close/', views.close, name='close'),

    # GET  /api/cash/closings/?limit=7   - Cash-out history
    path('closings/', views.closings, name='closings'),
]
