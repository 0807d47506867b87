"""
API URL configuration.

Endpoints:
- GET /api/v1/price-history/?q=<search key>  - Daily lowest unit price
"""

from django.urls import path

from prices.api.views import price_history

app_name = 'prices_api'

urlpatterns = [
    path('price-history/', price_history, name='price_history'),
]
