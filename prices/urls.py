"""
Prices URL configuration.

The site configuration (admin key, logo, stylesheet) is loaded once here,
at URLconf import, and handed to the comparison view.
"""

from django.urls import path

from prices.site_config import get_site_config
from prices.views import ComparisonView

app_name = "prices"

urlpatterns = [
    path("", ComparisonView.as_view(site=get_site_config()), name="comparison"),
]
