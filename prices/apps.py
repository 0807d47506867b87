"""
Prices application configuration.
"""

from django.apps import AppConfig


class PricesConfig(AppConfig):
    """Configuration for the prices Django application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "prices"
    verbose_name = "Grocery Prices"
