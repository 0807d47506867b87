"""
Django admin configuration for the price tables.
"""

from django.contrib import admin

from prices.models import Item, Store


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    """Admin interface for stores."""

    list_display = [
        "uuid",
        "name",
        "chain",
        "chain_store_id",
    ]
    list_filter = ["chain"]
    search_fields = ["name", "chain_store_id"]
    ordering = ["uuid"]


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    """Admin interface for price observations."""

    list_display = [
        "title",
        "q",
        "unit_price",
        "unit",
        "item_price",
        "member_price",
        "organic",
        "store_uuid",
        "created_at",
    ]
    list_filter = [
        "q",
        "unit",
        "organic",
    ]
    search_fields = ["title", "q", "country_of_origin"]
    ordering = ["-created_at"]
    date_hierarchy = "created_at"
