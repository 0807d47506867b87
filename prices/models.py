"""
Models for the grocery price comparison site.

Item and Store mirror the rows of the hosted ``items`` and ``stores`` tables.
Items reference their store by identifier only; resolving that reference is
a lookup done by the comparison pipeline, not a join.
"""

from django.db import models
from django.utils import timezone


class Store(models.Model):
    """
    A retail chain location.
    """

    uuid = models.IntegerField(
        primary_key=True,
        help_text="Store identifier referenced by items",
    )
    name = models.CharField(
        max_length=200,
        blank=True,
        null=True,
        help_text="Display name",
    )
    chain = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Retail chain name",
    )
    chain_store_id = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        help_text="Store code assigned by the chain",
    )

    class Meta:
        db_table = "stores"
        ordering = ["uuid"]
        verbose_name = "Store"
        verbose_name_plural = "Stores"

    def __str__(self):
        return self.name or str(self.uuid)


class Item(models.Model):
    """
    One price observation for a product at a store.

    Unit prices are only comparable among items sharing the same
    search key (``q``) and ``unit``.
    """

    id = models.BigAutoField(primary_key=True)

    q = models.CharField(
        max_length=200,
        blank=True,
        null=True,
        db_index=True,
        help_text="Search key the item was collected for",
    )
    title = models.CharField(
        max_length=500,
        help_text="Product title as listed by the store",
    )
    unit = models.CharField(
        max_length=20,
        help_text="Unit the unit price refers to, e.g. kg or l",
    )
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text="Price per unit in SEK",
    )
    item_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text="Price per item in SEK",
    )
    member_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        blank=True,
        null=True,
        help_text="Price for loyalty club members",
    )
    organic = models.BooleanField(default=False)
    country_of_origin = models.CharField(
        max_length=100,
        blank=True,
        null=True,
    )
    store_uuid = models.IntegerField(
        help_text="Identifier of the owning store",
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "items"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["q", "created_at"], name="items_q_created_idx"),
        ]
        verbose_name = "Item"
        verbose_name_plural = "Items"

    def __str__(self):
        return f"{self.title} ({self.unit_price}/{self.unit})"
