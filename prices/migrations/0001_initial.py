"""
Initial schema: stores and items tables.
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Store",
            fields=[
                (
                    "uuid",
                    models.IntegerField(
                        help_text="Store identifier referenced by items",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        blank=True, help_text="Display name", max_length=200, null=True
                    ),
                ),
                (
                    "chain",
                    models.CharField(
                        blank=True, help_text="Retail chain name", max_length=100, null=True
                    ),
                ),
                (
                    "chain_store_id",
                    models.CharField(
                        blank=True,
                        help_text="Store code assigned by the chain",
                        max_length=100,
                        null=True,
                    ),
                ),
            ],
            options={
                "verbose_name": "Store",
                "verbose_name_plural": "Stores",
                "db_table": "stores",
                "ordering": ["uuid"],
            },
        ),
        migrations.CreateModel(
            name="Item",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "q",
                    models.CharField(
                        blank=True,
                        db_index=True,
                        help_text="Search key the item was collected for",
                        max_length=200,
                        null=True,
                    ),
                ),
                (
                    "title",
                    models.CharField(
                        help_text="Product title as listed by the store", max_length=500
                    ),
                ),
                (
                    "unit",
                    models.CharField(
                        help_text="Unit the unit price refers to, e.g. kg or l",
                        max_length=20,
                    ),
                ),
                (
                    "unit_price",
                    models.DecimalField(
                        decimal_places=2, help_text="Price per unit in SEK", max_digits=10
                    ),
                ),
                (
                    "item_price",
                    models.DecimalField(
                        decimal_places=2, help_text="Price per item in SEK", max_digits=10
                    ),
                ),
                (
                    "member_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="Price for loyalty club members",
                        max_digits=10,
                        null=True,
                    ),
                ),
                ("organic", models.BooleanField(default=False)),
                (
                    "country_of_origin",
                    models.CharField(blank=True, max_length=100, null=True),
                ),
                (
                    "store_uuid",
                    models.IntegerField(help_text="Identifier of the owning store"),
                ),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
            ],
            options={
                "verbose_name": "Item",
                "verbose_name_plural": "Items",
                "db_table": "items",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["q", "created_at"], name="items_q_created_idx")
                ],
            },
        ),
    ]
