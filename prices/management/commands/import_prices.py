"""
Management command to import stores and price observations from a JSON file.

Usage:
    python manage.py import_prices /path/to/prices.json

File format:
    {
        "stores": [{"uuid": 1, "name": "ICA Kvantum Arvika", "chain": "ica", ...}],
        "items": [{"q": "smör", "title": "Smör 82%", "unit": "kg", "unit_price": 109.0, ...}]
    }
"""

import json
from decimal import Decimal, InvalidOperation

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils.dateparse import parse_datetime

from prices.models import Item, Store

REQUIRED_ITEM_FIELDS = ("title", "unit", "unit_price", "item_price", "store_uuid")


def _decimal(value):
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"not a number: {value!r}")


def build_item(data):
    """Item instance from one JSON record. Raises ValueError on bad input."""
    missing = [name for name in REQUIRED_ITEM_FIELDS if data.get(name) is None]
    if missing:
        raise ValueError(f"missing fields: {', '.join(missing)}")

    q = data.get('q')
    item = Item(
        q=q.lower().strip() if q else None,
        title=data['title'],
        unit=data['unit'],
        unit_price=_decimal(data['unit_price']),
        item_price=_decimal(data['item_price']),
        member_price=_decimal(data.get('member_price')),
        organic=bool(data.get('organic', False)),
        country_of_origin=data.get('country_of_origin'),
        store_uuid=int(data['store_uuid']),
    )

    created_at = data.get('created_at')
    if created_at:
        parsed = parse_datetime(created_at)
        if parsed is None:
            raise ValueError(f"invalid created_at: {created_at!r}")
        item.created_at = parsed

    return item


class Command(BaseCommand):
    help = 'Import stores and items from JSON file'

    def add_arguments(self, parser):
        parser.add_argument('json_file', type=str, help='Path to JSON file with stores and items')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be imported without saving'
        )

    def handle(self, *args, **options):
        json_file = options['json_file']
        dry_run = options['dry_run']

        try:
            with open(json_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Cannot read {json_file}: {e}")

        stores = data.get('stores', [])
        items = data.get('items', [])
        self.stdout.write(f"Found {len(stores)} stores and {len(items)} items in {json_file}")

        created_stores = 0
        created_items = 0
        errors = 0

        with transaction.atomic():
            for store_data in stores:
                if dry_run:
                    self.stdout.write(f"  Would upsert store: {store_data.get('uuid')} {store_data.get('name')}")
                    continue
                try:
                    _, created = Store.objects.update_or_create(
                        uuid=int(store_data['uuid']),
                        defaults={
                            'name': store_data.get('name'),
                            'chain': store_data.get('chain'),
                            'chain_store_id': store_data.get('chain_store_id'),
                        },
                    )
                    if created:
                        created_stores += 1
                except (KeyError, ValueError, TypeError) as e:
                    self.stdout.write(self.style.ERROR(f"  Error importing store {store_data!r}: {e}"))
                    errors += 1

            for item_data in items:
                try:
                    item = build_item(item_data)
                except (ValueError, TypeError) as e:
                    self.stdout.write(self.style.ERROR(f"  Error importing item {item_data.get('title')!r}: {e}"))
                    errors += 1
                    continue

                if dry_run:
                    self.stdout.write(f"  Would create: {item}")
                    continue

                item.save()
                created_items += 1

        # Summary
        self.stdout.write("")
        self.stdout.write("=" * 60)
        self.stdout.write("Import complete!")
        self.stdout.write(f"  Stores created: {created_stores}")
        self.stdout.write(f"  Items created: {created_items}")
        self.stdout.write(f"  Errors: {errors}")
