"""
Pytest configuration and fixtures for the prices test suite.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def stores(db):
    """Create the three Arvika test stores."""
    from prices.models import Store

    return [
        Store.objects.create(uuid=1, name="ICA Kvantum Arvika", chain="ica", chain_store_id="1001"),
        Store.objects.create(uuid=2, name="Coop Arvika", chain="coop", chain_store_id="2002"),
        Store.objects.create(uuid=3, name="Willys Arvika", chain="willys", chain_store_id="3003"),
    ]


@pytest.fixture
def make_item(db):
    """Factory creating persisted Item rows with sensible defaults."""
    from prices.models import Item

    def _make_item(**kwargs):
        defaults = {
            "q": "smör",
            "title": "Smör 82%",
            "unit": "kg",
            "unit_price": Decimal("100.00"),
            "item_price": Decimal("50.00"),
            "organic": False,
            "country_of_origin": None,
            "store_uuid": 1,
        }
        defaults.update(kwargs)
        return Item.objects.create(**defaults)

    return _make_item


@pytest.fixture
def butter_items(stores, make_item):
    """Three butter items at 10, 20 and 40 kr/kg, inserted out of price order."""
    return [
        make_item(title="Bregott Original", unit_price=Decimal("20.00"), item_price=Decimal("10.00"), store_uuid=2),
        make_item(title="Svenskt Smör", unit_price=Decimal("40.00"), item_price=Decimal("20.00"), store_uuid=3),
        make_item(title="Garant Smör", unit_price=Decimal("10.00"), item_price=Decimal("5.00"), store_uuid=1),
    ]
