"""
Daily lowest price for a search key.

Feeds the chart under the comparison table and the price history API.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List

from django.db import DatabaseError
from django.db.models.functions import TruncDate

from prices.models import Item, Store
from prices.services.filters import filter_items
from prices.services.pricing import store_name_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceHistoryPoint:
    """Lowest unit price seen on one day and the store that had it."""

    date: date
    min_price: Decimal
    store_name: str

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "min_price": float(self.min_price),
            "store_name": self.store_name,
        }


def fetch_price_history(query: str, stores: Dict[int, Store]) -> List[PriceHistoryPoint]:
    """
    Return one point per day, oldest first.

    Items excluded by the query's filter rule are left out, so the
    series compares the same products as the table. Ties on the lowest
    price go to the item fetched first.
    """
    try:
        rows = list(
            Item.objects.filter(q=query)
            .annotate(day=TruncDate("created_at"))
            .only("title", "unit", "unit_price", "store_uuid", "created_at")
            .order_by("day", "unit_price", "id")
        )
    except DatabaseError as e:
        logger.warning("Failed to fetch price history for q=%r: %s", query, e)
        return []

    points: List[PriceHistoryPoint] = []
    for item in filter_items(rows, query):
        if points and points[-1].date == item.day:
            continue
        points.append(
            PriceHistoryPoint(
                date=item.day,
                min_price=item.unit_price,
                store_name=store_name_for(item.store_uuid, stores),
            )
        )
    return points
