"""
Read access to the items and stores tables.

Upstream failures never reach the caller: a failed query is logged and
reported as an empty result, which the page turns into a 404.
"""

import logging
from typing import Dict, List

from django.db import DatabaseError

from prices.models import Item, Store

logger = logging.getLogger(__name__)


def fetch_items(query: str) -> List[Item]:
    """
    Fetch all items collected for the search key ``query``.

    Returned in fetch order (by id), unsorted by price.
    """
    try:
        return list(Item.objects.filter(q=query).order_by("id"))
    except DatabaseError as e:
        logger.warning("Failed to fetch items for q=%r: %s", query, e)
        return []


def fetch_stores() -> List[Store]:
    """Fetch every store."""
    try:
        return list(Store.objects.all())
    except DatabaseError as e:
        logger.warning("Failed to fetch stores: %s", e)
        return []


def stores_by_uuid(stores: List[Store]) -> Dict[int, Store]:
    return {store.uuid: store for store in stores}
