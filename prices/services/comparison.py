"""
Comparison pipeline.

Turns a search key into everything the page shows:

    fetch items + stores -> sort -> filter -> savings -> censor -> rows

Returns None when there is nothing to compare, which the view answers
with a 404.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Union

from prices.models import Item
from prices.services import repository
from prices.services.censor import STORE_NAME_SEED, censor, censored_row
from prices.services.filters import filter_items
from prices.services.price_history import PriceHistoryPoint, fetch_price_history
from prices.services.pricing import (
    CleanedItem,
    censored_count,
    clean_item,
    savings_amount,
    savings_percent,
    sort_by_unit_price,
    store_name_for,
    visible_items,
)
from prices.site_config import SiteConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CensoredRow:
    """Single placeholder row standing in for every withheld item."""

    cells: List[str]


TableRow = Union[CensoredRow, CleanedItem]


@dataclass
class ComparisonPage:
    query: str
    unit: str
    savings_amount: str
    savings_percent: int
    best_store_name: str
    censored_count: int
    is_admin: bool
    rows: List[TableRow] = field(default_factory=list)
    price_history: List[PriceHistoryPoint] = field(default_factory=list)


def normalize_query(raw: Optional[str], default: str) -> str:
    """Lower-case and trim ``raw``; absent means ``default``."""
    if raw is None:
        return default
    return raw.lower().strip()


def censor_rng(query: str, items: List[Item]) -> random.Random:
    """
    Random source for the placeholders, seeded from the data shown.

    The same query over the same rows always renders the same page, so
    the ETag stays stable until prices change.
    """
    fingerprint = "|".join(f"{item.id}:{item.unit_price}" for item in items)
    return random.Random(f"{query}|{fingerprint}")


def hide_store_names(
    points: List[PriceHistoryPoint],
    rng: random.Random,
) -> List[PriceHistoryPoint]:
    """The daily lowest-price store is what members pay to see."""
    return [
        replace(point, store_name=censor(STORE_NAME_SEED, rng))
        for point in points
    ]


def build_comparison(
    query: str,
    is_admin: bool,
    site: SiteConfig,
) -> Optional[ComparisonPage]:
    items = repository.fetch_items(query)
    stores = repository.fetch_stores()

    if not items or not stores:
        logger.debug(
            "Nothing to compare for q=%r (%d items, %d stores)",
            query, len(items), len(stores),
        )
        return None

    items = filter_items(sort_by_unit_price(items), query)
    if not items:
        logger.debug("All items for q=%r excluded by filter", query)
        return None

    store_lookup = repository.stores_by_uuid(stores)
    rng = censor_rng(query, items)
    formatter = site.formatter

    hidden = censored_count(len(items), is_admin)
    rows: List[TableRow] = [
        clean_item(item, store_lookup, formatter)
        for item in visible_items(items, is_admin)
    ]
    if hidden > 0:
        rows.insert(0, CensoredRow(cells=censored_row(rng)))

    if is_admin:
        best_store_name = store_name_for(items[0].store_uuid, store_lookup)
    else:
        best_store_name = censor(STORE_NAME_SEED, rng)

    price_history: List[PriceHistoryPoint] = []
    if site.price_history_enabled:
        price_history = fetch_price_history(query, store_lookup)
        if not is_admin:
            price_history = hide_store_names(price_history, rng)

    return ComparisonPage(
        query=query,
        unit=items[0].unit,
        savings_amount=formatter.format(savings_amount(items)),
        savings_percent=savings_percent(items),
        best_store_name=best_store_name,
        censored_count=hidden,
        is_admin=is_admin,
        rows=rows,
        price_history=price_history,
    )
