"""
Price calculations for the comparison table.

Provides:
- Stable sorting by unit price
- Savings amount and savings percentage
- Censored count and visible item selection
- Origin and organic badges
- Presentation rows (CleanedItem)
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Tuple

from prices.models import Item, Store
from prices.utils.formatting import CurrencyFormatter

SWEDEN_SPELLINGS = ("sweden", "sverige")
SWEDISH_TITLE_TERM = "svenskt"


@dataclass(frozen=True)
class Badge:
    """A small symbol shown next to an item title."""

    symbol: str
    label: str


ORGANIC_BADGE = Badge(symbol="🌱", label="ekologisk")
SWEDISH_BADGE = Badge(symbol="🇸🇪", label="från Sverige")


@dataclass(frozen=True)
class CleanedItem:
    """Presentation-ready projection of an Item joined with its Store."""

    marks: Tuple[Badge, ...]
    store_name: str
    item_price: str
    unit_price: str
    title: str


def sort_by_unit_price(items: List[Item]) -> List[Item]:
    """Cheapest first. Equal prices keep their fetch order."""
    return sorted(items, key=lambda item: item.unit_price)


def savings_amount(items: List[Item]) -> Decimal:
    """Absolute difference between the most and least expensive unit price."""
    if not items:
        return Decimal("0")
    prices = [Decimal(item.unit_price) for item in items]
    return abs(max(prices) - min(prices))


def savings_percent(items: List[Item]) -> int:
    """
    Percentage saved by buying the cheapest item instead of the most
    expensive one: ``(1 - cheapest / most_expensive) * 100``.

    Clamped to [0, 100]. Returns 0 for an empty list or a zero price.
    """
    if not items:
        return 0
    prices = [Decimal(item.unit_price) for item in items]
    cheapest, most_expensive = min(prices), max(prices)
    if most_expensive <= 0:
        return 0
    percent = (1 - cheapest / most_expensive) * 100
    rounded = int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return max(0, min(100, rounded))


def censored_count(total: int, is_admin: bool) -> int:
    """Number of cheapest items withheld from the caller."""
    if is_admin:
        return 0
    return total // 2


def visible_items(items: List[Item], is_admin: bool) -> List[Item]:
    """
    Items shown in the table.

    Admins see everything; everyone else sees the more expensive half,
    everything after the ``censored_count`` cheapest items. For an odd
    count the middle item is shown.
    """
    return list(items[censored_count(len(items), is_admin):])


def is_swedish(item: Item) -> bool:
    origin = (item.country_of_origin or "").lower()
    if any(spelling in origin for spelling in SWEDEN_SPELLINGS):
        return True
    return SWEDISH_TITLE_TERM in item.title.lower()


def item_marks(item: Item) -> Tuple[Badge, ...]:
    marks = []
    if item.organic:
        marks.append(ORGANIC_BADGE)
    if is_swedish(item):
        marks.append(SWEDISH_BADGE)
    return tuple(marks)


def store_name_for(store_uuid: int, stores: Dict[int, Store]) -> str:
    """Display name of a store, falling back to its identifier."""
    store: Optional[Store] = stores.get(store_uuid)
    if store is not None and store.name:
        return store.name
    return str(store_uuid)


def clean_item(
    item: Item,
    stores: Dict[int, Store],
    formatter: CurrencyFormatter,
) -> CleanedItem:
    return CleanedItem(
        marks=item_marks(item),
        store_name=store_name_for(item.store_uuid, stores),
        item_price=formatter.format(item.item_price),
        unit_price=formatter.format(item.unit_price),
        title=item.title,
    )
