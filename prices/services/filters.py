"""
Query-specific exclusion rules.

Some search keys match products that do not belong in the comparison,
e.g. coffee creamer showing up under milk. Each rule is keyed by the
exact normalized query and applied after sorting.
"""

from typing import Callable, Dict, List

from prices.models import Item

ItemPredicate = Callable[[Item], bool]


def _title_excludes(term: str) -> ItemPredicate:
    return lambda item: term not in item.title.lower()


def _unit_is(unit: str) -> ItemPredicate:
    return lambda item: item.unit == unit


FILTERS: Dict[str, ItemPredicate] = {
    "smör": _title_excludes("redbart"),
    "mjölk": _title_excludes("kaffe"),
    "kaffe": _unit_is("kg"),
}


def filter_items(items: List[Item], query: str) -> List[Item]:
    """
    Apply the exclusion rule registered for ``query``.

    Order is preserved. Queries without a rule pass through unchanged.
    """
    predicate = FILTERS.get(query)
    if predicate is None:
        return list(items)
    return [item for item in items if predicate(item)]
