"""
Currency formatting in the Swedish locale.

Produces the same shape as a browser formatting SEK for sv-SE:
non-breaking space as thousands separator, comma as decimal separator
and the currency symbol after the amount, e.g. ``1 234,50 kr``.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Union

NBSP = "\u00a0"
MINUS = "\u2212"

Number = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class CurrencyFormatter:
    """Formats amounts as locale currency strings."""

    symbol: str = "kr"
    decimal_separator: str = ","
    group_separator: str = NBSP
    decimal_places: int = 2

    def format(self, value: Number) -> str:
        amount = Decimal(str(value))
        quantum = Decimal(1).scaleb(-self.decimal_places)
        amount = amount.quantize(quantum, rounding=ROUND_HALF_EVEN)

        sign = MINUS if amount < 0 else ""
        integer_part, _, fraction = f"{abs(amount):f}".partition(".")

        groups = []
        while len(integer_part) > 3:
            groups.insert(0, integer_part[-3:])
            integer_part = integer_part[:-3]
        groups.insert(0, integer_part)

        # Swedish style leaves four-digit amounts ungrouped
        if len(groups) == 2 and len(groups[0]) == 1:
            number = "".join(groups)
        else:
            number = self.group_separator.join(groups)

        if fraction:
            number = f"{number}{self.decimal_separator}{fraction}"

        return f"{sign}{number}{NBSP}{self.symbol}"


SEK = CurrencyFormatter()
