"""
Obfuscated placeholder strings for withheld table cells.

The output only signals that something is hidden. It is not meant to be
unguessable, so any ``random.Random`` instance works as the source.
"""

import math
import random

# Sixteen visually distinctive glyphs from the Symbols for Legacy
# Computing Supplement block (U+1CD50 - U+1CD5F).
CENSOR_ALPHABET = tuple(chr(code) for code in range(0x1CD50, 0x1CD60))

# Per-column seeds for the collapsed row: marks, title, store,
# item price, unit price.
ROW_SEEDS = (2, 12, 8, 6, 6)

STORE_NAME_SEED = 12


def random_length(seed: int, rng: random.Random) -> int:
    """
    Draw a length uniformly from ``[ceil(seed / 2), floor(seed))``.

    Falls back to the lower bound when the range is empty.
    """
    low = math.ceil(seed / 2)
    high = math.floor(seed)
    if high <= low:
        return low
    return rng.randrange(low, high)


def censor(seed: int, rng: random.Random) -> str:
    """Return a placeholder whose length loosely follows ``seed``."""
    length = random_length(seed, rng)
    return "".join(rng.choice(CENSOR_ALPHABET) for _ in range(length))


def censored_row(rng: random.Random) -> list[str]:
    """Placeholder cells for the row standing in for all withheld items."""
    return [censor(seed, rng) for seed in ROW_SEEDS]
