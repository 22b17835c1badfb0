from __future__ import annotations

import random
from typing import Iterable, List, Optional, Union

from .errors import ConfigurationError

Value = Union[int, str]  # numeric by default, or a name from the supplied pool


def count_pairs(width: int, height: int) -> int:
    """Returns how many pairs a width x height board holds, or raises ConfigurationError."""
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Board dimensions must be positive, got {width}x{height}.")
    if (width * height) % 2 != 0:
        raise ConfigurationError(
            f"A {width}x{height} board has an odd number of cells; cards come in pairs."
        )
    return width * height // 2


def distinct_names(names: Iterable[Value]) -> List[Value]:
    """Strips text names and drops blanks and repeats, keeping first-seen order."""
    seen = set()
    out: List[Value] = []
    for name in names:
        if isinstance(name, str):
            name = name.strip()
            if not name:
                continue
        if name not in seen:
            seen.add(name)
            out.append(name)
    return out


def pick_values(pairs: int, names: Optional[Iterable[Value]], rng: random.Random) -> List[Value]:
    """Chooses one value per pair: 1..pairs, or a random sample of the name pool."""
    if names is None:
        return list(range(1, pairs + 1))
    pool = distinct_names(names)
    if len(pool) < pairs:
        raise ConfigurationError(
            f"The board needs {pairs} distinct names but only {len(pool)} were given."
        )
    return rng.sample(pool, pairs)


def deal_deck(
    width: int,
    height: int,
    names: Optional[Iterable[Value]] = None,
    rng: Optional[random.Random] = None,
) -> List[Value]:
    """Creates a shuffled row-major deck in which every value appears exactly twice."""
    rng = rng or random.Random()
    pairs = count_pairs(width, height)
    values = pick_values(pairs, names, rng)
    deck: List[Value] = [v for v in values for _ in range(2)]
    rng.shuffle(deck)
    return deck
