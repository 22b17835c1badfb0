from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .deal import Value, count_pairs, deal_deck, distinct_names
from .errors import ConfigurationError
from .logging_utils import get_logger

Coord = Tuple[int, int]  # (row, col), zero-based

HIDDEN_MARKER = "*"
MATCHED_MARKER = "-"

logger = get_logger(__name__)


@dataclass(eq=False)
class Card:
    """A single card. Cards compare by identity; use matches() to compare values."""
    value: Value
    flipped: bool = False
    paired: bool = False

    def flip(self, flipped: bool = True) -> None:
        self.flipped = flipped

    def pair(self, paired: bool = True) -> None:
        self.paired = paired

    def is_flipped(self) -> bool:
        return self.flipped

    def is_paired(self) -> bool:
        return self.paired

    def matches(self, other: Card) -> bool:
        """True iff both cards carry the same value, whatever their flags."""
        return self.value == other.value

    def display(self) -> str:
        return str(self.value) if self.flipped else HIDDEN_MARKER

    def face(self) -> str:
        """What the board shows for this card: matched marker, value, or hidden marker."""
        if self.paired:
            return MATCHED_MARKER
        return self.display()


class Board:
    """
    The playing field: a height x width grid of Cards holding every value exactly twice.

    The board is empty until setup() deals it. Shuffling draws from the injected
    random.Random, so a seeded generator gives a reproducible sequence of deals.
    str(board) returns the text cached by the last update() call.
    """

    def __init__(
        self,
        width: int = 4,
        height: int = 4,
        names: Optional[Iterable[Value]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.names: Optional[List[Value]] = list(names) if names is not None else None
        self._rng = rng or random.Random()
        pairs = count_pairs(width, height)
        if self.names is not None and len(distinct_names(self.names)) < pairs:
            raise ConfigurationError(
                f"The board needs {pairs} distinct names but only "
                f"{len(distinct_names(self.names))} were given."
            )
        self._grid: List[List[Card]] = []
        self._text = ""
        self.update()

    @classmethod
    def from_values(
        cls,
        width: int,
        height: int,
        values: Sequence[Value],
        rng: Optional[random.Random] = None,
    ) -> Board:
        """
        Builds a board with a fixed row-major layout instead of a shuffled deal.

        The values also become the board's pool, so a later setup() re-deals the same cards.
        """
        count_pairs(width, height)
        if len(values) != width * height:
            raise ConfigurationError(
                f"Expected {width * height} values for a {width}x{height} board, got {len(values)}."
            )
        odd = sorted(str(v) for v, n in Counter(values).items() if n != 2)
        if odd:
            raise ConfigurationError(f"Every value must appear exactly twice: {', '.join(odd)}")
        board = cls(width, height, names=list(dict.fromkeys(values)), rng=rng)
        board._lay_out(values)
        return board

    def setup(self) -> None:
        """Deals a fresh shuffled deck onto the board, all cards face down."""
        deck = deal_deck(self.width, self.height, self.names, self._rng)
        self._lay_out(deck)
        logger.debug("Dealt %dx%d board with %d pairs", self.width, self.height, self.possible_matches)

    def _lay_out(self, values: Sequence[Value]) -> None:
        it = iter(values)
        self._grid = [[Card(next(it)) for _ in range(self.width)] for _ in range(self.height)]
        self.update()

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_card(self, row: int, col: int) -> Optional[Card]:
        """Returns the card at (row, col), or None when the position is off the board."""
        if not self._grid or not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def coords(self) -> Iterator[Coord]:
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def cards(self) -> Iterator[Card]:
        for row in self._grid:
            yield from row

    def values(self) -> List[Value]:
        """Row-major list of every card value, visible or not."""
        return [card.value for card in self.cards()]

    def hide_cards(self) -> None:
        """Turns every unpaired card face down. Paired cards stay as they are."""
        for card in self.cards():
            if not card.is_paired():
                card.flip(False)

    @property
    def possible_matches(self) -> int:
        return self.width * self.height // 2

    def get_possible_matches(self) -> int:
        return self.possible_matches

    def faces(self) -> List[List[str]]:
        return [[card.face() for card in row] for row in self._grid]

    def update(self) -> None:
        """Re-renders the cached text shown by str(board)."""
        self._text = self.render()

    def render(self) -> str:
        """Generates the grid text: a column header, then one labelled line per row."""
        label_w = len(str(max(self.height - 1, 0)))
        cell_w = max(
            [len(str(self.width - 1)), len(HIDDEN_MARKER), len(MATCHED_MARKER)]
            + [len(str(card.value)) for card in self.cards()]
        )
        lines: List[str] = []
        header = " ".join(str(c).ljust(cell_w) for c in range(self.width))
        lines.append((" " * label_w + "  " + header).rstrip())
        for r, row in enumerate(self.faces()):
            cells = " ".join(face.ljust(cell_w) for face in row)
            lines.append((str(r).rjust(label_w) + "  " + cells).rstrip())
        return "\n".join(lines)

    def __str__(self) -> str:
        return self._text
