from __future__ import annotations

import re
from typing import NamedTuple, Tuple

from .board import Board, Card, Coord
from .errors import (
    AlreadyPairedError,
    DuplicatePositionError,
    InputParseError,
    OutOfBoundsError,
)

# Any run of digits counts; everything between runs is ignored.
INPUT_PATTERN = re.compile(r"[0-9]+")
INPUT_NUMS_SIZE = 4
# Largest coordinate accepted as a number; longer runs are unparsable input.
MAX_INPUT_INT = 2**31 - 1


class Move(NamedTuple):
    row1: int
    col1: int
    row2: int
    col2: int

    @property
    def first(self) -> Coord:
        return (self.row1, self.col1)

    @property
    def second(self) -> Coord:
        return (self.row2, self.col2)


def parse_move(text: str) -> Move:
    """
    Extracts the first four integers found anywhere in the line.

    "(0, 0) (0, 1)", "0 0 0 1" and even "a0b0c0d1" all give Move(0, 0, 0, 1);
    anything past the fourth integer is ignored. A run above MAX_INPUT_INT is
    rejected like any other unparsable input.
    """
    nums = []
    for match in INPUT_PATTERN.finditer(text):
        digits = match.group().lstrip("0") or "0"
        if len(digits) > len(str(MAX_INPUT_INT)) or int(digits) > MAX_INPUT_INT:
            raise InputParseError()
        nums.append(int(digits))
        if len(nums) == INPUT_NUMS_SIZE:
            return Move(*nums)
    raise InputParseError()


def validate_move(board: Board, move: Move) -> Tuple[Card, Card]:
    """Returns both cards of a playable move, or raises the first MoveError that applies."""
    if move.first == move.second:
        raise DuplicatePositionError()
    card1 = board.get_card(*move.first)
    card2 = board.get_card(*move.second)
    if card1 is None or card2 is None:
        raise OutOfBoundsError()
    if card1.is_paired() or card2.is_paired():
        raise AlreadyPairedError()
    return card1, card2
