from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    """Move and match counters for the person at the keyboard."""
    moves: int = 0
    matches: int = 0

    def reset(self) -> None:
        self.moves = 0
        self.matches = 0

    def add_move(self) -> None:
        self.moves += 1

    def add_match(self) -> None:
        self.matches += 1

    def get_moves(self) -> int:
        return self.moves

    def get_matches(self) -> int:
        return self.matches
