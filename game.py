from __future__ import annotations

# Facade module that re-exports the Concentration core.
# Tests and the Flask app import from here; the logic lives under concentration_core/*.

from concentration_core.board import Board, Card, Coord, HIDDEN_MARKER, MATCHED_MARKER  # noqa: F401
from concentration_core.deal import count_pairs, deal_deck, distinct_names, pick_values  # noqa: F401
from concentration_core.errors import (  # noqa: F401
    AlreadyPairedError,
    ConcentrationError,
    ConfigurationError,
    DuplicatePositionError,
    InputParseError,
    MoveError,
    OutOfBoundsError,
)
from concentration_core.moves import Move, parse_move, validate_move  # noqa: F401
from concentration_core.player import Player  # noqa: F401
from concentration_core.ports import ConsoleIO, ScriptedIO  # noqa: F401
from concentration_core.session import Game, Outcome, Phase, TurnResult  # noqa: F401


def main() -> None:
    # CLI driver delegated to concentration_core.cli
    from concentration_core.cli import run
    run()


if __name__ == '__main__':
    main()
