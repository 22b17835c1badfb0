"""
Concentration core Python package.

This package contains the card-matching game's data structures and the
turn-processing loop, kept free of console globals so it can be driven by the
CLI, the Flask app and the tests alike.
Modules:
- board.py: Card, Board, Coord
- deal.py: value pools and shuffled pair decks
- errors.py: ConcentrationError and the move/configuration errors
- player.py: Player
- moves.py: Move parsing and validation
- session.py: Game, TurnResult
- ports.py: console and scripted line I/O
- messages.py: console text and the end-of-game summary
- logging_utils.py: setup_logging, get_logger
- cli.py: command-line entry point
"""
