from __future__ import annotations

from typing import Optional


class ConcentrationError(ValueError):
    """Base class for every error raised by the game core."""

    default_message = "Concentration error."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ConfigurationError(ConcentrationError):
    """The board cannot be built from the given dimensions or value pool."""

    default_message = "Invalid board configuration."


class MoveError(ConcentrationError):
    """A rejected move. Recoverable: the player is asked again."""


class InputParseError(MoveError):
    default_message = "Invalid input!"


class OutOfBoundsError(MoveError):
    default_message = "The given positions aren't on the board."


class DuplicatePositionError(MoveError):
    default_message = "The given positions must be different."


class AlreadyPairedError(MoveError):
    default_message = "One or more of the given cards has already been paired."
