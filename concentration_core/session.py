from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import messages
from .board import Board
from .errors import MoveError
from .logging_utils import get_logger
from .moves import Move, parse_move, validate_move
from .player import Player
from .ports import ConsoleIO

logger = get_logger(__name__)


class Phase(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    VALIDATING = "validating"
    FLIPPING = "flipping"
    EVALUATING = "evaluating"
    FINISHED = "finished"


class Outcome(str, Enum):
    INVALID = "invalid"
    NO_MATCH = "no_match"
    MATCH = "match"
    WON = "won"
    QUIT = "quit"


@dataclass(frozen=True)
class TurnResult:
    """What one submitted line did to the game."""
    outcome: Outcome
    move: Optional[Move] = None
    error: Optional[MoveError] = None

    @property
    def finished(self) -> bool:
        return self.outcome in (Outcome.WON, Outcome.QUIT)


class Game:
    """
    One game of concentration: a Board, a Player and the turn state machine.

    submit() is the whole turn logic and does no I/O, so the Flask app and the
    tests can drive it directly. start() wraps it in the interactive console loop,
    talking to whatever port was injected (ConsoleIO by default).
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        player: Optional[Player] = None,
        io=None,
    ) -> None:
        self.board = board if board is not None else Board()
        self.player = player if player is not None else Player()
        self.io = io if io is not None else ConsoleIO()
        self.phase = Phase.AWAITING_INPUT
        self.match_found = False
        self.quit_requested = False

    def reset(self) -> None:
        """Resets the counters and per-round flags, leaving the board alone."""
        self.player.reset()
        self.match_found = False
        self.quit_requested = False
        self.phase = Phase.AWAITING_INPUT

    def new_round(self) -> None:
        self.board.setup()
        self.reset()

    @property
    def won(self) -> bool:
        return self.player.matches == self.board.possible_matches

    @property
    def finished(self) -> bool:
        return self.phase is Phase.FINISHED

    def summary(self) -> str:
        return messages.summary(self.player.moves, self.player.matches)

    # ---------- turn logic ----------

    def submit(self, line: str) -> TurnResult:
        """Processes one line of player input: the quit keyword or a pair of positions."""
        if self.finished:
            raise RuntimeError("game is finished; start a new round first")
        text = line.strip()
        if text.lower() == messages.EXIT_KEYWORD:
            return self._quit()

        self.phase = Phase.VALIDATING
        try:
            move = parse_move(text)
            card1, card2 = validate_move(self.board, move)
        except MoveError as e:
            logger.debug("Rejected input %r: %s", text, e.message)
            self.phase = Phase.AWAITING_INPUT
            return TurnResult(Outcome.INVALID, error=e)

        self.phase = Phase.FLIPPING
        # cards left face up by a missed pair go back down first
        self.board.hide_cards()
        card1.flip(True)
        card2.flip(True)
        self.board.update()

        self.phase = Phase.EVALUATING
        outcome = Outcome.NO_MATCH
        if card1.matches(card2):
            card1.pair(True)
            card2.pair(True)
            self.player.add_match()
            self.match_found = True
            outcome = Outcome.MATCH
        self.player.add_move()
        logger.debug("Move %d: %s -> %s", self.player.moves, move, outcome.value)

        if self.won:
            self.phase = Phase.FINISHED
            logger.info("Board cleared in %d moves", self.player.moves)
            return TurnResult(Outcome.WON, move=move)
        self.phase = Phase.AWAITING_INPUT
        return TurnResult(outcome, move=move)

    def _quit(self) -> TurnResult:
        self.board.hide_cards()
        self.board.update()
        self.quit_requested = True
        self.phase = Phase.FINISHED
        logger.info("Player quit after %d moves and %d matches", self.player.moves, self.player.matches)
        return TurnResult(Outcome.QUIT)

    # ---------- console loop ----------

    def start(self) -> int:
        """Deals and plays rounds until the player quits or declines a replay. Returns the exit code."""
        while True:
            self.new_round()
            if not self._play_round():
                return 0
            if not self._ask_for_replay():
                return 0

    def _play_round(self) -> bool:
        """Plays the current board to the end. True if it was won, False if the player quit."""
        while not self.finished:
            self.io.write(str(self.board))
            self._print_match_message()
            self._handle_input()
        self._end_game(won=not self.quit_requested)
        return not self.quit_requested

    def _handle_input(self) -> TurnResult:
        # Prompt until the line is either a playable move or the quit keyword.
        while True:
            try:
                line = self.io.read_line(messages.INPUT_PROMPT)
            except EOFError:
                line = messages.EXIT_KEYWORD
            result = self.submit(line)
            if result.outcome is Outcome.INVALID:
                message = result.error.message if result.error is not None else messages.INVALID_INPUT
                self.io.write(messages.input_error(message))
                continue
            if result.move is not None:
                self.io.write("\n" + messages.flipping(result.move.first, result.move.second))
            return result

    def _print_match_message(self) -> None:
        if self.match_found:
            self.io.write(messages.MATCH_MADE)
            self.match_found = False
        elif self.player.moves > 0:
            self.io.write(messages.NO_MATCH)

        if self.player.moves == 0:
            self.io.write(messages.INPUT_INSTRUCTIONS)
            self.io.write(messages.INPUT_EXAMPLE)

    def _end_game(self, won: bool) -> None:
        self.io.write(str(self.board))
        self.io.write(messages.GAME_WON_MESSAGE if won else messages.GAME_OVER_MESSAGE)
        self.io.write(self.summary())

    def _ask_for_replay(self) -> bool:
        self.io.write(messages.REPLAY_PROMPT)
        answer = ""
        while answer not in (messages.AFFIRMATIVE_RESPONSE, messages.NEGATIVE_RESPONSE):
            try:
                answer = self.io.read_line(messages.ANSWER_PROMPT).strip().lower()
            except EOFError:
                answer = messages.NEGATIVE_RESPONSE
        return answer == messages.AFFIRMATIVE_RESPONSE
