from __future__ import annotations

import os
import random
import uuid
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import Board, ConfigurationError, Game, Outcome, ScriptedIO, TurnResult
from concentration_core.messages import EXIT_KEYWORD
from concentration_core.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)

app = Flask(__name__)

# In-memory games keyed by id, oldest first; gone when the process exits.
GAMES: Dict[str, Game] = {}
MAX_GAMES = int(os.getenv("CONCENTRATION_MAX_GAMES", "256"))
MAX_DIMENSION = int(os.getenv("CONCENTRATION_MAX_DIMENSION", "16"))


def state_to_json(game_id: str, game: Game) -> Dict[str, Any]:
    return {
        "id": game_id,
        "rows": int(game.board.height),
        "cols": int(game.board.width),
        "faces": game.board.faces(),
        "text": str(game.board),
        "moves": int(game.player.moves),
        "matches": int(game.player.matches),
        "possibleMatches": int(game.board.possible_matches),
        "phase": game.phase.value,
        "finished": game.finished,
        "won": game.finished and game.won,
    }


def result_to_json(result: TurnResult) -> Dict[str, Any]:
    return {
        "outcome": result.outcome.value,
        "move": list(result.move) if result.move is not None else None,
        "error": result.error.message if result.error is not None else None,
    }


def _lookup(body: Dict[str, Any]) -> Tuple[Optional[str], Optional[Game]]:
    game_id = body.get("id")
    if not isinstance(game_id, str):
        return None, None
    return game_id, GAMES.get(game_id)


def _store(game: Game) -> str:
    # drop the oldest games once the map is full
    while GAMES and len(GAMES) >= MAX_GAMES:
        evicted = next(iter(GAMES))
        del GAMES[evicted]
        logger.debug("Evicted game %s", evicted)
    game_id = uuid.uuid4().hex
    GAMES[game_id] = game
    return game_id


def _board_from_json(body: Dict[str, Any]) -> Board:
    rows = int(body.get("rows", 4))
    cols = int(body.get("cols", 4))
    if rows > MAX_DIMENSION or cols > MAX_DIMENSION:
        raise ConfigurationError(f"rows and cols must be at most {MAX_DIMENSION}")
    values = body.get("values")
    if values is not None:
        return Board.from_values(cols, rows, list(values))
    names = body.get("names")
    if isinstance(names, str):
        names = names.split(",")
    seed = body.get("seed", None)
    board = Board(width=cols, height=rows, names=names, rng=random.Random(seed))
    board.setup()
    return board


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _board_from_json(body)
    except (ConfigurationError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad board: {e}"}), 400
    # the HTTP surface never reads from a console
    game = Game(board=board, io=ScriptedIO())
    game_id = _store(game)
    logger.info("New %dx%d game %s", board.height, board.width, game_id)
    return jsonify({"ok": True, "state": state_to_json(game_id, game)})


@app.post("/api/state")
def api_state() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    game_id, game = _lookup(body)
    if game is None:
        return jsonify({"ok": False, "error": "unknown game id"}), 404
    return jsonify({"ok": True, "state": state_to_json(game_id, game)})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    game_id, game = _lookup(body)
    if game is None:
        return jsonify({"ok": False, "error": "unknown game id"}), 404
    if game.finished:
        return jsonify({"ok": False, "error": "game is finished", "state": state_to_json(game_id, game)}), 409

    move = body.get("move")
    if isinstance(move, list):
        line = " ".join(str(x) for x in move)
    else:
        line = str(body.get("input", ""))
    result = game.submit(line)
    payload = {"ok": result.outcome is not Outcome.INVALID, "result": result_to_json(result),
               "summary": game.summary(), "state": state_to_json(game_id, game)}
    if result.outcome is Outcome.INVALID:
        payload["error"] = result.error.message if result.error is not None else "invalid move"
        return jsonify(payload), 400
    return jsonify(payload)


@app.post("/api/quit")
def api_quit() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    game_id, game = _lookup(body)
    if game is None:
        return jsonify({"ok": False, "error": "unknown game id"}), 404
    if not game.finished:
        game.submit(EXIT_KEYWORD)
    # a quit game can never be played or replayed again
    GAMES.pop(game_id, None)
    return jsonify({"ok": True, "summary": game.summary(), "state": state_to_json(game_id, game)})


@app.post("/api/replay")
def api_replay() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    game_id, game = _lookup(body)
    if game is None:
        return jsonify({"ok": False, "error": "unknown game id"}), 404
    if not (game.finished and game.won):
        return jsonify({"ok": False, "error": "only a won game can be replayed"}), 409
    game.new_round()
    return jsonify({"ok": True, "state": state_to_json(game_id, game)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
