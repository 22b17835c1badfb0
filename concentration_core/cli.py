from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from .board import Board
from .errors import ConfigurationError
from .logging_utils import LOG_LEVEL, get_logger, setup_logging
from .session import Game

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Concentration: flip two cards per turn and clear the board')
    parser.add_argument('--rows', type=int, default=4, help='Board height (default 4)')
    parser.add_argument('--cols', type=int, default=4, help='Board width (default 4)')
    parser.add_argument('--names', default=None,
                        help='Comma-separated names to put on the cards instead of numbers')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the shuffle')
    parser.add_argument('--log-level', default=LOG_LEVEL,
                        help='DEBUG, INFO, WARNING or ERROR (env CONCENTRATION_LOG_LEVEL)')
    return parser


def main(argv: Optional[List[str]] = None, io=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    names = args.names.split(',') if args.names else None
    try:
        board = Board(width=args.cols, height=args.rows, names=names, rng=random.Random(args.seed))
    except ConfigurationError as e:
        parser.error(e.message)
    logger.debug('Starting %dx%d game (seed=%s)', args.rows, args.cols, args.seed)
    return Game(board=board, io=io).start()


def run() -> None:
    sys.exit(main())
