"""Command-line entry point: replay moves on a position and print the FEN."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from chessmachine.core import STARTING_FEN, Board, Square

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CHESSMACHINE_LOG_LEVEL"

EXIT_OK = 0
EXIT_USAGE = 2


@dataclass
class CliSettings:
    """All user-configurable settings."""

    fen: str = STARTING_FEN
    show_board: bool = False
    log_level: str = "WARNING"


def parse_move(token: str) -> tuple[Square, Square]:
    """Split a move token such as ``e2e4`` or ``e2-e4`` into two squares."""
    text = token.replace("-", "")
    if len(text) != 4:
        raise ValueError(f"Invalid move token: {token!r}")
    return Square.from_name(text[:2]), Square.from_name(text[2:])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmachine",
        description="Apply moves to a chess position and print the resulting FEN.",
    )
    parser.add_argument(
        "moves",
        nargs="*",
        metavar="MOVE",
        help="from/to square pair, e.g. e2e4 or e2-e4",
    )
    parser.add_argument("--fen", default=STARTING_FEN, help="starting position")
    parser.add_argument(
        "--board", action="store_true", help="also print a text diagram"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def load_settings(argv: Sequence[str] | None = None) -> tuple[CliSettings, list[str]]:
    """Build settings from command-line options and the environment."""
    parser = build_parser()
    args = parser.parse_args(argv)
    log_level = (args.log_level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        parser.error(f"unknown log level: {log_level}")
    settings = CliSettings(
        fen=args.fen,
        show_board=args.board,
        log_level=log_level,
    )
    return settings, list(args.moves)


def replay(settings: CliSettings, moves: Sequence[str]) -> Board:
    """Parse the starting FEN and apply each move token in order."""
    board = Board.from_fen(settings.fen)
    for token in moves:
        from_sq, to_sq = parse_move(token)
        result = board.play_move(from_sq, to_sq)
        _LOGGER.debug("%s -> %s (%s): %s", from_sq, to_sq, result.name, board.to_fen())
    return board


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    settings, moves = load_settings(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        board = replay(settings, moves)
    except ValueError as exc:
        _LOGGER.error("%s: %s", type(exc).__name__, exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    print(board.to_fen())
    if settings.show_board:
        print(board.ascii())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
