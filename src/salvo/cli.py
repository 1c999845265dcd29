"""Console entry point for Salvo (``salvo`` script / ``python -m salvo.cli``)."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from . import config as _cfg
from .battleship import ConfigurationError, PlacementError
from .game import Game

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Salvo – single-player console Battleship")
    parser.add_argument(
        "--size",
        type=int,
        choices=_cfg.BOARD_SIZES,
        help="Board side; skips the size menu.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=_cfg.SEED,
        help="Seed for ship placement (default: $SALVO_SEED or random).",
    )
    parser.add_argument(
        "--games",
        type=_positive_int,
        default=None,
        help="Stop after this many wins instead of restarting forever.",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        default=_cfg.REVEAL,
        help="Show ship positions on every board (development only).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log session start and wins (-v).",
    )
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.debug or _cfg.DEBUG:
        return logging.DEBUG
    if args.verbose >= 1:
        return logging.INFO
    return logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Parse flags, configure logging and run the game loop."""
    args = build_parser().parse_args(argv)

    # stderr keeps log lines out of the board output
    logging.basicConfig(
        level=_log_level(args),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    if args.seed is not None:
        logger.info("Using placement seed %d", args.seed)

    game = Game(size=args.size, rng=rng, reveal=args.reveal)
    try:
        wins = game.run(max_games=args.games)
    except (ConfigurationError, PlacementError) as e:
        logger.error("Cannot set up the board: %s", e)
        return 2
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted, exiting")
        return 0
    logger.info("Exiting after %d win(s)", wins)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
