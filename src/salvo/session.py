"""Single-player game session: one board, one fleet, one hit counter.

A GameSession is created per game and thrown away after the win. The session
is the only thing that flips a cell's ``hit`` flag, and it keeps
``total_hits`` equal to the number of ship cells not yet hit.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from .battleship import Board, ShipSpec, fleet_for_size
from .coord_utils import InvalidCoordinate, format_coord, in_bounds
from .events import GuessResult, Outcome
from . import config as _cfg

logger = logging.getLogger(__name__)


class GameSession:
    """State of one game from board setup to all-ships-sunk."""

    def __init__(self, board: Board, ships: Sequence[ShipSpec]):
        """Wrap an already populated *board*.

        Args:
            board: Board whose ships were placed from *ships*.
            ships: The fleet used to populate the board. Its total length
                seeds the remaining-hit counter.
        """
        self.board = board
        self.ships = list(ships)
        self.total_hits = sum(ship.size for ship in self.ships)
        self.guesses = 0
        self.won = False

    @classmethod
    def new(
        cls,
        size: int,
        *,
        ships: Sequence[ShipSpec] | None = None,
        rng: random.Random | None = None,
        max_attempts: int | None = _cfg.MAX_PLACEMENT_ATTEMPTS,
    ) -> "GameSession":
        """Build a board of *size*, place the fleet for that size and start a session."""
        fleet = list(ships) if ships is not None else fleet_for_size(size)
        board = Board(size)
        board.place_all(fleet, rng=rng, max_attempts=max_attempts)
        logger.info("New %dx%d game with %d ship(s), %d cells to hit", size, size, len(fleet), board.ship_cell_count())
        return cls(board, fleet)

    @property
    def size(self) -> int:
        return self.board.size

    def resolve_guess(self, row: int, col: int) -> GuessResult:
        """Apply a guess at (*row*,*col*) and report what happened."""
        if not in_bounds(row, col, self.board.size):
            raise InvalidCoordinate(f"({row}, {col}) is off the {self.board.size}x{self.board.size} board")

        cell = self.board[row, col]
        if cell.hit:
            logger.debug("Repeat guess at %s", format_coord(row, col))
            return GuessResult(Outcome.ALREADY_GUESSED, row, col, remaining=self.total_hits)

        cell.hit = True
        self.guesses += 1
        if cell.empty:
            logger.debug("Miss at %s", format_coord(row, col))
            return GuessResult(Outcome.MISS, row, col, remaining=self.total_hits)

        self.total_hits -= 1
        logger.debug("Hit %s ship at %s – %d cell(s) left", cell.occupant, format_coord(row, col), self.total_hits)
        if self.total_hits == 0:
            self.won = True
            logger.info("All ships sunk after %d guess(es)", self.guesses)
            return GuessResult(Outcome.ALL_SUNK, row, col, category=cell.occupant, remaining=0)
        return GuessResult(Outcome.HIT, row, col, category=cell.occupant, remaining=self.total_hits)


def resolve_guess(session: GameSession, row: int, col: int) -> GuessResult:
    """Module-level shorthand for ``session.resolve_guess(row, col)``."""
    return session.resolve_guess(row, col)
