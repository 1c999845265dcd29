"""
battleship.py

Core board model and ship placement for Salvo:
 - Cell / ShipSpec records and the create_grid() factory
 - Board class that places ships without overlap and keeps track of them
 - fleet_for_size() / validate_fleet() for the fixed per-size fleet policy

Guess resolution lives in ``salvo.session`` so that the board itself only
knows about cells, never about game progress.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from . import config as _cfg

logger = logging.getLogger(__name__)

HORIZONTAL = 0
VERTICAL = 1


class ConfigurationError(ValueError):
    """Raised when a fleet can never fit on the requested board."""


class PlacementError(RuntimeError):
    """Raised when a ship could not be placed within the attempt cap."""


@dataclass(slots=True)
class Cell:
    occupant: str = _cfg.EMPTY
    hit: bool = False

    @property
    def empty(self) -> bool:
        return self.occupant == _cfg.EMPTY


@dataclass(frozen=True)
class ShipSpec:
    """Template for a ship still to be placed: its length and category."""

    size: int
    category: str

    @classmethod
    def of(cls, category: str) -> "ShipSpec":
        return cls(_cfg.SHIP_SIZES[category], category)


@dataclass(frozen=True)
class PlacedShip:
    category: str
    cells: frozenset[tuple[int, int]] = field(default_factory=frozenset)


def create_grid(size: int) -> list[list[Cell]]:
    """Return a *size*×*size* grid of empty, un-hit cells."""
    return [[Cell() for _ in range(size)] for _ in range(size)]


def fleet_for_size(size: int) -> list[ShipSpec]:
    """Return the fixed fleet for a board of side *size*."""
    try:
        categories = _cfg.FLEETS[size]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported board size {size}; choose one of {', '.join(map(str, _cfg.BOARD_SIZES))}"
        ) from None
    return [ShipSpec.of(category) for category in categories]


def validate_fleet(size: int, ships: Sequence[ShipSpec]) -> None:
    """Fail fast if *ships* can never all be placed on a *size*×*size* board."""
    for ship in ships:
        if ship.size <= 0:
            raise ConfigurationError(f"Ship size must be positive, got {ship.size}")
        if ship.size > size:
            raise ConfigurationError(f"A {ship.size}-cell {ship.category} ship cannot fit on a {size}x{size} board")
    total = sum(ship.size for ship in ships)
    if total > size * size:
        raise ConfigurationError(f"Fleet needs {total} cells but a {size}x{size} board only has {size * size}")


def ship_cells(row: int, col: int, size: int, orientation: int) -> list[tuple[int, int]]:
    """Coordinates covered by a ship of *size* starting at (*row*,*col*)."""
    if orientation == HORIZONTAL:
        return [(row, c) for c in range(col, col + size)]
    return [(r, col) for r in range(row, row + size)]


class Board:
    """
    A square grid of cells with hidden ships.

    We store:
      - self.grid: rows of Cell objects (occupant tag + hit flag)
      - self.placed_ships: one PlacedShip per ship, with the coordinates it covers
    """

    def __init__(self, size: int):
        """Initialise an empty *size*×*size* board with no ships placed."""
        self.size = size
        self.grid = create_grid(size)
        self.placed_ships: list[PlacedShip] = []

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        row, col = pos
        return self.grid[row][col]

    def cells(self) -> Iterable[tuple[int, int, Cell]]:
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                yield r, c, cell

    def can_place(self, row, col, ship_size, orientation):
        """Return `True` if a ship of *ship_size* fits on empty water at (*row*,*col*)."""
        if row < 0 or col < 0:
            return False
        if orientation == HORIZONTAL:
            if col + ship_size > self.size:
                return False
        else:
            if row + ship_size > self.size:
                return False
        return all(self.grid[r][c].empty for r, c in ship_cells(row, col, ship_size, orientation))

    def place(self, row, col, ship_size, orientation, category):
        """Write a ship into the grid and return the occupied set.

        The caller must have checked can_place() first; nothing is re-validated here.
        """
        occupied = set()
        for r, c in ship_cells(row, col, ship_size, orientation):
            self.grid[r][c] = Cell(category, False)
            occupied.add((r, c))
        self.placed_ships.append(PlacedShip(category, frozenset(occupied)))
        return occupied

    def place_all(
        self,
        ships: Sequence[ShipSpec],
        rng: random.Random | None = None,
        max_attempts: int | None = None,
    ) -> None:
        """Randomly position *ships*, in order, without collisions.

        Each attempt draws an orientation and a start cell uniformly. With
        *max_attempts* set, a ship that is still unplaced after that many draws
        raises PlacementError.
        """
        validate_fleet(self.size, ships)
        rand = rng if rng is not None else random
        for ship in ships:
            attempts = 0
            while True:
                if max_attempts is not None and attempts >= max_attempts:
                    raise PlacementError(
                        f"Could not place {ship.size}-cell {ship.category} ship after {attempts} attempts"
                    )
                attempts += 1
                orientation = rand.randint(0, 1)
                row = rand.randint(0, self.size - 1)
                col = rand.randint(0, self.size - 1)
                if self.can_place(row, col, ship.size, orientation):
                    self.place(row, col, ship.size, orientation, ship.category)
                    break
            logger.debug(
                "Placed %s ship at (%d,%d) %s after %d attempt(s)",
                ship.category,
                row,
                col,
                "H" if orientation == HORIZONTAL else "V",
                attempts,
            )

    def ship_cell_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if not cell.empty)

    def remaining_ship_cells(self) -> int:
        return sum(1 for _, _, cell in self.cells() if not cell.empty and not cell.hit)
