"""Unit tests for the board model and random ship placement."""

from __future__ import annotations

import random

import pytest

from salvo.battleship import (
    HORIZONTAL,
    VERTICAL,
    Board,
    Cell,
    ConfigurationError,
    PlacementError,
    ShipSpec,
    create_grid,
    fleet_for_size,
    validate_fleet,
)


def test_create_grid_starts_empty() -> None:
    grid = create_grid(5)
    assert len(grid) == 5
    assert all(len(row) == 5 for row in grid)
    assert all(cell == Cell("empty", False) for row in grid for cell in row)


def test_grid_rows_are_independent() -> None:
    grid = create_grid(4)
    grid[0][0].hit = True
    assert not grid[1][0].hit


@pytest.mark.parametrize(
    "size, expected",
    [
        (4, [3, 2]),
        (5, [3, 2, 2]),
        (6, [3, 3, 2, 2]),
    ],
)
def test_fleet_for_size(size: int, expected: list[int]) -> None:
    fleet = fleet_for_size(size)
    assert [ship.size for ship in fleet] == expected
    assert all(ship.category == ("large" if ship.size == 3 else "small") for ship in fleet)


def test_fleet_for_unsupported_size() -> None:
    with pytest.raises(ConfigurationError):
        fleet_for_size(7)


def test_validate_fleet_rejects_too_many_cells() -> None:
    ships = [ShipSpec(2, "small")] * 3  # 6 cells on a 2x2 board
    with pytest.raises(ConfigurationError):
        validate_fleet(2, ships)


def test_validate_fleet_rejects_ship_longer_than_board() -> None:
    with pytest.raises(ConfigurationError):
        validate_fleet(2, [ShipSpec(3, "large")])


def test_validate_fleet_rejects_non_positive_size() -> None:
    with pytest.raises(ConfigurationError):
        validate_fleet(4, [ShipSpec(0, "small")])


def test_place_all_fails_fast_on_oversized_fleet() -> None:
    class ExplodingRng:
        def randint(self, a, b):  # pragma: no cover - must never be reached
            raise AssertionError("placement sampled before validating the fleet")

    board = Board(4)
    with pytest.raises(ConfigurationError):
        board.place_all([ShipSpec(3, "large")] * 6, rng=ExplodingRng())
    assert board.ship_cell_count() == 0


@pytest.mark.parametrize("size", [4, 5, 6])
@pytest.mark.parametrize("seed", range(25))
def test_place_all_places_whole_fleet(size: int, seed: int) -> None:
    fleet = fleet_for_size(size)
    board = Board(size)
    board.place_all(fleet, rng=random.Random(seed))

    assert board.ship_cell_count() == sum(ship.size for ship in fleet)
    assert len(board.placed_ships) == len(fleet)

    seen: set[tuple[int, int]] = set()
    for wanted, ship in zip(fleet, board.placed_ships):
        assert ship.category == wanted.category
        assert len(ship.cells) == wanted.size
        assert not (seen & ship.cells), "ships overlap"
        seen |= ship.cells

        rows = {r for r, _ in ship.cells}
        cols = {c for _, c in ship.cells}
        # one straight, contiguous line
        assert len(rows) == 1 or len(cols) == 1
        line = sorted(cols) if len(rows) == 1 else sorted(rows)
        assert line == list(range(line[0], line[0] + wanted.size))
        assert all(0 <= r < size and 0 <= c < size for r, c in ship.cells)
        assert all(board[r, c].occupant == wanted.category for r, c in ship.cells)


def test_place_all_is_deterministic_for_a_seed() -> None:
    a, b = Board(6), Board(6)
    a.place_all(fleet_for_size(6), rng=random.Random(42))
    b.place_all(fleet_for_size(6), rng=random.Random(42))
    assert a.placed_ships == b.placed_ships


def test_place_all_gives_up_after_attempt_cap() -> None:
    board = Board(3)
    # One blocker in every row and column: the fleet fits by cell count,
    # but no 3-cell line is free anywhere.
    for r, c in [(0, 1), (1, 0), (1, 2), (2, 1)]:
        board.place(r, c, 1, HORIZONTAL, "small")
    with pytest.raises(PlacementError):
        board.place_all([ShipSpec(3, "large")], rng=random.Random(0), max_attempts=50)


def test_place_writes_cells_and_records_ship() -> None:
    board = Board(5)
    occupied = board.place(1, 2, 3, VERTICAL, "large")
    assert occupied == {(1, 2), (2, 2), (3, 2)}
    assert all(board[r, c] == Cell("large", False) for r, c in occupied)
    assert board.placed_ships[0].cells == frozenset(occupied)
    assert board.remaining_ship_cells() == 3


def test_place_all_uses_both_orientations() -> None:
    orientations = set()
    for seed in range(40):
        board = Board(6)
        board.place_all([ShipSpec(3, "large")], rng=random.Random(seed))
        (ship,) = board.placed_ships
        rows = {r for r, _ in ship.cells}
        orientations.add(HORIZONTAL if len(rows) == 1 else VERTICAL)
    assert orientations == {HORIZONTAL, VERTICAL}
