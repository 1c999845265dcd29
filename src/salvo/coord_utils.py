import re
from typing import Tuple

# One row letter followed by a 1-3 digit, 1-based column number, e.g. "B3" or "c12"
COORD_RE = re.compile(r"^([A-Z])([0-9]{1,3})$")


class InvalidCoordinate(ValueError):
    """Raised when a guess does not name a cell on the current board."""


def coord_to_rowcol(coord: str) -> Tuple[int, int]:
    """
    Convert a coordinate like 'A1' to a zero-based (row, col) tuple.

    Raises InvalidCoordinate when the text is not a letter followed by digits.
    Bounds are not checked here, see parse_guess().
    """
    text = coord.strip().upper()
    match = COORD_RE.match(text)
    if not match:
        raise InvalidCoordinate(f"Invalid coordinate: {coord!r}")
    row = ord(match.group(1)) - ord("A")
    col = int(match.group(2)) - 1
    return row, col


def in_bounds(row: int, col: int, size: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def parse_guess(coord: str, size: int) -> Tuple[int, int]:
    """Parse *coord* and check it lies on a *size*×*size* board."""
    row, col = coord_to_rowcol(coord)
    if not in_bounds(row, col, size):
        raise InvalidCoordinate(f"{coord.strip().upper()} is off the {size}x{size} board")
    return row, col


def format_coord(row: int, col: int) -> str:
    """
    Convert zero-based (row, col) to coordinate string like 'A1'.
    """
    return f"{chr(ord('A') + row)}{col + 1}"
