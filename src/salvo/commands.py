from dataclasses import dataclass
from typing import Union

from .coord_utils import parse_guess


class CommandParseError(ValueError):
    """Raised when a line cannot be parsed as a valid command."""


@dataclass(frozen=True)
class GuessCommand:
    row: int
    col: int


@dataclass(frozen=True)
class RevealCommand:
    pass


@dataclass(frozen=True)
class QuitCommand:
    pass


Command = Union[GuessCommand, RevealCommand, QuitCommand]


def parse_command(line: str, size: int) -> Command:
    """Parse one line of player input against a *size*×*size* board.

    Anything that is not a keyword is treated as a coordinate, so a bad
    coordinate surfaces as InvalidCoordinate from parse_guess().
    """
    if line is None:
        raise CommandParseError("No command to parse")
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty command")
    verb = raw.upper()
    if verb in {"QUIT", "EXIT"}:
        return QuitCommand()
    if verb == "REVEAL":
        return RevealCommand()
    row, col = parse_guess(raw, size)
    return GuessCommand(row=row, col=col)
