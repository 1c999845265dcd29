import sys
import logging
from pathlib import Path
from typing import Callable, Iterable

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from salvo.battleship import Board, ShipSpec, HORIZONTAL  # noqa: E402
from salvo.session import GameSession  # noqa: E402

# Suppress INFO & DEBUG logs during tests
logging.basicConfig(level=logging.WARNING)


class ScriptedConsole:
    """Feeds canned input lines and records everything shown to the player."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def recv(self, prompt: str = "") -> str:
        """Stand-in for input(); raises EOFError once the script runs out."""
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def notify(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def console() -> Callable[..., ScriptedConsole]:
    """Factory returning a ScriptedConsole for the given input lines."""

    def _factory(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(lines)

    return _factory


@pytest.fixture
def scenario_session() -> GameSession:
    """4x4 board: large ship on A1-A3, small ship on C2-C3."""
    board = Board(4)
    ships = [ShipSpec(3, "large"), ShipSpec(2, "small")]
    board.place(0, 0, 3, HORIZONTAL, "large")
    board.place(2, 1, 2, HORIZONTAL, "small")
    return GameSession(board, ships)
