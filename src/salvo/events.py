"""Lightweight outcome model returned by GameSession for every guess.

Keeping the result strongly typed lets the console layer decide how to word
each outcome, and lets tests assert on results without parsing printed text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Outcome(Enum):
    """What a single guess did to the board."""

    ALREADY_GUESSED = auto()  # cell was hit before, nothing changed
    MISS = auto()  # empty water
    HIT = auto()  # ship cell, ships remain
    ALL_SUNK = auto()  # ship cell, and it was the last one


@dataclass(frozen=True, slots=True)
class GuessResult:
    """Immutable result of resolving one guess."""

    outcome: Outcome
    row: int
    col: int
    category: str | None = None  # set for HIT and ALL_SUNK
    remaining: int = 0  # ship cells still afloat after this guess

    @property
    def is_hit(self) -> bool:
        return self.outcome in (Outcome.HIT, Outcome.ALL_SUNK)
