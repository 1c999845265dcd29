"""Top-level game loop: board-size selection, guessing, victory and restart.

The loop is an explicit state machine. Winning a game moves to ``WON`` and
then back to ``SELECTING``; nothing re-enters the loop recursively, so an
arbitrarily long run of games or invalid guesses keeps a flat call stack.
"""

from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import Optional

from . import config as _cfg
from .commands import QuitCommand, RevealCommand
from .events import Outcome
from .io_utils import (
    VICTORY_BANNER,
    WELCOME,
    NotifyFn,
    RecvFn,
    describe,
    print_board,
    read_guess,
    select_board_size,
)
from .session import GameSession

logger = logging.getLogger(__name__)


class GameState(Enum):
    SELECTING = auto()  # waiting for a board size
    PLAYING = auto()  # guessing on the current session
    WON = auto()  # all ships sunk, announce and restart
    EXITED = auto()  # cancel, quit or end of input


class Game:
    """Drive consecutive sessions over a line-based console."""

    def __init__(
        self,
        recv_fn: Optional[RecvFn] = None,
        notify: Optional[NotifyFn] = None,
        *,
        size: Optional[int] = None,
        rng: Optional[random.Random] = None,
        reveal: bool = _cfg.REVEAL,
        max_attempts: Optional[int] = _cfg.MAX_PLACEMENT_ATTEMPTS,
    ) -> None:
        """Create a game driver; nothing is read until run() is called.

        Args:
            recv_fn: prompt-and-read callable, ``input`` by default.
            notify: sink for player-facing text, ``print`` by default.
            size: fixed board side; when set the size menu is skipped.
            rng: random source for ship placement.
            reveal: always show ship positions (development only).
        """
        self.recv_fn = recv_fn if recv_fn is not None else input
        self.notify = notify if notify is not None else print
        self.size = size
        self.rng = rng
        self.reveal = reveal
        self.max_attempts = max_attempts
        self.state = GameState.SELECTING
        self.session: Optional[GameSession] = None
        self.wins = 0

    def _transition(self, state: GameState) -> None:
        logger.debug("state %s -> %s", self.state.name, state.name)
        self.state = state

    def run(self, max_games: Optional[int] = None) -> int:
        """Play until the player cancels, quits or input ends.

        With *max_games* set the loop also stops after that many wins.
        Returns the number of games won.
        """
        self.notify(WELCOME)
        while self.state is not GameState.EXITED:
            try:
                if self.state is GameState.SELECTING:
                    self._select()
                elif self.state is GameState.PLAYING:
                    self._play_turn()
                elif self.state is GameState.WON:
                    self._celebrate(max_games)
            except EOFError:
                logger.debug("input closed")
                self._transition(GameState.EXITED)
        return self.wins

    def _select(self) -> None:
        size = self.size if self.size is not None else select_board_size(self.recv_fn, self.notify)
        if size is None:
            self._transition(GameState.EXITED)
            return
        self.session = GameSession.new(size, rng=self.rng, max_attempts=self.max_attempts)
        self._transition(GameState.PLAYING)

    def _play_turn(self) -> None:
        session = self.session
        assert session is not None
        print_board(session.board, self.notify, reveal=self.reveal)
        cmd = read_guess(session.size, self.recv_fn, self.notify)
        if isinstance(cmd, QuitCommand):
            self._transition(GameState.EXITED)
            return
        if isinstance(cmd, RevealCommand):
            print_board(session.board, self.notify, reveal=True)
            return
        result = session.resolve_guess(cmd.row, cmd.col)
        self.notify(describe(result))
        if result.outcome is Outcome.ALL_SUNK:
            self._transition(GameState.WON)

    def _celebrate(self, max_games: Optional[int]) -> None:
        session = self.session
        assert session is not None
        self.notify("Congratulations! You have sunk all the ships!")
        self.notify(f"It took you {session.guesses} guesses.")
        print_board(session.board, self.notify)
        self.notify(VICTORY_BANNER)
        self.wins += 1
        self.session = None
        if max_games is not None and self.wins >= max_games:
            self._transition(GameState.EXITED)
        else:
            self._transition(GameState.SELECTING)
