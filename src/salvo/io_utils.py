# io_utils.py
"""
Console helpers shared by the game loop
–––––––––––––––––––––––––––––––––––––––
• grid_rows()         – Board → rows of cell markers (ships optionally revealed)
• render_board()      – Board → printable lines with row letters / column numbers
• print_board()       – render_board() through a notify callback
• read_guess()        – prompt until a valid command is typed
• select_board_size() – board-size menu, returns 4/5/6 or None on cancel
• describe()          – GuessResult → message shown to the player
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from . import config as _cfg
from .battleship import Board
from .commands import Command, CommandParseError, parse_command
from .coord_utils import InvalidCoordinate
from .events import GuessResult, Outcome

logger = logging.getLogger(__name__)

RecvFn = Callable[[str], str]
NotifyFn = Callable[[str], None]

WELCOME = "Welcome to Battleship 🚢"
GUESS_PROMPT = "Enter a guess (e.g., A1, B2): "
INVALID_GUESS = "Invalid guess, try again."
SIZE_PROMPT = "Which board size?"

VICTORY_BANNER = r"""
========
__   _______ _   _   _    _ _____ _   _
\ \ / /  _  | | | | | |  | |_   _| \ | |
 \ V /| | | | | | | | |  | | | | |  \| |
  \ / | | | | | | | | |/\| | | | | . ' |
  | | \ \_/ / |_| | \  /\  /_| |_| |\  |
  \_/  \___/ \___/   \/  \/ \___/\_| \_|
========"""

_WIDE_MARKERS = set(_cfg.SHIP_MARKERS.values())


def _marker(board: Board, row: int, col: int, reveal: bool) -> str:
    cell = board[row, col]
    if not cell.empty and (cell.hit or reveal):
        return _cfg.SHIP_MARKERS[cell.occupant]
    if cell.empty and cell.hit:
        return _cfg.MISS_MARKER
    return _cfg.HIDDEN_MARKER


def grid_rows(board: Board, *, reveal: bool = False) -> List[List[str]]:
    logger.debug("grid_rows() start – reveal=%s", reveal)
    return [[_marker(board, r, c, reveal) for c in range(board.size)] for r in range(board.size)]


def _pad(marker: str) -> str:
    # emoji markers already take two terminal columns
    return marker if marker in _WIDE_MARKERS else marker.rjust(2)


def render_board(board: Board, *, reveal: bool = False) -> List[str]:
    """Return the board as text lines: a numeric header, then one line per row."""
    lines = ["   " + " ".join(f"{i:>2}" for i in range(1, board.size + 1))]
    for idx, cells in enumerate(grid_rows(board, reveal=reveal)):
        label = chr(ord("A") + idx)
        lines.append(f"{label:2} " + " ".join(_pad(m) for m in cells))
    return lines


def print_board(board: Board, notify: NotifyFn = print, *, reveal: bool = False) -> None:
    notify("\n".join(render_board(board, reveal=reveal)))


def read_guess(size: int, recv_fn: RecvFn = input, notify: NotifyFn = print) -> Command:
    """Prompt until the player types a valid command for a *size*×*size* board.

    EOFError from *recv_fn* propagates so the caller can shut down.
    """
    while True:
        line = recv_fn(GUESS_PROMPT)
        try:
            return parse_command(line, size)
        except (InvalidCoordinate, CommandParseError) as e:
            logger.debug("read_guess() rejected %r – %s", line, e)
            notify(INVALID_GUESS)


def board_size_menu() -> str:
    options = [f"[{i}] {size}x{size}" for i, size in enumerate(_cfg.BOARD_SIZES, start=1)]
    return "\n".join(options + ["[0] CANCEL"])


def select_board_size(recv_fn: RecvFn = input, notify: NotifyFn = print) -> Optional[int]:
    """Offer the board sizes and return the chosen side, or None on cancel."""
    choices = [str(i) for i in range(1, len(_cfg.BOARD_SIZES) + 1)]
    prompt = f"{SIZE_PROMPT} [{', '.join(choices)}, 0]: "
    notify(board_size_menu())
    while True:
        answer = recv_fn(prompt).strip()
        if answer == "0":
            return None
        if answer in choices:
            return _cfg.BOARD_SIZES[int(answer) - 1]
        notify(f"[{answer}] is invalid")


def describe(result: GuessResult) -> str:
    """Return the player-facing message for *result*."""
    if result.outcome is Outcome.ALREADY_GUESSED:
        return "You already guessed that spot!"
    if result.outcome is Outcome.MISS:
        return "Miss!"
    return f"You hit a {result.category} ship!"
