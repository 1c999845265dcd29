"""Central configuration for runtime-tunable parameters.

Gameplay constants (board sizes, fleet policy, markers) are fixed. The few
knobs that are useful while developing or scripting a game can be overridden
via environment variables; the CLI flags in ``salvo.cli`` take precedence.
"""

from __future__ import annotations

import os


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# SALVO_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (disabled).
#   Example: export SALVO_DEBUG=1
DEBUG: bool = os.getenv("SALVO_DEBUG", "0") == "1"

# SALVO_REVEAL: If "1", the board is always printed with ship positions shown.
#   Development aid only, never meant for normal play.
#   Example: export SALVO_REVEAL=1
REVEAL: bool = os.getenv("SALVO_REVEAL", "0") == "1"


# ===========================================================================
# Randomness
# ===========================================================================
# SALVO_SEED: Integer seed for ship placement. Unset means a fresh random
#   layout every game.
#   Example: export SALVO_SEED=1234
SEED: int | None = _optional_int("SALVO_SEED")

# SALVO_MAX_PLACEMENT_ATTEMPTS: Random draws allowed per ship before placement
#   gives up with PlacementError. "0" removes the cap.
#   Defaults to 10000, far above what the supported fleets ever need.
MAX_PLACEMENT_ATTEMPTS: int | None = int(os.getenv("SALVO_MAX_PLACEMENT_ATTEMPTS", "10000")) or None


# ===========================================================================
# Game Constants
# ===========================================================================
# Board sides offered by the size menu, in menu order.
BOARD_SIZES: tuple[int, ...] = (4, 5, 6)

# Occupant tag for water.
EMPTY = "empty"

# Ship categories and their lengths.
LARGE = "large"
SMALL = "small"
SHIP_SIZES = {
    LARGE: 3,
    SMALL: 2,
}

# Fleet per board side: categories placed in this order.
FLEETS = {
    4: (LARGE, SMALL),
    5: (LARGE, SMALL, SMALL),
    6: (LARGE, LARGE, SMALL, SMALL),
}


# ===========================================================================
# Rendering
# ===========================================================================
HIDDEN_MARKER = "-"
MISS_MARKER = "·"
SHIP_MARKERS = {
    LARGE: "🔵",
    SMALL: "🟠",
}
