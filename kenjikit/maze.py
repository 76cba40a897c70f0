"""The Pac-Man maze, its constants, movement directions and key bindings."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum

SCREEN_WIDTH = 660
SCREEN_HEIGHT = 660
GRID_ROWS = 31
GRID_COLS = 28
FPS_LIMIT = 10

RICE_TO_WIN = 298
"""Once this much rice has been eaten, a new round starts."""

AUTHORIZED_KEYS = (
    "HAUTJ1",
    "BASJ1",
    "GAUCHEJ1",
    "DROITEJ1",
    "HAUTJ2",
    "BASJ2",
    "GAUCHEJ2",
    "DROITEJ2",
)

GameMap = list[list[int]]

_REFERENCE_ROWS = (
    "0000000000000000000000000000",
    "0111111111111001111111111110",
    "0100001000001001000001000010",
    "0100001000001001000001000010",
    "0100001000001001000001000010",
    "0111111111111111111111111110",
    "0100001001000000001001000010",
    "0100001001000000001001000010",
    "0111111001111001111001111110",
    "0000001000001001000001000000",
    "0000001000001001000001000000",
    "0000001001111111111001000000",
    "0000001001000000001001000000",
    "0000001001033333301001000000",
    "3111111111033333301111111113",
    "0000001001033333301001000000",
    "0000001001000000001001000000",
    "0000001001111111111001000000",
    "0000001001000000001001000000",
    "0000001001000000001001000000",
    "0111111111111001111111111110",
    "0100001000001001000001000010",
    "0100001000001001000001000010",
    "0111001111111111111111001110",
    "0001001001000000001001001000",
    "0001001001000000001001001000",
    "0111111001111001111001111110",
    "0100000000001001000000000010",
    "0100000000001001000000000010",
    "0111111111111111111111111110",
    "0000000000000000000000000000",
)

_BONUS = 6
_BONUS_CELLS = ((1, 23), (29, 4))


class MoveDirection(IntEnum):
    """Directions a player can move in."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class KeyParams:
    """Key bindings, keyed by the authorized action names."""

    def __init__(self, bindings: Mapping[str, str] | None = None) -> None:
        self._bindings: dict[str, str] = {}
        for name, key in (bindings or {}).items():
            self[name] = key

    def __getitem__(self, name: str) -> str:
        if name not in AUTHORIZED_KEYS:
            raise KeyError(name)
        return self._bindings[name]

    def __setitem__(self, name: str, key: str) -> None:
        if name not in AUTHORIZED_KEYS:
            raise KeyError(name)
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"a key binding must be one character, got {key!r}")
        self._bindings[name] = key


def reference_map() -> GameMap:
    """Return a fresh copy of the maze with no bonus cells."""
    return [[int(cell) for cell in row] for row in _REFERENCE_ROWS]


def initial_map() -> GameMap:
    """Return a fresh copy of the maze as a round starts, bonus cells included."""
    game_map = reference_map()
    for row, col in _BONUS_CELLS:
        game_map[row][col] = _BONUS
    return game_map


def count_cells(game_map: GameMap, value: int) -> int:
    """Return how many cells of ``game_map`` hold ``value``."""
    return sum(row.count(value) for row in game_map)


def frame_delay(elapsed: float) -> float:
    """Return the seconds to wait so a frame that took ``elapsed`` seconds
    keeps to the frame-rate limit; never negative."""
    remaining_ms = 1000 // FPS_LIMIT - int(elapsed * 1000)
    return max(0, remaining_ms) / 1000