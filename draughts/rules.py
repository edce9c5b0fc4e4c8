from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from draughts.types import Position

BOARD_SIZE: int = 8

Offset = Tuple[int, int]  # (dx, dy)


class Color(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class GameMode(str, Enum):
    PLAYER_VS_PLAYER = "player-vs-player"
    PLAYER_VS_COMPUTER = "player-vs-computer"


DRAW = "draw"

STARTING_PLAYER: Color = Color.DARK
AI_PLAYER_COLOR: Color = Color.LIGHT

# Kings move along all four diagonals
KING_OFFSETS: Tuple[Offset, ...] = ((-1, 1), (1, 1), (-1, -1), (1, -1))

# Men only move toward the opponent's back row
FORWARD_OFFSETS: Dict[Color, Tuple[Offset, ...]] = {
    Color.LIGHT: ((-1, 1), (1, 1)),
    Color.DARK: ((-1, -1), (1, -1)),
}

# Row a man of each color must reach to be crowned
PROMOTION_ROW: Dict[Color, int] = {
    Color.LIGHT: BOARD_SIZE - 1,
    Color.DARK: 0,
}

_STARTING_ROWS: Dict[Color, range] = {
    Color.LIGHT: range(0, 3),
    Color.DARK: range(BOARD_SIZE - 3, BOARD_SIZE),
}


def offsets_for_kind(color: Color, is_king: bool) -> Tuple[Offset, ...]:
    """Movement directions available to a piece of the given color and rank."""
    return KING_OFFSETS if is_king else FORWARD_OFFSETS[color]


def is_dark_square(pos: Position) -> bool:
    """Pieces only ever stand on squares with even coordinate parity."""
    return (pos.x + pos.y) % 2 == 0


def is_starting_square_for(color: Color, pos: Position) -> bool:
    return is_dark_square(pos) and pos.y in _STARTING_ROWS[color]


def opponent_of(color: Color) -> Color:
    return Color.DARK if color == Color.LIGHT else Color.LIGHT


get_next_player = opponent_of
