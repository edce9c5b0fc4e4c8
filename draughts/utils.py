from __future__ import annotations

import random
from typing import Optional, Sequence, Tuple, TypeVar

from draughts.rules import BOARD_SIZE, Color, Offset, is_starting_square_for, offsets_for_kind
from draughts.types import Board, Piece, Position, PositionKey

T = TypeVar("T")

KEY_SEPARATOR: str = ":"


# ============================
# Board lookup and geometry
# ============================
def is_move_in_bounds(board_size: int, at: Position) -> bool:
    return 0 <= at.x < board_size and 0 <= at.y < board_size


def get_piece(board: Board, at: Position) -> Optional[Piece]:
    """Return the piece at a square, or None for empty or off-board squares."""
    if not is_move_in_bounds(len(board), at):
        return None
    return board[at.y][at.x]


def offsets_for(piece: Piece) -> Tuple[Offset, ...]:
    return offsets_for_kind(piece.color, piece.is_king)


def equals(a: Position, b: Position) -> bool:
    return a.x == b.x and a.y == b.y


def clone_board(board: Board) -> Board:
    """Copy the row lists; pieces are immutable so cells are shared."""
    return [list(row) for row in board]


def create_empty_board() -> Board:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def initial_board() -> Board:
    """Initial position: light on rows 0..2, dark on rows 5..7."""
    board = create_empty_board()
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            square = Position(x, y)
            for color in (Color.DARK, Color.LIGHT):
                if is_starting_square_for(color, square):
                    board[y][x] = Piece(x, y, color)
    return board


# ============================
# Position keys
# ============================
def position_key(at: Position) -> PositionKey:
    return f"{at.x}{KEY_SEPARATOR}{at.y}"


def parse_position_key(key: PositionKey) -> Position:
    """Inverse of position_key; raises ValueError on malformed keys."""
    parts = key.split(KEY_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(f"Malformed position key: {key!r}")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Malformed position key: {key!r}") from None
    return Position(x, y)


# ============================
# Randomness
# ============================
def select_random(items: Sequence[T], rng: Optional[random.Random] = None) -> Optional[T]:
    """Pick a uniformly random element, or None when there is nothing to pick."""
    if not items:
        return None
    return (rng or random).choice(items)
