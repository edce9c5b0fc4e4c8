"""
Type definitions for the draughts rules engine.

This module provides:
- Immutable value types for positions, pieces and moves
- The turn-level move catalogue (MoveSet)
- The authoritative GameState snapshot consumed by the reducer and the UI
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Union

from draughts.rules import BOARD_SIZE, DRAW, Color, GameMode

# Basic type aliases
PositionKey = str  # "x:y"
Winner = Union[Color, str]  # a Color or DRAW


@dataclass(frozen=True)
class Position:
    """A board coordinate; x is the column, y the row."""
    x: int
    y: int


@dataclass(frozen=True)
class Piece:
    """
    One checker standing on the board.

    Pieces are value objects: moving or crowning a piece produces a new
    instance, so the (x, y) fields always match the cell holding it.
    """
    x: int
    y: int
    color: Color
    is_king: bool = False

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


Board = List[List[Optional[Piece]]]  # indexed board[y][x]


@dataclass(frozen=True)
class Step:
    from_: Position
    to: Position


@dataclass(frozen=True)
class Capture:
    from_: Position
    over: Position
    to: Position


Steps = List[Step]
Captures = List[Capture]


@dataclass
class MoveSet:
    """Legal moves for the side to move, grouped by the moving piece's key."""
    steps: Dict[PositionKey, Steps] = field(default_factory=dict)
    captures: Dict[PositionKey, Captures] = field(default_factory=dict)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of applying a step or capture to a board."""
    new_board: Board
    destination: Position
    captured: Optional[Position] = None


@dataclass(frozen=True)
class PlayerStats:
    moves: int = 0
    captures: int = 0


Stats = Dict[Color, PlayerStats]


@dataclass(frozen=True)
class InteractivityState:
    """Keys of the current player's pieces that may or may not be picked up."""
    selectable: FrozenSet[PositionKey]
    disabled: FrozenSet[PositionKey]


@dataclass(frozen=True)
class AiMove:
    piece: Position
    target: Position


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a game in progress.

    Every accepted command produces a new GameState; nothing here is
    mutated in place.
    """
    board: Board
    current_player: Color
    stats: Stats
    selected_piece: Optional[Piece] = None
    forced_capture_key: Optional[PositionKey] = None
    winner: Optional[Winner] = None
    mode: Optional[GameMode] = None

    def __post_init__(self) -> None:
        """Validate the game state after initialization."""
        if len(self.board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.board):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        if not isinstance(self.current_player, Color):
            raise ValueError("Current player must be a Color")
        if self.winner is not None and self.winner != DRAW and not isinstance(self.winner, Color):
            raise ValueError(f"Winner must be a Color or {DRAW!r}")


def create_stats() -> Stats:
    """Create zeroed statistics for both players."""
    return {Color.DARK: PlayerStats(), Color.LIGHT: PlayerStats()}
