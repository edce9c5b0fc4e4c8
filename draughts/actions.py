"""
Commands accepted by the game reducer.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from draughts.rules import GameMode
from draughts.types import Position


class GameActionType(str, Enum):
    SELECT_PIECE = "SELECT_PIECE"
    DESELECT_PIECE = "DESELECT_PIECE"
    APPLY_MOVE = "APPLY_MOVE"
    SET_MODE = "SET_MODE"
    NEW_GAME = "NEW_GAME"


@dataclass(frozen=True)
class GameAction:
    type: GameActionType
    payload: Optional[Union[Position, GameMode]] = None


def select_piece(position: Position) -> GameAction:
    return GameAction(GameActionType.SELECT_PIECE, position)


def deselect_piece(position: Position) -> GameAction:
    return GameAction(GameActionType.DESELECT_PIECE, position)


def apply_move(position: Position) -> GameAction:
    return GameAction(GameActionType.APPLY_MOVE, position)


def set_mode(mode: GameMode) -> GameAction:
    return GameAction(GameActionType.SET_MODE, mode)


def new_game() -> GameAction:
    return GameAction(GameActionType.NEW_GAME)
