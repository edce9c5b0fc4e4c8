"""
Move engine: selection rules, move application and game-end detection.

Generation of raw steps and captures lives in ``draughts.moves`` and is
re-exported here, so the UI layer can import every query it needs via
``from draughts.engine import ...``.
"""
from __future__ import annotations

from dataclasses import replace
from typing import AbstractSet, Dict, FrozenSet, Optional

from draughts.moves import (
    has_any_move,
    has_captures,
    is_valid_landing_spot,
    legal_captures_per_piece,
    legal_steps_per_piece,
    select_all_moves_for,
    select_all_moves_per_turn,
)
from draughts.rules import DRAW, PROMOTION_ROW, Color, get_next_player, opponent_of
from draughts.types import (
    Board,
    GameState,
    InteractivityState,
    MoveResult,
    MoveSet,
    Piece,
    PlayerStats,
    Position,
    PositionKey,
    Stats,
    Winner,
)
from draughts.utils import clone_board, equals, position_key

__all__ = [
    "is_valid_landing_spot",
    "legal_steps_per_piece",
    "legal_captures_per_piece",
    "select_all_moves_per_turn",
    "select_all_moves_for",
    "has_captures",
    "has_any_move",
    "select_interactivity_state",
    "select_move_targets_for",
    "is_in_move_targets",
    "promote_to_king",
    "apply_simple_move",
    "apply_capture_move",
    "increment_stats_for",
    "count_pieces",
    "evaluate_winner",
    "opponent_of",
    "get_next_player",
]


# ============================
# Selection rules
# ============================
def select_interactivity_state(state: GameState) -> InteractivityState:
    """Split the current player's pieces into selectable and disabled keys.

    A capture chain in progress pins selection to the forced piece. Otherwise
    the mandatory-capture rule applies board-wide: while any capture exists
    only capturing pieces are selectable, else only pieces with a step.
    """
    moves = select_all_moves_per_turn(state)
    must_capture = has_captures(moves)
    forced_key = state.forced_capture_key
    forced = forced_key is not None and forced_key in moves.captures

    selectable = set()
    disabled = set()
    for row in state.board:
        for piece in row:
            if piece is None or piece.color != state.current_player:
                continue
            key = position_key(piece.position)
            if forced:
                allowed = key == forced_key
            elif must_capture:
                allowed = key in moves.captures
            else:
                allowed = key in moves.steps
            (selectable if allowed else disabled).add(key)

    return InteractivityState(selectable=frozenset(selectable), disabled=frozenset(disabled))


def select_move_targets_for(selected: Piece, moves: MoveSet) -> FrozenSet[PositionKey]:
    """Destination keys the selected piece may move to right now."""
    key = position_key(selected.position)
    if has_captures(moves):
        return frozenset(position_key(c.to) for c in moves.captures.get(key, []))
    return frozenset(position_key(s.to) for s in moves.steps.get(key, []))


def is_in_move_targets(targets: Optional[AbstractSet[PositionKey]], target: Position) -> bool:
    return targets is not None and position_key(target) in targets


# ============================
# Applying moves
# ============================
def promote_to_king(piece: Piece) -> bool:
    """True when the piece is, or should now become, a king."""
    return piece.is_king or piece.y == PROMOTION_ROW[piece.color]


def _relocate(piece: Piece, to: Position) -> Piece:
    moved = replace(piece, x=to.x, y=to.y)
    if promote_to_king(moved):
        moved = replace(moved, is_king=True)
    return moved


def apply_simple_move(board: Board, moves: MoveSet, selected: Piece,
                      target: Position) -> Optional[MoveResult]:
    """Move ``selected`` one step to ``target``; None if that step is not legal."""
    key = position_key(selected.position)
    step = next((s for s in moves.steps.get(key, []) if equals(s.to, target)), None)
    if step is None:
        return None

    new_board = clone_board(board)
    new_board[step.to.y][step.to.x] = _relocate(selected, step.to)
    new_board[selected.y][selected.x] = None
    return MoveResult(new_board=new_board, destination=step.to)


def apply_capture_move(board: Board, moves: MoveSet, selected: Piece,
                       target: Position) -> Optional[MoveResult]:
    """Jump ``selected`` to ``target`` removing the jumped piece; None if not legal."""
    key = position_key(selected.position)
    capture = next((c for c in moves.captures.get(key, []) if equals(c.to, target)), None)
    if capture is None:
        return None

    new_board = clone_board(board)
    new_board[capture.to.y][capture.to.x] = _relocate(selected, capture.to)
    new_board[selected.y][selected.x] = None
    new_board[capture.over.y][capture.over.x] = None
    return MoveResult(new_board=new_board, destination=capture.to, captured=capture.over)


# ============================
# Stats and game end
# ============================
def increment_stats_for(stats: Stats, color: Color, moves: int = 0, captures: int = 0) -> Stats:
    """Return new stats with ``color``'s counters bumped; the other entry is shared."""
    current = stats[color]
    updated = dict(stats)
    updated[color] = PlayerStats(
        moves=current.moves + moves,
        captures=current.captures + captures,
    )
    return updated


def count_pieces(board: Board) -> Dict[Color, int]:
    counts = {Color.DARK: 0, Color.LIGHT: 0}
    for row in board:
        for piece in row:
            if piece is not None:
                counts[piece.color] += 1
    return counts


def evaluate_winner(state: GameState) -> Optional[Winner]:
    """Decide the game from material and mobility of both sides.

    Mobility is checked for both colors regardless of whose turn it is.
    """
    counts = count_pieces(state.board)
    dark_has_pieces = counts[Color.DARK] > 0
    light_has_pieces = counts[Color.LIGHT] > 0

    if not dark_has_pieces and not light_has_pieces:
        return DRAW
    if not dark_has_pieces:
        return Color.LIGHT
    if not light_has_pieces:
        return Color.DARK

    dark_can_move = has_any_move(select_all_moves_for(state, Color.DARK))
    light_can_move = has_any_move(select_all_moves_for(state, Color.LIGHT))

    if not dark_can_move and not light_can_move:
        return DRAW
    if not dark_can_move:
        return Color.LIGHT
    if not light_can_move:
        return Color.DARK
    return None
