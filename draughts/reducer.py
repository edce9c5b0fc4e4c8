"""
Game state reducer: ``new_state = game_reducer(state, action)``.

The reducer never mutates its input. Commands that are illegal or stale
return the very same ``state`` object, so callers can detect a no-op with
an identity check.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Optional

from draughts.actions import GameAction, GameActionType
from draughts.engine import (
    apply_capture_move,
    apply_simple_move,
    evaluate_winner,
    get_next_player,
    has_captures,
    increment_stats_for,
    is_in_move_targets,
    select_all_moves_per_turn,
    select_interactivity_state,
    select_move_targets_for,
)
from draughts.rules import STARTING_PLAYER, GameMode
from draughts.types import Board, GameState, MoveSet, Position, Stats, create_stats
from draughts.utils import equals, get_piece, initial_board, position_key

logger = logging.getLogger(__name__)


def create_initial_game_state(board: Optional[Board] = None, stats: Optional[Stats] = None,
                              **overrides: Any) -> GameState:
    """Fresh game in the standard starting layout; fields may be overridden for setups."""
    fields: Dict[str, Any] = {
        "current_player": STARTING_PLAYER,
        "selected_piece": None,
        "forced_capture_key": None,
        "winner": None,
        "mode": None,
    }
    fields.update(overrides)
    return GameState(
        board=board if board is not None else initial_board(),
        stats=stats if stats is not None else create_stats(),
        **fields,
    )


def _select_piece(state: GameState, at: Position) -> GameState:
    piece = get_piece(state.board, at)
    if piece is None or piece.color != state.current_player:
        return state
    if position_key(at) not in select_interactivity_state(state).selectable:
        return state
    return replace(state, selected_piece=piece)


def _deselect_piece(state: GameState, at: Position) -> GameState:
    selected = state.selected_piece
    if selected is None:
        return state
    # A capture chain cannot be abandoned half-way
    if state.forced_capture_key is not None and position_key(selected.position) == state.forced_capture_key:
        return state
    if at is not None and equals(selected.position, at):
        return replace(state, selected_piece=None)
    return state


def _apply_capture(state: GameState, at: Position, moves: MoveSet) -> GameState:
    mover = state.current_player
    result = apply_capture_move(state.board, moves, state.selected_piece, at)
    if result is None:
        return state

    next_state = replace(state, board=result.new_board)
    winner = evaluate_winner(next_state)
    if winner is not None:
        logger.info("Game over after capture at %s: winner=%s", position_key(at), winner)
        return replace(
            next_state,
            selected_piece=None,
            forced_capture_key=None,
            stats=increment_stats_for(state.stats, mover, moves=1, captures=1),
            winner=winner,
        )

    destination_key = position_key(result.destination)
    landed = get_piece(result.new_board, result.destination)
    follow_ups = select_all_moves_per_turn(next_state).captures.get(destination_key)
    if follow_ups and landed is not None:
        logger.debug("%s must continue capturing from %s", mover.value, destination_key)
        return replace(
            next_state,
            selected_piece=landed,
            forced_capture_key=destination_key,
            stats=increment_stats_for(state.stats, mover, captures=1),
        )

    return replace(
        next_state,
        selected_piece=None,
        forced_capture_key=None,
        current_player=get_next_player(mover),
        stats=increment_stats_for(state.stats, mover, moves=1, captures=1),
    )


def _apply_step(state: GameState, at: Position, moves: MoveSet) -> GameState:
    mover = state.current_player
    result = apply_simple_move(state.board, moves, state.selected_piece, at)
    if result is None:
        return state

    next_state = replace(
        state,
        board=result.new_board,
        selected_piece=None,
        forced_capture_key=None,
        stats=increment_stats_for(state.stats, mover, moves=1),
    )
    winner = evaluate_winner(next_state)
    if winner is not None:
        logger.info("Game over after step to %s: winner=%s", position_key(at), winner)
        return replace(next_state, winner=winner)
    return replace(next_state, current_player=get_next_player(mover))


def _apply_move(state: GameState, at: Position) -> GameState:
    if state.selected_piece is None:
        return state
    moves = select_all_moves_per_turn(state)
    targets = select_move_targets_for(state.selected_piece, moves)
    if not is_in_move_targets(targets, at):
        logger.debug("Rejected move of %s to %s",
                     position_key(state.selected_piece.position), position_key(at))
        return state
    if has_captures(moves):
        return _apply_capture(state, at, moves)
    return _apply_step(state, at, moves)


def _set_mode(state: GameState, mode: GameMode) -> GameState:
    return replace(state, mode=mode, forced_capture_key=None)


def _new_game(state: GameState, _payload: Any) -> GameState:
    return create_initial_game_state(mode=None)


_HANDLERS: Dict[GameActionType, Callable[[GameState, Any], GameState]] = {
    GameActionType.SELECT_PIECE: _select_piece,
    GameActionType.DESELECT_PIECE: _deselect_piece,
    GameActionType.APPLY_MOVE: _apply_move,
    GameActionType.SET_MODE: _set_mode,
    GameActionType.NEW_GAME: _new_game,
}


def game_reducer(state: GameState, action: GameAction) -> GameState:
    """Apply one command; once a winner is recorded only NEW_GAME has an effect."""
    if state.winner is not None and action.type != GameActionType.NEW_GAME:
        return state
    handler = _HANDLERS.get(action.type)
    if handler is None:
        return state
    return handler(state, action.payload)
