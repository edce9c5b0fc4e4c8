"""Draughts package: checkers rules engine, game reducer and random opponent.

Usage examples:
    from draughts import GameStore, Position
    from draughts import select_all_moves_per_turn, evaluate_winner
    from draughts import ComputerTurnWatcher
"""
from __future__ import annotations

# Rules and types
from .rules import BOARD_SIZE, DRAW, AI_PLAYER_COLOR, STARTING_PLAYER, Color, GameMode
from .types import (
    Position,
    Piece,
    Step,
    Capture,
    MoveSet,
    MoveResult,
    PlayerStats,
    InteractivityState,
    AiMove,
    GameState,
)
from .utils import position_key, parse_position_key, get_piece, clone_board, initial_board

# Engine API
from .engine import (
    legal_steps_per_piece,
    legal_captures_per_piece,
    select_all_moves_per_turn,
    select_interactivity_state,
    select_move_targets_for,
    is_in_move_targets,
    has_captures,
    promote_to_king,
    apply_simple_move,
    apply_capture_move,
    increment_stats_for,
    evaluate_winner,
)

# Game state
from .actions import GameAction, GameActionType
from .reducer import create_initial_game_state, game_reducer
from .game import GameStore

# Computer opponent
from .ai_player import pick_ai_move
from .computer_turn import ComputerTurnWatcher
