from __future__ import annotations

from typing import Optional

from draughts.rules import Color, is_dark_square, opponent_of
from draughts.types import Board, Capture, Captures, GameState, MoveSet, Piece, Position, Step, Steps
from draughts.utils import get_piece, is_move_in_bounds, offsets_for, position_key


def is_valid_landing_spot(board: Board, at: Position) -> bool:
    return is_move_in_bounds(len(board), at) and get_piece(board, at) is None and is_dark_square(at)


class MoveGenerator:
    """Generates single-hop steps and captures on one board.

    Captures are always mandatory: a piece that can capture never
    contributes steps, and the turn-wide rule is applied by the callers
    through ``has_captures``. Multi-hop chains are produced by applying
    one capture at a time and regenerating from the landing square.
    """

    def __init__(self, board: Board) -> None:
        self.board = board

    def steps_for(self, piece: Optional[Piece]) -> Steps:
        if piece is None:
            return []
        origin = piece.position
        steps: Steps = []
        for dx, dy in offsets_for(piece):
            adjacent = Position(origin.x + dx, origin.y + dy)
            if is_valid_landing_spot(self.board, adjacent):
                steps.append(Step(origin, adjacent))
        return steps

    def captures_for(self, piece: Optional[Piece]) -> Captures:
        if piece is None:
            return []
        origin = piece.position
        opponent = opponent_of(piece.color)
        captures: Captures = []
        for dx, dy in offsets_for(piece):
            adjacent = Position(origin.x + dx, origin.y + dy)
            landing = Position(origin.x + 2 * dx, origin.y + 2 * dy)
            if not is_move_in_bounds(len(self.board), adjacent):
                continue
            if not is_valid_landing_spot(self.board, landing):
                continue
            jumped = get_piece(self.board, adjacent)
            if jumped is not None and jumped.color == opponent:
                captures.append(Capture(origin, adjacent, landing))
        return captures

    def moves_for(self, player: Color) -> MoveSet:
        moves = MoveSet()
        for row in self.board:
            for piece in row:
                if piece is None or piece.color != player:
                    continue
                key = position_key(piece.position)
                captures = self.captures_for(piece)
                if captures:
                    moves.captures[key] = captures
                    continue
                steps = self.steps_for(piece)
                if steps:
                    moves.steps[key] = steps
        return moves


# Convenience functional API

def legal_steps_per_piece(board: Board, piece: Optional[Piece]) -> Steps:
    return MoveGenerator(board).steps_for(piece)


def legal_captures_per_piece(board: Board, piece: Optional[Piece]) -> Captures:
    return MoveGenerator(board).captures_for(piece)


def select_all_moves_per_turn(state: GameState) -> MoveSet:
    """Complete move catalogue for ``state.current_player``; recomputed on every call."""
    return MoveGenerator(state.board).moves_for(state.current_player)


def select_all_moves_for(state: GameState, player: Color) -> MoveSet:
    """Move catalogue for ``player`` regardless of whose turn it is."""
    return MoveGenerator(state.board).moves_for(player)


def has_captures(moves: MoveSet) -> bool:
    """True when the mandatory-capture rule is in force for the side to move."""
    return len(moves.captures) > 0


def has_any_move(moves: MoveSet) -> bool:
    return bool(moves.captures) or bool(moves.steps)
