"""
Game store: owns the authoritative GameState and exposes the command API.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, FrozenSet, List, Optional

from draughts import actions
from draughts.actions import GameAction
from draughts.engine import (
    select_all_moves_per_turn,
    select_interactivity_state,
    select_move_targets_for,
)
from draughts.reducer import create_initial_game_state, game_reducer
from draughts.rules import GameMode
from draughts.types import GameState, InteractivityState, MoveSet, Position, PositionKey

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class GameStore:
    """Holds the current GameState and replaces it on every accepted command.

    Transitions run under a re-entrant lock so a listener may issue further
    commands from inside its callback, and a background timer may dispatch
    while the UI thread reads ``state``.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self._state = state if state is not None else create_initial_game_state()
        self._listeners: List[StateListener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def lock(self) -> threading.RLock:
        """Lock serialising transitions; hold it to make check-then-dispatch atomic."""
        return self._lock

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with each new snapshot; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: GameAction) -> GameState:
        if not isinstance(action, GameAction):
            raise TypeError(f"Expected GameAction, got {type(action).__name__}")
        with self._lock:
            previous = self._state
            self._state = game_reducer(previous, action)
            if self._state is previous:
                logger.debug("%s ignored", action.type.value)
                return self._state
            current = self._state
            for listener in list(self._listeners):
                listener(current)
            return current

    # ── Commands ─────────────────────────────────────────────────────────

    def select_piece(self, position: Position) -> GameState:
        return self.dispatch(actions.select_piece(position))

    def deselect_piece(self, position: Position) -> GameState:
        return self.dispatch(actions.deselect_piece(position))

    def apply_move(self, position: Position) -> GameState:
        return self.dispatch(actions.apply_move(position))

    def set_mode(self, mode: GameMode) -> GameState:
        return self.dispatch(actions.set_mode(mode))

    def new_game(self) -> GameState:
        return self.dispatch(actions.new_game())

    # ── Queries ──────────────────────────────────────────────────────────

    def moves(self) -> MoveSet:
        return select_all_moves_per_turn(self._state)

    def interactivity(self) -> InteractivityState:
        return select_interactivity_state(self._state)

    def move_targets(self) -> FrozenSet[PositionKey]:
        """Targets for the currently selected piece; empty when nothing is selected."""
        selected = self._state.selected_piece
        if selected is None:
            return frozenset()
        return select_move_targets_for(selected, self.moves())
