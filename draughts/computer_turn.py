"""
Computer opponent integration for the game store.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol, Tuple

from draughts.ai_player import Chooser, pick_ai_move
from draughts.config import get_game_settings
from draughts.game import GameStore
from draughts.rules import AI_PLAYER_COLOR, Color, GameMode
from draughts.types import GameState, PositionKey
from draughts.utils import select_random

logger = logging.getLogger(__name__)

DEFAULT_THINKING_DELAY: float = 1.0


class PendingMove(Protocol):
    def cancel(self) -> None:
        ...


Scheduler = Callable[[float, Callable[[], None]], PendingMove]


def thread_timer_scheduler(delay: float, callback: Callable[[], None]) -> PendingMove:
    """Run ``callback`` once on a daemon timer thread after ``delay`` seconds."""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class ComputerTurnWatcher:
    """Plays the computer's side of a player-vs-computer game.

    When the store's state becomes the computer's turn the watcher picks a
    move, selects the piece straight away and schedules the move itself
    after ``delay`` seconds. Only one move is ever pending: a new turn or
    any state that is no longer the computer's turn cancels it, and a
    generation counter checked at fire time drops timers that lost a race
    with ``cancel``.
    """

    def __init__(self, store: GameStore, ai_color: Color = AI_PLAYER_COLOR,
                 delay: float = DEFAULT_THINKING_DELAY,
                 scheduler: Scheduler = thread_timer_scheduler,
                 choose: Chooser = select_random) -> None:
        self.store = store
        self.ai_color = ai_color
        self.delay = max(0.0, float(delay))
        self._scheduler = scheduler
        self._choose = choose
        self._pending: Optional[PendingMove] = None
        self._generation = 0
        self._trigger: Optional[Tuple[bool, Optional[PositionKey]]] = None
        self._lock = store.lock
        self._unsubscribe = store.subscribe(self._on_state)
        self._on_state(store.state)

    @classmethod
    def from_config(cls, store: GameStore, **kwargs) -> "ComputerTurnWatcher":
        """Build a watcher using the color and thinking delay from DraughtsConfig."""
        settings = get_game_settings()
        return cls(store, ai_color=settings.ai_player_color, delay=settings.ai_move_delay, **kwargs)

    @property
    def has_pending_move(self) -> bool:
        return self._pending is not None

    def is_computer_turn(self, state: GameState) -> bool:
        return (
            state.mode == GameMode.PLAYER_VS_COMPUTER
            and state.winner is None
            and state.current_player == self.ai_color
        )

    def cancel(self) -> None:
        """Drop the pending move, if any."""
        with self._lock:
            self._generation += 1
            if self._pending is not None:
                logger.debug("Cancelling pending computer move")
                self._pending.cancel()
                self._pending = None

    def close(self) -> None:
        self.cancel()
        self._unsubscribe()

    def _on_state(self, state: GameState) -> None:
        computer_turn = self.is_computer_turn(state)
        trigger = (computer_turn, state.forced_capture_key if computer_turn else None)
        with self._lock:
            # Selecting a piece also changes the state; only react to a new turn
            # or to a new link in a capture chain.
            if trigger == self._trigger:
                return
            self._trigger = trigger
            self.cancel()
            if not computer_turn:
                return

            move = pick_ai_move(self.store.moves(), state.forced_capture_key, self._choose)
            if move is None:
                logger.debug("Computer has no legal move")
                return

            generation = self._generation
            self.store.select_piece(move.piece)

            def fire() -> None:
                with self._lock:
                    if generation != self._generation:
                        return
                    self._pending = None
                    logger.debug("Computer plays to (%d, %d)", move.target.x, move.target.y)
                    self.store.apply_move(move.target)

            logger.debug("Computer selected (%d, %d); moving in %.2fs",
                         move.piece.x, move.piece.y, self.delay)
            self._pending = self._scheduler(self.delay, fire)
