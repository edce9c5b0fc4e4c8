"""
Self-play runner: random-vs-random games driven through the reducer.

Both sides use the same picker as the computer opponent and issue the same
select/apply commands a human would, so every game exercises the full
command path.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional

from draughts import actions
from draughts.ai_player import pick_ai_move
from draughts.engine import select_all_moves_per_turn
from draughts.reducer import create_initial_game_state, game_reducer
from draughts.rules import DRAW, Color, GameMode
from draughts.types import Stats, Winner
from draughts.utils import select_random

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRecord:
    """Outcome of a single self-play game; winner is None when unfinished."""
    winner: Optional[Winner]
    plies: int
    stats: Stats


@dataclass
class SelfPlayStats:
    """Aggregate results from a self-play session."""
    games_played: int = 0
    dark_wins: int = 0
    light_wins: int = 0
    draws: int = 0
    unfinished: int = 0
    game_lengths: List[int] = field(default_factory=list)

    @property
    def avg_game_length(self) -> float:
        if not self.game_lengths:
            return 0.0
        return sum(self.game_lengths) / len(self.game_lengths)

    def record(self, game: GameRecord) -> None:
        self.games_played += 1
        self.game_lengths.append(game.plies)
        if game.winner is None:
            self.unfinished += 1
        elif game.winner == DRAW:
            self.draws += 1
        elif game.winner == Color.DARK:
            self.dark_wins += 1
        else:
            self.light_wins += 1


def play_random_game(max_plies: int = 200, rng: Optional[random.Random] = None) -> GameRecord:
    """Play one game with random moves for both sides.

    A ply is one select/apply pair, so each link of a capture chain counts.
    """
    rng = rng or random.Random()

    def choose(items):
        return select_random(items, rng)

    state = create_initial_game_state(mode=GameMode.PLAYER_VS_PLAYER)
    plies = 0
    while state.winner is None and plies < max_plies:
        move = pick_ai_move(select_all_moves_per_turn(state), state.forced_capture_key, choose)
        if move is None:
            break
        state = game_reducer(state, actions.select_piece(move.piece))
        next_state = game_reducer(state, actions.apply_move(move.target))
        if next_state is state:
            raise RuntimeError(f"Reducer rejected a generated move: {move}")
        state = next_state
        plies += 1
    return GameRecord(winner=state.winner, plies=plies, stats=state.stats)


class SelfPlayRunner:
    """Plays a batch of random games and aggregates the results."""

    def __init__(self, max_plies: int = 200, seed: Optional[int] = None) -> None:
        self.max_plies = max_plies
        self.rng = random.Random(seed)
        self.stats = SelfPlayStats()

    def run(self, num_games: int) -> SelfPlayStats:
        for game_num in range(1, num_games + 1):
            start = time.time()
            game = play_random_game(self.max_plies, self.rng)
            self.stats.record(game)
            winner = game.winner.value if isinstance(game.winner, Color) else game.winner
            logger.info("Game %d: winner=%s plies=%d (%.3fs)",
                        game_num, winner or "unfinished", game.plies, time.time() - start)
        return self.stats
