"""
Random computer opponent.

Picks uniformly at random, but always honours the capture rules: a
capture chain in progress first, then any capture, then any step.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

from draughts.types import AiMove, MoveSet, PositionKey
from draughts.utils import parse_position_key, select_random

T = TypeVar("T")

Chooser = Callable[[Sequence[T]], Optional[T]]


def pick_ai_move(moves: MoveSet, forced_capture_key: Optional[PositionKey],
                 choose: Chooser = select_random) -> Optional[AiMove]:
    if forced_capture_key is not None:
        forced = moves.captures.get(forced_capture_key, [])
        if forced:
            capture = choose(forced)
            if capture is None:
                return None
            return AiMove(piece=parse_position_key(forced_capture_key), target=capture.to)

    for catalogue in (moves.captures, moves.steps):
        entry = choose(list(catalogue.items()))
        if entry is None:
            continue
        piece_key, options = entry
        option = choose(options)
        if option is None:
            return None
        return AiMove(piece=parse_position_key(piece_key), target=option.to)

    return None
