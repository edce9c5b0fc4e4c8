from __future__ import annotations

import argparse
from typing import List, Optional

from draughts.config import get_selfplay_settings, setup_logging
from draughts.selfplay import SelfPlayRunner, SelfPlayStats


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = get_selfplay_settings()
    ap = argparse.ArgumentParser(description="Play random self-play checkers games")
    ap.add_argument("--games", type=int, default=defaults.games, help="Number of games to play")
    ap.add_argument("--max-plies", type=int, default=defaults.max_plies,
                    help="Moves per game before it is reported unfinished")
    ap.add_argument("--seed", type=int, default=defaults.seed, help="Random seed")
    ap.add_argument("--log-level", default=None, help="Override DRAUGHTS_LOG_LEVEL")
    return ap.parse_args(argv)


def format_summary(stats: SelfPlayStats) -> str:
    return "\n".join([
        "Self-play summary:",
        f"  Games played: {stats.games_played}",
        f"  Dark wins: {stats.dark_wins}",
        f"  Light wins: {stats.light_wins}",
        f"  Draws: {stats.draws}",
        f"  Unfinished: {stats.unfinished}",
        f"  Average plies: {stats.avg_game_length:.1f}",
    ])


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)
    runner = SelfPlayRunner(max_plies=args.max_plies, seed=args.seed)
    stats = runner.run(args.games)
    print(format_summary(stats))


if __name__ == "__main__":
    main()
