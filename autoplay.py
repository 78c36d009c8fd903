# -*- coding: utf-8 -*-
"""
Play random games of 2048 and report how often each max tile is reached.
"""
import logging
from collections import Counter
from typing import Dict

import numpy as np
from numpy.random import default_rng
from tqdm import trange

from web2048 import GameSession, LeaderboardStore, MemoryStore
from web2048.core import legal_directions


def autoplay(length: int = 10, seed: int | None = None, player: str = "autoplay") -> Dict[int, int]:
    """
    Play random games through a game session.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Random number generator seed for reproducibility.
    player : str, optional
        Name under which each final score is saved.

    Returns
    -------
    Dict[int, int]
        How many games ended with each max tile.
    """
    rng = default_rng(seed)
    store = MemoryStore()
    leaderboard = LeaderboardStore(store)
    session = GameSession(store, leaderboard=leaderboard, seed=seed)
    score = []

    with trange(length) as period:
        for num in period:
            session.start_new()

            # ##: Play a game.
            while not session.game_over:
                directions = legal_directions(session.board)
                session.apply_move(directions[rng.integers(len(directions))])

                # ##: Log.
                period.set_description(f"Game: {num + 1}")
                period.set_postfix(score=session.score, best=session.best, max=int(np.max(session.board)))

            # ##: Save max cells.
            score.append(int(np.max(session.board)))
            session.save_score(player)

    for rank, entry in enumerate(leaderboard.all(), start=1):
        print(f"{rank:>2}. {entry.name:<12} {entry.score:>8} {entry.display_date()}")

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Play random games of 2048")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    result = autoplay(length=args.games, seed=args.seed)
    print(f"Max tile frequency over {args.games} games: {result}")
