# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 sliding-tile game.

This package provides the board engine, the game session with single-level undo, the leaderboard and the
key-value storage adapters they persist through.
"""

from .config import DEFAULT_CONFIG, GameConfig
from .core import Direction
from .envs import BoardEngine
from .session import GameSession, LeaderboardStore
from .storage import KeyValueStore, MemoryStore, RedisStore

__all__ = [
    "DEFAULT_CONFIG",
    "GameConfig",
    "Direction",
    "BoardEngine",
    "GameSession",
    "LeaderboardStore",
    "KeyValueStore",
    "MemoryStore",
    "RedisStore",
]
