# -*- coding: utf-8 -*-
"""
This module provides the game session, with single-level undo and best score tracking, and the leaderboard.
"""

from web2048.storage.records import LeaderboardEntry

from .game import GameSession
from .leaderboard import LeaderboardStore

__all__ = ["GameSession", "LeaderboardStore", "LeaderboardEntry"]
