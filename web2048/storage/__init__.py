# -*- coding: utf-8 -*-
"""
This module provides the key-value stores and the typed records persisted in them.
"""

from .gateway import KeyValueStore, MemoryStore, RedisStore
from .records import LeaderboardEntry, SessionRecord, UndoSnapshot

__all__ = ["KeyValueStore", "MemoryStore", "RedisStore", "LeaderboardEntry", "SessionRecord", "UndoSnapshot"]
