# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 board engine.

This module provides the `BoardEngine` class, which holds the board and score and applies moves and tile spawns.
"""

from .engine import BoardEngine

__all__ = ["BoardEngine"]
