# -*- coding: utf-8 -*-
"""
This module provides the pure board operations of the 2048 game.

It includes functions for rotating and mirroring the board, sliding and merging rows, listing empty cells,
checking if the game is done, and shifting the board in a given direction.
"""

from .gameboard import (
    as_board,
    max_tile,
    compress_and_merge_row,
    empty_board,
    empty_cells,
    is_done,
    reverse_rows,
    rotate_left,
    rotate_right,
    slide_and_merge,
)
from .gamemove import TRANSFORMS, Direction, legal_directions, shift

__all__ = [
    "as_board",
    "max_tile",
    "Direction",
    "TRANSFORMS",
    "compress_and_merge_row",
    "empty_board",
    "empty_cells",
    "is_done",
    "legal_directions",
    "reverse_rows",
    "rotate_left",
    "rotate_right",
    "shift",
    "slide_and_merge",
]
