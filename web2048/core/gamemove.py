"""
Game move utilities for the 2048 game: move directions, the direction-to-transform table and legal moves.
"""

from enum import Enum
from typing import Callable

from numpy import ndarray

from web2048.core.gameboard import reverse_rows, rotate_left, rotate_right, slide_and_merge


class Direction(str, Enum):
    """
    Direction in which every tile is shifted.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, token: 'Direction | str') -> 'Direction':
        """
        Convert a direction token such as ``"Up"`` into a ``Direction``.

        Raises
        ------
        ValueError
            If the token does not name a direction.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(str(token).strip().lower())
        except ValueError:
            raise ValueError(f'Unknown direction: {token!r}') from None


def _identity(board: ndarray) -> ndarray:
    return board.copy()


# ##>: (pre-transform, post-transform) turning each direction into a left slide and back.
TRANSFORMS: dict[Direction, tuple[Callable[[ndarray], ndarray], Callable[[ndarray], ndarray]]] = {
    Direction.UP: (rotate_left, rotate_right),
    Direction.DOWN: (rotate_right, rotate_left),
    Direction.LEFT: (_identity, _identity),
    Direction.RIGHT: (reverse_rows, reverse_rows),
}


def shift(board: ndarray, direction: Direction) -> tuple[ndarray, int, bool]:
    """
    Shift every tile in the given direction, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    direction : Direction
        The direction of the move.

    Returns
    -------
    new_board : ndarray
        The board after the move.
    gained : int
        The score obtained from merges.
    changed : bool
        Whether the move changed anything.
    """
    before, after = TRANSFORMS[direction]
    updated, gained, changed = slide_and_merge(before(board))
    return after(updated), gained, changed


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in the order up, down, left, right.

    Notes
    -----
    Computes horizontal and vertical adjacencies once, without rotating the board.
    A direction is legal if a tile can slide into an empty neighbour or merge with an equal one.
    """
    # ##>: Horizontal adjacency, shared by left and right.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Vertical adjacency, shared by up and down.
    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    mask = {
        Direction.UP: bool(((top_rows == 0) & (bottom_rows != 0)).any() or v_can_merge.any()),
        Direction.DOWN: bool(((bottom_rows == 0) & (top_rows != 0)).any() or v_can_merge.any()),
        Direction.LEFT: bool(((left_cols == 0) & (right_cols != 0)).any() or h_can_merge.any()),
        Direction.RIGHT: bool(((right_cols == 0) & (left_cols != 0)).any() or h_can_merge.any()),
    }
    return [direction for direction in Direction if mask[direction]]
