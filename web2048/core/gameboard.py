"""
Board arithmetic for the 2048 game: rotations, row compression with merging and the terminal predicate.

Every move direction is reduced to a single "slide left" operation by rotating or mirroring the board before and
after compressing its rows.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, fliplr, int64, ndarray, rot90, zeros, zeros_like


def empty_board(size: int = 4) -> ndarray:
    """
    Create an empty square board.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    ndarray
        A ``(size, size)`` array of zeros.
    """
    return zeros((size, size), dtype=int64)


def rotate_left(board: ndarray) -> ndarray:
    """
    Rotate the board 90 degrees counter-clockwise: cell (r, c) moves to (size - 1 - c, r).
    """
    return rot90(board, k=1).copy()


def rotate_right(board: ndarray) -> ndarray:
    """
    Rotate the board 90 degrees clockwise: cell (r, c) moves to (c, size - 1 - r).
    """
    return rot90(board, k=-1).copy()


def reverse_rows(board: ndarray) -> ndarray:
    """
    Reverse the order of the cells in every row.
    """
    return fliplr(board).copy()


def compress_and_merge_row(row: ndarray) -> tuple[ndarray, int, bool]:
    """
    Slide one row to the left and merge adjacent equal values.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one row of the game board.

    Returns
    -------
    new_row : ndarray
        The row after sliding and merging, padded with zeros on the right.
    gained : int
        The sum of the merged values.
    changed : bool
        Whether the new row differs from the input row.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the row towards the end.
    - A merged tile never merges again in the same pass: ``[4, 4, 4, 4]`` gives ``[8, 8, 0, 0]``.
    """
    non_zero = row[row != 0]

    result = []
    gained = 0

    # ##: Merge the first tile of each adjacent equal pair.
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            gained += merged
            i += 2
        else:
            result.append(int(non_zero[i]))
            i += 1

    new_row = zeros_like(row)
    new_row[: len(result)] = array(result, dtype=row.dtype)
    return new_row, gained, not array_equal(row, new_row)


def slide_and_merge(board: ndarray) -> tuple[ndarray, int, bool]:
    """
    Slide the whole board to the left, merging each row independently.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    new_board : ndarray
        The updated game board.
    gained : int
        The total score obtained from all merges.
    changed : bool
        Whether at least one row changed.
    """
    result = zeros_like(board)
    gained = 0
    changed = False

    for i, row in enumerate(board):
        new_row, row_gain, row_changed = compress_and_merge_row(row)
        result[i] = new_row
        gained += row_gain
        changed = changed or row_changed

    return result, gained, changed


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    List the positions of empty cells, in row-major order.
    """
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board == 0)]


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no cell equals its right or lower neighbour.
    """
    return bool(
        np_all(board != 0) and not np_any(board[:-1] == board[1:]) and not np_any(board[:, :-1] == board[:, 1:])
    )


def as_board(values, size: int = 4) -> ndarray:
    """
    Convert nested sequences into a validated board.

    Parameters
    ----------
    values : array_like
        A ``size`` x ``size`` grid of tile values.
    size : int, optional
        The expected size of the grid (default is 4).

    Returns
    -------
    ndarray
        A new ``int64`` board.

    Raises
    ------
    ValueError
        If the grid has the wrong shape, holds a value that is neither 0 nor a power of two >= 2, or holds a tile
        larger than ``max_tile(size)``.
    """
    try:
        board = array(values, dtype=int64)
    except OverflowError as error:
        raise ValueError(f'board holds values too large for a tile: {error}') from None
    if board.shape != (size, size):
        raise ValueError(f'board must have shape ({size}, {size}), got {board.shape}')

    tiles = board[board != 0]
    if np_any(tiles < 2) or np_any(tiles & (tiles - 1)):
        raise ValueError(f'board holds values that are not powers of two: {sorted(set(tiles.tolist()))}')
    if np_any(tiles > max_tile(size)):
        raise ValueError(f'board holds tiles above {max_tile(size)}: {sorted(set(tiles.tolist()))}')
    return board


def max_tile(size: int = 4) -> int:
    """
    Largest tile a ``size`` x ``size`` board can reach, ``2 ** (size * size + 1)``.

    Capped at ``2 ** 61`` so that merging two of them still fits in ``int64``.
    """
    return 2 ** min(size * size + 1, 61)
