"""2048 board engine: applies moves, spawns tiles and detects the end of the game."""

import logging

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from web2048.config import DEFAULT_CONFIG, GameConfig
from web2048.core.gameboard import as_board, empty_board, empty_cells, is_done
from web2048.core.gamemove import Direction, shift

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class BoardEngine:
    """
    2048 board engine.

    This class owns the board, the cumulative score and the terminal flag. It applies moves, spawns new tiles and
    checks whether any move is still possible. It never spawns on its own: the caller decides when to spawn.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None, rng: Generator | None = None):
        """
        Initialize an empty board.

        Parameters
        ----------
        config : GameConfig, optional
            Game rules (default is ``DEFAULT_CONFIG``).
        seed : int, optional
            Random number generator seed for reproducibility.
        rng : Generator, optional
            Generator to draw from. Takes precedence over ``seed``.
        """
        self.config = config or DEFAULT_CONFIG
        self.size = self.config.size
        self._rng = rng if rng is not None else default_rng(PCG64DXSM(seed))

        # ##>: Pre-computed tile values and probabilities for sampling.
        self._tile_values = list(self.config.tile_probs.keys())
        self._tile_probs = list(self.config.tile_probs.values())

        self._board: ndarray = empty_board(self.size)
        self._score = 0
        self._terminal = False

    @property
    def board(self) -> ndarray:
        """A copy of the current board."""
        return self._board.copy()

    @property
    def score(self) -> int:
        """The cumulative score."""
        return self._score

    @property
    def terminal(self) -> bool:
        """The terminal flag, as of the last move, spawn or load."""
        return self._terminal

    def clear(self) -> None:
        """
        Reset to an empty board with a zero score.
        """
        self._board = empty_board(self.size)
        self._score = 0
        self._terminal = False

    def load(self, board, score: int) -> None:
        """
        Replace the board and score wholesale.

        Parameters
        ----------
        board : array_like
            The board to restore.
        score : int
            The score to restore.

        Raises
        ------
        ValueError
            If the board is not a valid board of this size or the score is negative.
        """
        if score < 0:
            raise ValueError(f'score must be >= 0, got {score}')
        self._board = as_board(board, size=self.size)
        self._score = int(score)
        self._terminal = is_done(self._board)

    def move(self, direction: Direction | str) -> bool:
        """
        Shift every tile in the given direction.

        Parameters
        ----------
        direction : Direction or str
            The direction of the move.

        Returns
        -------
        bool
            Whether anything changed.

        Notes
        -----
        - The board and score are only updated if at least one row changed.
        - No tile is spawned here, see ``spawn_tile``.
        """
        direction = Direction.parse(direction)
        updated, gained, changed = shift(self._board, direction)
        if not changed:
            _logger.debug('Move %s changed nothing', direction.value)
            return False

        self._board = updated
        self._score += gained
        self._terminal = is_done(self._board)
        _logger.debug('Move %s gained %d, score %d', direction.value, gained, self._score)
        return True

    def spawn_tile(self) -> list[tuple[int, int]]:
        """
        Place one or two new tiles in random empty cells.

        Returns
        -------
        list[tuple[int, int]]
            The cells that received a tile, empty if the board is full.

        Notes
        -----
        - Two tiles are placed with probability ``double_spawn_prob``, otherwise one.
        - Each cell is drawn uniformly among the cells still empty.
        - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
        """
        candidates = empty_cells(self._board)
        if not candidates:
            return []

        count = 2 if self._rng.random() < self.config.double_spawn_prob else 1
        placed = []
        for _ in range(min(count, len(candidates))):
            cell = candidates.pop(int(self._rng.integers(len(candidates))))
            self._board[cell] = self._rng.choice(self._tile_values, p=self._tile_probs)
            placed.append(cell)

        self._terminal = is_done(self._board)
        _logger.debug('Spawned tiles at %s', placed)
        return placed

    def is_terminal(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the board is full and no two orthogonal neighbours are equal.
        """
        self._terminal = is_done(self._board)
        return self._terminal

    def render(self) -> str:
        """
        Render the game board as text, one tab-separated line per row.
        """
        return '\n'.join(' \t'.join(map(str, row)) for row in self._board.tolist())
