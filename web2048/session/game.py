"""
Lifecycle of a single 2048 game: new game, moves, single-level undo, best score and persistence.
"""

import logging
from typing import Callable

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from web2048.config import DEFAULT_CONFIG, GameConfig
from web2048.core.gameboard import empty_board
from web2048.core.gamemove import Direction
from web2048.envs.engine import BoardEngine
from web2048.session.leaderboard import LeaderboardStore
from web2048.storage.gateway import KeyValueStore
from web2048.storage.records import LeaderboardEntry, SessionRecord, UndoSnapshot

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameSession:
    """
    One game of 2048, persisted to a key-value store after every change.

    The session is restored from the store on construction. If nothing usable is stored, a new game is started.
    Invalid requests (moving or undoing after the game ended, undoing twice) are ignored rather than raised.
    """

    def __init__(
        self,
        store: KeyValueStore,
        leaderboard: LeaderboardStore | None = None,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: Generator | None = None,
        on_game_over: Callable[['GameSession'], None] | None = None,
    ):
        """
        Create the session and restore its state.

        Parameters
        ----------
        store : KeyValueStore
            Where the session state is read from and written to.
        leaderboard : LeaderboardStore, optional
            Leaderboard seeding the best score. Defaults to one sharing ``store``.
        config : GameConfig, optional
            Game rules and storage keys (default is ``DEFAULT_CONFIG``).
        seed : int, optional
            Random number generator seed for reproducibility.
        rng : Generator, optional
            Generator to draw from. Takes precedence over ``seed``.
        on_game_over : callable, optional
            Called with the session when a move ends the game.
        """
        self.config = config or DEFAULT_CONFIG
        self._store = store
        self.leaderboard = leaderboard or LeaderboardStore(store, config=self.config)
        self._on_game_over = on_game_over

        self._rng = rng if rng is not None else default_rng(PCG64DXSM(seed))
        self._engine = BoardEngine(config=self.config, rng=self._rng)
        self._best = 0
        self._game_over = False
        self._undo: UndoSnapshot | None = None

        self.restore()

    @property
    def board(self) -> ndarray:
        return self._engine.board

    @property
    def score(self) -> int:
        return self._engine.score

    @property
    def best(self) -> int:
        return self._best

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def can_undo(self) -> bool:
        return self._undo is not None and not self._game_over

    def start_new(self) -> None:
        """
        Start a new game: empty board, zero score, no undo point.

        Spawns twice, then once more with probability ``config.extra_start_tile_prob``. Each spawn places one or
        two tiles.
        """
        self._engine.clear()
        self._game_over = False
        self._undo = None

        self._engine.spawn_tile()
        self._engine.spawn_tile()
        if self._rng.random() < self.config.extra_start_tile_prob:
            self._engine.spawn_tile()

        _logger.info('New game started')
        self._save()

    def apply_move(self, direction: Direction | str) -> bool:
        """
        Play one move.

        Parameters
        ----------
        direction : Direction or str
            The direction of the move.

        Returns
        -------
        bool
            Whether the move changed the board. A move that changes nothing has no side effect at all.
        """
        if self._game_over:
            return False

        before = UndoSnapshot(board=self._engine.board.tolist(), score=self._engine.score)
        if not self._engine.move(direction):
            return False

        self._engine.spawn_tile()
        if self._engine.is_terminal():
            self._game_over = True
            _logger.info('Game over with score %d', self.score)

        self._best = max(self._best, self.score)
        self._undo = before
        self._save()

        if self._game_over and self._on_game_over is not None:
            self._on_game_over(self)
        return True

    def undo(self) -> bool:
        """
        Go back to the state before the last successful move.

        Returns
        -------
        bool
            Whether anything was undone. Only one level is kept, and undo is unavailable once the game is over.
        """
        if not self.can_undo:
            return False

        self._engine.load(self._undo.board, self._undo.score)
        self._undo = None
        self._save()
        return True

    def save_score(self, name: str) -> LeaderboardEntry:
        """
        Submit the current score to the leaderboard under ``name``.
        """
        entry = self.leaderboard.submit(name, self.score)
        if entry.score > self._best:
            self._best = entry.score
            self._save()
        return entry

    def to_record(self) -> SessionRecord:
        return SessionRecord(
            board=self._engine.board.tolist(),
            score=self._engine.score,
            best=self._best,
            game_over=self._game_over,
            undo_snapshot=self._undo,
        )

    def restore(self) -> None:
        """
        Load the stored state, or start a new game if there is none or it cannot be read.
        """
        raw = self._store.get(self.config.state_key)
        if raw:
            try:
                self._apply_record(SessionRecord.from_json(raw))
                return
            except ValueError as error:
                # ##: ValidationError is a ValueError; so are board and score errors from the engine.
                _logger.warning('Discarding unreadable session state: %s', error)

        self._best = self.leaderboard.best_score()
        self.start_new()

    def _apply_record(self, record: SessionRecord) -> None:
        if record.undo_snapshot is not None and len(record.undo_snapshot.board) != self.config.size:
            raise ValueError(f'undo snapshot does not fit a {self.config.size}x{self.config.size} board')

        board = record.board if record.board is not None else empty_board(self.config.size)
        self._engine.load(board, record.score)

        self._best = record.best if record.best is not None else self.leaderboard.best_score()
        self._game_over = record.game_over or self._engine.terminal
        self._undo = record.undo_snapshot

    def _save(self) -> None:
        self._store.set(self.config.state_key, self.to_record().to_json())
