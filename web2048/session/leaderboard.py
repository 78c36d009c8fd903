"""Ranked list of saved scores, kept apart from the live session."""

import logging
from datetime import UTC, datetime

from pydantic import ValidationError

from web2048.config import DEFAULT_CONFIG, GameConfig
from web2048.storage.gateway import KeyValueStore
from web2048.storage.records import LeaderboardEntry, dump_leaders, load_leaders

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class LeaderboardStore:
    """
    Top scores, sorted by descending score and capped at ``config.leaderboard_size`` entries.

    Equal scores keep their submission order. Entries only ever leave the list by falling off the end.
    """

    def __init__(self, store: KeyValueStore, config: GameConfig | None = None):
        self._store = store
        self.config = config or DEFAULT_CONFIG

    def all(self) -> list[LeaderboardEntry]:
        """
        Read the stored entries.

        Returns
        -------
        list[LeaderboardEntry]
            Entries in rank order, empty if nothing is stored or the stored blob is unreadable.
        """
        raw = self._store.get(self.config.leaders_key)
        if not raw:
            return []
        try:
            return load_leaders(raw)
        except ValidationError as error:
            _logger.warning('Discarding unreadable leaderboard: %s', error)
            return []

    def best_score(self) -> int:
        """Highest stored score, 0 if there is none."""
        return max((entry.score for entry in self.all()), default=0)

    def submit(self, name: str, score: int) -> LeaderboardEntry:
        """
        Save a score.

        Parameters
        ----------
        name : str
            Player name. Blank names are replaced by ``config.default_player_name``.
        score : int
            The score to save.

        Returns
        -------
        LeaderboardEntry
            The new entry, whether or not it made the cut.
        """
        entry = LeaderboardEntry(
            name=(name or '').strip() or self.config.default_player_name,
            score=score,
            timestamp=datetime.now(tz=UTC),
        )

        # ##: sorted() is stable, so ties stay in submission order.
        entries = sorted([*self.all(), entry], key=lambda item: item.score, reverse=True)
        entries = entries[: self.config.leaderboard_size]
        self._store.set(self.config.leaders_key, dump_leaders(entries))

        _logger.info('Saved score %d for %s', entry.score, entry.name)
        return entry
