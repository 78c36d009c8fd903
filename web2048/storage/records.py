"""
Typed records for the persisted session and leaderboard blobs.

Both blobs are JSON strings. Missing fields fall back to defaults so that older blobs still load; anything that
cannot be coerced raises ``pydantic.ValidationError``, which callers treat as "no usable state".
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from web2048.core.gameboard import as_board

# ##>: Latest session blob layout. Blobs without a version are read as version 1.
SESSION_VERSION = 1


def _check_grid(value: list[list[int]]) -> list[list[int]]:
    return as_board(value, size=len(value)).tolist()


class UndoSnapshot(BaseModel):
    """Board and score captured right before the last successful move."""

    board: list[list[int]]
    score: int = Field(0, ge=0)

    @field_validator('board')
    @classmethod
    def _check_board(cls, value: list[list[int]]) -> list[list[int]]:
        return _check_grid(value)


class SessionRecord(BaseModel):
    """
    The whole session state, as stored under the state key.

    Serialized with camelCase keys: ``{version, board, score, best, gameOver, undoSnapshot}``.
    The legacy key ``prevState`` is accepted in place of ``undoSnapshot``.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: int = SESSION_VERSION
    board: list[list[int]] | None = None
    score: int = Field(0, ge=0)
    best: int | None = Field(None, ge=0)
    game_over: bool = Field(False, alias='gameOver')
    undo_snapshot: UndoSnapshot | None = Field(
        None,
        validation_alias=AliasChoices('undoSnapshot', 'undo_snapshot', 'prevState'),
        serialization_alias='undoSnapshot',
    )

    @field_validator('version')
    @classmethod
    def _known_version(cls, value: int) -> int:
        if value > SESSION_VERSION:
            raise ValueError(f'unsupported session version {value}')
        return value

    @field_validator('board')
    @classmethod
    def _check_board(cls, value: list[list[int]] | None) -> list[list[int]] | None:
        return None if value is None else _check_grid(value)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str | bytes) -> SessionRecord:
        return cls.model_validate_json(raw)


class LeaderboardEntry(BaseModel):
    """One saved score. Serialized as ``{name, score, date}``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    score: int = Field(..., ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=UTC), alias='date')

    def display_date(self) -> str:
        """Local time of the submission, as ``dd.mm.YYYY HH:MM``."""
        return self.timestamp.astimezone().strftime('%d.%m.%Y %H:%M')


_LEADERS = TypeAdapter(list[LeaderboardEntry])


def dump_leaders(entries: list[LeaderboardEntry]) -> str:
    return _LEADERS.dump_json(entries, by_alias=True).decode()


def load_leaders(raw: str | bytes) -> list[LeaderboardEntry]:
    return _LEADERS.validate_json(raw)
