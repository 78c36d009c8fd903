"""
Key-value storage the session and leaderboard persist through.

Values are opaque strings. Any object with ``get(key)`` and ``set(key, value)`` works; two implementations are
provided: an in-process dictionary and a Redis client.
"""

from __future__ import annotations

import os
from typing import Protocol

import redis


class KeyValueStore(Protocol):
    """
    Synchronous string key-value storage.
    """

    def get(self, key: str) -> str | None:
        """
        Read the value stored under ``key``.

        Returns
        -------
        str or None
            The stored string, or None if the key was never set.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...


class MemoryStore:
    """Dictionary-backed store, lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        """Read the value stored under ``key``, None if absent."""
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data


def get_redis_url() -> str:
    """
    Redis connection URL, from the ``REDIS_URL`` environment variable.

    Returns
    -------
    str
        The URL, ``redis://localhost:6379/0`` when the variable is unset.
    """
    return os.environ.get('REDIS_URL', 'redis://localhost:6379/0')


class RedisStore:
    """
    Store backed by Redis string keys.

    Parameters
    ----------
    client : redis.Redis, optional
        Client to use. Defaults to one built from ``REDIS_URL``.
    prefix : str, optional
        Prepended to every key, to keep several players apart on one server.
    """

    def __init__(self, client: redis.Redis | None = None, prefix: str = ''):
        self._client = client if client is not None else redis.Redis.from_url(get_redis_url(), decode_responses=True)
        self._prefix = prefix

    def get(self, key: str) -> str | None:
        """Read the value stored under the prefixed ``key``, decoding bytes replies."""
        raw = self._client.get(self._prefix + key)
        if isinstance(raw, bytes):
            return raw.decode()
        return raw

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under the prefixed ``key``."""
        self._client.set(self._prefix + key, value)
