"""Hash cache abstractions."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol


class HashCache(Protocol):
    """Cache interface for keys holding a hash of string fields."""

    def get_all(self, key: str) -> dict[str, str]:
        """Return every field of a key, or an empty dict if it is absent."""

    def set_field(self, key: str, field: str, value: str) -> None:
        """Set one field of a key, creating the key if needed."""

    def expire(self, key: str, ttl_seconds: int) -> None:
        """Reset the TTL of an existing key."""


@dataclass
class _HashEntry:
    fields: dict[str, str] = field(default_factory=dict)
    expires_at: datetime | None = None


@dataclass
class InMemoryHashCache(HashCache):
    """Process-local hash cache with lazy expiry."""

    _entries: dict[str, _HashEntry]

    def __init__(self) -> None:
        self._entries = {}

    def get_all(self, key: str) -> dict[str, str]:
        """Return a copy of the fields of a key if it hasn't expired."""
        entry = self._live_entry(key)
        if entry is None:
            return {}
        return dict(entry.fields)

    def set_field(self, key: str, field: str, value: str) -> None:
        """Store a field, keeping the TTL of an existing entry."""
        entry = self._live_entry(key)
        if entry is None:
            entry = _HashEntry()
            self._entries[key] = entry
        entry.fields[field] = value

    def expire(self, key: str, ttl_seconds: int) -> None:
        """Set the expiry of a key; missing keys are ignored."""
        entry = self._live_entry(key)
        if entry is None:
            return
        entry.expires_at = datetime.now(tz=UTC) + timedelta(seconds=ttl_seconds)

    def ttl(self, key: str) -> float | None:
        """Return seconds until expiry, or None for missing or persistent keys."""
        entry = self._live_entry(key)
        if entry is None or entry.expires_at is None:
            return None
        return (entry.expires_at - datetime.now(tz=UTC)).total_seconds()

    def _live_entry(self, key: str) -> _HashEntry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry
