"""Redis-backed hash cache."""

from dataclasses import dataclass

import redis

from intake_calendar.services.cache import HashCache


@dataclass
class RedisHashCache(HashCache):
    """Hash cache stored in Redis hashes."""

    client: redis.Redis
    key_prefix: str = ""

    @classmethod
    def create(cls, url: str, key_prefix: str = "") -> "RedisHashCache":
        """Create a cache with a client decoding responses to str.

        Undecodable bytes become U+FFFD so a bad field fails on its own.
        """
        return cls(
            client=redis.Redis.from_url(
                url, decode_responses=True, encoding_errors="replace"
            ),
            key_prefix=key_prefix,
        )

    def get_all(self, key: str) -> dict[str, str]:
        """Return all fields of a hash (HGETALL)."""
        return dict(self.client.hgetall(self._key(key)))

    def set_field(self, key: str, field: str, value: str) -> None:
        """Set one hash field (HSET)."""
        self.client.hset(self._key(key), field, value)

    def expire(self, key: str, ttl_seconds: int) -> None:
        """Reset the key TTL (EXPIRE)."""
        self.client.expire(self._key(key), ttl_seconds)

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.client.close()

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"
