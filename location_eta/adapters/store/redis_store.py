"""Redis hash store adapter.

Each order is a Redis hash keyed by its order id, written with HSET
and read with HGET. Redis client errors are translated into the
domain's StoreWriteError / StoreReadError so callers never depend on
redis-py exception types.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import redis

from ...config import StoreConfig, get_config
from ...domain.errors import StoreReadError, StoreWriteError


@dataclass
class RedisHashStore:
    """Redis-backed implementation of HashStorePort.

    The connection pool is created lazily on first use and shared by
    all request threads; redis-py clients are thread-safe.

    Attributes:
        config: Store configuration
        client: Optional pre-built client (tests, custom pools)
    """

    config: StoreConfig = field(default_factory=lambda: get_config().store)
    client: Optional[Any] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_client(self) -> Any:
        """Get or initialize the Redis client."""
        if self.client is not None:
            return self.client

        self._logger.debug(
            "Initializing Redis client",
            extra={"timeout": self.config.socket_timeout_seconds},
        )
        self.client = redis.Redis.from_url(
            self.config.redis_url,
            decode_responses=True,
            socket_timeout=self.config.socket_timeout_seconds,
        )
        return self.client

    def hset(self, key: str, field: str, value: str) -> None:
        """Write one field of an order hash.

        Raises:
            StoreWriteError: If Redis rejected the write or was unreachable.
        """
        try:
            self._get_client().hset(key, field, value)
        except redis.RedisError as e:
            self._logger.error(
                "Redis write failed",
                extra={"order_id": key, "field": field, "error": str(e)},
            )
            raise StoreWriteError(
                f"Failed to write {field} for order {key}",
                order_id=key,
                field_name=field,
                cause=e,
            ) from e

    def hget(self, key: str, field: str) -> Optional[str]:
        """Read one field of an order hash.

        Returns:
            The value, or None if the field is absent.

        Raises:
            StoreReadError: If Redis was unreachable or errored.
        """
        try:
            value = self._get_client().hget(key, field)
        except redis.RedisError as e:
            self._logger.error(
                "Redis read failed",
                extra={"order_id": key, "field": field, "error": str(e)},
            )
            raise StoreReadError(
                f"Failed to read {field} for order {key}",
                order_id=key,
                field_name=field,
                cause=e,
            ) from e

        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def ping(self) -> bool:
        """Check that Redis answers."""
        try:
            return bool(self._get_client().ping())
        except redis.RedisError as e:
            self._logger.warning("Redis ping failed", extra={"error": str(e)})
            return False

    def close(self) -> None:
        """Release the connection pool."""
        if self.client is not None:
            self.client.close()
            self.client = None
