"""Thread-safe in-memory hash store.

Stands in for Redis in local runs and tests. The semantics match
RedisHashStore: hashes spring into existence on first write and
absent fields read back as None.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class InMemoryHashStore:
    """In-memory implementation of HashStorePort.

    Attributes:
        name: Store name for logging

    Example:
        store = InMemoryHashStore()
        store.hset("A1", "mode", "driving")
        store.hget("A1", "mode")  # "driving"
    """

    name: str = "memory"

    _hashes: Dict[str, Dict[str, str]] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"store.{self.name}")

    def hset(self, key: str, field: str, value: str) -> None:
        with self._lock:
            self._hashes.setdefault(key, {})[field] = value
            self._logger.debug(
                "Store field set",
                extra={"order_id": key, "field": field},
            )

    def hget(self, key: str, field: str) -> Optional[str]:
        with self._lock:
            return self._hashes.get(key, {}).get(field)

    def ping(self) -> bool:
        return True

    def snapshot(self, key: str) -> Dict[str, str]:
        """Return a copy of all fields of one hash."""
        with self._lock:
            return dict(self._hashes.get(key, {}))

    def clear(self) -> int:
        """Drop all hashes.

        Returns:
            Number of hashes that were dropped.
        """
        with self._lock:
            count = len(self._hashes)
            self._hashes.clear()
            self._logger.info("Store cleared", extra={"hashes_cleared": count})
            return count
