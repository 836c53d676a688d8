"""Store port - Abstraction over the external mapping-of-mappings store.

Orders are kept as ``order_id -> {field: value}`` hashes with textual
values. The port mirrors the two hash commands the service needs plus
a liveness probe.
"""

from __future__ import annotations

from typing import Optional, Protocol


class HashStorePort(Protocol):
    """Port for the per-order field store.

    Implementations:
    - adapters/store/redis_store.py (RedisHashStore) - Production
    - adapters/store/memory_store.py (InMemoryHashStore) - Local runs and tests

    Implementations must not cache: other replicas of the service may
    mutate the same hashes concurrently.
    """

    def hset(self, key: str, field: str, value: str) -> None:
        """Write one field of a hash, creating the hash if needed.

        Args:
            key: The order identifier.
            field: The field name.
            value: The textual field value.

        Raises:
            StoreWriteError: If the write did not reach the store.
        """
        ...

    def hget(self, key: str, field: str) -> Optional[str]:
        """Read one field of a hash.

        Args:
            key: The order identifier.
            field: The field name.

        Returns:
            The field value, or None if it was never written.

        Raises:
            StoreReadError: If the store could not be reached.
        """
        ...

    def ping(self) -> bool:
        """Check that the store is reachable.

        Returns:
            True if the store answered.
        """
        ...
