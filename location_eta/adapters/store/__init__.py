"""Store adapters - Implementations of the HashStorePort.

Available implementations:
- RedisHashStore: Redis hashes (production)
- InMemoryHashStore: Thread-safe dict of dicts (local runs, tests)
"""

from .memory_store import InMemoryHashStore
from .redis_store import RedisHashStore

__all__ = ["RedisHashStore", "InMemoryHashStore"]
