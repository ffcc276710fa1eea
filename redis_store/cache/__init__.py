"""
redis-store — Cache Module

Provides the cache contract and its Redis-backed implementation.

- factory.py: Creates and registers connected stores
- interface.py: Abstract cache contract
- backends/: Store implementations (Redis)
- coercion.py / defaults.py: typed reads and default resolution

Usage:
    from redis_store.cache import create_store

    store = await create_store()
    await store.put("key", "value", ttl=3600)
    value = await store.get("key", "fallback")
"""

from .backends.redis import RedisStore
from .defaults import Lazy
from .factory import (
    close_all_stores,
    create_store,
    get_store,
    list_store_instances,
    reset_store_factory,
)
from .interface import TTL, CacheStore

__all__ = [
    # Factory functions
    "create_store",
    "get_store",
    "close_all_stores",
    "list_store_instances",
    "reset_store_factory",
    # Interface and implementation
    "CacheStore",
    "RedisStore",
    "TTL",
    "Lazy",
]
