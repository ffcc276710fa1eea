"""
redis-store — Cache Interface

Defines the abstract cache contract that store implementations fulfil.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import timedelta
from typing import Any

# Seconds (int/float) or a timedelta; 0 or None means "no expiry"
TTL = int | float | timedelta | None


class CacheStore(ABC):
    """
    Abstract base class for cache stores.

    Read operations never raise on a miss or a backend failure; they fall back
    to the supplied default. ``default`` may be a literal or a supplier (see
    :mod:`redis_store.cache.defaults`).
    """

    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieve an item from the cache by key.

        Args:
            key: Cache key
            default: Value (or supplier) returned when the key cannot be read

        Returns:
            The raw cached value, or the resolved default
        """
        pass

    @abstractmethod
    async def get_bool(self, key: str, default: bool = False) -> bool:
        """Retrieve an item as a bool ("1"/"true", "0"/"false")."""
        pass

    @abstractmethod
    async def get_int(self, key: str, default: int = 0) -> int:
        """Retrieve an item as an int; non-numeric strings yield the default."""
        pass

    @abstractmethod
    async def get_string(self, key: str, default: str = "") -> str:
        """Retrieve an item as a str."""
        pass

    @abstractmethod
    async def has(self, key: str) -> bool:
        """
        Check whether an item exists in the cache.

        Returns:
            True if the key exists; False if missing or the check failed
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: Any, ttl: TTL = 0) -> None:
        """
        Store an item in the cache.

        Args:
            key: Cache key
            value: Value to store
            ttl: Expiry in seconds or as a timedelta (0/None = no expiry)

        Raises:
            Exception: Backend errors are propagated unchanged
        """
        pass

    @abstractmethod
    async def pull(self, key: str, default: Any = None) -> Any:
        """Retrieve an item from the cache and delete it."""
        pass

    @abstractmethod
    async def add(self, key: str, value: Any, ttl: TTL = 0) -> bool:
        """
        Store an item only if the key does not already exist.

        Returns:
            True if the value was newly stored, False otherwise (including on errors)
        """
        pass

    @abstractmethod
    async def remember(self, key: str, ttl: TTL, compute: Callable[[], Any]) -> Any:
        """
        Get an item from the cache, or compute and store it.

        Args:
            key: Cache key
            ttl: Expiry for the computed value
            compute: Zero-argument callable (sync or async) producing the value

        Returns:
            The cached value on a hit, the computed value on a miss
        """
        pass

    async def remember_forever(self, key: str, compute: Callable[[], Any]) -> Any:
        """Get an item from the cache, or compute and store it without expiry."""
        return await self.remember(key, 0, compute)

    @abstractmethod
    async def forever(self, key: str, value: Any) -> bool:
        """
        Store an item in the cache indefinitely.

        Returns:
            True if stored, False on any error
        """
        pass

    @abstractmethod
    async def forget(self, key: str) -> bool:
        """Remove an item from the cache. Returns False on error."""
        pass

    @abstractmethod
    async def flush(self) -> bool:
        """Remove all items from the cache."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Close the store and release resources.

        Should be called during graceful shutdown.
        """
        pass
