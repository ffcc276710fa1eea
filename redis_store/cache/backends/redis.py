"""
redis-store — Redis Cache Store

Asynchronous pass-through adapter over a Redis connection:
- Every logical key is prefixed verbatim (no separator is inserted)
- Reads fall back to a literal default or a lazily evaluated supplier
- Typed accessors for bool/int/str values
- Per-key expiry (0 -> no expiry)

Each public operation issues exactly one Redis command, except pull()
which issues GET followed by DEL.

Concurrency notes:
- The adapter keeps no state besides the prefix and the client; thread and
  task safety of the client is provided by redis-py's connection pool.
- pull() is not an atomic pop: a put() landing between its GET and DEL is
  deleted without ever being read.
- remember() does not collapse concurrent misses: two callers may both run
  compute() and both store a result, and either value may win.
- flush() runs FLUSHALL and wipes the whole Redis server, not just keys
  under this store's prefix. Do not call it on a shared deployment.

Requires: redis>=5.0 with asyncio support

Example:
    store = await RedisStore.connect(CacheConfig(prefix="app:"))
    await store.put("user:1", "alice", ttl=60)
    name = await store.get_string("user:1", "bob")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from ...config import CacheConfig
from ...errors import CacheConnectionError
from ..coercion import decode_reply, encode_value, ensure_type, to_bool, to_int, to_string
from ..defaults import call_supplier, resolve_default
from ..interface import TTL, CacheStore

logger = logging.getLogger(__name__)

try:
    from redis.asyncio import Redis
    from redis.exceptions import RedisError
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "Redis async client is required but not installed. "
        "Install with: pip install 'redis>=5.0.0' or add 'redis' to your dependencies."
    ) from e


class RedisStore(CacheStore):
    """
    Redis-backed cache store.

    Notes:
    - Physical key is ``prefix + key``; callers avoid prefix/key collisions.
    - Values are stored as Redis strings; booleans are written as "1"/"0".
    - Replies are decoded as UTF-8; values that are not valid UTF-8 are
      returned as raw bytes.
    - Reads swallow errors and return the default; put() and remember()
      propagate RedisError; the other boolean operations return False.
    """

    def __init__(self, client: Redis, prefix: str = "") -> None:
        """
        Wrap an already constructed client.

        Args:
            client: redis.asyncio client, shared by reference
            prefix: Prefix prepended to every key
        """
        self._client = client
        self._prefix = prefix

    @classmethod
    async def connect(cls, config: CacheConfig | None = None) -> RedisStore:
        """
        Build a client from configuration and verify it with PING.

        Raises:
            CacheConnectionError: If Redis cannot be reached
        """
        config = config or CacheConfig()

        client = Redis(
            host=config.host,
            port=int(config.port),
            db=config.db,
            password=config.password or None,
            socket_timeout=config.socket_timeout,
            max_connections=config.max_connections,
            decode_responses=False,
        )

        try:
            await client.ping()
        except (RedisError, OSError) as e:
            logger.error(
                f"Redis liveness check failed at {config.address}: {e}",
                extra={"address": config.address, "db": config.db, "error": str(e)},
            )
            await client.aclose()
            raise CacheConnectionError(config.address, details={"db": config.db, "error": str(e)}) from e

        logger.info(
            f"Connected to Redis at {config.address} (db {config.db})",
            extra={"address": config.address, "db": config.db, "prefix": config.prefix},
        )
        return cls(client, prefix=config.prefix)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def client(self) -> Redis:
        return self._client

    # ------------ Helpers ------------

    def _make_key(self, key: str) -> str:
        """Create the physical (prefixed) key."""
        return self._prefix + key

    @staticmethod
    def _expiry_ms(ttl: TTL) -> int | None:
        """
        Normalize TTL to milliseconds:
        - None or 0 -> no expiry (return None)
        - positive -> milliseconds, at least 1
        - negative -> ValueError
        """
        if ttl is None:
            return None
        seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
        if seconds < 0:
            raise ValueError(f"ttl must not be negative, got {ttl!r}")
        if seconds == 0:
            return None
        return max(1, round(seconds * 1000))

    # ------------ Reads ------------

    async def get(self, key: str, default: Any = None) -> Any:
        """Retrieve an item, falling back to the (resolved) default."""
        physical_key = self._make_key(key)
        try:
            value = await self._client.get(physical_key)
        except RedisError as e:
            logger.error(
                f"Failed to get key '{physical_key}' from Redis: {e}",
                extra={"key": key, "prefix": self._prefix, "error": str(e)},
                exc_info=True,
            )
            return await resolve_default(default)

        if value is None:
            logger.debug(f"Cache miss for key '{physical_key}'", extra={"key": key, "prefix": self._prefix})
            return await resolve_default(default)

        return decode_reply(value)

    async def get_bool(self, key: str, default: bool = False) -> bool:
        raw = await self.get(key, None)
        if raw is None:
            return ensure_type(key, await resolve_default(default), bool)
        return to_bool(key, raw)

    async def get_int(self, key: str, default: int = 0) -> int:
        """Stored strings that are not base-10 integers yield the default."""
        raw = await self.get(key, None)
        if raw is not None:
            parsed = to_int(key, raw)
            if parsed is not None:
                return parsed
        return ensure_type(key, await resolve_default(default), int)

    async def get_string(self, key: str, default: str = "") -> str:
        raw = await self.get(key, None)
        if raw is None:
            return ensure_type(key, await resolve_default(default), str)
        return to_string(key, raw)

    async def has(self, key: str) -> bool:
        """Check if a key exists."""
        try:
            return bool(await self._client.exists(self._make_key(key)))
        except RedisError as e:
            logger.error(
                f"Failed to check existence of key '{key}' in Redis: {e}",
                extra={"key": key, "prefix": self._prefix, "error": str(e)},
                exc_info=True,
            )
            return False

    # ------------ Writes ------------

    async def put(self, key: str, value: Any, ttl: TTL = 0) -> None:
        """Store a value; Redis errors propagate to the caller."""
        await self._client.set(self._make_key(key), encode_value(value), px=self._expiry_ms(ttl))

    async def pull(self, key: str, default: Any = None) -> Any:
        """
        Retrieve an item and delete it.

        DEL is issued whatever the outcome of GET. The two commands are not
        atomic with respect to other writers.
        """
        physical_key = self._make_key(key)
        value = None
        try:
            value = await self._client.get(physical_key)
        except RedisError as e:
            logger.error(
                f"Failed to get key '{physical_key}' from Redis: {e}",
                extra={"key": key, "prefix": self._prefix, "error": str(e)},
                exc_info=True,
            )
        finally:
            try:
                await self._client.delete(physical_key)
            except RedisError as e:
                logger.error(
                    f"Failed to delete pulled key '{physical_key}' from Redis: {e}",
                    extra={"key": key, "prefix": self._prefix, "error": str(e)},
                    exc_info=True,
                )

        if value is None:
            return await resolve_default(default)
        return decode_reply(value)

    async def add(self, key: str, value: Any, ttl: TTL = 0) -> bool:
        """SET NX: store only when absent."""
        px = self._expiry_ms(ttl)
        try:
            return bool(await self._client.set(self._make_key(key), encode_value(value), px=px, nx=True))
        except RedisError as e:
            logger.error(
                f"Failed to add key '{key}' in Redis: {e}",
                extra={"key": key, "prefix": self._prefix, "ttl": px, "error": str(e)},
                exc_info=True,
            )
            return False

    async def remember(self, key: str, ttl: TTL, compute: Callable[[], Any]) -> Any:
        """
        Return the cached value, or run compute() once and store its result.

        There is no mutual exclusion between concurrent callers; see the
        module docstring.
        """
        value = await self.get(key, None)
        if value is not None:
            return value

        value = await call_supplier(compute)
        await self.put(key, value, ttl)
        return value

    async def forever(self, key: str, value: Any) -> bool:
        try:
            await self.put(key, value, 0)
        except RedisError as e:
            logger.error(
                f"Failed to store key '{key}' in Redis: {e}",
                extra={"key": key, "prefix": self._prefix, "error": str(e)},
                exc_info=True,
            )
            return False
        return True

    async def forget(self, key: str) -> bool:
        """Delete a single key; a missing key still counts as success."""
        try:
            await self._client.delete(self._make_key(key))
        except RedisError as e:
            logger.error(
                f"Failed to delete key '{key}' from Redis: {e}",
                extra={"key": key, "prefix": self._prefix, "error": str(e)},
                exc_info=True,
            )
            return False
        return True

    async def flush(self) -> bool:
        """
        Remove every key on the Redis server.

        Not scoped to the prefix: FLUSHALL also drops keys owned by other
        applications and other databases on the same server.
        """
        logger.warning(
            "Flushing ALL keys on the Redis server (not limited to prefix)",
            extra={"prefix": self._prefix},
        )
        try:
            return bool(await self._client.flushall())
        except RedisError as e:
            logger.error(
                f"Failed to flush Redis: {e}",
                extra={"prefix": self._prefix, "error": str(e)},
                exc_info=True,
            )
            return False

    async def close(self) -> None:
        """Close the Redis client and release resources."""
        try:
            await self._client.aclose()
            logger.info(f"Closed Redis cache store (prefix '{self._prefix}')")
        except (RedisError, OSError) as e:
            logger.warning(
                f"Error closing Redis client: {e}",
                extra={"prefix": self._prefix, "error": str(e)},
            )
