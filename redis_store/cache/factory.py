"""
redis-store — Cache Factory

Canonical factory for creating store instances from configuration.

Key points:
- Stores are connected once and shared by name for the process lifetime
- Construction fails fast (CacheConnectionError) if Redis does not answer PING
- Configuration is typed and validated via Pydantic models

Examples:
    from redis_store.cache.factory import create_store, get_store

    # Uses env-configured Redis (REDIS_HOST, REDIS_PORT, CACHE_PREFIX, ...)
    store = await create_store()

    # Or explicitly supply a CacheConfig (e.g., for tests)
    from redis_store.config import CacheConfig
    sessions = await create_store(CacheConfig(prefix="session:", db=1), name="sessions")
"""

from __future__ import annotations

import logging

from ..config import CacheConfig, get_config
from ..errors import CacheConnectionError, CacheOperationError, ConfigurationError
from .backends.redis import RedisStore
from .interface import CacheStore

logger = logging.getLogger(__name__)

# Global store instances registry
_store_instances: dict[str, CacheStore] = {}


async def create_store(
    config: CacheConfig | None = None,
    name: str = "default",
) -> CacheStore:
    """
    Create (or return the already registered) store instance.

    Args:
        config: Cache configuration (uses global config if not provided)
        name: Store instance name (for multiple store instances)

    Returns:
        Connected store instance

    Raises:
        CacheConnectionError: If Redis cannot be reached
        ConfigurationError: If the global configuration is invalid
        CacheOperationError: On any other construction failure
    """
    if name in _store_instances:
        logger.debug("Returning existing store instance: %s", name)
        return _store_instances[name]

    if config is None:
        config = get_config().cache

    logger.info(
        "Creating store instance '%s' for Redis at %s",
        name,
        config.address,
        extra={"store_name": name, "address": config.address},
    )

    try:
        store = await RedisStore.connect(config)
    except (CacheConnectionError, ConfigurationError):
        raise
    except Exception as e:
        logger.error(
            "Unexpected error creating store instance '%s': %s",
            name,
            e,
            extra={"store_name": name, "address": config.address, "error": str(e)},
            exc_info=True,
        )
        raise CacheOperationError(
            f"Failed to create store instance '{name}': {e}",
            details={"store_name": name, "address": config.address, "error": str(e)},
        ) from e

    _store_instances[name] = store
    logger.info("Store instance '%s' created successfully", name, extra={"store_name": name})
    return store


async def get_store(name: str = "default") -> CacheStore:
    """
    Get an existing store instance by name.

    If the instance doesn't exist, it is created from the global configuration.
    """
    if name not in _store_instances:
        logger.debug("Store instance '%s' not found, creating new instance", name)
        return await create_store(name=name)

    return _store_instances[name]


async def close_all_stores() -> None:
    """
    Close all store instances and release resources.

    Call during graceful shutdown.
    """
    if not _store_instances:
        logger.debug("No store instances to close")
        return

    logger.info("Closing %d store instance(s)...", len(_store_instances))

    for name, store in list(_store_instances.items()):
        await store.close()
        logger.info("Closed store instance: %s", name)

    _store_instances.clear()


def reset_store_factory() -> None:
    """
    Reset the factory by clearing all instance references.

    Does NOT call close() on instances - use close_all_stores() for proper cleanup.
    Only use this in testing contexts.
    """
    count = len(_store_instances)
    _store_instances.clear()
    logger.debug("Reset store factory, cleared %d instance reference(s)", count)


def list_store_instances() -> list[str]:
    """List all registered store instance names."""
    return list(_store_instances.keys())
