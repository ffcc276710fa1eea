"""
redis-store — Redis-backed Key-Value Cache

Typed reads, expiring writes, store-if-absent and compute-and-cache
on top of a Redis connection.
"""

__version__ = "1.0.0"

from .cache import (
    CacheStore,
    Lazy,
    RedisStore,
    close_all_stores,
    create_store,
    get_store,
)
from .config import CacheConfig, StoreConfig, load_config
from .errors import (
    CacheConnectionError,
    CacheError,
    ConfigurationError,
    ErrorCode,
    StoreError,
    TypeMismatchError,
    extract_error_code,
)
from .logging_setup import setup_logging

__all__ = [
    "CacheStore",
    "RedisStore",
    "Lazy",
    "create_store",
    "get_store",
    "close_all_stores",
    "CacheConfig",
    "StoreConfig",
    "load_config",
    "setup_logging",
    "StoreError",
    "ConfigurationError",
    "CacheError",
    "CacheConnectionError",
    "TypeMismatchError",
    "ErrorCode",
    "extract_error_code",
]
