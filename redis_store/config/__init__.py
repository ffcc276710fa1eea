"""
redis-store — Configuration Module

Provides typed configuration loading and validation.
"""

from .loader import get_config, load_config, reload_config
from .schemas import (
    CacheConfig,
    Environment,
    LogLevel,
    StoreConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "get_config",
    "reload_config",
    # Main config
    "StoreConfig",
    # Enums
    "Environment",
    "LogLevel",
    # Config sections
    "CacheConfig",
]
