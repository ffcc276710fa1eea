"""
redis-store — Cache Backends

Exports available cache store implementations.
"""

from .redis import RedisStore

__all__ = [
    "RedisStore",
]
