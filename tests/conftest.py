"""
redis-store — Test Configuration and Shared Fixtures

Provides pytest configuration and shared fixtures for unit and integration tests.
Unit tests run against FakeRedis, an in-memory double of the redis.asyncio
commands the store issues; integration tests need a live Redis server.
"""

import os
import time
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import pytest
import pytest_asyncio
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import DataError

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"


class FakeRedis:
    """
    In-memory stand-in for the subset of redis.asyncio.Redis used by RedisStore.

    Behaves like a client created with decode_responses=False: values are
    kept and returned as bytes. Expiry follows an adjustable clock (see
    ``advance``). Setting ``fail`` makes every command raise redis'
    ConnectionError.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.closed = False
        self.data: dict[str, bytes] = {}
        self.expiry: dict[str, float] = {}
        self.commands: list[str] = []
        self._offset = 0.0

    # ------------ Test controls ------------

    def advance(self, seconds: float) -> None:
        """Move the fake clock forward."""
        self._offset += seconds

    def _now(self) -> float:
        return time.monotonic() + self._offset

    def _check(self, command: str) -> None:
        self.commands.append(command)
        if self.fail:
            raise RedisConnectionError("Error connecting to fake Redis")

    def _purge(self, name: str) -> None:
        deadline = self.expiry.get(name)
        if deadline is not None and self._now() >= deadline:
            self.data.pop(name, None)
            self.expiry.pop(name, None)

    @staticmethod
    def _encode(value: Any) -> bytes:
        # Mirrors redis-py's Encoder: bools and containers are rejected.
        if isinstance(value, bytes):
            return value
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise DataError(f"Invalid input of type: '{type(value).__name__}'.")
        return repr(value).encode()

    # ------------ Commands ------------

    async def ping(self) -> bool:
        self._check("PING")
        return True

    async def get(self, name: str) -> bytes | None:
        self._check("GET")
        self._purge(name)
        return self.data.get(name)

    async def set(
        self,
        name: str,
        value: Any,
        ex: int | None = None,
        px: int | None = None,
        nx: bool = False,
    ) -> bool | None:
        self._check("SET")
        encoded = self._encode(value)
        self._purge(name)
        if nx and name in self.data:
            return None
        self.data[name] = encoded
        self.expiry.pop(name, None)
        if ex is not None:
            self.expiry[name] = self._now() + ex
        if px is not None:
            self.expiry[name] = self._now() + px / 1000
        return True

    async def exists(self, *names: str) -> int:
        self._check("EXISTS")
        for name in names:
            self._purge(name)
        return sum(1 for name in names if name in self.data)

    async def delete(self, *names: str) -> int:
        self._check("DEL")
        deleted = 0
        for name in names:
            self._purge(name)
            if name in self.data:
                del self.data[name]
                self.expiry.pop(name, None)
                deleted += 1
        return deleted

    async def flushall(self) -> bool:
        self._check("FLUSHALL")
        self.data.clear()
        self.expiry.clear()
        return True

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_redis() -> FakeRedis:
    """A fresh, healthy FakeRedis."""
    return FakeRedis()


@pytest.fixture
def fake_redis_factory() -> Callable[..., FakeRedis]:
    """Build FakeRedis instances (e.g. failing ones)."""
    return FakeRedis


@pytest.fixture
def test_redis_url() -> str:
    """Get Redis URL for testing (database 15 for isolation)."""
    return os.environ.get("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest_asyncio.fixture
async def redis_client(test_redis_url: str) -> AsyncGenerator[Redis, None]:
    """
    Create a raw Redis client for testing.

    Automatically skips tests if Redis is not available.
    Clears the test database before and after each test.
    """
    client: Redis = Redis.from_url(test_redis_url, decode_responses=True)

    try:
        await client.ping()
    except Exception as e:
        await client.aclose()
        pytest.skip(f"Redis not available for testing: {e}")

    await client.flushdb()

    yield client

    try:
        await client.flushdb()
    finally:
        await client.aclose()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove store-related environment variables."""
    for var in (
        "CACHE_PREFIX",
        "REDIS_HOST",
        "REDIS_PORT",
        "REDIS_DB",
        "REDIS_PASSWORD",
        "REDIS_SOCKET_TIMEOUT",
        "REDIS_MAX_CONNECTIONS",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_store_factory() -> Generator[None, None, None]:
    """Reset store factory and config singleton after each test to prevent state leakage."""
    yield
    from redis_store.cache.factory import reset_store_factory
    from redis_store.config import loader

    reset_store_factory()
    loader._config_instance = None
