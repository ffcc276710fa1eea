"""
redis-store — Default Values

A fallback passed to a read operation is either a literal value or a supplier.
Suppliers are only invoked when the fallback is actually needed.

Example:
    await store.get("report", Lazy(build_report))
    await store.get("report", build_report)  # bare callables are suppliers too
    await store.get("report", "n/a")
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Lazy(Generic[T]):
    """Explicit supplier: a zero-argument callable evaluated on demand."""

    factory: Callable[[], T | Awaitable[T]]

    async def resolve(self) -> T:
        return await call_supplier(self.factory)


async def call_supplier(supplier: Callable[[], Any]) -> Any:
    """Invoke a zero-argument callable, awaiting its result if needed."""
    result = supplier()
    if inspect.isawaitable(result):
        result = await result
    return result


async def resolve_default(default: Any) -> Any:
    """Return the literal default, or the result of invoking a supplier."""
    if isinstance(default, Lazy):
        return await default.resolve()
    if callable(default):
        return await call_supplier(default)
    return default
