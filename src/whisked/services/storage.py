"""Helpers shared by the local stores."""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import ParamSpec, TypeVar

from whisked.domain.errors import PersistenceError

_P = ParamSpec("_P")
_T = TypeVar("_T")

_logger = logging.getLogger(__name__)


@dataclass
class KeyedLocks:
    """One asyncio lock per key, dropped once nobody holds or awaits it."""

    _locks: dict[str, asyncio.Lock] = field(default_factory=dict)
    _users: dict[str, int] = field(default_factory=dict)

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """Serialize callers that use the same key."""
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


async def call_repository(
    operation: str,
    meal_id: str | None,
    func: Callable[_P, _T],
    *args: _P.args,
    **kwargs: _P.kwargs,
) -> _T:
    """Run a blocking repository call off the event loop.

    Any failure is re-raised as ``PersistenceError``.
    """
    try:
        return await asyncio.to_thread(func, *args, **kwargs)
    except Exception as exc:
        _logger.warning("Store %s failed for %s: %s", operation, meal_id, exc)
        raise PersistenceError(operation, meal_id) from exc
