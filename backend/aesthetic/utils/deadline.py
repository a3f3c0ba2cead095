"""Per-request deadline shared by every external call of one synthesis."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


class Deadline:
    def __init__(self, seconds: float, *, clock=time.monotonic) -> None:
        self._clock = clock
        self._expires_at = clock() + seconds

    def remaining(self) -> float:
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` within what's left; raises ``TimeoutError`` past the deadline."""
        return await asyncio.wait_for(awaitable, timeout=self.remaining())
