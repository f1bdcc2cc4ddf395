"""Shared fixtures: an in-memory driver and a virtual clock."""

from __future__ import annotations

from typing import Callable

import pytest

from tui_assert.driver.memory import MemoryDriver


class FakeClock:
    """Stands in for time.sleep; fires scheduled state changes as time advances."""

    def __init__(self):
        self.now_ms = 0
        self.sleeps: list[int] = []
        self._pending: list[tuple[int, Callable[[], None]]] = []

    def sleep(self, seconds: float) -> None:
        ms = round(seconds * 1000)
        self.sleeps.append(ms)
        self.now_ms += ms
        due = [p for p in self._pending if p[0] <= self.now_ms]
        self._pending = [p for p in self._pending if p[0] > self.now_ms]
        for _, fn in due:
            fn()

    def at(self, ms: int, fn: Callable[[], None]) -> None:
        self._pending.append((ms, fn))


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def driver():
    return MemoryDriver()
