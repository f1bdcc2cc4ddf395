"""Structured per-assertion logging for sessions."""

from __future__ import annotations

import json
import sys
import time
from typing import Any

from tui_assert.constants import DEFAULT_LOG_TAIL
from tui_assert.core.session import Session
from tui_assert.testing.retry import PollResult


class AssertionLogger:
    """Append-only JSON-lines log of assertion outcomes for a session.

    Only terminal outcomes are written; individual failed polls are not.
    """

    def __init__(self, session: Session, echo: bool = False):
        self.session = session
        self.echo = echo
        self._log_path = session.log_path()
        self._fh = None

    def open(self) -> None:
        self._log_path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = open(self._log_path, "a", encoding="utf-8")

    def close(self) -> None:
        if self._fh:
            self._fh.close()
            self._fh = None

    def log_assertion(self, name: str, result: PollResult) -> None:
        self._write({
            "step": self.session.next_step(),
            "timestamp": time.time(),
            "assertion": name,
            "passed": result.passed,
            "attempts": result.attempts,
            "slept_ms": result.slept_ms,
            "message": None if result.passed else result.message,
        })

    def log_event(self, event: str, **fields: Any) -> None:
        self._write({"timestamp": time.time(), "event": event, **fields})

    def _write(self, entry: dict[str, Any]) -> None:
        line = json.dumps(entry, ensure_ascii=False, default=str)
        if self._fh:
            self._fh.write(line + "\n")
            self._fh.flush()
        if self.echo:
            print(line, file=sys.stderr)

    def read_last_n(self, n: int = DEFAULT_LOG_TAIL) -> list[dict[str, Any]]:
        if not self._log_path.exists():
            return []
        lines = self._log_path.read_text(encoding="utf-8").strip().splitlines()
        return [json.loads(l) for l in lines[-n:]]
