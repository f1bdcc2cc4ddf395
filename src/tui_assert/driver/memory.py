"""In-memory driver for exercising assertions without a live application."""

from __future__ import annotations

import copy
import threading
from typing import Iterable

from tui_assert.driver.base import (
    Commit,
    Context,
    File,
    Model,
    RaisingSink,
    Ref,
    StashEntry,
    View,
)

MAIN_VIEW = "main"
SECONDARY_VIEW = "secondary"


class MemoryDriver(RaisingSink):
    """Mutable application state guarded by a lock.

    Every read returns a copy taken under the lock, so a poll never sees a
    value torn by a concurrent mutation from another thread.
    """

    def __init__(self, branch: str = "master"):
        self._lock = threading.Lock()
        self._model = Model()
        self._ref = Ref(branch)
        self._views: dict[str, View] = {
            MAIN_VIEW: View(MAIN_VIEW),
            SECONDARY_VIEW: View(SECONDARY_VIEW),
        }
        self._list_views: set[str] = set()
        self._focused = MAIN_VIEW
        self.failures: list[str] = []

    # ── reads ─────────────────────────────────────────────────────

    def model(self) -> Model:
        with self._lock:
            return copy.deepcopy(self._model)

    def checked_out_ref(self) -> Ref:
        with self._lock:
            return Ref(self._ref.name)

    def current_context(self) -> Context:
        with self._lock:
            view = copy.deepcopy(self._views[self._focused])
            return Context(self._focused, view, self._focused in self._list_views)

    def view(self, name: str) -> View:
        with self._lock:
            # A view the application has not created yet reads as empty.
            view = self._views.get(name)
            return copy.deepcopy(view) if view is not None else View(name)

    def main_view(self) -> View:
        return self.view(MAIN_VIEW)

    def secondary_view(self) -> View:
        return self.view(SECONDARY_VIEW)

    def fail(self, message: str) -> None:
        with self._lock:
            self.failures.append(message)
        super().fail(message)

    # ── mutations ─────────────────────────────────────────────────

    def set_files(self, names: Iterable[str]) -> None:
        with self._lock:
            self._model.files = [File(n) for n in names]

    def set_commits(self, names: Iterable[str]) -> None:
        with self._lock:
            self._model.commits = [Commit(n) for n in names]

    def set_stash(self, names: Iterable[str]) -> None:
        with self._lock:
            self._model.stash_entries = [StashEntry(n, i) for i, n in enumerate(names)]

    def checkout(self, branch: str) -> None:
        with self._lock:
            self._ref = Ref(branch)

    def add_view(
        self,
        name: str,
        lines: Iterable[str] = (),
        title: str = "",
        editable: bool = False,
        list_view: bool = False,
    ) -> None:
        with self._lock:
            self._views[name] = View(name, title=title, editable=editable, lines=list(lines))
            if list_view:
                self._list_views.add(name)
            else:
                self._list_views.discard(name)

    def set_lines(self, name: str, lines: Iterable[str]) -> None:
        with self._lock:
            self._views[name].lines = list(lines)

    def set_title(self, name: str, title: str) -> None:
        with self._lock:
            self._views[name].title = title

    def select_line(self, name: str, idx: int) -> None:
        with self._lock:
            self._views[name].selected_idx = idx

    def focus(self, name: str) -> None:
        with self._lock:
            if name not in self._views:
                raise KeyError(f"No view named '{name}'")
            self._focused = name
