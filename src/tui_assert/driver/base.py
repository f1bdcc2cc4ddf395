"""Driver interface: live state reads plus a failure sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from tui_assert.core.errors import AssertionFailedError


@dataclass
class File:
    name: str
    status: str = ""


@dataclass
class Commit:
    name: str
    sha: str = ""


@dataclass
class StashEntry:
    name: str
    index: int = 0


@dataclass
class Ref:
    name: str


@dataclass
class Model:
    files: list[File] = field(default_factory=list)
    commits: list[Commit] = field(default_factory=list)
    stash_entries: list[StashEntry] = field(default_factory=list)


@dataclass
class View:
    """A panel of the application under test."""

    name: str
    title: str = ""
    editable: bool = False
    lines: list[str] = field(default_factory=list)
    selected_idx: int = 0

    def buffer(self) -> str:
        return "\n".join(self.lines)

    def buffer_lines(self) -> list[str]:
        return list(self.lines)

    def selected_line(self) -> str:
        if 0 <= self.selected_idx < len(self.lines):
            return self.lines[self.selected_idx]
        return ""

    def selected_line_idx(self) -> int:
        return self.selected_idx


@dataclass
class Context:
    """The focused context; ``list_context`` tags list-type panels."""

    key: str
    view: View
    list_context: bool = False

    def get_view(self) -> View:
        return self.view

    def get_key(self) -> str:
        return self.key


@runtime_checkable
class FailureSink(Protocol):
    def fail(self, message: str) -> None: ...


@runtime_checkable
class StateSource(Protocol):
    def model(self) -> Model: ...

    def checked_out_ref(self) -> Ref: ...

    def current_context(self) -> Context: ...

    def view(self, name: str) -> View: ...

    def main_view(self) -> View: ...

    def secondary_view(self) -> View: ...


@runtime_checkable
class GuiDriver(StateSource, FailureSink, Protocol):
    """State reads plus failure signalling, as required by ``Assert``."""


class RaisingSink:
    """Failure sink that aborts the scenario by raising AssertionFailedError."""

    def fail(self, message: str) -> None:
        raise AssertionFailedError(message)
