"""Driver interface and an in-memory implementation."""

from tui_assert.driver.base import (
    Commit,
    Context,
    FailureSink,
    File,
    GuiDriver,
    Model,
    RaisingSink,
    Ref,
    StashEntry,
    StateSource,
    View,
)
from tui_assert.driver.memory import MemoryDriver

__all__ = [
    "Commit",
    "Context",
    "FailureSink",
    "File",
    "GuiDriver",
    "MemoryDriver",
    "Model",
    "RaisingSink",
    "Ref",
    "StashEntry",
    "StateSource",
    "View",
]
