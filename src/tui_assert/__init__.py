"""tui-assert — eventually-consistent assertions on live terminal UI state."""

__version__ = "0.1.0"
