"""CLI entry point — click-based commands."""

from __future__ import annotations

import sys
from typing import Optional

import click

from tui_assert import __version__
from tui_assert.config import load_config
from tui_assert.core.errors import (
    EXIT_OK,
    AssertionFailedError,
    ConfigError,
    exit_description,
)


@click.group()
@click.version_option(version=__version__, prog_name="tui-assert")
def main() -> None:
    """tui-assert — eventually-consistent assertions for terminal UI tests."""


def _load(config_path: Optional[str]):
    try:
        return load_config(config_path)
    except ConfigError as exc:
        click.echo(f"{exit_description(exc.exit_code)}: {exc}", err=True)
        sys.exit(exc.exit_code)


# ── schedule ──────────────────────────────────────────────────────

@main.command()
@click.option("--config", "config_path", default=None, metavar="FILE", help="YAML config file.")
def schedule(config_path: Optional[str]) -> None:
    """Show the retry schedule and its worst-case cost per assertion."""
    retry = _load(config_path).retry
    click.echo(f"Retry schedule (ms): {', '.join(str(w) for w in retry.schedule_ms)}")
    click.echo(f"  evaluations per assertion: {retry.evaluations}")
    click.echo(f"  worst-case sleep per assertion: {retry.total_wait_ms} ms")


# ── wait-path ─────────────────────────────────────────────────────

@main.command("wait-path")
@click.argument("path", type=click.Path())
@click.option("--absent", is_flag=True, help="Wait for the path to disappear instead.")
@click.option("--config", "config_path", default=None, metavar="FILE", help="YAML config file.")
def wait_path(path: str, absent: bool, config_path: Optional[str]) -> None:
    """Wait until PATH exists (or, with --absent, no longer exists)."""
    from tui_assert.driver.base import RaisingSink
    from tui_assert.testing.assertions import Assert

    retry = _load(config_path).retry
    # Filesystem assertions only need a failure sink, not live app state.
    assert_ = Assert(RaisingSink(), schedule=retry.schedule_ms)
    try:
        if absent:
            assert_.file_system_path_not_present(path)
        else:
            assert_.file_system_path_present(path)
    except AssertionFailedError as exc:
        click.echo(f"FAIL: {exc.message}", err=True)
        sys.exit(exc.exit_code)

    click.echo(f"OK: {path} {'absent' if absent else 'present'}")
    sys.exit(EXIT_OK)
