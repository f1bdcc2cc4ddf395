"""Configuration loading for tui-assert."""

from __future__ import annotations

import pathlib
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tui_assert.constants import CONFIG_FILE, DEFAULT_RETRY_SCHEDULE_MS, SESSION_DIR
from tui_assert.core.errors import ConfigError
from tui_assert.testing.retry import validate_schedule


class RetryConfig(BaseModel):
    schedule_ms: list[int] = Field(default_factory=lambda: list(DEFAULT_RETRY_SCHEDULE_MS))

    @field_validator("schedule_ms")
    @classmethod
    def _check_schedule(cls, value: list[int]) -> list[int]:
        validate_schedule(value)
        return value

    @property
    def total_wait_ms(self) -> int:
        return sum(self.schedule_ms)

    @property
    def evaluations(self) -> int:
        return len(self.schedule_ms)


class RunnerConfig(BaseModel):
    retry: RetryConfig = Field(default_factory=RetryConfig)
    session_dir: str = SESSION_DIR
    echo_log: bool = False


def load_config(path: str | pathlib.Path | None = None) -> RunnerConfig:
    """Load a YAML config file. A missing file yields the defaults."""
    path = pathlib.Path(path or CONFIG_FILE)
    if not path.exists():
        return RunnerConfig()
    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if raw is None:
        return RunnerConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at the top level of {path}")
    try:
        return RunnerConfig(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc
