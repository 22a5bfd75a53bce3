"""Application settings models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubedeck.constants.defaults import (
    LOG_FORMAT_MODE_DEFAULT,
    NAMESPACE_DEFAULT,
    THEME_DEFAULT,
)
from kubedeck.constants.limits import (
    DEFAULT_LOG_TAIL_LINES,
    LOG_TAIL_LINES_MAX,
    LOG_TAIL_LINES_MIN,
    REFRESH_INTERVAL_MIN,
    WORKLOAD_LOG_TAIL_LINES,
)
from kubedeck.constants.timeouts import (
    MUTATING_COMMAND_TIMEOUT,
    READ_COMMAND_TIMEOUT,
    REFRESH_INTERVAL,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Cluster scope
    context: str | None = None
    namespace: str = NAMESPACE_DEFAULT
    targets: list[str] = Field(default_factory=list)

    # Refresh and remote call timing (seconds)
    refresh_interval: float = REFRESH_INTERVAL
    read_timeout: float = READ_COMMAND_TIMEOUT
    command_timeout: float = MUTATING_COMMAND_TIMEOUT

    # Log viewing
    log_tail_lines: int = DEFAULT_LOG_TAIL_LINES
    workload_log_tail_lines: int = WORKLOAD_LOG_TAIL_LINES
    log_format_mode: bool = LOG_FORMAT_MODE_DEFAULT

    # UI preferences
    theme: str = THEME_DEFAULT

    @field_validator("refresh_interval")
    @classmethod
    def _check_refresh_interval(cls, value: float) -> float:
        if value < REFRESH_INTERVAL_MIN:
            raise ValueError(f"refresh_interval must be at least {REFRESH_INTERVAL_MIN}s")
        return value

    @field_validator("read_timeout", "command_timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeouts must be positive")
        return value

    @field_validator("log_tail_lines", "workload_log_tail_lines")
    @classmethod
    def _check_tail_lines(cls, value: int) -> int:
        if not LOG_TAIL_LINES_MIN <= value <= LOG_TAIL_LINES_MAX:
            raise ValueError(
                f"tail lines must be between {LOG_TAIL_LINES_MIN} and {LOG_TAIL_LINES_MAX}"
            )
        return value

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, value: str) -> str:
        return value.strip() or NAMESPACE_DEFAULT

    @field_validator("targets")
    @classmethod
    def _dedupe_targets(cls, value: list[str]) -> list[str]:
        seen: list[str] = []
        for name in value:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return seen


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
