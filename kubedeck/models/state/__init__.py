"""Application state models."""

from kubedeck.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubedeck.models.state.config_manager import ConfigManager
from kubedeck.models.state.session import Session
from kubedeck.models.state.targets import (
    LastTargetError,
    TargetError,
    TargetSet,
    UnknownTargetError,
)

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "LastTargetError",
    "Session",
    "TargetError",
    "TargetSet",
    "UnknownTargetError",
]
