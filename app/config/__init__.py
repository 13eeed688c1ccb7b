"""Configuration package for runtime settings and startup validation."""

from .settings import (
    ActionSettings,
    AppSettings,
    SettingsLoadError,
    config_load_action_settings,
    config_load_settings,
)

__all__ = [
    "ActionSettings",
    "AppSettings",
    "SettingsLoadError",
    "config_load_action_settings",
    "config_load_settings",
]
