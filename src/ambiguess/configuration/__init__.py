"""Configuration loading utilities for ambiguess."""

from .settings import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_TIMEZONES,
    DisplaySettings,
    GuessSettings,
    Settings,
    bootstrap_settings,
    load_settings,
    load_zone,
    resolve_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_TIMEZONES",
    "DisplaySettings",
    "GuessSettings",
    "Settings",
    "bootstrap_settings",
    "load_settings",
    "load_zone",
    "resolve_config",
]
