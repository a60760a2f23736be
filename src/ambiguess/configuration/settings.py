"""Typed settings for ambiguess.

User configuration is wrapped in Pydantic models so the CLI can rely on
validated values. Settings are layered: defaults, then an optional JSON
file, then ``AMBIGUESS_*`` environment variables, then explicit
overrides from the command line. ``resolve_config`` turns the result into
the immutable ``GuessConfig`` the guessers consume; every zone name is
checked there, once, before any token is classified.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import tzinfo
from pathlib import Path
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz
from pydantic import BaseModel, Field, ValidationError, field_validator

from ambiguess.errors import ConfigurationError, InvalidTimezoneError
from ambiguess.guessing.models import GuessConfig, NamedZone

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".ambiguess" / "config.json"
DEFAULT_TIMEZONES = [
    "America/Los_Angeles",
    "America/New_York",
    "UTC",
    "Europe/Berlin",
    "Asia/Dubai",
    "Asia/Singapore",
    "Australia/Sydney",
]


def load_zone(name: str) -> tzinfo:
    """Load an IANA zone by name.

    Raises:
        InvalidTimezoneError: If the name is unknown or malformed
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezoneError(name) from exc


def _check_zone(name: str) -> str:
    try:
        load_zone(name)
    except InvalidTimezoneError as exc:
        raise ValueError(exc.message) from exc
    return name


class GuessSettings(BaseModel):
    """Inputs to the guessing engine."""

    timezones: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TIMEZONES),
        min_length=1,
        description="Zones to convert to and from for timestamps and dates",
    )
    local_timezone: Optional[str] = Field(
        default=None, description="Zone for naive dates; the system zone if unset"
    )
    dns_timeout: float = Field(2.0, gt=0, le=60, description="Seconds per DNS lookup")
    resolve_dns: bool = Field(True, description="Look up host names for IP addresses")

    @field_validator("timezones")
    def _validate_timezones(cls, value: List[str]) -> List[str]:
        return [_check_zone(name.strip()) for name in value]

    @field_validator("local_timezone")
    def _validate_local_timezone(cls, value: Optional[str]) -> Optional[str]:
        return _check_zone(value) if value else None


class DisplaySettings(BaseModel):
    """How guesses are presented."""

    show_unlikely: bool = Field(False, description="Also show unlikely matches")
    sort: bool = Field(True, description="Sort guesses by likeliness")
    verbose: bool = Field(False, description="Print goodness and source of each guess")
    color: bool = Field(True, description="Style output for the terminal")


class Settings(BaseModel):
    """Root configuration state."""

    guessing: GuessSettings = Field(default_factory=GuessSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from disk or raise if invalid."""

    if not path.exists():
        raise ConfigurationError(f"Settings file not found at {path}", details={"path": str(path)})
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Settings file {path} is not valid JSON: {exc}") from exc
    return _validate(payload)


def bootstrap_settings(
    *,
    path: Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Layer defaults, config file, environment and explicit overrides.

    A missing config file is not an error; the defaults apply.
    """
    if path.exists():
        merged = load_settings(path).model_dump(mode="python")
    else:
        logger.debug(f"No settings file at {path}, using defaults")
        merged = Settings().model_dump(mode="python")

    merged = _apply_env_overrides(merged)
    merged = _apply_overrides(merged, overrides or {})
    return _validate(merged)


def resolve_config(settings: Settings) -> GuessConfig:
    """Resolve zone names into the configuration handed to the guessers.

    Raises:
        InvalidTimezoneError: If any zone name cannot be loaded
        ConfigurationError: If the zone list is empty
    """
    guessing = settings.guessing
    if not guessing.timezones:
        raise ConfigurationError("At least one time zone must be configured")
    zones = tuple(NamedZone(name, load_zone(name)) for name in guessing.timezones)
    local = load_zone(guessing.local_timezone) if guessing.local_timezone else tz.tzlocal()
    return GuessConfig(zones=zones, local=local, dns_timeout=guessing.dns_timeout)


def _validate(payload: Dict[str, Any]) -> Settings:
    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _apply_overrides(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    guessing = data.setdefault("guessing", {})
    _set_env_override(guessing, "timezones", "AMBIGUESS_TIMEZONES", cast_list=True)
    _set_env_override(guessing, "local_timezone", "AMBIGUESS_LOCAL_TIMEZONE")
    _set_env_override(guessing, "dns_timeout", "AMBIGUESS_DNS_TIMEOUT")

    display = data.setdefault("display", {})
    _set_env_override(display, "show_unlikely", "AMBIGUESS_SHOW_UNLIKELY", cast_bool=True)
    _set_env_override(display, "sort", "AMBIGUESS_SORT", cast_bool=True)
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_bool: bool = False,
    cast_list: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_bool:
        mapping[key] = raw.lower() in {"1", "true", "yes"}
    elif cast_list:
        mapping[key] = split_zone_list(raw)
    else:
        mapping[key] = raw


def split_zone_list(raw: str) -> List[str]:
    """Split a comma-separated zone list, ignoring blank entries."""
    return [name.strip() for name in raw.split(",") if name.strip()]
