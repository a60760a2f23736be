"""Shared fixtures: a fixed current instant, the default zones and a fake resolver."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

import pytest

from ambiguess.configuration.settings import DEFAULT_TIMEZONES
from ambiguess.guessing.models import GuessConfig, NamedZone

NOW = datetime(2015, 9, 27, 9, 29, 35, tzinfo=timezone.utc)


class FakeResolver:
    """In-memory resolver; unknown names resolve to nothing."""

    def __init__(
        self,
        reverse: Optional[Dict[str, List[str]]] = None,
        forward: Optional[Dict[str, List[str]]] = None,
    ) -> None:
        self._reverse = reverse or {}
        self._forward = forward or {}
        self.lookups: List[str] = []

    def reverse(self, address: str) -> List[str]:
        self.lookups.append(address)
        return list(self._reverse.get(address, []))

    def forward(self, host: str) -> List[str]:
        self.lookups.append(host)
        return list(self._forward.get(host, []))


def _make_config(names: Optional[List[str]] = None, local: str = "UTC") -> GuessConfig:
    zones = tuple(NamedZone(name, ZoneInfo(name)) for name in (names or DEFAULT_TIMEZONES))
    return GuessConfig(zones=zones, local=ZoneInfo(local))


@pytest.fixture
def now() -> datetime:
    """2015-09-27T09:29:35Z."""
    return NOW


@pytest.fixture
def config() -> GuessConfig:
    """Default zones, local time is UTC."""
    return _make_config()


@pytest.fixture
def make_config():
    """Factory for configs with other zones or another local zone."""
    return _make_config


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver(
        reverse={"192.0.2.1": ["host.example.", "alias.example."]},
        forward={"host.example.": ["192.0.2.1", "2001:db8::1"]},
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's AMBIGUESS_* variables out of the tests."""
    for name in (
        "AMBIGUESS_TIMEZONES",
        "AMBIGUESS_LOCAL_TIMEZONE",
        "AMBIGUESS_DNS_TIMEOUT",
        "AMBIGUESS_SHOW_UNLIKELY",
        "AMBIGUESS_SORT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_resolver():
    """Factory for resolvers with other records."""
    return FakeResolver
