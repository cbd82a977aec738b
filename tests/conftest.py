"""Global pytest fixtures for geotime."""

from __future__ import annotations

import pytest

from geotime.adapters.alphabets import ALPHABETS


@pytest.fixture(params=sorted(ALPHABETS))
def alphabet_name(request: pytest.FixtureRequest) -> str:
    """Parametrize a test over every registered alphabet name."""
    return request.param


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove geotime environment overrides for the duration of a test."""
    for name in ("GEOTIME_ALPHABET", "GEOTIME_DISPLAY_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
