from __future__ import annotations

import os
from typing import Iterator

import pytest

from aadauth.catalog import authentication_properties
from aadauth.config import MapConfiguration
from aadauth.settings import AadSettings


@pytest.fixture(autouse=True)
def clear_sonar_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove SONAR_AUTH_AAD_* vars to prevent cross-test leakage.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = [k for k in os.environ if k.upper().startswith("SONAR_AUTH_AAD_")]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield


@pytest.fixture()
def config() -> MapConfiguration:
    """In-memory configuration with the authentication catalog registered."""
    return MapConfiguration(definitions=authentication_properties())


@pytest.fixture()
def under_test(config: MapConfiguration) -> AadSettings:
    return AadSettings(config)
