"""Shared fixtures: isolated settings and structlog state per test."""

from pathlib import Path

import pytest
import structlog

from propguard.config import get_settings
from propguard.validators import RuleOptions


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop any PROPGUARD_* environment leaking in and reset the settings cache."""
    for key in ("DEBUG", "LOG_LEVEL", "DEFAULT_SUBJECT_LABEL", "CACHE_DEFAULT_MESSAGE", "VALUE_ENCODING"):
        monkeypatch.delenv(f"PROPGUARD_{key}", raising=False)
    monkeypatch.chdir(Path(__file__).parent)  # keep a stray .env out of reach
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def version_options() -> RuleOptions:
    """Options resembling a runtime version rule."""
    return RuleOptions(
        subject_label="JDK Version",
        property_name="java.version",
        regex=r"1\.5.*",
    )
