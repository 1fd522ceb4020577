"""Test configuration and fixtures."""

from __future__ import annotations

import pytest

from fileshare_testkit.config import CONFIG_FILE_ENV, ENV_PREFIX, get_settings
from tests.fakes import FAKE_KEY

SETTINGS_ENV_VARS = (
    "ACCOUNT_NAME",
    "ACCOUNT_KEY",
    "SECONDARY_ACCOUNT_NAME",
    "SECONDARY_ACCOUNT_KEY",
    CONFIG_FILE_ENV,
    f"{ENV_PREFIX}ENDPOINT_SUFFIX",
    f"{ENV_PREFIX}CONNECTION_TIMEOUT",
    f"{ENV_PREFIX}READ_TIMEOUT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Process environment with no account variables and no config file."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def primary_env(clean_env: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    clean_env.setenv("ACCOUNT_NAME", "acct1")
    clean_env.setenv("ACCOUNT_KEY", FAKE_KEY)
    return clean_env
