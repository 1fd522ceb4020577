"""Test kit configuration.

Configuration sources (in priority order):
1. Explicit keyword arguments
2. Environment variables (ACCOUNT_NAME, ACCOUNT_KEY, ..., FILESHARE_TESTKIT_ prefix
   for everything else)
3. YAML file (FILESHARE_TESTKIT_CONFIG or ./fileshare-testkit.yaml)
4. Defaults
"""

from __future__ import annotations

import base64
import binascii
import os
import re
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from fileshare_testkit.errors import ConfigurationError, CredentialsError

ENV_PREFIX = "FILESHARE_TESTKIT_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"
DEFAULT_CONFIG_FILE = Path("fileshare-testkit.yaml")

# Storage account names: 3-24 chars, lowercase letters and digits only
_ACCOUNT_NAME_RE = re.compile(r"^[a-z0-9]{3,24}$")


class AccountCredentials(BaseModel):
    """Shared-key credential pair for one storage account."""

    name: str
    key: SecretStr

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not _ACCOUNT_NAME_RE.match(value):
            raise ValueError(
                "account name must be 3-24 lowercase letters or digits"
            )
        return value

    @field_validator("key")
    @classmethod
    def _check_key(cls, value: SecretStr) -> SecretStr:
        try:
            base64.b64decode(value.get_secret_value(), validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("account key must be base64 encoded")
        return value

    def account_url(self, endpoint_suffix: str = "core.windows.net") -> str:
        return f"https://{self.name}.file.{endpoint_suffix}/"


def _config_file() -> Path | None:
    """Locate the optional YAML config file."""
    candidates = [os.environ.get(CONFIG_FILE_ENV), DEFAULT_CONFIG_FILE]
    for candidate in candidates:
        if not candidate:
            continue
        path = Path(candidate)
        if path.is_file():
            return path
    return None


class Settings(BaseSettings):
    """Test kit settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    # Account variables keep their unprefixed names
    account_name: str | None = Field(
        default=None, validation_alias=AliasChoices("account_name", "ACCOUNT_NAME")
    )
    account_key: SecretStr | None = Field(
        default=None, validation_alias=AliasChoices("account_key", "ACCOUNT_KEY")
    )
    secondary_account_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("secondary_account_name", "SECONDARY_ACCOUNT_NAME"),
    )
    secondary_account_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("secondary_account_key", "SECONDARY_ACCOUNT_KEY"),
    )

    endpoint_suffix: str = "core.windows.net"
    # Passed through to the SDK transport, in seconds
    connection_timeout: float = 20.0
    read_timeout: float = 60.0

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        config_file = _config_file()
        if config_file is not None:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=config_file))
        return tuple(sources)

    def primary(self) -> AccountCredentials:
        """Credentials for the primary account. Missing values are fatal."""
        if _blank(self.account_name, self.account_key):
            raise CredentialsError(
                "ACCOUNT_NAME and ACCOUNT_KEY environment vars must be set before running tests"
            )
        return _build_credentials(self.account_name, self.account_key)

    def secondary(self) -> AccountCredentials:
        """Credentials for the secondary account used by cross-account tests."""
        if _blank(self.secondary_account_name, self.secondary_account_key):
            raise CredentialsError(
                "SECONDARY_ACCOUNT_NAME and/or SECONDARY_ACCOUNT_KEY environment "
                "variables not specified."
            )
        return _build_credentials(self.secondary_account_name, self.secondary_account_key)

    def has_secondary(self) -> bool:
        return not _blank(self.secondary_account_name, self.secondary_account_key)


def _blank(name: str | None, key: SecretStr | None) -> bool:
    return not name or key is None or not key.get_secret_value()


def _build_credentials(name: str, key: SecretStr) -> AccountCredentials:
    try:
        return AccountCredentials(name=name, key=key)
    except ValidationError as e:
        raise CredentialsError(f"invalid credentials for account {name!r}: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Malformed values raise ConfigurationError instead of a raw ValidationError.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid fileshare-testkit settings: {e}") from e


def get_account_and_key(settings: Settings | None = None) -> tuple[str, str]:
    """Return the primary ``(account_name, account_key)`` pair."""
    account = (settings or get_settings()).primary()
    return account.name, account.key.get_secret_value()
