"""pytest plugin exposing live-account fixtures.

Registered through the ``pytest11`` entry point, so any test session with
the package installed can request ``fsu``, ``share``, ``directory`` or
``file`` directly.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from azure.storage.fileshare import (
    ShareClient,
    ShareDirectoryClient,
    ShareFileClient,
    ShareServiceClient,
)

from fileshare_testkit.config import Settings, get_settings
from fileshare_testkit.errors import ConfigurationError, CredentialsError
from fileshare_testkit.resources import (
    create_new_directory_from_share,
    create_new_file_from_share_with_default_data,
    create_new_share,
    delete_share,
)
from fileshare_testkit.service import get_alternate_fsu, get_fsu


@pytest.fixture(scope="session")
def testkit_settings() -> Settings:
    """Loaded settings. Malformed settings abort the run."""
    try:
        return get_settings()
    except ConfigurationError as e:
        pytest.exit(str(e), returncode=pytest.ExitCode.USAGE_ERROR)


@pytest.fixture(scope="session")
def fsu(testkit_settings: Settings) -> ShareServiceClient:
    """Primary account service client. Missing credentials abort the run."""
    try:
        return get_fsu(testkit_settings)
    except CredentialsError as e:
        pytest.exit(str(e), returncode=pytest.ExitCode.USAGE_ERROR)


@pytest.fixture(scope="session")
def alternate_fsu(testkit_settings: Settings) -> ShareServiceClient:
    """Secondary account service client; skips when not configured."""
    try:
        return get_alternate_fsu(testkit_settings)
    except CredentialsError as e:
        pytest.skip(str(e))


@pytest.fixture
def share(fsu: ShareServiceClient) -> Iterator[ShareClient]:
    """A freshly created share, deleted after the test."""
    client, _ = create_new_share(fsu)
    try:
        yield client
    finally:
        delete_share(client)


@pytest.fixture
def directory(share: ShareClient) -> ShareDirectoryClient:
    client, _ = create_new_directory_from_share(share)
    return client


@pytest.fixture
def file(share: ShareClient) -> ShareFileClient:
    """A root-directory file holding FILE_DEFAULT_DATA."""
    client, _ = create_new_file_from_share_with_default_data(share)
    return client
