"""fileshare-testkit: helpers for tests against a live Azure Files account.

Typical use inside a test:

    fsu = get_fsu()
    share, share_name = create_new_share(fsu)
    directory, _ = create_new_directory_from_share(share)
    file, _ = create_new_file_from_directory(directory, 1024)
"""

from fileshare_testkit.assertions import (
    expect_created,
    expect_status,
    expect_storage_error,
    validate_storage_error,
)
from fileshare_testkit.config import Settings, get_account_and_key, get_settings
from fileshare_testkit.errors import ConfigurationError, CredentialsError, FileShareKitError
from fileshare_testkit.handles import (
    get_directory_from_directory,
    get_directory_from_share,
    get_file_from_directory,
    get_file_from_share,
    get_share,
)
from fileshare_testkit.naming import (
    DIRECTORY_PREFIX,
    FILE_PREFIX,
    SHARE_PREFIX,
    generate_directory_name,
    generate_file_name,
    generate_name,
    generate_share_name,
)
from fileshare_testkit.resources import (
    create_new_directory_from_directory,
    create_new_directory_from_share,
    create_new_directory_with_prefix,
    create_new_file_from_directory,
    create_new_file_from_share,
    create_new_file_from_share_with_default_data,
    create_new_file_with_prefix,
    create_new_share,
    create_new_share_with_prefix,
    delete_share,
    sweep_shares,
)
from fileshare_testkit.service import get_alternate_fsu, get_credential, get_fsu
from fileshare_testkit.testdata import BASIC_HEADERS, BASIC_METADATA, FILE_DEFAULT_DATA

__all__ = [
    "BASIC_HEADERS",
    "BASIC_METADATA",
    "DIRECTORY_PREFIX",
    "FILE_DEFAULT_DATA",
    "FILE_PREFIX",
    "SHARE_PREFIX",
    "ConfigurationError",
    "CredentialsError",
    "FileShareKitError",
    "Settings",
    "create_new_directory_from_directory",
    "create_new_directory_from_share",
    "create_new_directory_with_prefix",
    "create_new_file_from_directory",
    "create_new_file_from_share",
    "create_new_file_from_share_with_default_data",
    "create_new_file_with_prefix",
    "create_new_share",
    "create_new_share_with_prefix",
    "delete_share",
    "expect_created",
    "expect_status",
    "expect_storage_error",
    "generate_directory_name",
    "generate_file_name",
    "generate_name",
    "generate_share_name",
    "get_account_and_key",
    "get_alternate_fsu",
    "get_credential",
    "get_directory_from_directory",
    "get_directory_from_share",
    "get_file_from_directory",
    "get_file_from_share",
    "get_fsu",
    "get_settings",
    "get_share",
    "sweep_shares",
    "validate_storage_error",
]
