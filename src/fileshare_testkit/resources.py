"""Create (and clean up) remote shares, directories and files for tests.

Every create helper issues a single request, asserts the service answered
201 Created and returns ``(handle, name)``. Service errors are not
interpreted: they propagate to the test.
"""

from __future__ import annotations

import structlog
from azure.core.exceptions import ResourceNotFoundError
from azure.storage.fileshare import (
    ContentSettings,
    ShareClient,
    ShareDirectoryClient,
    ShareFileClient,
    ShareServiceClient,
)

from fileshare_testkit.assertions import expect_created
from fileshare_testkit.handles import (
    get_directory_from_directory,
    get_directory_from_share,
    get_file_from_directory,
    get_share,
)
from fileshare_testkit.naming import PATH_NAME_MAX_LENGTH, SHARE_NAME_MAX_LENGTH, generate_name
from fileshare_testkit.testdata import FILE_DEFAULT_DATA

logger = structlog.get_logger()


def _create_share(share: ShareClient, name: str) -> None:
    expect_created(share.create_share, metadata=None, quota=None)
    logger.info("share.created", share=name)


def _create_directory(directory: ShareDirectoryClient, name: str, metadata: dict | None) -> None:
    expect_created(directory.create_directory, metadata=metadata)
    logger.info("directory.created", directory=name)


def _create_file(file: ShareFileClient, name: str, size: int) -> None:
    expect_created(file.create_file, size, content_settings=ContentSettings(), metadata=None)
    logger.info("file.created", file=name, size=size)


# Shares


def create_new_share(fsu: ShareServiceClient) -> tuple[ShareClient, str]:
    share, name = get_share(fsu)
    _create_share(share, name)
    return share, name


def create_new_share_with_prefix(fsu: ShareServiceClient, prefix: str) -> tuple[ShareClient, str]:
    name = generate_name(prefix, max_length=SHARE_NAME_MAX_LENGTH)
    share = fsu.get_share_client(name)
    _create_share(share, name)
    return share, name


# Directories


def create_new_directory_with_prefix(
    parent: ShareDirectoryClient, prefix: str
) -> tuple[ShareDirectoryClient, str]:
    name = generate_name(prefix, max_length=PATH_NAME_MAX_LENGTH)
    directory = parent.get_subdirectory_client(name)
    _create_directory(directory, name, metadata={})
    return directory, name


def create_new_directory_from_share(share: ShareClient) -> tuple[ShareDirectoryClient, str]:
    directory, name = get_directory_from_share(share)
    _create_directory(directory, name, metadata=None)
    return directory, name


def create_new_directory_from_directory(
    parent: ShareDirectoryClient,
) -> tuple[ShareDirectoryClient, str]:
    directory, name = get_directory_from_directory(parent)
    _create_directory(directory, name, metadata=None)
    return directory, name


# Files


def create_new_file_with_prefix(
    directory: ShareDirectoryClient, prefix: str, size: int
) -> tuple[ShareFileClient, str]:
    name = generate_name(prefix, max_length=PATH_NAME_MAX_LENGTH)
    file = directory.get_file_client(name)
    _create_file(file, name, size)
    return file, name


def create_new_file_from_share(share: ShareClient, size: int) -> tuple[ShareFileClient, str]:
    """Create a file in the share's root directory."""
    return create_new_file_from_directory(share.get_directory_client(), size)


def create_new_file_from_share_with_default_data(share: ShareClient) -> tuple[ShareFileClient, str]:
    """Create a file in the share's root directory holding FILE_DEFAULT_DATA."""
    file, name = create_new_file_from_share(share, len(FILE_DEFAULT_DATA))
    file.upload_range(FILE_DEFAULT_DATA, offset=0, length=len(FILE_DEFAULT_DATA))
    logger.debug("file.default_data_uploaded", file=name)
    return file, name


def create_new_file_from_directory(
    directory: ShareDirectoryClient, size: int
) -> tuple[ShareFileClient, str]:
    file, name = get_file_from_directory(directory)
    _create_file(file, name, size)
    return file, name


# Cleanup


def delete_share(share: ShareClient) -> bool:
    """Delete a share and its snapshots.

    Returns False when the share was already gone.
    """
    log = logger.bind(share=share.share_name)
    try:
        share.delete_share(delete_snapshots=True)
    except ResourceNotFoundError:
        log.debug("share.already_deleted")
        return False
    log.info("share.deleted")
    return True


def sweep_shares(fsu: ShareServiceClient, prefix: str) -> list[str]:
    """Delete every share whose name starts with ``prefix``.

    Removes shares left behind by aborted runs. Returns the deleted names.
    """
    deleted = []
    for props in fsu.list_shares(name_starts_with=prefix, include_snapshots=False):
        if delete_share(fsu.get_share_client(props.name)):
            deleted.append(props.name)
    logger.info("share.sweep_completed", prefix=prefix, deleted=len(deleted))
    return deleted
