"""Handle constructors for not-yet-created resources.

Nothing here talks to the service: each helper composes a parent handle with
a generated name and returns ``(handle, name)``.
"""

from __future__ import annotations

from azure.storage.fileshare import (
    ShareClient,
    ShareDirectoryClient,
    ShareFileClient,
    ShareServiceClient,
)

from fileshare_testkit.naming import (
    generate_directory_name,
    generate_file_name,
    generate_share_name,
)


def get_share(fsu: ShareServiceClient) -> tuple[ShareClient, str]:
    name = generate_share_name()
    return fsu.get_share_client(name), name


def get_directory_from_share(share: ShareClient) -> tuple[ShareDirectoryClient, str]:
    name = generate_directory_name()
    return share.get_directory_client(name), name


def get_directory_from_directory(
    parent: ShareDirectoryClient,
) -> tuple[ShareDirectoryClient, str]:
    name = generate_directory_name()
    return parent.get_subdirectory_client(name), name


def get_file_from_share(share: ShareClient) -> tuple[ShareFileClient, str]:
    """File handle in the share's root directory."""
    return get_file_from_directory(share.get_directory_client())


def get_file_from_directory(directory: ShareDirectoryClient) -> tuple[ShareFileClient, str]:
    name = generate_file_name()
    return directory.get_file_client(name), name
