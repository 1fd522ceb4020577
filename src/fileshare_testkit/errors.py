"""Exceptions raised by fileshare-testkit itself.

Errors from the storage service are never wrapped: the SDK's
``HttpResponseError`` subclasses reach the test unchanged.
"""

from __future__ import annotations


class FileShareKitError(Exception):
    """Base error for the test kit."""


class CredentialsError(FileShareKitError):
    """Account credentials are missing or malformed."""


class ConfigurationError(FileShareKitError):
    """Settings could not be loaded."""
