"""Service clients for the configured storage accounts."""

from __future__ import annotations

import structlog
from azure.core.credentials import AzureNamedKeyCredential
from azure.storage.fileshare import ShareServiceClient

from fileshare_testkit.config import AccountCredentials, Settings, get_settings

logger = structlog.get_logger()


def _service_client(account: AccountCredentials, settings: Settings) -> ShareServiceClient:
    account_url = account.account_url(settings.endpoint_suffix)
    credential = AzureNamedKeyCredential(account.name, account.key.get_secret_value())
    logger.debug("service.client_created", account=account.name, url=account_url)
    return ShareServiceClient(
        account_url,
        credential=credential,
        connection_timeout=settings.connection_timeout,
        read_timeout=settings.read_timeout,
    )


def get_fsu(settings: Settings | None = None) -> ShareServiceClient:
    """Service client for the primary account.

    Raises CredentialsError when ACCOUNT_NAME/ACCOUNT_KEY are not set.
    """
    settings = settings or get_settings()
    return _service_client(settings.primary(), settings)


def get_alternate_fsu(settings: Settings | None = None) -> ShareServiceClient:
    """Service client for the secondary account.

    Raises CredentialsError when the secondary account is not configured;
    callers usually turn that into a skip.
    """
    settings = settings or get_settings()
    return _service_client(settings.secondary(), settings)


def get_credential(settings: Settings | None = None) -> tuple[AzureNamedKeyCredential, str]:
    """Shared-key credential and account name for the primary account."""
    account = (settings or get_settings()).primary()
    credential = AzureNamedKeyCredential(account.name, account.key.get_secret_value())
    return credential, account.name
