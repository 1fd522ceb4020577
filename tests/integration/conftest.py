"""Shared configuration for live Azure Files tests."""

from __future__ import annotations

import pytest

from fileshare_testkit.config import get_settings
from fileshare_testkit.errors import FileShareKitError
from fileshare_testkit.probe import endpoint_reachable


def _live_account_reason() -> str | None:
    """Why live tests cannot run, or None when they can."""
    try:
        settings = get_settings()
        account = settings.primary()
    except FileShareKitError as e:
        return str(e)
    url = account.account_url(settings.endpoint_suffix)
    if not endpoint_reachable(url):
        return f"file endpoint not reachable: {url}"
    return None


_SKIP_REASON = _live_account_reason()

e2e_skipif_marks = [
    pytest.mark.e2e,
    pytest.mark.skipif(_SKIP_REASON is not None, reason=_SKIP_REASON or ""),
]
