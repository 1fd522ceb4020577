"""Reachability probe for the file service endpoint."""

from __future__ import annotations

import httpx
import structlog

logger = structlog.get_logger()


def endpoint_reachable(
    url: str,
    *,
    timeout: float = 5.0,
    transport: httpx.BaseTransport | None = None,
) -> bool:
    """Return True if the endpoint answers HTTP at all.

    The request is unauthenticated, so the service normally rejects it with
    a 4xx; any response means the account endpoint exists and is reachable.
    """
    log = logger.bind(url=url)
    try:
        with httpx.Client(transport=transport, timeout=timeout) as client:
            response = client.get(url, params={"comp": "list"})
    except httpx.TimeoutException:
        log.warning("probe.timeout", timeout=timeout)
        return False
    except httpx.HTTPError as e:
        log.warning("probe.unreachable", error=str(e))
        return False

    log.debug("probe.reachable", status=response.status_code)
    return True
