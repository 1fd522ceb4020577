"""Unit tests for the endpoint probe using httpx MockTransport."""

from __future__ import annotations

import httpx

from fileshare_testkit.probe import endpoint_reachable

URL = "https://acct1.file.core.windows.net/"


class TestEndpointReachable:
    def test_rejected_request_counts_as_reachable(self):
        captured = None

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal captured
            captured = request
            return httpx.Response(403, text="NoAuthenticationInformation")

        assert endpoint_reachable(URL, transport=httpx.MockTransport(handler)) is True
        assert captured is not None
        assert captured.url.host == "acct1.file.core.windows.net"
        assert captured.url.params["comp"] == "list"

    def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("name resolution failed", request=request)

        assert endpoint_reachable(URL, transport=httpx.MockTransport(handler)) is False

    def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        assert endpoint_reachable(URL, timeout=0.1, transport=httpx.MockTransport(handler)) is False
