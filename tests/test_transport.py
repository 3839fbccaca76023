"""Tests for the httpx-backed transport."""

import httpx
import pytest

from actuator_hunter.core.exceptions import (
    ConnectionFailedError,
    NetworkTimeoutError,
    TransportError,
)
from actuator_hunter.core.models import HttpRequest, ProbeOutcome
from actuator_hunter.prober.scanner import ActuatorProber
from actuator_hunter.prober.transport import HttpxTransport


def make_transport(handler) -> HttpxTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpxTransport(client=client)


class TestHttpxTransport:
    """Tests for HttpxTransport."""

    def test_send_returns_outcome(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='{"_links":{}}', headers={"content-type": "application/json"})

        transport = make_transport(handler)
        outcome = transport.send(HttpRequest.from_url("https://victim.example/actuator"))

        assert isinstance(outcome, ProbeOutcome)
        assert outcome.status_code == 200
        assert outcome.body == '{"_links":{}}'
        assert outcome.headers["content-type"] == "application/json"
        assert str(seen[0].url) == "https://victim.example/actuator"

    def test_probe_wire_format(self):
        """Probes go out as bodiless GETs with the scanner User-Agent."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(404)

        base = (
            HttpRequest.from_url("http://victim.example:8080/login")
            .with_method("POST")
            .with_body("a=b")
            .with_header("Content-Type", "application/x-www-form-urlencoded")
        )
        prober = ActuatorProber(make_transport(handler))

        assert prober.scan(base) == []
        assert [r.url.path for r in seen] == [
            "/actuator/env",
            "/actuator",
            "/actuator/mappings",
            "/env",
            "/actuator/gateway/routes",
        ]
        for request in seen:
            assert request.method == "GET"
            assert request.content == b""
            assert request.headers["user-agent"] == "Mozilla/5.0 (BugBountyScanner/1.0)"
            assert "content-type" not in request.headers
            assert request.url.port == 8080

    def test_timeout_maps_to_network_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        transport = make_transport(handler)

        with pytest.raises(NetworkTimeoutError):
            transport.send(HttpRequest.from_url("https://victim.example/actuator"))

    def test_connect_error_maps_to_connection_failed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        transport = make_transport(handler)

        with pytest.raises(ConnectionFailedError):
            transport.send(HttpRequest.from_url("https://victim.example/actuator"))

    def test_other_http_errors_map_to_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.RemoteProtocolError("bad response", request=request)

        transport = make_transport(handler)

        with pytest.raises(TransportError):
            transport.send(HttpRequest.from_url("https://victim.example/actuator"))

    def test_scan_survives_unreachable_host(self):
        """A host refusing every connection simply yields no findings."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        prober = ActuatorProber(make_transport(handler))
        outcome = prober.scan_with_diagnostics(HttpRequest.from_url("https://victim.example"))

        assert outcome.findings == []
        assert len(outcome.failures) == 5

    def test_injected_client_not_closed(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))

        with HttpxTransport(client=client):
            pass

        assert not client.is_closed

    def test_scan_ipv6_target(self):
        """An exposed endpoint on an IPv6 literal host is found."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text='{"_links":{}}')

        prober = ActuatorProber(make_transport(handler))
        outcome = prober.scan_with_diagnostics(HttpRequest.from_url("http://[::1]:8080/"))

        assert outcome.failures == []
        assert len(outcome.findings) == 1
        assert outcome.findings[0].base_url == "http://[::1]:8080/"
        assert str(seen[1].url) == "http://[::1]:8080/actuator"
        assert seen[1].headers["host"] == "[::1]:8080"
