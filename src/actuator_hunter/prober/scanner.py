"""Sequential actuator prober."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from actuator_hunter.auditor.issues import synthesize
from actuator_hunter.core.config import DEFAULT_USER_AGENT
from actuator_hunter.core.exceptions import TransportError
from actuator_hunter.core.logging import get_logger
from actuator_hunter.core.models import (
    EndpointSignature,
    Finding,
    HttpRequest,
    HttpRequestResponse,
    ProbeFailure,
    ScanOutcome,
)
from actuator_hunter.prober.matchers import Matcher, StatusKeywordMatcher
from actuator_hunter.prober.signatures import DEFAULT_SIGNATURES
from actuator_hunter.prober.transport import HttpTransport

# Stale once the body is cleared
_BODY_HEADERS = ("Content-Type", "Content-Length")


class ActuatorProber:
    """
    Probes a target for exposed Spring Boot Actuator endpoints.

    For every signature in the table one GET request is derived from the
    base request and sent through the injected transport, strictly one after
    another. The prober keeps no per-scan state, so one instance may serve
    concurrent scans of different targets as long as the transport allows it.

    A probe that fails at the transport level is reported exactly like a
    probe that did not match: no finding, no retry.
    """

    def __init__(
        self,
        transport: HttpTransport,
        signatures: Iterable[EndpointSignature] = DEFAULT_SIGNATURES,
        matcher: Optional[Matcher] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: Any = None,
    ):
        self.transport = transport
        self.signatures: tuple[EndpointSignature, ...] = tuple(signatures)
        self.matcher = matcher or StatusKeywordMatcher()
        self.user_agent = user_agent
        self.logger = logger or get_logger("actuator_hunter.prober")

    def build_probe_request(
        self,
        base_request: HttpRequest,
        signature: EndpointSignature,
    ) -> HttpRequest:
        """Derive the GET request for one signature from the base request."""
        request = (
            base_request
            .with_method("GET")
            .with_path(signature.path)
            .with_body("")
        )
        for name in _BODY_HEADERS:
            request = request.with_removed_header(name)
        return request.with_header("User-Agent", self.user_agent)

    def probe(
        self,
        base_request: HttpRequest,
        signature: EndpointSignature,
    ) -> Optional[Finding]:
        """Send one probe and return a finding if it matched."""
        finding, _ = self._probe_one(base_request, signature)
        return finding

    def scan(self, base_request: HttpRequest) -> list[Finding]:
        """Probe every signature in table order and collect the findings."""
        return self.scan_with_diagnostics(base_request).findings

    def scan_with_diagnostics(self, base_request: HttpRequest) -> ScanOutcome:
        """Like ``scan`` but also report which probes could not be completed."""
        outcome = ScanOutcome()

        for signature in self.signatures:
            finding, failure = self._probe_one(base_request, signature)
            if finding is not None:
                outcome.findings.append(finding)
            if failure is not None:
                outcome.failures.append(failure)

        return outcome

    def _probe_one(
        self,
        base_request: HttpRequest,
        signature: EndpointSignature,
    ) -> tuple[Optional[Finding], Optional[ProbeFailure]]:
        request = self.build_probe_request(base_request, signature)

        try:
            response = self.transport.send(request)
        except TransportError as e:
            return None, self._failure(request, signature, e)
        except Exception as e:
            # Third-party transports may raise their own errors
            self.logger.warning("transport_raised_unexpected_error", error=repr(e))
            return None, self._failure(request, signature, e)

        if not self.matcher.matches(signature, response):
            return None, None

        host = base_request.service.host
        self.logger.info(
            f"[+] FOUND: {signature.path} on {host}",
            path=signature.path,
            host=host,
            issue=signature.issue_name,
        )

        evidence = HttpRequestResponse(request=request, response=response)
        return synthesize(signature, base_request.url, evidence), None

    def _failure(
        self,
        request: HttpRequest,
        signature: EndpointSignature,
        error: Exception,
    ) -> ProbeFailure:
        self.logger.debug(
            "probe_failed",
            url=request.url,
            path=signature.path,
            error=str(error),
        )
        return ProbeFailure(signature=signature, url=request.url, error=str(error))
