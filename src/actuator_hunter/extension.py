"""Scan-check integration with a host scanning platform.

The host hands the extension a capability handle on load. Everything the
check needs (transport, logger) comes from that handle and is passed on
explicitly, so tests can drive the check with a stub transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from actuator_hunter.auditor.consolidation import consolidate
from actuator_hunter.core.config import Settings
from actuator_hunter.core.exceptions import ConfigurationError
from actuator_hunter.core.logging import get_logger
from actuator_hunter.core.models import (
    AuditResult,
    ConsolidationAction,
    Finding,
    HttpRequestResponse,
)
from actuator_hunter.prober.scanner import ActuatorProber
from actuator_hunter.prober.signatures import DEFAULT_SIGNATURES, load_signatures
from actuator_hunter.prober.transport import HttpTransport

EXTENSION_NAME = "Spring Boot Actuator Hunter"
STARTUP_MESSAGE = "Spring Boot Scanner loaded. Hunting for /actuator endpoints..."


@dataclass
class HostApi:
    """Capabilities a host exposes to a loaded extension."""

    transport: HttpTransport
    logger: Any = field(default_factory=lambda: get_logger("actuator_hunter.extension"))
    extension_name: str = ""
    scan_checks: list[Any] = field(default_factory=list)

    def set_extension_name(self, name: str) -> None:
        self.extension_name = name

    def register_scan_check(self, check: Any) -> None:
        self.scan_checks.append(check)


class ActuatorScanCheck:
    """Active scan check reporting exposed actuator endpoints."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.prober: Optional[ActuatorProber] = None

    def initialize(self, api: HostApi) -> None:
        """Register with the host and build the prober from its transport."""
        signatures = DEFAULT_SIGNATURES
        if self.settings.signatures_file:
            signatures = load_signatures(self.settings.signatures_file)

        self.prober = ActuatorProber(
            transport=api.transport,
            signatures=signatures,
            user_agent=self.settings.prober.user_agent,
            logger=api.logger,
        )

        api.set_extension_name(EXTENSION_NAME)
        api.register_scan_check(self)
        api.logger.info(STARTUP_MESSAGE)

    def active_audit(
        self,
        base_request_response: HttpRequestResponse,
        insertion_point: Any = None,
    ) -> AuditResult:
        """Probe the base request's host; the insertion point is not used."""
        if self.prober is None:
            raise ConfigurationError("Scan check used before initialize()")

        findings = self.prober.scan(base_request_response.request)
        return AuditResult(findings=tuple(findings))

    def passive_audit(self, base_request_response: HttpRequestResponse) -> AuditResult:
        return AuditResult()

    def consolidate_issues(
        self,
        new_issue: Finding,
        existing_issue: Finding,
    ) -> ConsolidationAction:
        return consolidate(new_issue, existing_issue)
