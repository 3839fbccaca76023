"""Turn a matched probe into a host-facing finding."""

from __future__ import annotations

from html import escape

from actuator_hunter.core.models import (
    Confidence,
    EndpointSignature,
    Finding,
    HttpRequestResponse,
    Severity,
)

REFERENCE_URL = "https://www.wiz.io/blog/spring-boot-actuator-misconfigurations"

REMEDIATION = (
    "Disable or secure the exposed actuator endpoint in the application "
    "configuration (e.g., application.properties or application.yml)."
)

BACKGROUND_HTML = (
    "<b>Vulnerability Information & Remediation:</b><br>"
    "Exposing actuator endpoints publicly can lead to serious security risks, "
    "including unauthorized configuration changes or sensitive data leaks.<br><br>"
    "<b>References:</b><ul>"
    f"<li><a href='{REFERENCE_URL}'>Wiz: Spring Boot Actuator Misconfigurations</a></li>"
    "</ul>"
)


def issue_detail(signature: EndpointSignature) -> str:
    """HTML describing which path leaked and what proved it."""
    return (
        "The application exposes a Spring Boot Actuator endpoint at "
        f"<b>{escape(signature.path)}</b>.<br><br>"
        "This was confirmed by receiving a HTTP 200 OK status code and finding "
        f"the signature keyword <b>'{escape(signature.signature_keyword)}'</b> "
        "in the response body. This leak can expose sensitive configuration "
        "details or routing tables."
    )


def synthesize(
    signature: EndpointSignature,
    base_url: str,
    evidence: HttpRequestResponse,
) -> Finding:
    """Build the finding for a matched signature.

    Pure and deterministic. Every signature is reported as HIGH severity with
    CERTAIN confidence: a 200 response carrying the keyword is treated as
    conclusive.
    """
    return Finding(
        name=signature.issue_name,
        detail_html=issue_detail(signature),
        remediation=REMEDIATION,
        background_html=BACKGROUND_HTML,
        remediation_background=None,
        severity=Severity.HIGH,
        typical_severity=Severity.HIGH,
        confidence=Confidence.CERTAIN,
        base_url=base_url,
        evidence=evidence,
    )
