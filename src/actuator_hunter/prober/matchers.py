"""Response matching rules for actuator probes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from actuator_hunter.core.models import EndpointSignature, ProbeOutcome


class Matcher(ABC):
    """Decides whether a probe outcome proves a signature is exposed."""

    @abstractmethod
    def matches(self, signature: EndpointSignature, outcome: ProbeOutcome) -> bool:
        ...


class StatusKeywordMatcher(Matcher):
    """
    Match when the status is exactly ``expected_status`` and the body holds
    the signature keyword as a literal, case-sensitive substring.

    No decoding, normalization or regex is applied to the body, so generic
    keywords such as ``profiles`` can produce false positives.
    """

    def __init__(self, expected_status: int = 200):
        self.expected_status = expected_status

    def matches(self, signature: EndpointSignature, outcome: ProbeOutcome) -> bool:
        return (
            outcome.status_code == self.expected_status
            and signature.signature_keyword in outcome.body
        )
