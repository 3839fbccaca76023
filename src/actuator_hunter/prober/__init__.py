"""Prober module - Actuator endpoint probing."""

from actuator_hunter.prober.matchers import Matcher, StatusKeywordMatcher
from actuator_hunter.prober.scanner import ActuatorProber
from actuator_hunter.prober.signatures import DEFAULT_SIGNATURES, load_signatures
from actuator_hunter.prober.transport import HttpTransport, HttpxTransport

__all__ = [
    "ActuatorProber",
    "DEFAULT_SIGNATURES",
    "HttpTransport",
    "HttpxTransport",
    "Matcher",
    "StatusKeywordMatcher",
    "load_signatures",
]
