"""Actuator Hunter - Spring Boot Actuator exposure scan check."""

__version__ = "1.0.0"
__author__ = "VILLEN Security"

from actuator_hunter.core.config import Settings
from actuator_hunter.core.models import EndpointSignature, Finding, HttpRequest
from actuator_hunter.extension import ActuatorScanCheck, HostApi
from actuator_hunter.prober.scanner import ActuatorProber

__all__ = [
    "Settings",
    "EndpointSignature",
    "Finding",
    "HttpRequest",
    "ActuatorScanCheck",
    "HostApi",
    "ActuatorProber",
]
