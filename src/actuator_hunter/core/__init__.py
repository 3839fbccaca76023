"""Core module - Configuration, models, logging and exceptions."""

from actuator_hunter.core.config import Settings
from actuator_hunter.core.models import (
    EndpointSignature,
    Finding,
    HttpRequest,
    HttpService,
    ProbeOutcome,
)

__all__ = [
    "Settings",
    "EndpointSignature",
    "Finding",
    "HttpRequest",
    "HttpService",
    "ProbeOutcome",
]
