"""Custom exceptions for Actuator Hunter.

Scanning itself never raises: a failed probe is reported as "no finding".
These exceptions cover the places where failing loudly is correct
(configuration, signature tables, extension setup) and the transport layer,
whose errors the prober catches and records.
"""

from __future__ import annotations


class ActuatorHunterError(Exception):
    """Base exception for all Actuator Hunter errors.

    All custom exceptions inherit from this class, allowing callers to
    catch every Actuator Hunter-specific error with a single except clause.
    """
    pass


class ConfigurationError(ActuatorHunterError):
    """Raised when settings cannot be loaded or the extension is misused."""
    pass


class SignatureTableError(ConfigurationError):
    """Raised when a signature table file is malformed or empty."""
    pass


class ProbeError(ActuatorHunterError):
    """Raised during endpoint probing operations."""
    pass


class TransportError(ProbeError):
    """Raised by an HTTP transport when a request cannot be completed.

    This includes failures in:
    - DNS resolution
    - TCP/TLS connection setup
    - Reading the response
    """
    pass


class NetworkTimeoutError(TransportError):
    """Raised when a network request times out."""
    pass


class ConnectionFailedError(TransportError):
    """Raised when a network connection fails."""
    pass
