"""HTTP transports used by the prober to send probe requests."""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx

from actuator_hunter.core.config import ProberSettings
from actuator_hunter.core.exceptions import (
    ConnectionFailedError,
    NetworkTimeoutError,
    TransportError,
)
from actuator_hunter.core.models import HttpRequest, ProbeOutcome


class HttpTransport(ABC):
    """Sends one request and returns its outcome.

    Implementations must be safe to share between threads, since the host
    may scan several targets concurrently with one transport. Any network
    level failure is raised as a ``TransportError``.
    """

    @abstractmethod
    def send(self, request: HttpRequest) -> ProbeOutcome:
        ...

    def close(self) -> None:
        pass

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class HttpxTransport(HttpTransport):
    """
    Synchronous transport backed by a shared ``httpx.Client``.

    Timeout, redirect and TLS verification policy all live here; the prober
    has no timeout logic of its own.
    """

    def __init__(
        self,
        settings: ProberSettings | None = None,
        client: httpx.Client | None = None,
    ):
        self.settings = settings or ProberSettings()
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=httpx.Timeout(self.settings.timeout),
            follow_redirects=self.settings.follow_redirects,
            max_redirects=self.settings.max_redirects,
            verify=self.settings.verify_ssl,
        )

    def send(self, request: HttpRequest) -> ProbeOutcome:
        try:
            response = self.client.request(
                request.method,
                request.url,
                headers=list(request.headers),
                content=request.body.encode() if request.body else None,
            )
        except httpx.TimeoutException as e:
            raise NetworkTimeoutError(f"Request to {request.url} timed out") from e
        except httpx.ConnectError as e:
            raise ConnectionFailedError(f"Connection error: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request to {request.url} failed: {e}") from e

        return ProbeOutcome(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
