"""Test configuration and fixtures for Actuator Hunter."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from actuator_hunter.core.config import Settings
from actuator_hunter.core.exceptions import ConnectionFailedError
from actuator_hunter.core.models import HttpRequest, HttpService, ProbeOutcome
from actuator_hunter.prober.transport import HttpTransport


class StubTransport(HttpTransport):
    """Transport answering from a path -> outcome table and recording requests.

    A value that is an exception instance is raised instead of returned.
    Paths missing from the table answer 404.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.requests: list[HttpRequest] = []

    def send(self, request: HttpRequest) -> ProbeOutcome:
        self.requests.append(request)
        answer = self.responses.get(request.path, ProbeOutcome(status_code=404, body="Not Found"))
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def settings() -> Settings:
    """Default settings for testing."""
    return Settings()


@pytest.fixture
def temp_dir() -> Path:
    """Temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def base_request() -> HttpRequest:
    """A POST with a body, so probe derivation has something to strip."""
    return HttpRequest(
        service=HttpService(host="victim.example", port=443, secure=True),
        method="POST",
        path="/api/login?next=/home",
        headers=(
            ("Host", "victim.example"),
            ("User-Agent", "Browser/1.0"),
            ("Content-Type", "application/json"),
            ("Content-Length", "27"),
            ("Cookie", "session=abc"),
        ),
        body='{"user":"a","pass":"b"}',
    )


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def stub_transport():
    """Factory building a StubTransport from a responses table."""
    def _make(responses=None) -> StubTransport:
        return StubTransport(responses)
    return _make


@pytest.fixture
def all_exposed() -> dict:
    """Responses under which every default signature matches."""
    return {
        "/actuator/env": ProbeOutcome(status_code=200, body='{"activeProfiles":["prod"]}'),
        "/actuator": ProbeOutcome(status_code=200, body='{"_links":{"self":{"href":"/actuator"}}}'),
        "/actuator/mappings": ProbeOutcome(status_code=200, body='{"contexts":{"dispatcherServlet":[]}}'),
        "/env": ProbeOutcome(status_code=200, body='{"profiles":[]}'),
        "/actuator/gateway/routes": ProbeOutcome(status_code=200, body='[{"predicate":"Paths: [/api]"}]'),
    }


@pytest.fixture
def connection_refused() -> ConnectionFailedError:
    return ConnectionFailedError("Connection error: [Errno 111] Connection refused")
