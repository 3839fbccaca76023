"""Data models for Actuator Hunter."""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(str, Enum):
    """Severity levels for findings."""

    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Confidence(str, Enum):
    """How sure a scan check is about a finding."""

    TENTATIVE = "tentative"
    FIRM = "firm"
    CERTAIN = "certain"


class ConsolidationAction(str, Enum):
    """Decision returned when the host sees two findings with the same name."""

    KEEP_EXISTING = "keep_existing"
    KEEP_BOTH = "keep_both"


class HttpService(BaseModel):
    """Network target of a request."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1)
    port: int = Field(default=443, ge=1, le=65535)
    secure: bool = True

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"

    @property
    def authority(self) -> str:
        """Render host[:port], bracketing IPv6 literals and omitting the default port."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        default_port = 443 if self.secure else 80
        if self.port == default_port:
            return host
        return f"{host}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.authority}"


class HttpRequest(BaseModel):
    """An immutable HTTP request.

    The ``with_*`` builders never modify the instance they are called on;
    each returns a new request, so a derived probe never shares state with
    the base request it was built from.
    """

    model_config = ConfigDict(frozen=True)

    service: HttpService
    method: str = "GET"
    path: str = "/"
    headers: tuple[tuple[str, str], ...] = ()
    body: str = ""

    @field_validator("path")
    @classmethod
    def _path_is_absolute(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    @classmethod
    def from_url(cls, url: str, method: str = "GET") -> "HttpRequest":
        """Build a request from an absolute http(s) URL."""
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ValueError(f"Not an absolute http(s) URL: {url!r}")

        secure = parts.scheme == "https"
        service = HttpService(
            host=parts.hostname,
            port=parts.port or (443 if secure else 80),
            secure=secure,
        )
        path = parts.path or "/"
        if parts.query:
            path = f"{path}?{parts.query}"
        return cls(
            service=service,
            method=method,
            path=path,
            headers=(("Host", service.authority),),
        )

    @property
    def url(self) -> str:
        return f"{self.service.base_url}{self.path}"

    def header(self, name: str) -> str | None:
        """Return the first value of a header, matched case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    def with_method(self, method: str) -> "HttpRequest":
        return self.model_copy(update={"method": method.upper()})

    def with_path(self, path: str) -> "HttpRequest":
        return self.model_copy(
            update={"path": path if path.startswith("/") else f"/{path}"}
        )

    def with_body(self, body: str) -> "HttpRequest":
        return self.model_copy(update={"body": body})

    def with_removed_header(self, name: str) -> "HttpRequest":
        wanted = name.lower()
        kept = tuple((k, v) for k, v in self.headers if k.lower() != wanted)
        return self.model_copy(update={"headers": kept})

    def with_header(self, name: str, value: str) -> "HttpRequest":
        """Replace every existing value of ``name`` with a single new one."""
        stripped = self.with_removed_header(name)
        return stripped.model_copy(
            update={"headers": stripped.headers + ((name, value),)}
        )


class EndpointSignature(BaseModel):
    """A path to probe and the keyword proving it is exposed."""

    model_config = ConfigDict(frozen=True)

    issue_name: str = Field(..., min_length=1)
    path: str = Field(..., min_length=1)
    signature_keyword: str = Field(..., min_length=1)

    @field_validator("path")
    @classmethod
    def _path_is_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"signature path must start with '/': {value!r}")
        return value


class ProbeOutcome(BaseModel):
    """Status and body returned by the transport for one probe."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)


class HttpRequestResponse(BaseModel):
    """A request paired with the response it produced, kept as evidence."""

    model_config = ConfigDict(frozen=True)

    request: HttpRequest
    response: ProbeOutcome | None = None


class Finding(BaseModel):
    """A reported exposure, shaped for the host's issue tracker."""

    model_config = ConfigDict(frozen=True)

    name: str
    detail_html: str
    remediation: str
    background_html: str
    remediation_background: str | None = None
    severity: Severity
    typical_severity: Severity
    confidence: Confidence
    base_url: str
    evidence: HttpRequestResponse


class AuditResult(BaseModel):
    """Ordered findings handed back to the host for one audit call."""

    model_config = ConfigDict(frozen=True)

    findings: tuple[Finding, ...] = ()


class ProbeFailure(BaseModel):
    """A probe that could not be completed (diagnostics only)."""

    model_config = ConfigDict(frozen=True)

    signature: EndpointSignature
    url: str
    error: str


class ScanOutcome(BaseModel):
    """Findings of one scan together with the probes that failed."""

    findings: list[Finding] = Field(default_factory=list)
    failures: list[ProbeFailure] = Field(default_factory=list)
