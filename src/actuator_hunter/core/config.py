"""Configuration management using Pydantic Settings.

Every default matches the compiled-in behavior of the scan check, so with no
configuration file and no environment overrides the scanner behaves exactly
like the fixed five-signature plugin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from actuator_hunter.core.exceptions import ConfigurationError

DEFAULT_USER_AGENT = "Mozilla/5.0 (BugBountyScanner/1.0)"


class ProberSettings(BaseModel):
    """Prober and HTTP transport configuration."""

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every probe"
    )

    timeout: float = Field(
        default=10.0,
        gt=0,
        le=120.0,
        description="HTTP request timeout in seconds (enforced by the transport)"
    )

    follow_redirects: bool = Field(
        default=False,
        description="Follow HTTP redirects"
    )

    max_redirects: int = Field(
        default=5,
        ge=0,
        le=20,
        description="Maximum number of redirects to follow"
    )

    verify_ssl: bool = Field(
        default=False,
        description="Verify SSL certificates"
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level"
    )

    json_format: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console output"
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional file to mirror log output to"
    )


class Settings(BaseSettings):
    """Main configuration container."""

    model_config = SettingsConfigDict(
        env_prefix="ACTUATOR_HUNTER_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    prober: ProberSettings = Field(default_factory=ProberSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    signatures_file: Path | None = Field(
        default=None,
        description="YAML file replacing the built-in signature table"
    )

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML configuration file."""
        import yaml

        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {path}")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in {path}: {e}") from e

    @classmethod
    def from_file_or_default(cls, path: Path | None = None) -> "Settings":
        """Load from file if exists, otherwise return defaults."""
        default_paths = [
            Path("actuator-hunter.yaml"),
            Path("actuator-hunter.yml"),
            Path(".actuator-hunter.yaml"),
            Path.home() / ".config" / "actuator-hunter" / "config.yaml",
        ]

        if path and path.exists():
            return cls.from_yaml(path)

        for default_path in default_paths:
            if default_path.exists():
                return cls.from_yaml(default_path)

        return cls()
