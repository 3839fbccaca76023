"""Actuator signature table and loading of operator-supplied tables."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from actuator_hunter.core.exceptions import SignatureTableError
from actuator_hunter.core.models import EndpointSignature

# Probe order is part of the output contract: findings come back in this order.
DEFAULT_SIGNATURES: tuple[EndpointSignature, ...] = (
    EndpointSignature(
        issue_name="Spring Boot Environment Leak",
        path="/actuator/env",
        signature_keyword="activeProfiles",
    ),
    EndpointSignature(
        issue_name="Spring Boot Actuator Discovery",
        path="/actuator",
        signature_keyword="_links",
    ),
    EndpointSignature(
        issue_name="Spring Boot API Mappings",
        path="/actuator/mappings",
        signature_keyword="dispatcherServlet",
    ),
    EndpointSignature(
        issue_name="Legacy Spring Boot Env Leak",
        path="/env",
        signature_keyword="profiles",
    ),
    EndpointSignature(
        issue_name="Spring Cloud Gateway Routes Leak",
        path="/actuator/gateway/routes",
        signature_keyword="predicate",
    ),
)


def parse_signatures(data: Any) -> tuple[EndpointSignature, ...]:
    """Validate raw YAML/JSON data into an ordered signature table.

    Accepts either a bare list of entries or a mapping with a
    ``signatures`` key holding that list.
    """
    if isinstance(data, dict):
        data = data.get("signatures")

    if not isinstance(data, list):
        raise SignatureTableError("Signature table must be a list of entries")

    if not data:
        raise SignatureTableError("Signature table is empty")

    signatures = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise SignatureTableError(f"Entry {index} is not a mapping")
        try:
            signatures.append(EndpointSignature(**entry))
        except ValidationError as e:
            raise SignatureTableError(f"Entry {index} is invalid: {e}") from e

    return tuple(signatures)


def load_signatures(path: Path) -> tuple[EndpointSignature, ...]:
    """Load a signature table from a YAML file."""
    if not path.exists():
        raise SignatureTableError(f"Signature file '{path}' does not exist")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SignatureTableError(f"Invalid YAML in {path}: {e}") from e

    return parse_signatures(data)
