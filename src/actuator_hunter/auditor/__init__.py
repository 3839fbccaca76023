"""Auditor module - Finding synthesis and duplicate consolidation."""

from actuator_hunter.auditor.consolidation import consolidate
from actuator_hunter.auditor.issues import synthesize

__all__ = [
    "consolidate",
    "synthesize",
]
