"""Duplicate-finding policy used by the host when an issue is re-discovered."""

from __future__ import annotations

from actuator_hunter.core.models import ConsolidationAction, Finding


def consolidate(new_finding: Finding, existing_finding: Finding) -> ConsolidationAction:
    """Keep the existing finding when both carry exactly the same name.

    Only the name is compared, case-sensitively; URL and evidence are ignored.
    """
    if new_finding.name == existing_finding.name:
        return ConsolidationAction.KEEP_EXISTING
    return ConsolidationAction.KEEP_BOTH
