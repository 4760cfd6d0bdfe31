"""
Checks for team data validation.

A check visits part of the data model and records one message per
violation in the shared error log; it never aborts the run.

Organization by dependency:
- local/: Pure validation against the data model
- remote/: Validation that also queries GitHub or Zulip
- registry: The ordered tiers the runner executes
"""

from teamguard.checks.base import each
from teamguard.checks.registry import (
    GITHUB_CHECKS,
    GITHUB_TIER,
    LOCAL_CHECKS,
    LOCAL_TIER,
    ZULIP_CHECKS,
    ZULIP_TIER,
    CheckRegistry,
)

__all__ = [
    "each",
    # Tiers
    "LOCAL_CHECKS",
    "GITHUB_CHECKS",
    "ZULIP_CHECKS",
    "LOCAL_TIER",
    "GITHUB_TIER",
    "ZULIP_TIER",
    # Lookup
    "CheckRegistry",
]
