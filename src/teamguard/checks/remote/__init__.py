"""
Remote checks - Validation that needs an external directory.

Each tier runs only when its directory is available.
"""

from teamguard.checks.remote.github import validate_github_usernames
from teamguard.checks.remote.zulip import missing_member, validate_zulip_users

__all__ = [
    "missing_member",
    "validate_github_usernames",
    "validate_zulip_users",
]
