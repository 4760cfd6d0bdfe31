"""
Infrastructure layer for team data validation.

Contains adapters for external concerns (GitHub, Zulip, snapshot files).
"""

from teamguard.infrastructure.directory import (
    GitHubDirectory,
    GitHubDirectoryConfig,
    MockGitHubDirectory,
    MockZulipDirectory,
    ZulipDirectory,
    ZulipDirectoryConfig,
)
from teamguard.infrastructure.loader import load_snapshot, snapshot_from_dict

__all__ = [
    # Directories
    "GitHubDirectory",
    "GitHubDirectoryConfig",
    "ZulipDirectory",
    "ZulipDirectoryConfig",
    "MockGitHubDirectory",
    "MockZulipDirectory",
    # Snapshots
    "load_snapshot",
    "snapshot_from_dict",
]
