"""
Directory adapters for GitHub and Zulip.
"""

from teamguard.infrastructure.directory.github import (
    GitHubDirectory,
    GitHubDirectoryConfig,
)
from teamguard.infrastructure.directory.mock import (
    MockGitHubDirectory,
    MockZulipDirectory,
)
from teamguard.infrastructure.directory.zulip import (
    ZulipDirectory,
    ZulipDirectoryConfig,
)

__all__ = [
    "GitHubDirectory",
    "GitHubDirectoryConfig",
    "MockGitHubDirectory",
    "MockZulipDirectory",
    "ZulipDirectory",
    "ZulipDirectoryConfig",
]
