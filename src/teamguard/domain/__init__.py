"""
Domain layer for team data validation.

Contains the data model and its resolution rules, with no external dependencies.
"""

from teamguard.domain.data import ALUMNI_TEAM, TeamData
from teamguard.domain.exceptions import (
    CheckFailed,
    DirectoryError,
    DirectoryUnavailable,
    InvalidPermission,
    SnapshotError,
    TeamDataError,
    ValidationFailed,
)
from teamguard.domain.interfaces import (
    GitHubDirectoryInterface,
    ZulipDirectoryInterface,
)
from teamguard.domain.models import (
    Bot,
    BranchProtection,
    Check,
    Config,
    DiscordRole,
    ErrorLog,
    GitHubTeam,
    GitHubTeamConfig,
    JustId,
    MailingList,
    MemberWithId,
    MemberWithoutId,
    Permissions,
    Person,
    Repo,
    RepoAccess,
    RepoPermission,
    RfcbotData,
    Team,
    TeamKind,
    TeamList,
    ValidationReport,
    WebsiteData,
    ZulipGroup,
    ZulipGroupConfig,
    ZulipGroupMember,
    ZulipUser,
)

__all__ = [
    # Data model
    "ALUMNI_TEAM",
    "TeamData",
    # Models
    "Bot",
    "BranchProtection",
    "Check",
    "Config",
    "DiscordRole",
    "ErrorLog",
    "GitHubTeam",
    "GitHubTeamConfig",
    "JustId",
    "MailingList",
    "MemberWithId",
    "MemberWithoutId",
    "Permissions",
    "Person",
    "Repo",
    "RepoAccess",
    "RepoPermission",
    "RfcbotData",
    "Team",
    "TeamKind",
    "TeamList",
    "ValidationReport",
    "WebsiteData",
    "ZulipGroup",
    "ZulipGroupConfig",
    "ZulipGroupMember",
    "ZulipUser",
    # Interfaces
    "GitHubDirectoryInterface",
    "ZulipDirectoryInterface",
    # Exceptions
    "CheckFailed",
    "DirectoryError",
    "DirectoryUnavailable",
    "InvalidPermission",
    "SnapshotError",
    "TeamDataError",
    "ValidationFailed",
]
