"""
Domain models for team data validation.

These are pure data structures describing the membership graph: teams,
people, repositories, mailing lists, chat groups and permission grants.
All entity models are immutable (frozen dataclasses) so that a validation
run can never mutate the data it is checking.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from teamguard.domain.exceptions import InvalidPermission


# =============================================================================
# CONFIGURATION AND PERMISSIONS
# =============================================================================


@dataclass(frozen=True)
class Config:
    """Organization-wide allow-lists and the permission catalog."""

    allowed_mailing_lists_domains: tuple[str, ...] = ()
    allowed_github_orgs: tuple[str, ...] = ()
    permissions_bools: tuple[str, ...] = ()
    permissions_bors_repos: tuple[str, ...] = ()

    def available_permissions(self) -> tuple[str, ...]:
        """Every permission name that may be granted, in catalog order."""
        available = list(self.permissions_bools)
        for repo in self.permissions_bors_repos:
            available.append(f"bors.{repo}.review")
            available.append(f"bors.{repo}.try")
        return tuple(available)


@dataclass(frozen=True)
class Permissions:
    """Set of permission names granted to a person or a team."""

    grants: tuple[str, ...] = ()

    def has(self, permission: str) -> bool:
        """Granted directly, or implied (bors review implies bors try)."""
        if permission in self.grants:
            return True
        if permission.startswith("bors.") and permission.endswith(".try"):
            review = permission.removesuffix(".try") + ".review"
            return review in self.grants
        return False

    def has_directly(self, permission: str) -> bool:
        return permission in self.grants

    def has_any(self) -> bool:
        return bool(self.grants)

    def validate(self, what: str, config: Config) -> None:
        """
        Ensure every grant is known and no grant is redundant.

        Args:
            what: Description of the holder used in messages (e.g. "team `x`")
            config: Configuration providing the permission catalog

        Raises:
            InvalidPermission: On the first problem found
        """
        available = config.available_permissions()
        for permission in self.grants:
            if permission not in available:
                raise InvalidPermission(
                    f"unknown permission `{permission}` (in {what})"
                )
        for repo in config.permissions_bors_repos:
            review = f"bors.{repo}.review"
            try_ = f"bors.{repo}.try"
            if review in self.grants and try_ in self.grants:
                raise InvalidPermission(
                    f"{what} has both the `{review}` and `{try_}` permissions, "
                    "but review implies try"
                )


# =============================================================================
# PEOPLE
# =============================================================================


@dataclass(frozen=True)
class Person:
    """A person, identified by their GitHub handle."""

    github: str
    github_id: int
    name: str = ""
    email: str | None = None
    email_disabled: bool = False  # Explicitly opted out of having an email
    zulip_id: int | None = None
    discord_id: int | None = None
    permissions: Permissions = field(default_factory=Permissions)

    @property
    def email_missing(self) -> bool:
        return self.email is None and not self.email_disabled


# =============================================================================
# TEAMS
# =============================================================================


class TeamKind(Enum):
    """Kind of a team, which drives naming and nesting rules."""

    TEAM = "team"
    WORKING_GROUP = "working-group"
    PROJECT_GROUP = "project-group"
    MARKER_TEAM = "marker-team"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value.replace("-", " ")


@dataclass(frozen=True)
class GitHubTeamConfig:
    """GitHub team mapping declared on a team."""

    orgs: tuple[str, ...]
    team_name: str | None = None  # Defaults to the team's own name
    extra_teams: tuple[str, ...] = ()
    include_members: bool = True


@dataclass(frozen=True)
class GitHubTeam:
    """Resolved GitHub team: one per configured organization."""

    org: str
    name: str
    member_ids: tuple[int, ...]


@dataclass(frozen=True)
class WebsiteData:
    """Metadata published on the governance website."""

    name: str
    description: str = ""
    zulip_stream: str | None = None
    repo: str | None = None
    weight: int = 0


@dataclass(frozen=True)
class DiscordRole:
    """Discord role bound to a team's members."""

    name: str
    color: str | None = None


@dataclass(frozen=True)
class TeamList:
    """Mailing list declared on a team, before resolution."""

    address: str
    extra_people: tuple[str, ...] = ()
    extra_emails: tuple[str, ...] = ()
    extra_teams: tuple[str, ...] = ()
    include_team_members: bool = True


@dataclass(frozen=True)
class MailingList:
    """Resolved mailing list with its final recipients."""

    address: str
    emails: tuple[str, ...]


@dataclass(frozen=True)
class ZulipGroupConfig:
    """Zulip user group declared on a team, before resolution."""

    name: str
    include_team_members: bool = True
    extra_people: tuple[str, ...] = ()
    extra_zulip_ids: tuple[int, ...] = ()
    extra_teams: tuple[str, ...] = ()
    excluded_people: tuple[str, ...] = ()


@dataclass(frozen=True)
class RfcbotData:
    """rfcbot integration settings of a team."""

    label: str
    name: str = ""
    ping: str = ""
    exclude_members: tuple[str, ...] = ()


@dataclass(frozen=True)
class Team:
    """
    A team, working group, project group or marker team.

    Membership is declared explicitly (members, leads, alumni) and can be
    extended through included teams and include flags; see
    TeamData.effective_members for the resolution rules.
    """

    name: str
    kind: TeamKind = TeamKind.TEAM
    subteam_of: str | None = None

    # People
    leads: tuple[str, ...] = ()
    members: tuple[str, ...] = ()
    alumni: tuple[str, ...] = ()
    included_teams: tuple[str, ...] = ()
    include_team_leads: bool = False
    include_wg_leads: bool = False
    include_project_group_leads: bool = False
    include_all_team_members: bool = False
    include_all_alumni: bool = False

    # Integrations
    github: tuple[GitHubTeamConfig, ...] = ()
    website: WebsiteData | None = None
    discord_roles: tuple[DiscordRole, ...] = ()
    lists: tuple[TeamList, ...] = ()
    zulip_groups: tuple[ZulipGroupConfig, ...] = ()
    permissions: Permissions = field(default_factory=Permissions)
    leads_permissions: Permissions = field(default_factory=Permissions)
    rfcbot: RfcbotData | None = None


# =============================================================================
# ZULIP GROUP MEMBERS
# =============================================================================


@dataclass(frozen=True)
class MemberWithId:
    """Group member with a person record and a known Zulip id."""

    github: str
    zulip_id: int


@dataclass(frozen=True)
class MemberWithoutId:
    """Group member with a person record but no Zulip id."""

    github: str


@dataclass(frozen=True)
class JustId:
    """Group member known only by a raw Zulip id."""

    zulip_id: int


ZulipGroupMember = MemberWithId | MemberWithoutId | JustId


@dataclass(frozen=True)
class ZulipGroup:
    """Resolved Zulip user group."""

    name: str
    includes_team_members: bool
    members: tuple[ZulipGroupMember, ...]


@dataclass(frozen=True)
class ZulipUser:
    """User record returned by the Zulip directory."""

    user_id: int
    email: str = ""
    full_name: str = ""


# =============================================================================
# REPOSITORIES
# =============================================================================


class RepoPermission(Enum):
    WRITE = "write"
    ADMIN = "admin"
    MAINTAIN = "maintain"
    TRIAGE = "triage"


class Bot(Enum):
    BORS = "bors"
    HIGHFIVE = "highfive"
    RUSTBOT = "rustbot"
    RUST_TIMER = "rust-timer"
    RFCBOT = "rfcbot"


@dataclass(frozen=True)
class BranchProtection:
    pattern: str
    ci_checks: tuple[str, ...] = ()
    dismiss_stale_review: bool = False


@dataclass(frozen=True)
class RepoAccess:
    """Per-team and per-person access grants, as (name, permission) pairs."""

    teams: tuple[tuple[str, RepoPermission], ...] = ()
    individuals: tuple[tuple[str, RepoPermission], ...] = ()


@dataclass(frozen=True)
class Repo:
    org: str
    name: str
    description: str = ""
    bots: tuple[Bot, ...] = ()
    access: RepoAccess = field(default_factory=RepoAccess)
    branch_protections: tuple[BranchProtection, ...] = ()


# =============================================================================
# CHECKS AND RESULTS
# =============================================================================


@dataclass(frozen=True)
class Check:
    """
    A named validation function.

    The name is stable: it is used for skip-by-name and in log output.
    The function signature depends on the tier the check belongs to.
    """

    name: str
    func: Callable[..., None]

    def __call__(self, *args: Any) -> None:
        self.func(*args)


@dataclass
class ErrorLog:
    """
    Mutable accumulator shared by all checks of a validation run.

    Owned by the runner and handed to one check at a time.
    """

    messages: list[str] = field(default_factory=list)

    def push(self, message: str) -> None:
        self.messages.append(message)

    def extend(self, messages: "ErrorLog | list[str]") -> None:
        self.messages.extend(messages)

    def finalize(self) -> tuple[str, ...]:
        """Deduplicated messages in lexicographic order."""
        return tuple(sorted(set(self.messages)))

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of a validation run."""

    errors: tuple[str, ...]
    skipped_checks: tuple[str, ...] = ()
    skipped_tiers: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.errors
