"""
Naming checks.

Team names, kind prefixes and website metadata that must look a certain way.
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed
from teamguard.domain.models import ErrorLog, Team, TeamKind

# Teams allowed to carry a kind prefix without being of that kind, per kind
PREFIX_RULES: tuple[tuple[TeamKind, str, tuple[str, ...]], ...] = (
    (TeamKind.WORKING_GROUP, "wg-", ("wg-leads",)),
    (TeamKind.PROJECT_GROUP, "project-", ("project-group-leads",)),
)


def _ensure_prefix(
    team: Team, kind: TeamKind, prefix: str, exceptions: tuple[str, ...]
) -> None:
    if team.name in exceptions:
        return
    if team.kind is kind and not team.name.startswith(prefix):
        raise CheckFailed(f"{kind} `{team.name}`'s name doesn't start with `{prefix}`")
    if team.kind is not kind and team.name.startswith(prefix):
        raise CheckFailed(
            f"{team.kind} `{team.name}` seems like a {kind} "
            f"(since it has the `{prefix}` prefix)"
        )


def validate_name_prefixes(data: TeamData, errors: ErrorLog) -> None:
    """Ensure working and project group names carry their kind's prefix."""

    def check(team: Team, _errors: ErrorLog) -> None:
        for kind, prefix, exceptions in PREFIX_RULES:
            _ensure_prefix(team, kind, prefix, exceptions)

    each(data.teams(), errors, check)


def validate_team_names(data: TeamData, errors: ErrorLog) -> None:
    """Ensure team names are alphanumeric plus `-`."""

    def check(team: Team, _errors: ErrorLog) -> None:
        if not all(c.isalnum() or c == "-" for c in team.name):
            raise CheckFailed(
                f"team name `{team.name}` can only be alphanumeric with dashes"
            )

    each(data.teams(), errors, check)


def validate_zulip_stream_name(data: TeamData, errors: ErrorLog) -> None:
    """Ensure the Zulip stream is a name, not a link."""

    def check(team: Team, _errors: ErrorLog) -> None:
        stream = team.website.zulip_stream if team.website else None
        if stream is not None and stream.startswith("https://"):
            raise CheckFailed(
                f"the zulip stream name of the team `{team.name}` is a link: "
                "only the name is required"
            )

    each(data.teams(), errors, check)
