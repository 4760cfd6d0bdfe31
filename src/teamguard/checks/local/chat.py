"""
Chat platform checks that only need the data model (Discord and Zulip).
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed
from teamguard.domain.models import ErrorLog, Team, ZulipGroupConfig

# The universal team mirrors everyone; its Discord role is not tied to ids
ALL_TEAM = "all"


def validate_discord_team_members_have_discord_ids(
    data: TeamData, errors: ErrorLog
) -> None:
    """Ensure every member of a team with Discord roles has a Discord id."""

    def check(team: Team, _errors: ErrorLog) -> None:
        if not team.discord_roles or team.name == ALL_TEAM:
            return
        members = data.effective_members(team)
        if len(data.discord_ids(team)) == len(members):
            return
        missing = []
        for name in sorted(members):
            person = data.person(name)
            if person is not None and person.discord_id is None:
                missing.append(name)
        if missing:
            raise CheckFailed(
                f'the following members of the "{team.name}" team do not have '
                f"discord_ids: {', '.join(missing)}"
            )

    each(data.teams(), errors, check)


def validate_zulip_group_ids(data: TeamData, errors: ErrorLog) -> None:
    """Ensure members of a team mirrored into a Zulip group have a Zulip id."""

    def check(team: Team, errors: ErrorLog) -> None:
        groups = data.zulip_groups(team)
        if not any(group.includes_team_members for group in groups):
            return

        def check_member(member: str, _errors: ErrorLog) -> None:
            person = data.person(member)
            if person is not None and person.zulip_id is None:
                raise CheckFailed(
                    f"person `{person.github}` in '{team.name}' is a member of a "
                    "Zulip user group but has no Zulip id"
                )

        each(sorted(data.effective_members(team)), errors, check_member)

    each(data.teams(), errors, check)


def validate_zulip_group_extra_people(data: TeamData, errors: ErrorLog) -> None:
    """Ensure extra people of a Zulip user group are real people."""

    def check(team: Team, errors: ErrorLog) -> None:
        def check_group(group: ZulipGroupConfig, _errors: ErrorLog) -> None:
            for person in group.extra_people:
                if data.person(person) is None:
                    raise CheckFailed(
                        f"person `{person}` does not exist (in Zulip group `{group.name}`)"
                    )

        each(team.zulip_groups, errors, check_group)

    each(data.teams(), errors, check)
