"""
rfcbot integration checks.
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed
from teamguard.domain.models import ErrorLog, Team


def validate_rfcbot_labels(data: TeamData, errors: ErrorLog) -> None:
    """Ensure there are no duplicate rfcbot labels."""
    labels: set[str] = set()

    def check(team: Team, errors: ErrorLog) -> None:
        if team.rfcbot is None:
            return
        if team.rfcbot.label in labels:
            errors.push(f"duplicate rfcbot label: {team.rfcbot.label}")
        labels.add(team.rfcbot.label)

    each(data.teams(), errors, check)


def validate_rfcbot_exclude_members(data: TeamData, errors: ErrorLog) -> None:
    """Ensure rfcbot's exclude-members only lists current members, once each."""

    def check(team: Team, errors: ErrorLog) -> None:
        if team.rfcbot is None:
            return
        members = data.effective_members(team)
        excluded: set[str] = set()

        def check_member(member: str, _errors: ErrorLog) -> None:
            if member in excluded:
                raise CheckFailed(
                    f"duplicate member in `{team.name}` rfcbot.exclude-members: {member}"
                )
            excluded.add(member)
            if member not in members:
                raise CheckFailed(
                    f"person `{member}` is not a member of team `{team.name}` "
                    "(in rfcbot.exclude-members)"
                )

        each(team.rfcbot.exclude_members, errors, check_member)

    each(data.teams(), errors, check)
