"""
Permission checks.
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.models import ErrorLog, Person, Team


def validate_duplicate_permissions(data: TeamData, errors: ErrorLog) -> None:
    """Ensure members of teams with permissions don't also hold them directly."""
    available = data.config.available_permissions()

    def check(team: Team, errors: ErrorLog) -> None:
        def check_member(member: str, errors: ErrorLog) -> None:
            person = data.person(member)
            if person is None:
                return
            for permission in available:
                if team.permissions.has(permission) and person.permissions.has_directly(
                    permission
                ):
                    errors.push(
                        f"user `{member}` has the permission `{permission}` both "
                        f"explicitly and through the `{team.name}` team"
                    )

        each(sorted(data.effective_members(team)), errors, check_member)

    each(data.teams(), errors, check)


def validate_permissions(data: TeamData, errors: ErrorLog) -> None:
    """Ensure every granted permission exists and is not redundant."""

    def check_team(team: Team, _errors: ErrorLog) -> None:
        what = f"team `{team.name}`"
        team.permissions.validate(what, data.config)
        team.leads_permissions.validate(what, data.config)

    def check_person(person: Person, _errors: ErrorLog) -> None:
        person.permissions.validate(f"user `{person.github}`", data.config)

    each(data.teams(), errors, check_team)
    each(data.people(), errors, check_person)
