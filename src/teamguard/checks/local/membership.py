"""
Membership checks.

These reconcile the effective membership of teams with leads, people
records, the alumni team and the set of people that are referenced at all.
"""

from teamguard.checks.base import each
from teamguard.domain.data import ALUMNI_TEAM, TeamData
from teamguard.domain.exceptions import CheckFailed, TeamDataError
from teamguard.domain.models import ErrorLog, Team


def validate_team_leads(data: TeamData, errors: ErrorLog) -> None:
    """Ensure team leads are part of the teams they lead."""

    def check(team: Team, errors: ErrorLog) -> None:
        members = data.effective_members(team)

        def check_lead(lead: str, _errors: ErrorLog) -> None:
            if lead not in members:
                raise CheckFailed(
                    f"`{lead}` leads team `{team.name}`, but is not a member of it"
                )

        each(team.leads, errors, check_lead)

    each(data.teams(), errors, check)


def validate_team_members(data: TeamData, errors: ErrorLog) -> None:
    """Ensure team members are people."""

    def check(team: Team, errors: ErrorLog) -> None:
        def check_member(member: str, _errors: ErrorLog) -> None:
            if data.person(member) is None:
                raise CheckFailed(
                    f"person `{member}` is member of team `{team.name}` "
                    "but doesn't exist"
                )

        each(sorted(data.effective_members(team)), errors, check_member)

    each(data.teams(), errors, check)


def validate_alumni(data: TeamData, errors: ErrorLog) -> None:
    """
    Ensure alumni are not active.

    Members of the alumni team must not be effective members of any other
    team, and people already listed as alumni of a team must not be listed
    again explicitly on the alumni team.
    """
    try:
        active_members = data.active_members()
    except TeamDataError as err:
        errors.push(str(err))
        return

    alumni_team = data.team(ALUMNI_TEAM)
    if alumni_team is None:
        return

    def check_alumni_team(alumni_team: Team, errors: ErrorLog) -> None:
        explicit_members = set(alumni_team.members)

        def check_active(member: str, _errors: ErrorLog) -> None:
            if member in active_members:
                raise CheckFailed(f"alumni team includes active member '{member}'")

        each(sorted(data.effective_members(alumni_team)), errors, check_active)

        def check_explicit(pair: tuple[str, str], _errors: ErrorLog) -> None:
            team_name, member = pair
            if member in explicit_members:
                explicit_members.remove(member)
                raise CheckFailed(
                    f"alumni team explicitly includes member '{member}' who was "
                    f"specified as an alumni already in '{team_name}'"
                )

        pairs = [
            (team.name, member)
            for team in data.teams()
            if team.name != ALUMNI_TEAM
            for member in team.alumni
        ]
        each(pairs, errors, check_explicit)

    each([alumni_team], errors, check_alumni_team)


def validate_inactive_members(data: TeamData, errors: ErrorLog) -> None:
    """
    Ensure every person is referenced somewhere.

    A person must be a member or alumnus of some team (active or archived),
    an extra person on one of its lists, hold a permission directly, or be
    an individual contributor to a repo.
    """
    referenced: set[str] = set()

    def collect(team: Team, _errors: ErrorLog) -> None:
        referenced.update(data.effective_members(team))
        referenced.update(team.alumni)
        for raw_list in team.lists:
            referenced.update(raw_list.extra_people)

    each([*data.teams(), *data.archived_teams()], errors, collect)

    all_people = {person.github for person in data.people()}
    individual_contributors = {
        name for repo in data.repos() for name, _ in repo.access.individuals
    }

    def check(github: str, _errors: ErrorLog) -> None:
        person = data.person(github)
        if (
            person is not None
            and not person.permissions.has_any()
            and github not in individual_contributors
        ):
            raise CheckFailed(
                f"person `{github}` is not a member of any team (active or archived), "
                "has no permissions, and is not an individual contributor to any repo"
            )

    each(sorted(all_people - referenced), errors, check)
