"""
Mailing list and email address checks.
"""

import re

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed
from teamguard.domain.models import ErrorLog, Person, Team, TeamList

LIST_ADDRESS_RE = re.compile(r"^[a-zA-Z0-9_.-]+@([a-zA-Z0-9_.-]+)$")


def validate_list_email_addresses(data: TeamData, errors: ErrorLog) -> None:
    """Ensure every member of a team with a mailing list has an email address."""

    def check(team: Team, errors: ErrorLog) -> None:
        if not data.lists(team):
            return

        def check_member(member: str, _errors: ErrorLog) -> None:
            person = data.person(member)
            if person is not None and person.email_missing:
                raise CheckFailed(
                    f"person `{person.github}` is a member of a mailing list "
                    "but has no email address"
                )

        each(sorted(data.effective_members(team)), errors, check_member)

    each(data.teams(), errors, check)


def validate_list_extra_people(data: TeamData, errors: ErrorLog) -> None:
    """Ensure extra people of a list are real people."""

    def check(team: Team, errors: ErrorLog) -> None:
        def check_list(raw_list: TeamList, _errors: ErrorLog) -> None:
            for person in raw_list.extra_people:
                if data.person(person) is None:
                    raise CheckFailed(
                        f"person `{person}` does not exist (in list `{raw_list.address}`)"
                    )

        each(team.lists, errors, check_list)

    each(data.teams(), errors, check)


def validate_list_extra_teams(data: TeamData, errors: ErrorLog) -> None:
    """Ensure extra teams of a list are real teams."""

    def check(team: Team, errors: ErrorLog) -> None:
        def check_list(raw_list: TeamList, _errors: ErrorLog) -> None:
            for list_team in raw_list.extra_teams:
                if data.team(list_team) is None:
                    raise CheckFailed(
                        f"team `{list_team}` does not exist (in list `{raw_list.address}`)"
                    )

        each(team.lists, errors, check_list)

    each(data.teams(), errors, check)


def validate_list_addresses(data: TeamData, errors: ErrorLog) -> None:
    """Ensure list addresses are well formed and on a domain we own."""
    allowed_domains = data.config.allowed_mailing_lists_domains

    def check(team: Team, errors: ErrorLog) -> None:
        def check_list(raw_list: TeamList, _errors: ErrorLog) -> None:
            match = LIST_ADDRESS_RE.match(raw_list.address)
            if match is None:
                raise CheckFailed(f"invalid list address: `{raw_list.address}`")
            if match.group(1) not in allowed_domains:
                raise CheckFailed(
                    f"list address on a domain we don't own: `{raw_list.address}`"
                )

        each(team.lists, errors, check_list)

    each(data.teams(), errors, check)


def validate_people_addresses(data: TeamData, errors: ErrorLog) -> None:
    """Ensure people's email addresses look like addresses."""

    def check(person: Person, _errors: ErrorLog) -> None:
        if person.email is not None and "@" not in person.email:
            raise CheckFailed(
                f"invalid email address of `{person.github}`: {person.email}"
            )

    each(data.people(), errors, check)
