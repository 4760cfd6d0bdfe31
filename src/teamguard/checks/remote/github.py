"""
Checks that query the GitHub directory.
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed, DirectoryError
from teamguard.domain.interfaces import GitHubDirectoryInterface
from teamguard.domain.models import ErrorLog


def validate_github_usernames(
    data: TeamData, github: GitHubDirectoryInterface, errors: ErrorLog
) -> None:
    """Ensure no person's GitHub handle is stale or misspelled."""
    people = {person.github_id: person for person in data.people()}
    try:
        current = github.usernames(sorted(people))
    except DirectoryError as err:
        errors.push(f"couldn't verify GitHub usernames: {err}")
        return

    def check(item: tuple[int, str], _errors: ErrorLog) -> None:
        github_id, name = item
        person = people.get(github_id)
        if person is not None and person.github != name:
            raise CheckFailed(
                f"user `{person.github}` changed username to `{name}`"
            )

    each(sorted(current.items()), errors, check)
