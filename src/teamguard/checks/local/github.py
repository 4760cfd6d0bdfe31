"""
GitHub mapping checks.

These only read the data model; checks that query GitHub itself live in
teamguard.checks.remote.
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed
from teamguard.domain.models import ErrorLog, GitHubTeam, Repo, Team


def validate_github_teams(data: TeamData, errors: ErrorLog) -> None:
    """Ensure GitHub teams are unique and in the allowed orgs."""
    allowed = data.config.allowed_github_orgs
    found: dict[tuple[str, str], str] = {}

    def check(team: Team, errors: ErrorLog) -> None:
        def check_github_team(github_team: GitHubTeam, _errors: ErrorLog) -> None:
            if github_team.org not in allowed:
                raise CheckFailed(
                    f"GitHub organization `{github_team.org}` isn't allowed "
                    f"(in team `{team.name}`)"
                )
            key = (github_team.org, github_team.name)
            other = found.get(key)
            found[key] = team.name
            if other is not None:
                raise CheckFailed(
                    f"GitHub team `{github_team.org}/{github_team.name}` is defined "
                    f"for both the `{team.name}` and `{other}` teams"
                )

        each(data.github_teams(team), errors, check_github_team)

    each(data.teams(), errors, check)


def validate_repos(data: TeamData, errors: ErrorLog) -> None:
    """Ensure repos live in allowed orgs and grant access to known teams and people."""
    allowed_orgs = data.config.allowed_github_orgs
    github_teams = data.all_github_teams()

    def check(repo: Repo, _errors: ErrorLog) -> None:
        if repo.org not in allowed_orgs:
            raise CheckFailed(
                f"The repo '{repo.name}' is in an invalid org '{repo.org}'"
            )
        for team_name, _ in repo.access.teams:
            if (repo.org, team_name) not in github_teams:
                raise CheckFailed(
                    f"access for {repo.org}/{repo.name} is invalid: '{team_name}' "
                    f"is not configured as a GitHub team for the '{repo.org}' org"
                )
        for name, _ in repo.access.individuals:
            if data.person(name) is None:
                raise CheckFailed(
                    f"access for {repo.org}/{repo.name} is invalid: '{name}' "
                    "is not the name of a person in the team repo"
                )

    each(data.repos(), errors, check)
