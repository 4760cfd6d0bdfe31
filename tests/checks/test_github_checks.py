"""Tests for GitHub team and repository checks."""

from teamguard.checks.local.github import validate_github_teams, validate_repos
from teamguard.domain.models import (
    GitHubTeamConfig,
    Repo,
    RepoAccess,
    RepoPermission,
    Team,
)


class TestGitHubTeams:
    """Tests for validate_github_teams."""

    def test_sample_data_passes(self, run_check, sample_data) -> None:  # noqa: ANN001
        assert run_check(validate_github_teams, sample_data) == ()

    def test_disallowed_org_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        team = Team(name="compiler", github=(GitHubTeamConfig(orgs=("evil-corp",)),))
        data = make_data(teams=[team])

        assert run_check(validate_github_teams, data) == (
            "GitHub organization `evil-corp` isn't allowed (in team `compiler`)",
        )

    def test_duplicate_team_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        """Two teams can't map onto the same GitHub team."""
        data = make_data(
            teams=[
                Team(name="compiler", github=(GitHubTeamConfig(orgs=("rust-lang",)),)),
                Team(
                    name="compiler-team",
                    github=(
                        GitHubTeamConfig(orgs=("rust-lang",), team_name="compiler"),
                    ),
                ),
            ]
        )

        assert run_check(validate_github_teams, data) == (
            "GitHub team `rust-lang/compiler` is defined for both the "
            "`compiler-team` and `compiler` teams",
        )

    def test_unresolvable_members_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        team = Team(
            name="compiler",
            members=("ghost",),
            github=(GitHubTeamConfig(orgs=("rust-lang",)),),
        )
        data = make_data(teams=[team])

        assert run_check(validate_github_teams, data) == (
            "person `ghost` does not exist",
        )


class TestRepos:
    """Tests for validate_repos."""

    def test_sample_data_passes(self, run_check, sample_data) -> None:  # noqa: ANN001
        assert run_check(validate_repos, sample_data) == ()

    def test_disallowed_org_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        data = make_data(repos=[Repo(org="evil-corp", name="rust")])

        assert run_check(validate_repos, data) == (
            "The repo 'rust' is in an invalid org 'evil-corp'",
        )

    def test_unknown_team_access_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        repo = Repo(
            org="rust-lang",
            name="rust",
            access=RepoAccess(teams=(("compiler", RepoPermission.WRITE),)),
        )
        data = make_data(teams=[Team(name="compiler")], repos=[repo])

        assert run_check(validate_repos, data) == (
            "access for rust-lang/rust is invalid: 'compiler' is not configured "
            "as a GitHub team for the 'rust-lang' org",
        )

    def test_unknown_individual_access_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        repo = Repo(
            org="rust-lang",
            name="rust",
            access=RepoAccess(individuals=(("ghost", RepoPermission.ADMIN),)),
        )
        data = make_data(repos=[repo])

        assert run_check(validate_repos, data) == (
            "access for rust-lang/rust is invalid: 'ghost' is not the name of a "
            "person in the team repo",
        )
