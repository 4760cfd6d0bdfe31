"""Shared pytest fixtures for teamguard tests."""

from collections.abc import Callable, Iterable

import pytest

from teamguard.domain.data import TeamData
from teamguard.domain.models import (
    Check,
    Config,
    DiscordRole,
    ErrorLog,
    GitHubTeamConfig,
    Permissions,
    Person,
    Repo,
    RepoAccess,
    RepoPermission,
    RfcbotData,
    Team,
    TeamKind,
    TeamList,
    WebsiteData,
    ZulipGroupConfig,
)
from teamguard.infrastructure.directory.mock import (
    MockGitHubDirectory,
    MockZulipDirectory,
)

CONFIG = Config(
    allowed_mailing_lists_domains=("rust-lang.org",),
    allowed_github_orgs=("rust-lang",),
    permissions_bools=("perf", "crates-io-ops"),
    permissions_bors_repos=("rust",),
)


def _person(github: str, github_id: int, **kwargs) -> Person:
    kwargs.setdefault("email", f"{github}@example.com")
    return Person(github=github, github_id=github_id, **kwargs)


@pytest.fixture
def make_person() -> Callable[..., Person]:
    """Factory building a Person with a valid email address unless overridden."""
    return _person


@pytest.fixture
def make_data() -> Callable[..., TeamData]:
    """Factory building a TeamData with the shared test configuration."""

    def build(
        people: Iterable[Person] = (),
        teams: Iterable[Team] = (),
        archived_teams: Iterable[Team] = (),
        repos: Iterable[Repo] = (),
        config: Config = CONFIG,
    ) -> TeamData:
        return TeamData(
            config=config,
            people=people,
            teams=teams,
            archived_teams=archived_teams,
            repos=repos,
        )

    return build


@pytest.fixture
def run_check() -> Callable[..., tuple[str, ...]]:
    """Run one check (with optional directory) and return its finalized errors."""

    def run(check: Check | Callable[..., None], data: TeamData, *directory) -> tuple[str, ...]:
        errors = ErrorLog()
        check(data, *directory, errors)
        return errors.finalize()

    return run


@pytest.fixture
def sample_people() -> list[Person]:
    """People referenced by the sample teams."""
    return [
        _person("alice", 1, name="Alice", zulip_id=101, discord_id=201),
        _person("bob", 2, name="Bob", zulip_id=102, discord_id=202),
        _person("carol", 3, name="Carol", zulip_id=103),
        _person("dave", 4, name="Dave", permissions=Permissions(("perf",))),
        _person("erin", 5, name="Erin"),
    ]


@pytest.fixture
def sample_teams() -> list[Team]:
    """A small, fully consistent team hierarchy."""
    return [
        Team(
            name="compiler",
            leads=("alice",),
            members=("alice", "bob"),
            alumni=("erin",),
            github=(GitHubTeamConfig(orgs=("rust-lang",)),),
            website=WebsiteData(name="Compiler team", zulip_stream="t-compiler"),
            discord_roles=(DiscordRole(name="compiler"),),
            lists=(TeamList(address="compiler@rust-lang.org"),),
            zulip_groups=(ZulipGroupConfig(name="T-compiler"),),
            permissions=Permissions(("bors.rust.review",)),
            rfcbot=RfcbotData(label="T-compiler", exclude_members=("bob",)),
        ),
        Team(
            name="wg-async",
            kind=TeamKind.WORKING_GROUP,
            subteam_of="compiler",
            leads=("carol",),
            members=("carol",),
        ),
        Team(
            name="project-exploit",
            kind=TeamKind.PROJECT_GROUP,
            subteam_of="compiler",
            members=("bob",),
        ),
        Team(name="alumni", kind=TeamKind.MARKER_TEAM, include_all_alumni=True),
    ]


@pytest.fixture
def sample_repos() -> list[Repo]:
    return [
        Repo(
            org="rust-lang",
            name="rust",
            access=RepoAccess(
                teams=(("compiler", RepoPermission.WRITE),),
                individuals=(("dave", RepoPermission.TRIAGE),),
            ),
        )
    ]


@pytest.fixture
def sample_data(make_data, sample_people, sample_teams, sample_repos) -> TeamData:
    """A TeamData on which every check passes."""
    return make_data(people=sample_people, teams=sample_teams, repos=sample_repos)


@pytest.fixture
def github_directory() -> MockGitHubDirectory:
    """GitHub directory agreeing with the sample people."""
    return MockGitHubDirectory(
        usernames={1: "alice", 2: "bob", 3: "carol", 4: "dave", 5: "erin"}
    )


@pytest.fixture
def zulip_directory() -> MockZulipDirectory:
    """Zulip directory knowing every sample Zulip id."""
    return MockZulipDirectory(user_ids=[101, 102, 103])
