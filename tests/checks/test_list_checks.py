"""Tests for mailing list and email address checks."""

from teamguard.checks.local.lists import (
    validate_list_addresses,
    validate_list_email_addresses,
    validate_list_extra_people,
    validate_list_extra_teams,
    validate_people_addresses,
)
from teamguard.domain.models import Team, TeamList


def list_team(*lists: TeamList, members: tuple[str, ...] = ()) -> Team:
    return Team(name="compiler", members=members, lists=lists)


class TestListEmailAddresses:
    """Tests for validate_list_email_addresses."""

    def test_sample_data_passes(self, run_check, sample_data) -> None:  # noqa: ANN001
        assert run_check(validate_list_email_addresses, sample_data) == ()

    def test_member_without_email_reported(self, run_check, make_data, make_person) -> None:  # noqa: ANN001
        team = list_team(TeamList(address="c@rust-lang.org"), members=("alice",))
        data = make_data(people=[make_person("alice", 1, email=None)], teams=[team])

        assert run_check(validate_list_email_addresses, data) == (
            "person `alice` is a member of a mailing list but has no email address",
        )

    def test_disabled_email_passes(self, run_check, make_data, make_person) -> None:  # noqa: ANN001
        """Opting out of an address is allowed."""
        team = list_team(TeamList(address="c@rust-lang.org"), members=("alice",))
        person = make_person("alice", 1, email=None, email_disabled=True)
        data = make_data(people=[person], teams=[team])

        assert run_check(validate_list_email_addresses, data) == ()

    def test_team_without_lists_passes(self, run_check, make_data, make_person) -> None:  # noqa: ANN001
        data = make_data(
            people=[make_person("alice", 1, email=None)],
            teams=[Team(name="compiler", members=("alice",))],
        )

        assert run_check(validate_list_email_addresses, data) == ()


class TestListExtras:
    """Tests for validate_list_extra_people and validate_list_extra_teams."""

    def test_missing_extra_person_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        team = list_team(TeamList(address="c@rust-lang.org", extra_people=("ghost",)))
        data = make_data(teams=[team])

        assert run_check(validate_list_extra_people, data) == (
            "person `ghost` does not exist (in list `c@rust-lang.org`)",
        )

    def test_missing_extra_team_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        team = list_team(TeamList(address="c@rust-lang.org", extra_teams=("ghost",)))
        data = make_data(teams=[team])

        assert run_check(validate_list_extra_teams, data) == (
            "team `ghost` does not exist (in list `c@rust-lang.org`)",
        )

    def test_existing_extras_pass(self, run_check, make_data, make_person) -> None:  # noqa: ANN001
        team = list_team(
            TeamList(
                address="c@rust-lang.org", extra_people=("alice",), extra_teams=("compiler",)
            )
        )
        data = make_data(people=[make_person("alice", 1)], teams=[team])

        assert run_check(validate_list_extra_people, data) == ()
        assert run_check(validate_list_extra_teams, data) == ()


class TestListAddresses:
    """Tests for validate_list_addresses."""

    def test_owned_domain_passes(self, run_check, sample_data) -> None:  # noqa: ANN001
        assert run_check(validate_list_addresses, sample_data) == ()

    def test_malformed_address_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        data = make_data(teams=[list_team(TeamList(address="not an address"))])

        assert run_check(validate_list_addresses, data) == (
            "invalid list address: `not an address`",
        )

    def test_foreign_domain_reported(self, run_check, make_data) -> None:  # noqa: ANN001
        data = make_data(teams=[list_team(TeamList(address="team@example.com"))])

        assert run_check(validate_list_addresses, data) == (
            "list address on a domain we don't own: `team@example.com`",
        )

    def test_every_list_checked(self, run_check, make_data) -> None:  # noqa: ANN001
        """One bad list doesn't hide the next one."""
        team = list_team(TeamList(address="a@example.com"), TeamList(address="b@example.com"))
        data = make_data(teams=[team])

        assert len(run_check(validate_list_addresses, data)) == 2


class TestPeopleAddresses:
    """Tests for validate_people_addresses."""

    def test_invalid_email_reported(self, run_check, make_data, make_person) -> None:  # noqa: ANN001
        data = make_data(people=[make_person("alice", 1, email="alice")])

        assert run_check(validate_people_addresses, data) == (
            "invalid email address of `alice`: alice",
        )

    def test_missing_email_passes(self, run_check, make_data, make_person) -> None:  # noqa: ANN001
        data = make_data(people=[make_person("alice", 1, email=None)])

        assert run_check(validate_people_addresses, data) == ()
