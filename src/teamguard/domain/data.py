"""
In-memory team data model.

TeamData owns every entity of a validation run and answers the lookups
and derived-set queries the checks rely on. Resolution is fallible: a
dangling reference raises TeamDataError instead of being silently ignored.
"""

from collections.abc import Iterable, Iterator

from teamguard.domain.exceptions import TeamDataError
from teamguard.domain.models import (
    Config,
    GitHubTeam,
    JustId,
    MailingList,
    MemberWithId,
    MemberWithoutId,
    Person,
    Repo,
    Team,
    TeamKind,
    ZulipGroup,
    ZulipGroupMember,
)

ALUMNI_TEAM = "alumni"


class TeamData:
    """Read-only view over teams, archived teams, people and repos."""

    def __init__(
        self,
        config: Config | None = None,
        people: Iterable[Person] = (),
        teams: Iterable[Team] = (),
        archived_teams: Iterable[Team] = (),
        repos: Iterable[Repo] = (),
    ):
        """
        Args:
            config: Allow-lists and permission catalog (empty if None)
            people: Person records, keyed by GitHub handle
            teams: Active teams, keyed by name
            archived_teams: Archived teams, only reachable by iteration
            repos: Repositories
        """
        self._config = config if config is not None else Config()
        self._people: dict[str, Person] = {p.github: p for p in people}
        self._teams: dict[str, Team] = {t.name: t for t in teams}
        self._archived_teams: tuple[Team, ...] = tuple(archived_teams)
        self._repos: tuple[Repo, ...] = tuple(repos)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @property
    def config(self) -> Config:
        return self._config

    def team(self, name: str) -> Team | None:
        return self._teams.get(name)

    def person(self, github: str) -> Person | None:
        return self._people.get(github)

    def teams(self) -> Iterator[Team]:
        return iter(self._teams.values())

    def archived_teams(self) -> Iterator[Team]:
        return iter(self._archived_teams)

    def people(self) -> Iterator[Person]:
        return iter(self._people.values())

    def repos(self) -> Iterator[Repo]:
        return iter(self._repos)

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def effective_members(self, team: Team) -> frozenset[str]:
        """
        Resolve the GitHub handles counted as members of a team.

        Explicit members are merged with the members of included teams and
        with whatever the include flags pull in.

        Raises:
            TeamDataError: If an included team is missing or includes form a cycle
        """
        return frozenset(self._resolve_members(team, ()))

    def _resolve_members(self, team: Team, stack: tuple[str, ...]) -> set[str]:
        if team.name in stack:
            path = " => ".join((*stack, team.name))
            raise TeamDataError(f"team `{team.name}` includes itself: {path}")
        stack = (*stack, team.name)

        members = set(team.members)

        for name in team.included_teams:
            included = self.team(name)
            if included is None:
                raise TeamDataError(
                    f"team `{name}` (included by `{team.name}`) does not exist"
                )
            members |= self._resolve_members(included, stack)

        lead_kinds = set()
        if team.include_team_leads:
            lead_kinds.add(TeamKind.TEAM)
        if team.include_wg_leads:
            lead_kinds.add(TeamKind.WORKING_GROUP)
        if team.include_project_group_leads:
            lead_kinds.add(TeamKind.PROJECT_GROUP)
        if lead_kinds:
            for other in self.teams():
                if other.kind in lead_kinds:
                    members.update(other.leads)

        if team.include_all_team_members:
            for other in self.teams():
                if (
                    other.kind is not TeamKind.TEAM
                    or other.name == team.name
                    or other.include_all_team_members
                ):
                    continue
                members |= self._resolve_members(other, stack)

        if team.include_all_alumni:
            for other in self.teams():
                members.update(other.alumni)
            for archived in self.archived_teams():
                members.update(archived.members)
                members.update(archived.alumni)

        return members

    def active_members(self) -> frozenset[str]:
        """
        Union of the effective members of every active team but `alumni`.

        Raises:
            TeamDataError: If any team's membership cannot be resolved
        """
        active: set[str] = set()
        for team in self.teams():
            if team.name == ALUMNI_TEAM:
                continue
            active |= self.effective_members(team)
        return frozenset(active)

    def _require_person(self, github: str) -> Person:
        person = self.person(github)
        if person is None:
            raise TeamDataError(f"person `{github}` does not exist")
        return person

    def _require_team(self, name: str) -> Team:
        team = self.team(name)
        if team is None:
            raise TeamDataError(f"team `{name}` does not exist")
        return team

    # -------------------------------------------------------------------------
    # Derived integrations
    # -------------------------------------------------------------------------

    def github_teams(self, team: Team) -> tuple[GitHubTeam, ...]:
        """Resolve the GitHub teams of a team, one per configured org."""
        result = []
        for github in team.github:
            handles: set[str] = set()
            if github.include_members:
                handles |= self.effective_members(team)
            for name in github.extra_teams:
                handles |= self.effective_members(self._require_team(name))
            ids = tuple(sorted(self._require_person(h).github_id for h in handles))
            for org in github.orgs:
                result.append(
                    GitHubTeam(
                        org=org,
                        name=github.team_name or team.name,
                        member_ids=ids,
                    )
                )
        return tuple(result)

    def all_github_teams(self) -> frozenset[tuple[str, str]]:
        """
        Every (org, team name) pair declared by active teams.

        Reads the mappings directly so unresolvable memberships do not hide
        a declared GitHub team.
        """
        pairs = set()
        for team in self.teams():
            for github in team.github:
                for org in github.orgs:
                    pairs.add((org, github.team_name or team.name))
        return frozenset(pairs)

    def lists(self, team: Team) -> dict[str, MailingList]:
        """Resolve a team's mailing lists, keyed by lowercase address."""
        lists = {}
        for raw in team.lists:
            emails: list[str] = []
            handles: list[str] = []
            if raw.include_team_members:
                handles.extend(sorted(self.effective_members(team)))
            handles.extend(raw.extra_people)
            for name in raw.extra_teams:
                handles.extend(sorted(self.effective_members(self._require_team(name))))
            for handle in handles:
                person = self._require_person(handle)
                if person.email is not None and person.email not in emails:
                    emails.append(person.email)
            emails.extend(e for e in raw.extra_emails if e not in emails)
            lists[raw.address.lower()] = MailingList(
                address=raw.address, emails=tuple(emails)
            )
        return lists

    def zulip_groups(self, team: Team) -> tuple[ZulipGroup, ...]:
        """
        Resolve a team's Zulip user groups.

        People with a Zulip id become MemberWithId, people without one
        MemberWithoutId, and raw extra ids JustId.

        Raises:
            TeamDataError: On a missing team or person, or a useless exclusion
        """
        groups = []
        for raw in team.zulip_groups:
            handles: set[str] = set()
            if raw.include_team_members:
                handles |= self.effective_members(team)
            handles.update(raw.extra_people)
            for name in raw.extra_teams:
                handles |= self.effective_members(self._require_team(name))
            for excluded in raw.excluded_people:
                if excluded not in handles:
                    raise TeamDataError(
                        f"'{excluded}' was specifically excluded from the Zulip "
                        f"group '{raw.name}' but they were already not included"
                    )
                handles.discard(excluded)

            members: list[ZulipGroupMember] = []
            for handle in sorted(handles):
                person = self._require_person(handle)
                if person.zulip_id is not None:
                    members.append(MemberWithId(person.github, person.zulip_id))
                else:
                    members.append(MemberWithoutId(person.github))
            members.extend(JustId(zulip_id) for zulip_id in raw.extra_zulip_ids)
            groups.append(
                ZulipGroup(
                    name=raw.name,
                    includes_team_members=raw.include_team_members,
                    members=tuple(members),
                )
            )
        return tuple(groups)

    def all_zulip_groups(self) -> dict[str, ZulipGroup]:
        """All Zulip groups of active teams, keyed by group name."""
        groups = {}
        for team in self.teams():
            for group in self.zulip_groups(team):
                groups[group.name] = group
        return groups

    def discord_ids(self, team: Team) -> tuple[int, ...]:
        """Discord ids of the team's effective members that have one."""
        ids = []
        for handle in sorted(self.effective_members(team)):
            person = self.person(handle)
            if person is not None and person.discord_id is not None:
                ids.append(person.discord_id)
        return tuple(ids)
