"""
Team hierarchy checks.

The hierarchy is a leaf-to-root chain of `subteam_of` links. It must be
acyclic, every link must resolve, and only top-level teams may have
working or project groups below a subteam.
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed
from teamguard.domain.models import ErrorLog, Team, TeamKind


def _canonical_cycle(cycle: list[str]) -> tuple[str, ...]:
    """Rotate a cycle so it starts at its smallest name."""
    start = cycle.index(min(cycle))
    return tuple(cycle[start:] + cycle[:start])


def validate_subteam_of(data: TeamData, errors: ErrorLog) -> None:
    """
    Walk each team's parent chain, reporting cycles, dangling parents and
    illegal two-level nesting.

    The first walk records every visited name, so it stops either at a root
    or at the first repeated name. A cycle is reported in canonical
    rotation, so every team that leads into it yields the same message.
    Nesting is only judged once the chain is known to reach a root.
    """

    def check(team: Team, _errors: ErrorLog) -> None:
        chain: list[Team] = []
        visited: list[str] = []
        current = team
        while current.subteam_of is not None:
            parent_name = current.subteam_of
            visited.append(current.name)

            if parent_name in visited:
                cycle = _canonical_cycle(visited[visited.index(parent_name) :])
                path = " => ".join((*cycle, cycle[0]))
                raise CheckFailed(f"team `{cycle[0]}` is a subteam of itself: {path}")

            parent = data.team(parent_name)
            if parent is None:
                raise CheckFailed(
                    f"the parent of team `{current.name}` doesn't exist: `{parent_name}`"
                )

            chain.append(current)
            current = parent

        for link in chain:
            parent = data.team(link.subteam_of)
            if link.kind is not TeamKind.TEAM and parent.subteam_of is not None:
                raise CheckFailed(
                    f"{link.kind} `{link.name}` can't be a subteam of a subteam "
                    f"(`{parent.name}`)"
                )

    each(data.teams(), errors, check)


def validate_project_groups_have_parent_teams(
    data: TeamData, errors: ErrorLog
) -> None:
    """Ensure each project group has a parent team."""

    def check(team: Team, _errors: ErrorLog) -> None:
        if team.kind is TeamKind.PROJECT_GROUP and team.subteam_of is None:
            raise CheckFailed(
                f"the project group `{team.name}` doesn't have a parent team, "
                "but it's required to have one"
            )

    each(data.teams(), errors, check)
