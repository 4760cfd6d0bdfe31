"""
Checks that query the Zulip directory.
"""

from teamguard.checks.base import each
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import CheckFailed, DirectoryError, TeamDataError
from teamguard.domain.interfaces import ZulipDirectoryInterface
from teamguard.domain.models import (
    ErrorLog,
    JustId,
    MemberWithId,
    MemberWithoutId,
    ZulipGroup,
    ZulipGroupMember,
)


def missing_member(member: ZulipGroupMember, known_ids: frozenset[int]) -> str | None:
    """
    Describe a group member unknown to Zulip, or None if it is known.

    A member without an id is always missing; a member with an id is
    missing only when the id is absent from the directory.
    """
    if isinstance(member, MemberWithId):
        return None if member.zulip_id in known_ids else member.github
    if isinstance(member, JustId):
        return None if member.zulip_id in known_ids else f"ID: {member.zulip_id}"
    if isinstance(member, MemberWithoutId):
        return member.github
    raise TypeError(f"unsupported Zulip group member: {member!r}")


def validate_zulip_users(
    data: TeamData, zulip: ZulipDirectoryInterface, errors: ErrorLog
) -> None:
    """Ensure every member of a Zulip group exists on Zulip."""
    try:
        known_ids = frozenset(user.user_id for user in zulip.get_users())
    except DirectoryError as err:
        errors.push(f"couldn't verify Zulip users: {err}")
        return
    try:
        groups = data.all_zulip_groups()
    except TeamDataError as err:
        errors.push(f"couldn't get all the Zulip groups: {err}")
        return

    def check(group: ZulipGroup, _errors: ErrorLog) -> None:
        missing = {
            name
            for name in (missing_member(m, known_ids) for m in group.members)
            if name is not None
        }
        if missing:
            raise CheckFailed(
                f'the "{group.name}" Zulip group includes members who don\'t '
                f"appear on Zulip: {', '.join(sorted(missing))}"
            )

    each(groups.values(), errors, check)
