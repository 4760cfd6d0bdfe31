"""
Check Registry.

Checks are registered statically, in three ordered tiers:

- local: only reads the data model, always runs
- github: also queries the GitHub directory
- zulip: also queries the Zulip directory

Names are the function names, so `--skip validate_repos` on the command
line matches the registered check exactly.
"""

from collections.abc import Callable

from teamguard.checks.local import (
    validate_alumni,
    validate_discord_team_members_have_discord_ids,
    validate_duplicate_permissions,
    validate_github_teams,
    validate_inactive_members,
    validate_list_addresses,
    validate_list_email_addresses,
    validate_list_extra_people,
    validate_list_extra_teams,
    validate_name_prefixes,
    validate_people_addresses,
    validate_permissions,
    validate_project_groups_have_parent_teams,
    validate_repos,
    validate_rfcbot_exclude_members,
    validate_rfcbot_labels,
    validate_subteam_of,
    validate_team_leads,
    validate_team_members,
    validate_team_names,
    validate_zulip_group_extra_people,
    validate_zulip_group_ids,
    validate_zulip_stream_name,
)
from teamguard.checks.remote import validate_github_usernames, validate_zulip_users
from teamguard.domain.models import Check

LOCAL_TIER = "local"
GITHUB_TIER = "github"
ZULIP_TIER = "zulip"


def checks(*funcs: Callable[..., None]) -> tuple[Check, ...]:
    """Build an ordered tier, naming each check after its function."""
    return tuple(Check(name=func.__name__, func=func) for func in funcs)


LOCAL_CHECKS = checks(
    validate_name_prefixes,
    validate_subteam_of,
    validate_team_leads,
    validate_team_members,
    validate_alumni,
    validate_inactive_members,
    validate_list_email_addresses,
    validate_list_extra_people,
    validate_list_extra_teams,
    validate_list_addresses,
    validate_people_addresses,
    validate_duplicate_permissions,
    validate_permissions,
    validate_rfcbot_labels,
    validate_rfcbot_exclude_members,
    validate_team_names,
    validate_github_teams,
    validate_zulip_stream_name,
    validate_project_groups_have_parent_teams,
    validate_discord_team_members_have_discord_ids,
    validate_zulip_group_ids,
    validate_zulip_group_extra_people,
    validate_repos,
)

GITHUB_CHECKS = checks(validate_github_usernames)

ZULIP_CHECKS = checks(validate_zulip_users)


class CheckRegistry:
    """
    Lookup helpers over the static check tiers.

    Example usage:
        CheckRegistry.get("validate_repos")
        CheckRegistry.tier_of("validate_zulip_users")  # "zulip"
    """

    _tiers: dict[str, tuple[Check, ...]] = {
        LOCAL_TIER: LOCAL_CHECKS,
        GITHUB_TIER: GITHUB_CHECKS,
        ZULIP_TIER: ZULIP_CHECKS,
    }

    @classmethod
    def tiers(cls) -> dict[str, tuple[Check, ...]]:
        """Tiers in execution order."""
        return dict(cls._tiers)

    @classmethod
    def names(cls) -> list[str]:
        """All check names, in execution order."""
        return [check.name for tier in cls._tiers.values() for check in tier]

    @classmethod
    def get(cls, name: str) -> Check:
        """
        Get a check by name.

        Raises:
            KeyError: If no check has that name
        """
        for tier in cls._tiers.values():
            for check in tier:
                if check.name == name:
                    return check
        available = ", ".join(cls.names())
        raise KeyError(f"Check '{name}' not found. Available checks: {available}")

    @classmethod
    def tier_of(cls, name: str) -> str:
        """
        Get the tier a check belongs to.

        Raises:
            KeyError: If no check has that name
        """
        check = cls.get(name)
        for tier_name, tier in cls._tiers.items():
            if check in tier:
                return tier_name
        raise KeyError(name)
