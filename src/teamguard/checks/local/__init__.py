"""
Local checks - Pure validation against the data model.

These checks have no external dependency and always run.
"""

from teamguard.checks.local.chat import (
    validate_discord_team_members_have_discord_ids,
    validate_zulip_group_extra_people,
    validate_zulip_group_ids,
)
from teamguard.checks.local.github import validate_github_teams, validate_repos
from teamguard.checks.local.hierarchy import (
    validate_project_groups_have_parent_teams,
    validate_subteam_of,
)
from teamguard.checks.local.lists import (
    validate_list_addresses,
    validate_list_email_addresses,
    validate_list_extra_people,
    validate_list_extra_teams,
    validate_people_addresses,
)
from teamguard.checks.local.membership import (
    validate_alumni,
    validate_inactive_members,
    validate_team_leads,
    validate_team_members,
)
from teamguard.checks.local.naming import (
    validate_name_prefixes,
    validate_team_names,
    validate_zulip_stream_name,
)
from teamguard.checks.local.permissions import (
    validate_duplicate_permissions,
    validate_permissions,
)
from teamguard.checks.local.rfcbot import (
    validate_rfcbot_exclude_members,
    validate_rfcbot_labels,
)

__all__ = [
    "validate_alumni",
    "validate_discord_team_members_have_discord_ids",
    "validate_duplicate_permissions",
    "validate_github_teams",
    "validate_inactive_members",
    "validate_list_addresses",
    "validate_list_email_addresses",
    "validate_list_extra_people",
    "validate_list_extra_teams",
    "validate_name_prefixes",
    "validate_people_addresses",
    "validate_permissions",
    "validate_project_groups_have_parent_teams",
    "validate_repos",
    "validate_rfcbot_exclude_members",
    "validate_rfcbot_labels",
    "validate_subteam_of",
    "validate_team_leads",
    "validate_team_members",
    "validate_team_names",
    "validate_zulip_group_extra_people",
    "validate_zulip_group_ids",
    "validate_zulip_stream_name",
]
