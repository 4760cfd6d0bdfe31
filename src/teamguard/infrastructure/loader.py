"""
Snapshot loader.

Builds a TeamData from a JSON snapshot of the team repository, after
validating it against the bundled JSON Schema.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import SnapshotError
from teamguard.domain.models import (
    Bot,
    BranchProtection,
    Config,
    DiscordRole,
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
from teamguard.schemas import validate_snapshot

logger = logging.getLogger("teamguard.loader")


def load_snapshot(path: str | Path) -> TeamData:
    """
    Load a snapshot file.

    Raises:
        SnapshotError: If the file can't be read, parsed or validated
    """
    path = Path(path)
    try:
        with open(path) as f:
            payload = json.load(f)
    except OSError as err:
        raise SnapshotError(f"couldn't read snapshot {path}: {err}") from err
    except json.JSONDecodeError as err:
        raise SnapshotError(f"snapshot {path} is not valid JSON: {err}") from err
    data = snapshot_from_dict(payload)
    logger.debug("loaded snapshot %s", path)
    return data


def snapshot_from_dict(payload: dict[str, Any]) -> TeamData:
    """
    Build a TeamData from an already parsed snapshot.

    Raises:
        SnapshotError: If the payload doesn't match the snapshot schema
    """
    try:
        validate_snapshot(payload)
    except jsonschema.ValidationError as err:
        location = "/".join(str(p) for p in err.absolute_path) or "<root>"
        raise SnapshotError(f"invalid snapshot at {location}: {err.message}") from err

    return TeamData(
        config=_dict_to_config(payload.get("config", {})),
        people=[_dict_to_person(p) for p in payload.get("people", [])],
        teams=[_dict_to_team(t) for t in payload.get("teams", [])],
        archived_teams=[_dict_to_team(t) for t in payload.get("archived_teams", [])],
        repos=[_dict_to_repo(r) for r in payload.get("repos", [])],
    )


def _names(data: dict[str, Any], key: str) -> tuple[str, ...]:
    return tuple(data.get(key, ()))


def _dict_to_config(data: dict[str, Any]) -> Config:
    return Config(
        allowed_mailing_lists_domains=_names(data, "allowed_mailing_lists_domains"),
        allowed_github_orgs=_names(data, "allowed_github_orgs"),
        permissions_bools=_names(data, "permissions_bools"),
        permissions_bors_repos=_names(data, "permissions_bors_repos"),
    )


def _dict_to_person(data: dict[str, Any]) -> Person:
    # `email: false` opts out of having an address
    email = data.get("email")
    return Person(
        github=data["github"],
        github_id=data["github_id"],
        name=data.get("name", ""),
        email=email if isinstance(email, str) else None,
        email_disabled=email is False,
        zulip_id=data.get("zulip_id"),
        discord_id=data.get("discord_id"),
        permissions=Permissions(_names(data, "permissions")),
    )


def _dict_to_team(data: dict[str, Any]) -> Team:
    people = data.get("people", {})
    website = data.get("website")
    rfcbot = data.get("rfcbot")
    return Team(
        name=data["name"],
        kind=TeamKind(data.get("kind", "team")),
        subteam_of=data.get("subteam_of"),
        leads=_names(people, "leads"),
        members=_names(people, "members"),
        alumni=_names(people, "alumni"),
        included_teams=_names(people, "included_teams"),
        include_team_leads=people.get("include_team_leads", False),
        include_wg_leads=people.get("include_wg_leads", False),
        include_project_group_leads=people.get("include_project_group_leads", False),
        include_all_team_members=people.get("include_all_team_members", False),
        include_all_alumni=people.get("include_all_alumni", False),
        github=tuple(
            GitHubTeamConfig(
                orgs=_names(g, "orgs"),
                team_name=g.get("team_name"),
                extra_teams=_names(g, "extra_teams"),
                include_members=g.get("include_members", True),
            )
            for g in data.get("github", [])
        ),
        website=(
            WebsiteData(
                name=website["name"],
                description=website.get("description", ""),
                zulip_stream=website.get("zulip_stream"),
                repo=website.get("repo"),
                weight=website.get("weight", 0),
            )
            if website is not None
            else None
        ),
        discord_roles=tuple(
            DiscordRole(name=d["name"], color=d.get("color"))
            for d in data.get("discord", [])
        ),
        lists=tuple(
            TeamList(
                address=raw["address"],
                extra_people=_names(raw, "extra_people"),
                extra_emails=_names(raw, "extra_emails"),
                extra_teams=_names(raw, "extra_teams"),
                include_team_members=raw.get("include_team_members", True),
            )
            for raw in data.get("lists", [])
        ),
        zulip_groups=tuple(
            ZulipGroupConfig(
                name=raw["name"],
                include_team_members=raw.get("include_team_members", True),
                extra_people=_names(raw, "extra_people"),
                extra_zulip_ids=tuple(raw.get("extra_zulip_ids", ())),
                extra_teams=_names(raw, "extra_teams"),
                excluded_people=_names(raw, "excluded_people"),
            )
            for raw in data.get("zulip_groups", [])
        ),
        permissions=Permissions(_names(data, "permissions")),
        leads_permissions=Permissions(_names(data, "leads_permissions")),
        rfcbot=(
            RfcbotData(
                label=rfcbot["label"],
                name=rfcbot.get("name", ""),
                ping=rfcbot.get("ping", ""),
                exclude_members=_names(rfcbot, "exclude_members"),
            )
            if rfcbot is not None
            else None
        ),
    )


def _dict_to_repo(data: dict[str, Any]) -> Repo:
    access = data.get("access", {})
    return Repo(
        org=data["org"],
        name=data["name"],
        description=data.get("description", ""),
        bots=tuple(Bot(b) for b in data.get("bots", [])),
        access=RepoAccess(
            teams=tuple(
                (name, RepoPermission(p)) for name, p in access.get("teams", {}).items()
            ),
            individuals=tuple(
                (name, RepoPermission(p))
                for name, p in access.get("individuals", {}).items()
            ),
        ),
        branch_protections=tuple(
            BranchProtection(
                pattern=bp["pattern"],
                ci_checks=_names(bp, "ci_checks"),
                dismiss_stale_review=bp.get("dismiss_stale_review", False),
            )
            for bp in data.get("branch_protections", [])
        ),
    )
