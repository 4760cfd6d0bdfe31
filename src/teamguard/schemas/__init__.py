"""teamguard JSON Schema definitions and validation utilities.

Schemas:
    - teamdata.schema.json: Team data snapshot (config, people, teams, repos)

Usage:
    from teamguard.schemas import validate_snapshot

    with open("teamdata.json") as f:
        payload = json.load(f)
    validate_snapshot(payload)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'teamdata.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("teamguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_snapshot_schema() -> dict[str, Any]:
    """Get the teamdata.json schema."""
    return _load_schema("teamdata.schema.json")


def validate_snapshot(data: dict[str, Any]) -> None:
    """Validate a team data snapshot against the schema.

    Args:
        data: Snapshot dictionary

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_snapshot_schema())


__all__ = [
    "get_snapshot_schema",
    "validate_snapshot",
]
