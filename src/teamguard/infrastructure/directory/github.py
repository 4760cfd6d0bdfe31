"""
GitHub directory implementation.

Resolves numeric user ids to current logins through the GraphQL API.
"""

import base64
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import httpx

from teamguard.domain.exceptions import DirectoryError, DirectoryUnavailable
from teamguard.domain.interfaces import GitHubDirectoryInterface

logger = logging.getLogger("teamguard.directory.github")

DEFAULT_GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

# GitHub caps the number of node ids accepted by a single `nodes` query
NODES_PER_QUERY = 100

USERNAMES_QUERY = """
query($ids: [ID!]!) {
    nodes(ids: $ids) {
        ... on User {
            databaseId
            login
        }
    }
}
"""


@dataclass
class GitHubDirectoryConfig:
    """Configuration for GitHubDirectory.

    This typed config ensures unknown fields are rejected at construction time.
    """

    token: str | None = None  # Auto-detects from GITHUB_TOKEN env var
    graphql_url: str = DEFAULT_GITHUB_GRAPHQL_URL
    timeout: float = 30.0


def user_node_id(github_id: int) -> str:
    """Legacy global node id of a user, accepted by the `nodes` query."""
    return base64.b64encode(f"04:User{github_id}".encode()).decode()


class GitHubDirectory(GitHubDirectoryInterface):
    """Queries GitHub's GraphQL API with a personal access token."""

    config_class = GitHubDirectoryConfig

    def __init__(
        self,
        config: GitHubDirectoryConfig | None = None,
        client: httpx.Client | None = None,
        **kwargs: Any,
    ):
        """
        Args:
            config: Typed configuration object (preferred)
            client: HTTP client to reuse (created from config if None)
            **kwargs: Config fields, used when config is None
        """
        if config is None:
            config = GitHubDirectoryConfig(**kwargs)

        self._token = config.token or os.environ.get("GITHUB_TOKEN")
        self._url = config.graphql_url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout)

    def close(self) -> None:
        """Close the HTTP client if this directory created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GitHubDirectory":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def require_auth(self) -> None:
        if not self._token:
            raise DirectoryUnavailable("missing GITHUB_TOKEN environment variable")

    def usernames(self, ids: Iterable[int]) -> dict[int, str]:
        """Resolve current logins, querying in batches of NODES_PER_QUERY ids."""
        self.require_auth()
        ids = list(ids)
        result: dict[int, str] = {}
        for start in range(0, len(ids), NODES_PER_QUERY):
            chunk = ids[start : start + NODES_PER_QUERY]
            data = self._graphql(
                USERNAMES_QUERY, {"ids": [user_node_id(i) for i in chunk]}
            )
            try:
                for node in data["nodes"]:
                    # Deleted accounts come back as null nodes
                    if node and "databaseId" in node:
                        result[node["databaseId"]] = node["login"]
            except (KeyError, TypeError) as err:
                raise DirectoryError(
                    f"GitHub API returned an unexpected payload: {err!r}"
                ) from err
        logger.debug("resolved %d of %d GitHub ids", len(result), len(ids))
        return result

    def _graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        try:
            response = self._client.post(
                self._url,
                json={"query": query, "variables": variables},
                headers={"Authorization": f"token {self._token}"},
            )
            response.raise_for_status()
        except httpx.HTTPError as err:
            raise DirectoryError(f"GitHub API request failed: {err}") from err

        try:
            payload = response.json()
            errors = [
                e for e in payload.get("errors") or [] if e.get("type") != "NOT_FOUND"
            ]
        except (ValueError, AttributeError) as err:
            raise DirectoryError(f"GitHub API returned a malformed response: {err}") from err
        if errors:
            messages = "; ".join(e.get("message", "unknown error") for e in errors)
            raise DirectoryError(f"GitHub API returned errors: {messages}")
        data: dict[str, Any] = payload.get("data") or {}
        return data
