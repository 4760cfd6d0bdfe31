"""
Zulip directory implementation.

Lists the users of a Zulip organization through the REST API.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any

import httpx

from teamguard.domain.exceptions import DirectoryError, DirectoryUnavailable
from teamguard.domain.interfaces import ZulipDirectoryInterface
from teamguard.domain.models import ZulipUser

logger = logging.getLogger("teamguard.directory.zulip")

DEFAULT_ZULIP_SITE = "https://rust-lang.zulipchat.com"


@dataclass
class ZulipDirectoryConfig:
    """Configuration for ZulipDirectory.

    Credentials default to the ZULIP_USER and ZULIP_TOKEN environment
    variables, the site to ZULIP_SITE.
    """

    site: str | None = None
    user: str | None = None
    token: str | None = None
    timeout: float = 30.0


class ZulipDirectory(ZulipDirectoryInterface):
    """Queries a Zulip server with a bot's API key."""

    config_class = ZulipDirectoryConfig

    def __init__(
        self,
        config: ZulipDirectoryConfig | None = None,
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
            config = ZulipDirectoryConfig(**kwargs)

        self._site = (
            config.site or os.environ.get("ZULIP_SITE") or DEFAULT_ZULIP_SITE
        ).rstrip("/")
        self._user = config.user or os.environ.get("ZULIP_USER")
        self._token = config.token or os.environ.get("ZULIP_TOKEN")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout)

    def close(self) -> None:
        """Close the HTTP client if this directory created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ZulipDirectory":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def require_auth(self) -> None:
        if not self._user or not self._token:
            raise DirectoryUnavailable(
                "missing ZULIP_USER or ZULIP_TOKEN environment variable"
            )

    def get_users(self) -> list[ZulipUser]:
        self.require_auth()
        try:
            response = self._client.get(
                f"{self._site}/api/v1/users",
                auth=(self._user, self._token),
            )
            response.raise_for_status()
        except httpx.HTTPError as err:
            raise DirectoryError(f"Zulip API request failed: {err}") from err

        try:
            payload = response.json()
            result = payload.get("result")
        except (ValueError, AttributeError) as err:
            raise DirectoryError(f"Zulip API returned a malformed response: {err}") from err
        if result != "success":
            raise DirectoryError(
                f"Zulip API returned an error: {payload.get('msg', 'unknown error')}"
            )
        try:
            users = [
                ZulipUser(
                    user_id=member["user_id"],
                    email=member.get("email", ""),
                    full_name=member.get("full_name", ""),
                )
                for member in payload.get("members", [])
            ]
        except (KeyError, TypeError, AttributeError) as err:
            raise DirectoryError(
                f"Zulip API returned an unexpected payload: {err!r}"
            ) from err
        logger.debug("fetched %d Zulip users", len(users))
        return users
