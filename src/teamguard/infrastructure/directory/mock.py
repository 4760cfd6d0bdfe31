"""
Mock directories for testing without network access.

Return predefined answers and count how often they were queried.
"""

from collections.abc import Iterable

from teamguard.domain.exceptions import DirectoryError, DirectoryUnavailable
from teamguard.domain.interfaces import (
    GitHubDirectoryInterface,
    ZulipDirectoryInterface,
)
from teamguard.domain.models import ZulipUser


class MockGitHubDirectory(GitHubDirectoryInterface):
    """Returns predefined usernames for testing."""

    def __init__(
        self,
        usernames: dict[int, str] | None = None,
        unavailable: str | None = None,
        failure: str | None = None,
    ):
        """
        Args:
            usernames: Current login of each known GitHub id
            unavailable: If set, require_auth() fails with this cause
            failure: If set, usernames() fails with this message
        """
        self._usernames = dict(usernames or {})
        self._unavailable = unavailable
        self._failure = failure
        self._call_count = 0

    def require_auth(self) -> None:
        if self._unavailable is not None:
            raise DirectoryUnavailable(self._unavailable)

    def usernames(self, ids: Iterable[int]) -> dict[int, str]:
        self._call_count += 1
        if self._failure is not None:
            raise DirectoryError(self._failure)
        return {i: self._usernames[i] for i in ids if i in self._usernames}

    @property
    def call_count(self) -> int:
        """Number of times usernames() has been called."""
        return self._call_count


class MockZulipDirectory(ZulipDirectoryInterface):
    """Returns predefined Zulip users for testing."""

    def __init__(
        self,
        user_ids: Iterable[int] = (),
        unavailable: str | None = None,
        failure: str | None = None,
    ):
        """
        Args:
            user_ids: Ids of the users known to the Zulip server
            unavailable: If set, require_auth() fails with this cause
            failure: If set, get_users() fails with this message
        """
        self._users = [ZulipUser(user_id=i) for i in user_ids]
        self._unavailable = unavailable
        self._failure = failure
        self._call_count = 0

    def require_auth(self) -> None:
        if self._unavailable is not None:
            raise DirectoryUnavailable(self._unavailable)

    def get_users(self) -> list[ZulipUser]:
        self._call_count += 1
        if self._failure is not None:
            raise DirectoryError(self._failure)
        return list(self._users)

    @property
    def call_count(self) -> int:
        """Number of times get_users() has been called."""
        return self._call_count
