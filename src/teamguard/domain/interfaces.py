"""
Domain interfaces (Ports) for team data validation.

These abstract base classes define the contracts external directories must
satisfy. They have no external dependencies; concrete HTTP and in-memory
adapters live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from teamguard.domain.models import ZulipUser


class GitHubDirectoryInterface(ABC):
    """
    Port for the code-hosting directory.

    Used to detect people whose GitHub handle no longer matches the
    account behind their numeric id.
    """

    @abstractmethod
    def require_auth(self) -> None:
        """
        Probe whether the directory can be queried.

        Raises:
            DirectoryUnavailable: If credentials are missing or rejected
        """
        pass

    @abstractmethod
    def usernames(self, ids: "Iterable[int]") -> dict[int, str]:
        """
        Resolve the current usernames of a set of numeric user ids.

        Args:
            ids: GitHub numeric user ids

        Returns:
            Mapping of id to current login; ids that no longer exist are omitted

        Raises:
            DirectoryError: If the query fails
        """
        pass


class ZulipDirectoryInterface(ABC):
    """
    Port for the chat-platform directory.

    Used to detect Zulip group members that are unknown to the Zulip server.
    """

    @abstractmethod
    def require_auth(self) -> None:
        """
        Probe whether the directory can be queried.

        Raises:
            DirectoryUnavailable: If credentials are missing or rejected
        """
        pass

    @abstractmethod
    def get_users(self) -> list["ZulipUser"]:
        """
        List every user known to the Zulip server.

        Raises:
            DirectoryError: If the query fails
        """
        pass
