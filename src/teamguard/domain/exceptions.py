"""
Domain exceptions for team data validation.

Violations found by checks are plain strings collected in an ErrorLog;
these exceptions model the failures that happen while computing them.
"""


class TeamDataError(Exception):
    """
    Raised when a derived set cannot be resolved from the data model.

    Examples are an included team that does not exist, or a group member
    without a person record. Checks convert it into a single violation.
    """


class CheckFailed(Exception):
    """
    Raised by a per-item check callback to report one violation.

    The message is the human-readable violation recorded in the error log.
    """


class InvalidPermission(CheckFailed):
    """Raised when a permission grant is unknown or redundant."""


class DirectoryUnavailable(Exception):
    """
    Raised when an external directory cannot be used for this run.

    Covers missing credentials, a missing adapter and a failed
    authentication probe. Non-strict runs downgrade it to a warning.
    """


class DirectoryError(Exception):
    """Raised when a directory query fails after authentication."""


class SnapshotError(Exception):
    """Raised when a team data snapshot cannot be loaded."""


class ValidationFailed(Exception):
    """
    Raised when a validation run detects at least one violation.

    The individual messages are emitted to the log before this is raised.
    """

    def __init__(self, errors: tuple[str, ...]):
        """
        Args:
            errors: Sorted, deduplicated violation messages
        """
        super().__init__(f"{len(errors)} validation errors found")
        self.errors = errors

    @property
    def count(self) -> int:
        return len(self.errors)
