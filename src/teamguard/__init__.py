"""
teamguard: Consistency validation for team membership data.

Checks that teams, people, repositories, mailing lists, chat groups and
permission grants agree with each other, and reports every inconsistency
found in a single deterministic pass.

Example:
    from teamguard import validate
    from teamguard.infrastructure import GitHubDirectory, load_snapshot

    data = load_snapshot("teamdata.json")
    validate(data, strict=True, github=GitHubDirectory())
"""

# Application layer (orchestration)
from teamguard.application.validator import Validator, validate

# Check registry
from teamguard.checks.registry import (
    GITHUB_CHECKS,
    LOCAL_CHECKS,
    ZULIP_CHECKS,
    CheckRegistry,
)

# Data model
from teamguard.domain.data import TeamData

# Domain exceptions
from teamguard.domain.exceptions import (
    DirectoryError,
    DirectoryUnavailable,
    TeamDataError,
    ValidationFailed,
)

# Domain interfaces (for custom directory implementations)
from teamguard.domain.interfaces import (
    GitHubDirectoryInterface,
    ZulipDirectoryInterface,
)
from teamguard.domain.models import (
    Config,
    ErrorLog,
    Permissions,
    Person,
    Repo,
    Team,
    TeamKind,
    ValidationReport,
)

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Data model
    "TeamData",
    "Config",
    "Permissions",
    "Person",
    "Repo",
    "Team",
    "TeamKind",
    "ErrorLog",
    "ValidationReport",
    # Domain interfaces
    "GitHubDirectoryInterface",
    "ZulipDirectoryInterface",
    # Domain exceptions
    "DirectoryError",
    "DirectoryUnavailable",
    "TeamDataError",
    "ValidationFailed",
    # Checks
    "CheckRegistry",
    "LOCAL_CHECKS",
    "GITHUB_CHECKS",
    "ZULIP_CHECKS",
    # Application layer
    "Validator",
    "validate",
]
