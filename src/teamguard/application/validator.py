"""
Validator: Runs the check tiers against a team data model.

Owns the error log for the duration of a run and decides which tiers
can run based on directory availability.
"""

import logging
from collections.abc import Iterable

from teamguard.checks.registry import (
    GITHUB_CHECKS,
    GITHUB_TIER,
    LOCAL_CHECKS,
    LOCAL_TIER,
    ZULIP_CHECKS,
    ZULIP_TIER,
)
from teamguard.domain.data import TeamData
from teamguard.domain.exceptions import DirectoryUnavailable, ValidationFailed
from teamguard.domain.interfaces import (
    GitHubDirectoryInterface,
    ZulipDirectoryInterface,
)
from teamguard.domain.models import Check, ErrorLog, ValidationReport

logger = logging.getLogger("teamguard.validator")

_DIRECTORY_LABELS = {GITHUB_TIER: "GitHub", ZULIP_TIER: "Zulip"}


class Validator:
    """
    Executes every non-skipped check, tier by tier, into one error log.

    Tiers run in the order local, GitHub, Zulip. Checks never abort the
    run; the only early exit is an unavailable GitHub directory in strict
    mode.
    """

    def __init__(
        self,
        github: GitHubDirectoryInterface | None = None,
        zulip: ZulipDirectoryInterface | None = None,
        strict: bool = False,
        skip: Iterable[str] = (),
        local_checks: tuple[Check, ...] = LOCAL_CHECKS,
        github_checks: tuple[Check, ...] = GITHUB_CHECKS,
        zulip_checks: tuple[Check, ...] = ZULIP_CHECKS,
    ):
        """
        Args:
            github: GitHub directory (tier skipped if None)
            zulip: Zulip directory (tier skipped if None)
            strict: Fail when the GitHub directory is unavailable
            skip: Names of checks not to run
            local_checks: Local tier, in execution order
            github_checks: GitHub tier, in execution order
            zulip_checks: Zulip tier, in execution order
        """
        self._github = github
        self._zulip = zulip
        self._strict = strict
        self._skip = frozenset(skip)
        self._local_checks = local_checks
        self._github_checks = github_checks
        self._zulip_checks = zulip_checks

    def run(self, data: TeamData) -> ValidationReport:
        """
        Run all tiers against the data model.

        Returns:
            ValidationReport with sorted, deduplicated errors

        Raises:
            DirectoryUnavailable: In strict mode, if GitHub can't be queried
        """
        errors = ErrorLog()
        skipped_checks: list[str] = []
        skipped_tiers: list[str] = []

        logger.debug("running %s checks", LOCAL_TIER)
        skipped_checks += self._run_tier(self._local_checks, errors, data)

        if self._available(GITHUB_TIER, self._github, fatal=self._strict):
            logger.debug("running %s checks", GITHUB_TIER)
            skipped_checks += self._run_tier(
                self._github_checks, errors, data, self._github
            )
        else:
            skipped_tiers.append(GITHUB_TIER)

        if self._available(ZULIP_TIER, self._zulip, fatal=False):
            logger.debug("running %s checks", ZULIP_TIER)
            skipped_checks += self._run_tier(
                self._zulip_checks, errors, data, self._zulip
            )
        else:
            skipped_tiers.append(ZULIP_TIER)

        return ValidationReport(
            errors=errors.finalize(),
            skipped_checks=tuple(skipped_checks),
            skipped_tiers=tuple(skipped_tiers),
        )

    def _run_tier(
        self,
        tier: tuple[Check, ...],
        errors: ErrorLog,
        data: TeamData,
        *directory: GitHubDirectoryInterface | ZulipDirectoryInterface | None,
    ) -> list[str]:
        skipped = []
        for check in tier:
            if check.name in self._skip:
                logger.warning("skipped check: %s", check.name)
                skipped.append(check.name)
                continue
            before = len(errors)
            check(data, *directory, errors)
            logger.debug("%s: %d errors", check.name, len(errors) - before)
        return skipped

    def _available(
        self,
        tier: str,
        directory: GitHubDirectoryInterface | ZulipDirectoryInterface | None,
        fatal: bool,
    ) -> bool:
        label = _DIRECTORY_LABELS[tier]
        try:
            if directory is None:
                raise DirectoryUnavailable(f"no {label} directory configured")
            directory.require_auth()
        except DirectoryUnavailable as err:
            if fatal:
                raise
            logger.warning(
                "couldn't perform checks relying on the %s API, "
                "some errors will not be detected",
                label,
            )
            logger.warning("cause: %s", err)
            return False
        return True


def validate(
    data: TeamData,
    strict: bool = False,
    skip: Iterable[str] = (),
    github: GitHubDirectoryInterface | None = None,
    zulip: ZulipDirectoryInterface | None = None,
) -> ValidationReport:
    """
    Validate a team data model, logging every violation.

    Args:
        data: The data model to validate
        strict: Fail when the GitHub directory is unavailable
        skip: Names of checks not to run
        github: GitHub directory (tier skipped if None)
        zulip: Zulip directory (tier skipped if None)

    Returns:
        The passing ValidationReport (skipped checks and tiers included)

    Raises:
        ValidationFailed: If any violation was found
        DirectoryUnavailable: In strict mode, if GitHub can't be queried
    """
    report = Validator(github=github, zulip=zulip, strict=strict, skip=skip).run(data)
    if not report.passed:
        for error in report.errors:
            logger.error("validation error: %s", error)
        raise ValidationFailed(report.errors)
    return report
