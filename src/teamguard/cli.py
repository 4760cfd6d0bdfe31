"""CLI for team data validation.

Usage:
    # Validate a snapshot, using GitHub/Zulip when credentials are present
    teamguard check teamdata.json

    # Fail if GitHub can't be queried, and skip a check
    teamguard check teamdata.json --strict --skip validate_inactive_members

    # Only run the local checks
    teamguard check teamdata.json --offline

    # List the registered checks
    teamguard list-checks
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from teamguard.application.validator import validate
from teamguard.checks.registry import CheckRegistry
from teamguard.domain.exceptions import (
    DirectoryUnavailable,
    SnapshotError,
    ValidationFailed,
)
from teamguard.infrastructure.directory import GitHubDirectory, ZulipDirectory
from teamguard.infrastructure.loader import load_snapshot

logger = logging.getLogger("teamguard.cli")

EXIT_INVALID = 1
EXIT_ERROR = 2

_SUPPRESS_LOGGERS = ("httpx", "httpcore")


def _configure_logging(debug: bool) -> None:
    """Send log records to stderr through rich, quieting HTTP libraries."""
    level = logging.DEBUG if debug else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=debug,
        markup=False,
    )
    handler.setLevel(level)
    root.addHandler(handler)

    for name in _SUPPRESS_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Validate the consistency of team membership data."""
    _configure_logging(debug)


@cli.command()
@click.argument("snapshot", type=click.Path(dir_okay=False))
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if the GitHub API can't be used instead of skipping its checks",
)
@click.option(
    "--skip",
    multiple=True,
    metavar="CHECK",
    help="Name of a check to skip (repeatable)",
)
@click.option(
    "--offline",
    is_flag=True,
    help="Don't query GitHub or Zulip, only run local checks",
)
@click.pass_context
def check(
    ctx: click.Context,
    snapshot: str,
    strict: bool,
    skip: tuple[str, ...],
    offline: bool,
) -> None:
    """Run every validation check against SNAPSHOT."""
    for name in skip:
        try:
            CheckRegistry.get(name)
        except KeyError as err:
            raise click.BadParameter(err.args[0], param_hint="--skip") from err

    console = Console()
    try:
        data = load_snapshot(snapshot)
    except SnapshotError as err:
        logger.error("%s", err)
        ctx.exit(EXIT_ERROR)

    github = None if offline else GitHubDirectory()
    zulip = None if offline else ZulipDirectory()
    try:
        report = validate(data, strict=strict, skip=skip, github=github, zulip=zulip)
    except DirectoryUnavailable as err:
        logger.error("GitHub API unavailable in strict mode: %s", err)
        ctx.exit(EXIT_ERROR)
    except ValidationFailed as err:
        console.print(f"[bold red]✘ {err}[/]")
        ctx.exit(EXIT_INVALID)
    finally:
        for directory in (github, zulip):
            if directory is not None:
                directory.close()

    if report.skipped_tiers:
        console.print(
            f"[bold yellow]✔ no validation errors found[/] "
            f"(skipped: {', '.join(report.skipped_tiers)} checks)"
        )
    else:
        console.print("[bold green]✔ no validation errors found[/]")


@cli.command("list-checks")
def list_checks() -> None:
    """List registered checks in execution order."""
    for tier, checks in CheckRegistry.tiers().items():
        for registered in checks:
            click.echo(f"{tier:6} {registered.name}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
