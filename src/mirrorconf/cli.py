"""CLI for mirrorconf."""

import json
import sys

import click
import structlog

from mirrorconf.config.logging import configure_logging
from mirrorconf.config.settings import get_settings
from mirrorconf.core.exceptions import ConfigFileError
from mirrorconf.core.models.repository import Repository
from mirrorconf.parsing import MirrorConfigParser
from mirrorconf.utils.rendering import render_repositories

logger = structlog.get_logger(__name__)


def _load(config: str) -> list[Repository]:
    """Parse a config file, exiting with status 1 if it cannot be opened."""
    parser = MirrorConfigParser(get_settings())
    try:
        return parser.parse(config)
    except ConfigFileError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """mirrorconf: inspect pacman-style mirror configuration."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)


@cli.command(name="list")
@click.argument("config", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print repositories as JSON")
def list_repos(config: str, as_json: bool) -> None:
    """List repositories and their servers.

    Include directives are followed, so the output covers every file
    reachable from CONFIG.
    """
    repositories = _load(config)

    if as_json:
        payload = [repo.model_dump(mode="json") for repo in repositories]
        click.echo(json.dumps(payload, indent=2))
        return

    if not repositories:
        click.echo("No repositories found.")
        return

    for repo in repositories:
        click.echo(f"{repo.name} ({repo.server_count} servers)")
        for server in repo.servers:
            click.echo(f"  - {server}")


@cli.command()
@click.argument("config", type=click.Path(dir_okay=False))
def render(config: str) -> None:
    """Print CONFIG with includes flattened into plain sections."""
    repositories = _load(config)
    logger.debug("Rendering repositories", count=len(repositories))
    click.echo(render_repositories(repositories), nl=False)


if __name__ == "__main__":
    cli()
