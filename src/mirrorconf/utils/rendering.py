"""Render repository records back to config text."""

from collections.abc import Iterable

from mirrorconf.core.models.repository import Repository


def render_repository(repository: Repository) -> str:
    """Render a single ``[name]`` section with its ``Server`` lines."""
    lines = [f"[{repository.name}]"]
    lines.extend(f"Server = {server}" for server in repository.servers)
    return "\n".join(lines) + "\n"


def render_repositories(repositories: Iterable[Repository]) -> str:
    """Render repositories as a flat config, one blank line between sections.

    Includes are already expanded in the parsed records, so the output
    is self-contained and parses back to the same ``(name, servers)``
    pairs.
    """
    return "\n".join(render_repository(repository) for repository in repositories)
