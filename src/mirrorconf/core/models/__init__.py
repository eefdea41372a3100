"""Domain models for mirrorconf."""

from mirrorconf.core.models.repository import Repository, RepositoryStatus

__all__ = [
    "Repository",
    "RepositoryStatus",
]
