"""Core domain models and exceptions for mirrorconf."""

from mirrorconf.core.exceptions import (
    ConfigFileError,
    ConfigurationError,
    DirectivePlacementError,
    IncludeCycleError,
    IncludeDepthError,
    IncludeError,
    LineTooLongError,
    MirrorConfError,
    ParseError,
)
from mirrorconf.core.models import Repository, RepositoryStatus

__all__ = [
    # Models
    "Repository",
    "RepositoryStatus",
    # Exceptions
    "MirrorConfError",
    "ConfigurationError",
    "ConfigFileError",
    "ParseError",
    "DirectivePlacementError",
    "LineTooLongError",
    "IncludeError",
    "IncludeCycleError",
    "IncludeDepthError",
]
