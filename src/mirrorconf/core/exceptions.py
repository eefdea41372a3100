"""Exception hierarchy for mirrorconf."""

from typing import Any


class MirrorConfError(Exception):
    """Base exception for all mirrorconf errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MirrorConfError):
    """Invalid application settings."""


class ConfigFileError(MirrorConfError):
    """A config file could not be opened or read."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(
            f"failed to open {filename}: {reason}",
            details={"file": filename, "reason": reason},
        )
        self.filename = filename
        self.reason = reason


class ParseError(MirrorConfError):
    """A single line of a config file could not be used."""

    def __init__(self, filename: str, lineno: int, reason: str) -> None:
        super().__init__(
            f"failed to parse {filename} on line {lineno}: {reason}",
            details={"file": filename, "line": lineno, "reason": reason},
        )
        self.filename = filename
        self.lineno = lineno
        self.reason = reason


class DirectivePlacementError(ParseError):
    """A directive appeared where it is not allowed."""


class LineTooLongError(ParseError):
    """A line exceeded the configured maximum length."""


class IncludeError(MirrorConfError):
    """An Include directive could not be followed."""


class IncludeCycleError(IncludeError):
    """A file includes itself, directly or transitively."""

    def __init__(self, filename: str, chain: list[str], message: str | None = None) -> None:
        super().__init__(
            message or f"include cycle detected: {' -> '.join([*chain, filename])}",
            details={"file": filename, "chain": list(chain)},
        )
        self.filename = filename
        self.chain = list(chain)


class IncludeDepthError(IncludeCycleError):
    """Include nesting exceeded the configured depth."""

    def __init__(self, filename: str, chain: list[str], max_depth: int) -> None:
        super().__init__(
            filename, chain, f"maximum include depth ({max_depth}) exceeded at {filename}"
        )
        self.details["max_depth"] = max_depth
        self.max_depth = max_depth
