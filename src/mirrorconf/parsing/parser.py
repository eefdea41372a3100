"""Recursive parser for pacman-style mirror configuration files."""

import glob
import os
from pathlib import Path
from typing import TextIO

import structlog

from mirrorconf.config.settings import Settings, get_settings
from mirrorconf.core.exceptions import (
    ConfigFileError,
    DirectivePlacementError,
    IncludeCycleError,
    IncludeDepthError,
    LineTooLongError,
)
from mirrorconf.core.models.repository import Repository
from mirrorconf.parsing.context import ParseContext
from mirrorconf.utils.lines import clean_line, parse_section_header, split_directive

logger = structlog.get_logger(__name__)

SERVER_DIRECTIVE = "Server"
INCLUDE_DIRECTIVE = "Include"


class MirrorConfigParser:
    """Parses a root config file, following ``Include`` directives.

    Includes are processed depth-first and in place: every file shares
    one :class:`ParseContext`, so repositories come out in the order
    their section headers appear in the flattened input. Only a root
    file that cannot be opened fails the whole parse; everything else
    is logged and skipped at line or file granularity.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def parse(self, filename: str | Path) -> list[Repository]:
        """Parse ``filename`` and return its repositories in order.

        Raises:
            ConfigFileError: If the root file cannot be opened.
        """
        path = str(filename)
        handle = self._open(path)
        context = ParseContext()
        with handle:
            self._parse_stream(handle, path, context)

        logger.debug(
            "Parsed config",
            file=path,
            repositories=len(context.repositories),
        )
        return context.repositories

    def _open(self, filename: str) -> TextIO:
        try:
            return open(filename, encoding=self._settings.encoding, errors="replace")
        except OSError as e:
            raise ConfigFileError(filename, e.strerror or str(e)) from e

    def _parse_file(self, filename: str, context: ParseContext) -> None:
        """Parse an included file into ``context``."""
        resolved = os.path.realpath(filename)
        if resolved in context.include_stack:
            raise IncludeCycleError(filename, context.include_stack)
        if len(context.include_stack) > self._settings.max_include_depth:
            raise IncludeDepthError(
                filename, context.include_stack, self._settings.max_include_depth
            )

        with self._open(filename) as handle:
            self._parse_stream(handle, filename, context)

    def _parse_stream(self, handle: TextIO, filename: str, context: ParseContext) -> None:
        context.include_stack.append(os.path.realpath(filename))
        logger.debug("Parsing config file", file=filename, depth=context.depth)
        try:
            for lineno, raw in enumerate(handle, start=1):
                try:
                    self._parse_line(raw, filename, lineno, context)
                except DirectivePlacementError as e:
                    logger.error(
                        "Misplaced directive",
                        file=e.filename,
                        line=e.lineno,
                        reason=e.reason,
                    )
                except LineTooLongError as e:
                    logger.error(
                        "Line too long",
                        file=e.filename,
                        line=e.lineno,
                        limit=self._settings.max_line_length,
                    )
        finally:
            context.include_stack.pop()

    def _parse_line(self, raw: str, filename: str, lineno: int, context: ParseContext) -> None:
        if len(raw.rstrip("\r\n")) > self._settings.max_line_length:
            raise LineTooLongError(
                filename,
                lineno,
                f"line exceeds {self._settings.max_line_length} characters",
            )

        line = clean_line(raw)
        if not line:
            return

        section = parse_section_header(line)
        if section is not None:
            repository = context.enter_section(section)
            if repository is not None:
                logger.debug("Repository section", name=section, file=filename, line=lineno)
            return

        directive = split_directive(line)
        if directive is None:
            return

        key, value = directive
        if key == SERVER_DIRECTIVE:
            self._add_server(value, filename, lineno, context)
        elif key == INCLUDE_DIRECTIVE:
            self._include(value, filename, lineno, context)

    def _add_server(self, url: str, filename: str, lineno: int, context: ParseContext) -> None:
        if context.section is None:
            raise DirectivePlacementError(
                filename, lineno, "found 'Server' directive outside of a section"
            )
        if context.in_options or context.active is None:
            raise DirectivePlacementError(
                filename, lineno, "found 'Server' directive in options section"
            )
        context.active.add_server(url)

    def _include(self, pattern: str, filename: str, lineno: int, context: ParseContext) -> None:
        try:
            paths = expand_include(pattern)
        except OSError as e:
            logger.warning("Globbing failed", pattern=pattern, reason=str(e))
            return

        for path in paths:
            try:
                self._parse_file(path, context)
            except ConfigFileError as e:
                logger.error("Failed to open config file", file=e.filename, reason=e.reason)
            except IncludeDepthError as e:
                logger.error(
                    "Include depth exceeded",
                    file=e.filename,
                    included_from=filename,
                    line=lineno,
                    max_depth=e.max_depth,
                )
            except IncludeCycleError as e:
                logger.error(
                    "Include cycle detected",
                    file=e.filename,
                    included_from=filename,
                    line=lineno,
                    chain=e.chain,
                )


def expand_include(pattern: str) -> list[str]:
    """Expand an ``Include`` glob pattern, sorted.

    A pattern that matches nothing expands to itself, so a missing
    include surfaces as a file-open error instead of vanishing.
    """
    matches = sorted(glob.glob(pattern))
    return matches or [pattern]


def find_active_repos(
    filename: str | Path, settings: Settings | None = None
) -> list[Repository]:
    """Parse ``filename`` with a fresh parser and return its repositories."""
    return MirrorConfigParser(settings).parse(filename)
