"""Config file parsing for mirrorconf."""

from mirrorconf.parsing.context import ParseContext
from mirrorconf.parsing.parser import MirrorConfigParser, expand_include, find_active_repos

__all__ = ["MirrorConfigParser", "ParseContext", "expand_include", "find_active_repos"]
