"""mirrorconf: pacman-style mirror configuration parser."""

__version__ = "0.1.0"
