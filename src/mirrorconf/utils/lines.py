"""Line-level helpers for pacman-style config files."""


def strip_comment(line: str) -> str:
    """Drop everything from the first ``#`` on. There is no escape."""
    head, _, _ = line.partition("#")
    return head


def clean_line(line: str) -> str:
    """Remove the comment and surrounding whitespace from a raw line."""
    return strip_comment(line).strip()


def parse_section_header(line: str) -> str | None:
    """Return the section name of a ``[name]`` line, or None.

    ``line`` must already be cleaned. An empty interior (``[]``) is not
    a header.
    """
    if len(line) > 2 and line.startswith("[") and line.endswith("]"):
        return line[1:-1]
    return None


def split_directive(line: str) -> tuple[str, str] | None:
    """Split ``key = value`` at the first ``=``.

    Both sides are trimmed. Returns None when the line has no ``=``.
    """
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()
