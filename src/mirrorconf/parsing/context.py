"""Mutable state shared by one parse and all of its includes."""

from pydantic import BaseModel, Field

from mirrorconf.core.models.repository import Repository

OPTIONS_SECTION = "options"


class ParseContext(BaseModel):
    """State threaded through the root file and every included file.

    The current section survives include boundaries: a ``Server`` line
    at the top of an included file belongs to the section that was open
    in the including file.
    """

    repositories: list[Repository] = Field(default_factory=list)
    section: str | None = None
    in_options: bool = False
    active: Repository | None = None
    # Resolved paths of the files currently open, outermost first.
    include_stack: list[str] = Field(default_factory=list)

    @property
    def depth(self) -> int:
        """Nesting depth of the innermost open file (root is 0)."""
        return max(len(self.include_stack) - 1, 0)

    def enter_section(self, name: str) -> Repository | None:
        """Switch to section ``name``.

        Creates and returns a new repository unless ``name`` is the
        reserved options section.
        """
        self.section = name
        if name == OPTIONS_SECTION:
            self.in_options = True
            self.active = None
            return None

        self.in_options = False
        self.active = Repository(name=name)
        self.repositories.append(self.active)
        return self.active
