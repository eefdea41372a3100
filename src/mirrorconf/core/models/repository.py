"""Repository record models."""

from enum import Enum

from pydantic import BaseModel, Field


class RepositoryStatus(str, Enum):
    """Outcome of the last operation a consumer ran against a repository."""

    FAILED = "failed"
    OK = "ok"


class Repository(BaseModel):
    """A named repository and its ordered list of mirror servers.

    Server order is mirror priority. Records start out as ``FAILED``;
    only consumers that actually contact the mirrors change the status.
    """

    name: str = Field(min_length=1, frozen=True)
    servers: list[str] = Field(default_factory=list)
    status: RepositoryStatus = RepositoryStatus.FAILED

    @classmethod
    def create(cls, name: str) -> "Repository":
        return cls(name=name)

    @property
    def server_count(self) -> int:
        return len(self.servers)

    def add_server(self, url: str) -> None:
        """Append a server URL (or ``$repo``/``$arch`` template)."""
        self.servers.append(url)

    def clear(self) -> None:
        """Drop all servers."""
        self.servers.clear()

    def mark_ok(self) -> None:
        self.status = RepositoryStatus.OK

    def mark_failed(self) -> None:
        self.status = RepositoryStatus.FAILED
