"""Tests for core domain models."""

import pytest
from pydantic import ValidationError

from factories import RepositoryFactory
from mirrorconf.core.models.repository import Repository, RepositoryStatus


@pytest.mark.unit
class TestRepository:
    """Tests for Repository model."""

    def test_create_repository(self) -> None:
        repo = Repository.create("core")
        assert repo.name == "core"
        assert repo.servers == []
        assert repo.server_count == 0
        assert repo.status == RepositoryStatus.FAILED

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Repository(name="")

    def test_name_is_frozen(self) -> None:
        repo = Repository(name="core")
        with pytest.raises(ValidationError):
            repo.name = "extra"
        assert repo.name == "core"

    def test_add_server_preserves_order(self) -> None:
        repo = Repository(name="core")
        repo.add_server("https://a.example.org/$repo/os/$arch")
        repo.add_server("https://b.example.org/$repo/os/$arch")
        assert repo.servers == [
            "https://a.example.org/$repo/os/$arch",
            "https://b.example.org/$repo/os/$arch",
        ]
        assert repo.server_count == 2

    def test_add_server_keeps_duplicates(self) -> None:
        repo = Repository(name="core")
        repo.add_server("http://a")
        repo.add_server("http://a")
        assert repo.servers == ["http://a", "http://a"]

    def test_server_lists_are_independent(self) -> None:
        first = Repository(name="core")
        second = Repository(name="extra")
        first.add_server("http://a")
        assert second.servers == []

    def test_clear(self) -> None:
        repo = RepositoryFactory()
        assert repo.server_count == 2
        repo.clear()
        assert repo.servers == []
        assert repo.name

    def test_status_transitions(self) -> None:
        repo = RepositoryFactory()
        repo.mark_ok()
        assert repo.status == RepositoryStatus.OK
        repo.mark_failed()
        assert repo.status == RepositoryStatus.FAILED

    def test_model_dump(self) -> None:
        repo = Repository(name="core", servers=["http://a"])
        assert repo.model_dump(mode="json") == {
            "name": "core",
            "servers": ["http://a"],
            "status": "failed",
        }
