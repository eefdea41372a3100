"""Tests for rendering repositories back to config text."""

import pytest

from factories import RepositoryFactory
from mirrorconf.core.models.repository import Repository
from mirrorconf.parsing import MirrorConfigParser
from mirrorconf.utils.rendering import render_repositories, render_repository


@pytest.mark.unit
class TestRendering:
    """Tests for render_repository and render_repositories."""

    def test_render_repository(self) -> None:
        repo = Repository(name="core", servers=["http://a", "http://b"])
        assert render_repository(repo) == "[core]\nServer = http://a\nServer = http://b\n"

    def test_render_repository_without_servers(self) -> None:
        assert render_repository(Repository(name="core")) == "[core]\n"

    def test_render_repositories(self) -> None:
        repos = [Repository(name="core", servers=["http://a"]), Repository(name="extra")]
        assert render_repositories(repos) == "[core]\nServer = http://a\n\n[extra]\n"

    def test_render_nothing(self) -> None:
        assert render_repositories([]) == ""

    def test_round_trip(self, parser: MirrorConfigParser, write_config) -> None:
        original = [RepositoryFactory() for _ in range(3)]
        original.append(Repository(name="empty"))
        path = write_config("rendered.conf", render_repositories(original))

        parsed = parser.parse(path)
        assert [(r.name, r.servers) for r in parsed] == [
            (r.name, r.servers) for r in original
        ]

    def test_round_trip_flattens_includes(
        self, parser: MirrorConfigParser, write_config
    ) -> None:
        mirrorlist = write_config("mirrorlist", "Server = http://m1\nServer = http://m2\n")
        root = write_config(
            "pacman.conf", f"[options]\nHoldPkg = pacman\n[core]\nInclude = {mirrorlist}\n"
        )
        first = parser.parse(root)
        flat = write_config("flat.conf", render_repositories(first))
        second = parser.parse(flat)
        assert [(r.name, r.servers) for r in second] == [("core", ["http://m1", "http://m2"])]
