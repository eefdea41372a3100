"""Pytest configuration and fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog

from mirrorconf.config.settings import Settings, get_settings
from mirrorconf.parsing import MirrorConfigParser


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore structlog defaults so log capture works in every test."""
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def parser(settings: Settings) -> MirrorConfigParser:
    return MirrorConfigParser(settings)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a config file below tmp_path and return its path."""

    def _write(relative_path: str, content: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
