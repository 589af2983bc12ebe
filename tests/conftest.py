"""Pytest configuration and shared fixtures for cfgfile tests."""

import tempfile
from pathlib import Path
from typing import Callable, Iterator

import pytest
from cfgfile import ConfigFile

SAMPLE_CONFIG = (
    "[default]\n"
    "host=www.example.com\n"
    "protocol=http://\n"
    "base-url=%(protocol)s%(host)s\n"
    "\n"
    "[service-1]\n"
    "url=%(base-url)s/some/path\n"
    "delegation : on\n"
    "maxclients=200 # do not set this higher\n"
    "comments=This is a multi-line\n"
    "\tentry\t; And this is a comment\n"
)


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_text() -> str:
    """Return the documented example configuration."""
    return SAMPLE_CONFIG


@pytest.fixture
def config() -> ConfigFile:
    """Create an empty ConfigFile instance."""
    return ConfigFile()


@pytest.fixture
def write_text_file(temp_dir: Path) -> Callable[..., Path]:
    """Return a helper writing text to a file inside ``temp_dir``."""

    def _write(name: str, content: str, encoding: str = "utf-8") -> Path:
        path = temp_dir / name
        path.write_bytes(content.encode(encoding))
        return path

    return _write
