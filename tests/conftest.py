"""Shared test fixtures for goscope tests."""

from pathlib import Path

import pytest

from goscope.scanning.treesitter_parser import GoParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"
GO_PROJECT = FIXTURES_DIR / "goproject"
GO_MODULE = "example.com/garage"


@pytest.fixture(scope="session")
def go_parser():
    """One parser for the whole session; parsing is stateless."""
    return GoParser()


@pytest.fixture
def go_project():
    """Root of the sample Go module."""
    return GO_PROJECT


@pytest.fixture
def write_module(tmp_path):
    """Create a Go module on disk from a {relative path: source} mapping."""

    def _write(module: str, files: dict) -> Path:
        (tmp_path / "go.mod").write_text(f"module {module}\n\ngo 1.22\n")
        for rel, source in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source)
        return tmp_path

    return _write
