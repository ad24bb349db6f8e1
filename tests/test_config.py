"""Tests for pyproject.toml configuration handling."""
from __future__ import annotations

from pathlib import Path

import pytest

from buildfacts.config import (
    format_authors,
    get_output_path,
    get_project_metadata,
    get_pyproject,
    get_settings,
)


def test_project_metadata(make_project) -> None:
    metadata = get_project_metadata(get_pyproject(make_project()))
    assert metadata == {
        "name": "demo-pkg",
        "version": "1.4.2",
        "description": "Demo package",
        "license": "Apache-2.0",
        "homepage": "https://demo.example.org",
        "repository": "https://github.com/example/demo-pkg",
        "authors": "Ada Lovelace <ada@example.org>:Charles Babbage",
    }


def test_format_authors_handles_partial_entries() -> None:
    assert format_authors([]) == ""
    assert format_authors([{"email": "team@example.org"}]) == "<team@example.org>"


def test_missing_pyproject(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        get_pyproject(tmp_path)


def test_invalid_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project\nname = ", encoding="utf-8")
    with pytest.raises(ValueError):
        get_pyproject(tmp_path)


def test_missing_version_is_rejected() -> None:
    with pytest.raises(ValueError, match="version"):
        get_project_metadata({"project": {"name": "demo"}})


def test_settings_defaults_and_unknown_keys() -> None:
    settings = get_settings({})
    assert settings["features"] == []
    assert settings["profile"] == "release"
    assert settings["git"] is False

    with pytest.raises(ValueError, match="colour"):
        get_settings({"tool": {"buildfacts": {"colour": True}}})


def test_default_output_path(tmp_path: Path) -> None:
    path = get_output_path(tmp_path, "demo-pkg", get_settings({}))
    assert path == (tmp_path / "src" / "demo_pkg" / "built.py").resolve()

    custom = get_output_path(tmp_path, "demo-pkg", {"output": "lib/facts.py"})
    assert custom == (tmp_path / "lib" / "facts.py").resolve()
