"""Shared fixtures for buildfacts tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from buildfacts.registry import BuildInfo, load_built_file


FIXTURES_DIR = Path(__file__).parent / "fixtures"

PYPROJECT_TEMPLATE = """\
[project]
name = "demo-pkg"
version = "{version}"
description = "Demo package"
license = {{ text = "Apache-2.0" }}
authors = [
    {{ name = "Ada Lovelace", email = "ada@example.org" }},
    {{ name = "Charles Babbage" }},
]

[project.urls]
Homepage = "https://demo.example.org"
Repository = "https://github.com/example/demo-pkg"

[tool.buildfacts]
features = {features}
"""


@pytest.fixture
def rav1e_info() -> BuildInfo:
    return load_built_file(FIXTURES_DIR / "rav1e_built.py")


@pytest.fixture
def make_project(tmp_path: Path):
    def _make(version: str = "1.4.2", features: str = '["Threading", "SIMD"]') -> Path:
        (tmp_path / "pyproject.toml").write_text(
            PYPROJECT_TEMPLATE.format(version=version, features=features), encoding="utf-8"
        )
        return tmp_path

    return _make


@pytest.fixture
def quiet_tools(monkeypatch: pytest.MonkeyPatch) -> None:
    """Never run external documentation tools during tests."""
    monkeypatch.setattr("buildfacts.generator.collect.tool_version", lambda command: "")
