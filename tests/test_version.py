"""Tests for version formatting and reporting."""
from __future__ import annotations

import pytest

import buildfacts
from buildfacts.version import format_version, get_version, parse_version, version_banner


def test_format_release_version() -> None:
    assert format_version("0", "8", "1", "") == "0.8.1"
    assert format_version("0", "8", "1") == "0.8.1"


def test_format_pre_release_version() -> None:
    assert format_version("2", "0", "0", "beta.1") == "2.0.0-beta.1"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.8.1", ("0", "8", "1", "")),
        ("10.20.30", ("10", "20", "30", "")),
        ("1.0.0-alpha.2", ("1", "0", "0", "alpha.2")),
        ("1.2.0rc1", ("1", "2", "0", "rc1")),
        (" 3.1.4 ", ("3", "1", "4", "")),
    ],
)
def test_parse_version(text: str, expected: tuple) -> None:
    assert parse_version(text) == expected


@pytest.mark.parametrize(
    "text", ["1.2", "v1.2.3", "1.2.3-", "1.2.3.4", "", "a.b.c", "\u0661.2.3", "1.2.0rc\u0663"]
)
def test_parse_version_rejects_unsupported_formats(text: str) -> None:
    with pytest.raises(ValueError):
        parse_version(text)


def test_installed_version() -> None:
    assert get_version() == "0.8.1"
    assert buildfacts.__version__ == "0.8.1"


def test_version_banner() -> None:
    banner = version_banner()
    assert banner.startswith("buildfacts 0.8.1 (")
    assert banner.endswith(", release)")


def test_package_version_is_resolved_on_access(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("buildfacts.get_version", lambda: "9.9.9")
    assert buildfacts.__version__ == "9.9.9"
    with pytest.raises(AttributeError):
        buildfacts.not_an_attribute
