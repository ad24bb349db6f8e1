"""Version formatting and reporting for buildfacts."""

import re
from typing import Tuple


# X.Y.Z with an optional semver (-pre) or PEP 440 (a1, b2, rc3) pre-release
_VERSION_PATTERN = re.compile(
    r'^([0-9]+)\.([0-9]+)\.([0-9]+)(?:-([0-9A-Za-z.-]+)|((?:a|b|rc)[0-9]+))?$'
)


def format_version(major: str, minor: str, patch: str, pre: str = "") -> str:
    """
    Assemble a full version string from its components.

    Args:
        major: Major version
        minor: Minor version
        patch: Patch version
        pre: Pre-release version, empty for releases

    Returns:
        str: ``major.minor.patch``, followed by ``-pre`` when pre is not empty
    """
    version = f"{major}.{minor}.{patch}"
    if pre:
        version = f"{version}-{pre}"
    return version


def parse_version(version: str) -> Tuple[str, str, str, str]:
    """
    Split a version string into major, minor, patch and pre-release parts.

    PEP 440 pre-releases (``1.2.0rc1``) are normalized to the ``-`` form, so
    ``format_version(*parse_version(v))`` yields the canonical full version.

    Args:
        version: Version string such as ``0.8.1`` or ``1.0.0-beta.2``

    Returns:
        Tuple[str, str, str, str]: Major, minor, patch and pre-release strings

    Raises:
        ValueError: If the version string is not in a supported format
    """
    match = _VERSION_PATTERN.match(version.strip())
    if not match:
        raise ValueError(f"Unsupported version format: {version!r}. Expected X.Y.Z[-pre]")

    major, minor, patch, semver_pre, pep440_pre = match.groups()
    return major, minor, patch, semver_pre or pep440_pre or ""


def get_version() -> str:
    """
    Get the version the package was built as.

    Returns:
        str: Version string
    """
    from .registry import get_build_info

    return get_build_info().version


def version_banner() -> str:
    """One-line summary used by ``--version`` and diagnostics."""
    from .registry import get_build_info

    info = get_build_info()
    return f"{info.name} {info.version} ({info.scalar('TARGET')}, {info.scalar('PROFILE')})"
