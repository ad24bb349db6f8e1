"""Configuration management for buildfacts.

Project metadata comes from the ``[project]`` table of ``pyproject.toml``;
generator settings come from ``[tool.buildfacts]``.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Union

import toml


PYPROJECT_FILE = "pyproject.toml"
DEFAULT_OUTPUT = os.path.join("src", "{package}", "built.py")

DEFAULT_SETTINGS = {
    "features": [],
    "output": None,
    "doc-tool": "sphinx-build",
    "profile": "release",
    "opt-level": None,
    "git": False,
}


def get_pyproject(project_dir: Union[str, Path] = ".") -> Dict[str, Any]:
    """Load the project's pyproject.toml.

    Args:
        project_dir (str): Directory containing pyproject.toml.

    Returns:
        dict: Parsed TOML document.

    Raises:
        FileNotFoundError: If the project has no pyproject.toml.
        ValueError: If the file is not valid TOML.
    """
    pyproject_path = Path(project_dir) / PYPROJECT_FILE
    if not pyproject_path.exists():
        raise FileNotFoundError(f"No {PYPROJECT_FILE} found in {Path(project_dir).resolve()}")

    try:
        with open(pyproject_path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid {PYPROJECT_FILE}: {e}") from e


def get_project_metadata(pyproject: Dict[str, Any]) -> Dict[str, str]:
    """Extract package identity from the [project] table.

    Args:
        pyproject (dict): Parsed pyproject.toml.

    Returns:
        dict: name, version, description, license, homepage, repository, authors.
    """
    project = pyproject.get("project")
    if not project:
        raise ValueError(f"{PYPROJECT_FILE} has no [project] table")
    if not project.get("name"):
        raise ValueError("Missing required field [project].name")
    if not project.get("version"):
        raise ValueError("Missing required field [project].version")

    # PEP 621 allows either a plain string or a {text = ...} / {file = ...} table
    license_value = project.get("license", "")
    if isinstance(license_value, dict):
        license_value = license_value.get("text", "")

    urls = {key.lower(): value for key, value in project.get("urls", {}).items()}

    return {
        "name": project["name"],
        "version": str(project["version"]),
        "description": project.get("description", ""),
        "license": license_value,
        "homepage": urls.get("homepage", ""),
        "repository": urls.get("repository") or urls.get("source", ""),
        "authors": format_authors(project.get("authors", [])),
    }


def format_authors(authors: List[Dict[str, str]]) -> str:
    """Render PEP 621 author tables as a colon-separated list.

    Args:
        authors (list): Entries with optional ``name`` and ``email`` keys.

    Returns:
        str: ``Name <email>`` entries joined by ``:``.
    """
    rendered = []
    for author in authors:
        name = author.get("name", "")
        email = author.get("email", "")
        if name and email:
            rendered.append(f"{name} <{email}>")
        elif name or email:
            rendered.append(name or f"<{email}>")
    return ":".join(rendered)


def get_settings(pyproject: Dict[str, Any]) -> Dict[str, Any]:
    """Get generator settings, filling in defaults.

    Args:
        pyproject (dict): Parsed pyproject.toml.

    Returns:
        dict: Settings from [tool.buildfacts] merged over the defaults.
    """
    settings = dict(DEFAULT_SETTINGS)
    settings.update(pyproject.get("tool", {}).get("buildfacts", {}))

    unknown = set(settings) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ValueError(f"Unknown [tool.buildfacts] settings: {', '.join(sorted(unknown))}")
    if not isinstance(settings["features"], list):
        raise ValueError("[tool.buildfacts].features must be a list of strings")
    return settings


def get_import_name(package_name: str) -> str:
    """Import package name for a distribution name (``demo-pkg`` -> ``demo_pkg``)."""
    return package_name.replace("-", "_").lower()


def get_output_path(project_dir: Union[str, Path], package_name: str, settings: Dict[str, Any]) -> Path:
    """Resolve where the generated module is written.

    Args:
        project_dir (str): Project root.
        package_name (str): Distribution name from [project].
        settings (dict): Generator settings.

    Returns:
        Path: Absolute path of the generated module.
    """
    output = settings.get("output")
    if not output:
        output = DEFAULT_OUTPUT.format(package=get_import_name(package_name))
    return (Path(project_dir) / output).resolve()
