"""Collection of build facts from the project, interpreter and environment."""

import os
import platform
import re
import shutil
import struct
import subprocess
import sys
import sysconfig
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..config import get_project_metadata, get_pyproject, get_settings
from ..models import FACT_CATALOG, FactKind, join_collection
from ..version import format_version, parse_version
from .ci import detect_ci_platform


ENV_PREFIX = "BUILDFACTS_"
OVERRIDE_PREFIX = "BUILDFACTS_OVERRIDE_"
PROFILES = ("release", "debug")

_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i686": "x86",
    "armv7l": "arm",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(name: str, text: str) -> bool:
    """Parse a boolean environment or override value.

    Raises:
        ValueError: If the text is not a recognized boolean
    """
    value = text.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {text!r}")


def parse_int(name: str, text: str) -> int:
    """Parse a non-negative integer environment or override value."""
    value = text.strip()
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"{name} must be a non-negative integer, got {text!r}")
    return int(value)


def target_arch() -> str:
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine) or "unknown"


def target_os() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    # freebsd13 -> freebsd
    return re.sub(r"\d+$", "", sys.platform)


def target_family() -> str:
    return "windows" if os.name == "nt" else "unix"


def target_env() -> str:
    """C library or ABI the interpreter was built against."""
    if sys.platform == "win32":
        return "msvc" if "MSC" in sys.version else "gnu"
    if sys.platform.startswith("linux"):
        libc, _ = platform.libc_ver()
        if libc == "glibc":
            return "gnu"
        return libc
    return ""


def target_triple() -> str:
    """Target triple of the running interpreter."""
    configured = sysconfig.get_config_var("HOST_GNU_TYPE")
    if configured:
        return configured

    arch = target_arch()
    os_name = target_os()
    if os_name == "windows":
        return f"{arch}-pc-windows-{target_env() or 'msvc'}"
    if os_name == "macos":
        return f"{arch}-apple-darwin"
    if os_name == "linux":
        return f"{arch}-unknown-linux-{target_env() or 'gnu'}"
    return f"{arch}-unknown-{os_name}"


def collect_target_facts() -> Dict[str, str]:
    """Describe the platform the build artifact runs on."""
    target = target_triple()
    return {
        "TARGET": target,
        "HOST": sysconfig.get_config_var("BUILD_GNU_TYPE") or target,
        "CFG_TARGET_ARCH": target_arch(),
        "CFG_ENDIAN": sys.byteorder,
        "CFG_ENV": target_env(),
        "CFG_FAMILY": target_family(),
        "CFG_OS": target_os(),
        "CFG_POINTER_WIDTH": str(struct.calcsize("P") * 8),
    }


def tool_version(command: Sequence[str]) -> str:
    """Run ``<tool> --version`` style commands.

    Returns:
        str: First line of the output, or an empty string if the tool failed
    """
    try:
        result = subprocess.run(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=30,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired):
        return ""
    if result.returncode != 0:
        return ""
    lines = result.stdout.strip().splitlines()
    return lines[0].strip() if lines else ""


def collect_toolchain_facts(settings: Mapping[str, Any], environ: Mapping[str, str]) -> Dict[str, Any]:
    """Describe the interpreter and tools the build ran with.

    Values the build orchestrator exports as ``BUILDFACTS_<NAME>`` take
    precedence over ``[tool.buildfacts]`` settings.
    """
    profile = environ.get(f"{ENV_PREFIX}PROFILE") or settings["profile"]
    if profile not in PROFILES:
        raise ValueError(f"Unknown build profile {profile!r}. Expected one of: {', '.join(PROFILES)}")

    debug_env = environ.get(f"{ENV_PREFIX}DEBUG")
    debug = parse_bool(f"{ENV_PREFIX}DEBUG", debug_env) if debug_env else profile == "debug"

    opt_level = environ.get(f"{ENV_PREFIX}OPT_LEVEL") or settings.get("opt-level")
    if opt_level is None:
        opt_level = sys.flags.optimize

    jobs_env = environ.get(f"{ENV_PREFIX}NUM_JOBS")
    num_jobs = parse_int(f"{ENV_PREFIX}NUM_JOBS", jobs_env) if jobs_env else (os.cpu_count() or 1)

    doc_tool = settings["doc-tool"]
    doc_tool_path = shutil.which(doc_tool) or doc_tool

    return {
        "PROFILE": profile,
        "COMPILER": sys.executable or "python",
        "COMPILER_VERSION": f"{platform.python_implementation()} {platform.python_version()}",
        "DOC_TOOL": doc_tool_path,
        "DOC_TOOL_VERSION": tool_version([doc_tool_path, "--version"]),
        "OPT_LEVEL": str(opt_level),
        "NUM_JOBS": num_jobs,
        "DEBUG": debug,
    }


def collect_git_facts(project_dir: Union[str, Path]) -> Dict[str, Optional[Any]]:
    """Describe the git work tree the build ran in.

    Every fact is None when the project is not inside a git work tree or the
    repository has no commits yet.
    """
    # GitPython looks for a git executable on import
    from git import Repo
    from git.exc import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError

    facts: Dict[str, Optional[Any]] = {
        "GIT_COMMIT_HASH": None,
        "GIT_COMMIT_HASH_SHORT": None,
        "GIT_DIRTY": None,
    }
    try:
        repo = Repo(project_dir, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return facts

    try:
        commit_hash = repo.head.commit.hexsha
    except ValueError:
        # Unborn HEAD
        return facts

    facts["GIT_COMMIT_HASH"] = commit_hash
    facts["GIT_COMMIT_HASH_SHORT"] = commit_hash[:7]
    try:
        facts["GIT_DIRTY"] = repo.is_dirty(untracked_files=False)
    except (GitCommandError, GitCommandNotFound):
        facts["GIT_DIRTY"] = None
    return facts


def resolve_features(
    features: Optional[Sequence[str]],
    settings: Mapping[str, Any],
    environ: Mapping[str, str],
) -> List[str]:
    """Pick the enabled features: explicit list, then environment, then settings.

    Names are kept as given; blanks are dropped and duplicates keep their
    first position.
    """
    if features is None:
        env_features = environ.get(f"{ENV_PREFIX}FEATURES")
        if env_features is not None:
            features = env_features.split(",")
        else:
            features = settings["features"]

    resolved: List[str] = []
    for feature in features:
        feature = str(feature).strip()
        if feature and feature not in resolved:
            resolved.append(feature)
    return resolved


def apply_overrides(facts: Dict[str, Any], package_name: str, environ: Mapping[str, str]) -> List[str]:
    """Replace facts with ``BUILDFACTS_OVERRIDE_<PACKAGE>_<FACT>`` values.

    Args:
        facts: Collected facts, updated in place
        package_name: Distribution name, upper-cased with ``-`` and ``.`` as ``_``
        environ: Environment to read overrides from

    Returns:
        List[str]: Names of the override variables that were applied, in catalog order
    """
    prefix = f"{OVERRIDE_PREFIX}{re.sub(r'[-.]', '_', package_name).upper()}_"
    used = []
    for spec in FACT_CATALOG:
        variable = f"{prefix}{spec.name}"
        if variable not in environ:
            continue
        if not spec.overridable:
            raise ValueError(f"{spec.name} cannot be overridden (set by {variable})")

        text = environ[variable]
        if spec.value_type is bool:
            facts[spec.name] = parse_bool(variable, text)
        elif spec.value_type is int:
            facts[spec.name] = parse_int(variable, text)
        else:
            facts[spec.name] = text
        used.append(variable)
    return used


def collect_facts(
    project_dir: Union[str, Path] = ".",
    environ: Optional[Mapping[str, str]] = None,
    features: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """Collect every build fact for a project.

    Args:
        project_dir: Directory containing pyproject.toml
        environ: Environment to read, defaults to the process environment
        features: Enabled features, overriding environment and settings

    Returns:
        Dict[str, Any]: Fact values keyed by name, in catalog order

    Raises:
        FileNotFoundError: If the project has no pyproject.toml
        ValueError: If the project metadata or an environment value is invalid
    """
    if environ is None:
        environ = dict(os.environ)

    pyproject = get_pyproject(project_dir)
    metadata = get_project_metadata(pyproject)
    settings = get_settings(pyproject)

    ci_platform = detect_ci_platform(environ)
    facts: Dict[str, Any] = {
        "CI_PLATFORM": ci_platform.value if ci_platform else None,
        "PKG_VERSION": metadata["version"],
        "PKG_AUTHORS": metadata["authors"],
        "PKG_NAME": metadata["name"],
        "PKG_DESCRIPTION": metadata["description"],
        "PKG_HOMEPAGE": metadata["homepage"],
        "PKG_LICENSE": metadata["license"],
        "PKG_REPOSITORY": metadata["repository"],
    }
    facts.update(collect_target_facts())
    facts.update(collect_toolchain_facts(settings, environ))
    if settings["git"]:
        facts.update(collect_git_facts(project_dir))
    else:
        facts.update({"GIT_COMMIT_HASH": None, "GIT_COMMIT_HASH_SHORT": None, "GIT_DIRTY": None})

    used = apply_overrides(facts, metadata["name"], environ)

    # Version components always follow the (possibly overridden) full version
    major, minor, patch, pre = parse_version(facts["PKG_VERSION"])
    facts["PKG_VERSION"] = format_version(major, minor, patch, pre)
    facts["PKG_VERSION_MAJOR"] = major
    facts["PKG_VERSION_MINOR"] = minor
    facts["PKG_VERSION_PATCH"] = patch
    facts["PKG_VERSION_PRE"] = pre

    enabled = resolve_features(features, settings, environ)
    facts["FEATURES"] = tuple(enabled)
    facts["FEATURES_LOWERCASE"] = tuple(feature.lower() for feature in enabled)
    facts["OVERRIDE_VARIABLES_USED"] = tuple(used)

    for spec in FACT_CATALOG:
        if spec.kind == FactKind.JOINED:
            facts[spec.name] = join_collection(facts[spec.source])

    return {spec.name: facts[spec.name] for spec in FACT_CATALOG}
