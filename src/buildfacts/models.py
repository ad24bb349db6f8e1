"""Build fact data models and the fact catalog."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple


# Separator used for every joined collection form
JOIN_SEPARATOR = ","


class FactKind(Enum):
    """Categories of build facts."""
    SCALAR = "scalar"
    OPTIONAL = "optional"
    COLLECTION = "collection"
    JOINED = "joined"


class FactGroup(Enum):
    """Display groups for build facts."""
    IDENTITY = "Identity"
    VERSION = "Version"
    TARGET = "Target"
    TOOLCHAIN = "Toolchain"
    FEATURES = "Features"
    ENVIRONMENT = "Environment"
    GIT = "Git"


class CIPlatform(Enum):
    """Continuous integration platforms recognized at build time."""
    GITHUB_ACTIONS = "GitHub Actions"
    GITLAB_CI = "GitLab CI"
    TRAVIS_CI = "Travis CI"
    CIRCLECI = "CircleCI"
    APPVEYOR = "AppVeyor"
    AZURE_PIPELINES = "Azure Pipelines"
    JENKINS = "Jenkins"
    TEAMCITY = "TeamCity"
    BUILDKITE = "Buildkite"
    BITBUCKET_PIPELINES = "Bitbucket Pipelines"
    DRONE = "Drone"
    GENERIC = "Generic CI"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["CIPlatform"]:
        """Map a generated CI_PLATFORM value back to its enum member.

        Args:
            value: The stored platform name, or None when nothing was detected

        Returns:
            Optional[CIPlatform]: Matching member, or None when absent

        Raises:
            ValueError: If the value names no known platform
        """
        if value is None:
            return None
        return cls(value)


@dataclass(frozen=True)
class FactSpec:
    """Catalog entry describing one build fact."""
    name: str
    kind: FactKind
    value_type: type
    group: FactGroup
    doc: str
    source: Optional[str] = None  # Collection a joined fact is derived from
    overridable: bool = True

    def check_value(self, value: Any) -> None:
        """Check that a value has the shape this fact requires.

        Raises:
            ValueError: If the value does not match the declared kind and type
        """
        if self.kind == FactKind.OPTIONAL and value is None:
            return
        if self.kind == FactKind.COLLECTION:
            if not isinstance(value, tuple) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"{self.name} must be a tuple of strings, got {value!r}")
            return
        # bool is a subclass of int; keep the two apart
        if self.value_type is int and isinstance(value, bool):
            raise ValueError(f"{self.name} must be an integer, got {value!r}")
        if not isinstance(value, self.value_type):
            raise ValueError(
                f"{self.name} must be of type {self.value_type.__name__}, got {value!r}"
            )


@dataclass(frozen=True)
class BuildFact:
    """A named, immutable value fixed at build time."""
    spec: FactSpec
    value: Any

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def kind(self) -> FactKind:
        return self.spec.kind

    def display_value(self) -> str:
        """Render the value for human-readable output."""
        if self.value is None:
            return "(not detected)"
        if self.kind == FactKind.COLLECTION:
            return JOIN_SEPARATOR.join(self.value) if self.value else "(none)"
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)


def join_collection(values: Sequence[str]) -> str:
    """Join a collection fact into its canonical string form.

    Args:
        values: Ordered collection elements

    Returns:
        str: Elements separated by a comma, without padding or trailing separator
    """
    for value in values:
        if JOIN_SEPARATOR in value:
            raise ValueError(f"Collection element {value!r} contains the separator '{JOIN_SEPARATOR}'")
        if not value:
            raise ValueError("Collection elements cannot be empty")
    return JOIN_SEPARATOR.join(values)


def _scalar(name, value_type, group, doc, overridable=True):
    return FactSpec(name, FactKind.SCALAR, value_type, group, doc, overridable=overridable)


def _optional(name, value_type, group, doc):
    return FactSpec(name, FactKind.OPTIONAL, value_type, group, doc, overridable=False)


def _collection(name, group, doc):
    return FactSpec(name, FactKind.COLLECTION, tuple, group, doc, overridable=False)


def _joined(name, source, group, doc):
    return FactSpec(name, FactKind.JOINED, str, group, doc, source=source, overridable=False)


# Ordered catalog of every fact the generated module defines.
FACT_CATALOG: Tuple[FactSpec, ...] = (
    _optional("CI_PLATFORM", str, FactGroup.ENVIRONMENT,
              "The continuous integration platform detected during the build."),
    _scalar("PKG_VERSION", str, FactGroup.VERSION, "The full version."),
    _scalar("PKG_VERSION_MAJOR", str, FactGroup.VERSION, "The major version.", overridable=False),
    _scalar("PKG_VERSION_MINOR", str, FactGroup.VERSION, "The minor version.", overridable=False),
    _scalar("PKG_VERSION_PATCH", str, FactGroup.VERSION, "The patch version.", overridable=False),
    _scalar("PKG_VERSION_PRE", str, FactGroup.VERSION, "The pre-release version.", overridable=False),
    _scalar("PKG_AUTHORS", str, FactGroup.IDENTITY, "A colon-separated list of authors."),
    _scalar("PKG_NAME", str, FactGroup.IDENTITY, "The name of the package."),
    _scalar("PKG_DESCRIPTION", str, FactGroup.IDENTITY, "The description."),
    _scalar("PKG_HOMEPAGE", str, FactGroup.IDENTITY, "The homepage."),
    _scalar("PKG_LICENSE", str, FactGroup.IDENTITY, "The license."),
    _scalar("PKG_REPOSITORY", str, FactGroup.IDENTITY,
            "The source repository as advertised in pyproject.toml."),
    _scalar("TARGET", str, FactGroup.TARGET, "The target triple that was being built for."),
    _scalar("HOST", str, FactGroup.TARGET, "The host triple of the build interpreter."),
    _scalar("PROFILE", str, FactGroup.TOOLCHAIN, "`release` for release builds, `debug` for other builds."),
    _scalar("COMPILER", str, FactGroup.TOOLCHAIN, "The interpreter the build ran under."),
    _scalar("DOC_TOOL", str, FactGroup.TOOLCHAIN, "The documentation generator resolved for the build."),
    _scalar("OPT_LEVEL", str, FactGroup.TOOLCHAIN, "Optimization level for the profile used during the build."),
    _scalar("NUM_JOBS", int, FactGroup.TOOLCHAIN, "The parallelism that was specified during the build."),
    _scalar("DEBUG", bool, FactGroup.TOOLCHAIN, "Whether the profile used during the build is a debug profile."),
    _collection("FEATURES", FactGroup.FEATURES, "The features that were enabled during the build."),
    _joined("FEATURES_STR", "FEATURES", FactGroup.FEATURES, "The features as a comma-separated string."),
    _collection("FEATURES_LOWERCASE", FactGroup.FEATURES, "The features as above, as lowercase strings."),
    _joined("FEATURES_LOWERCASE_STR", "FEATURES_LOWERCASE", FactGroup.FEATURES,
            "The feature-string as above, from lowercase strings."),
    _scalar("COMPILER_VERSION", str, FactGroup.TOOLCHAIN, "The version reported by the build interpreter."),
    _scalar("DOC_TOOL_VERSION", str, FactGroup.TOOLCHAIN,
            "The output of `DOC_TOOL --version`; empty string if it failed to execute."),
    _scalar("CFG_TARGET_ARCH", str, FactGroup.TARGET, "The target architecture."),
    _scalar("CFG_ENDIAN", str, FactGroup.TARGET, "The endianness."),
    _scalar("CFG_ENV", str, FactGroup.TARGET, "The toolchain environment (C library or ABI)."),
    _scalar("CFG_FAMILY", str, FactGroup.TARGET, "The OS family."),
    _scalar("CFG_OS", str, FactGroup.TARGET, "The operating system."),
    _scalar("CFG_POINTER_WIDTH", str, FactGroup.TARGET, "The pointer width."),
    _collection("OVERRIDE_VARIABLES_USED", FactGroup.ENVIRONMENT,
                "The override variables that were used during the build."),
    _joined("OVERRIDE_VARIABLES_USED_STR", "OVERRIDE_VARIABLES_USED", FactGroup.ENVIRONMENT,
            "The override variables as a comma-separated string."),
    _optional("GIT_COMMIT_HASH", str, FactGroup.GIT, "The full commit hash of the working tree, if known."),
    _optional("GIT_COMMIT_HASH_SHORT", str, FactGroup.GIT, "The abbreviated commit hash, if known."),
    _optional("GIT_DIRTY", bool, FactGroup.GIT, "Whether the working tree had uncommitted changes, if known."),
)

FACTS_BY_NAME = {spec.name: spec for spec in FACT_CATALOG}


def get_fact_spec(name: str) -> FactSpec:
    """Look up a catalog entry by fact name.

    Raises:
        KeyError: If no fact has that name
    """
    try:
        return FACTS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown build fact: {name}") from None
