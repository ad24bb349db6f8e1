"""Read-only access to the build facts recorded when the package was built.

The generated ``buildfacts.built`` module holds the facts as plain constants.
This module wraps them in an immutable view that is loaded once per process
and can be read from any thread without locking.
"""

import importlib
import importlib.machinery
import importlib.util
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType, ModuleType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

from .models import (
    FACT_CATALOG,
    BuildFact,
    CIPlatform,
    FactKind,
    get_fact_spec,
    join_collection,
)
from .version import format_version


BUILT_MODULE = "buildfacts.built"


@dataclass(frozen=True)
class BuildInfo:
    """Immutable view over one complete set of build facts."""
    facts: Mapping[str, BuildFact]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "BuildInfo":
        """Build a view from a name -> value mapping.

        Args:
            values: Fact values keyed by fact name, covering the whole catalog

        Returns:
            BuildInfo: Validated, immutable view

        Raises:
            ValueError: If a fact is missing, mistyped, or inconsistent
        """
        facts: Dict[str, BuildFact] = {}
        for spec in FACT_CATALOG:
            if spec.name not in values:
                raise ValueError(f"Missing build fact: {spec.name}")
            value = values[spec.name]
            if spec.kind == FactKind.COLLECTION and isinstance(value, list):
                value = tuple(value)
            spec.check_value(value)
            facts[spec.name] = BuildFact(spec, value)

        info = cls(MappingProxyType(facts))
        info._validate()
        return info

    @classmethod
    def from_module(cls, module: ModuleType) -> "BuildInfo":
        """Build a view from a generated module's constants."""
        values = {
            spec.name: getattr(module, spec.name)
            for spec in FACT_CATALOG
            if hasattr(module, spec.name)
        }
        return cls.from_mapping(values)

    def _validate(self) -> None:
        for spec in FACT_CATALOG:
            if spec.kind == FactKind.JOINED:
                expected = join_collection(self.collection(spec.source))
                if self.facts[spec.name].value != expected:
                    raise ValueError(
                        f"{spec.name} is {self.facts[spec.name].value!r}, expected {expected!r}"
                    )

        features = self.collection("FEATURES")
        if self.collection("FEATURES_LOWERCASE") != tuple(f.lower() for f in features):
            raise ValueError("FEATURES_LOWERCASE does not match FEATURES")

        components = [self.scalar(f"PKG_VERSION_{part}") for part in ("MAJOR", "MINOR", "PATCH")]
        for component in components:
            if not (component.isascii() and component.isdigit()):
                raise ValueError(f"Version component {component!r} is not a non-negative integer")
        expected_version = format_version(*components, self.scalar("PKG_VERSION_PRE"))
        if self.scalar("PKG_VERSION") != expected_version:
            raise ValueError(
                f"PKG_VERSION is {self.scalar('PKG_VERSION')!r}, expected {expected_version!r}"
            )

        # Unknown platform names raise ValueError
        CIPlatform.from_value(self.scalar("CI_PLATFORM"))

    def fact(self, name: str) -> BuildFact:
        """Get a fact by name.

        Raises:
            KeyError: If no fact has that name
        """
        get_fact_spec(name)
        return self.facts[name]

    def scalar(self, name: str) -> Any:
        """Get the value of a scalar, optional or joined fact."""
        fact = self.fact(name)
        if fact.kind == FactKind.COLLECTION:
            raise TypeError(f"{name} is a collection fact")
        return fact.value

    def collection(self, name: str) -> Tuple[str, ...]:
        """Get the value of a collection fact."""
        fact = self.fact(name)
        if fact.kind != FactKind.COLLECTION:
            raise TypeError(f"{name} is not a collection fact")
        return fact.value

    def joined(self, name: str) -> str:
        """Get a joined string form by its own name or its collection's name."""
        fact = self.fact(name)
        if fact.kind == FactKind.JOINED:
            return fact.value
        if fact.kind == FactKind.COLLECTION:
            for spec in FACT_CATALOG:
                if spec.source == name:
                    return self.facts[spec.name].value
        raise TypeError(f"{name} has no joined form")

    def __iter__(self) -> Iterator[BuildFact]:
        return (self.facts[spec.name] for spec in FACT_CATALOG)

    @property
    def name(self) -> str:
        return self.scalar("PKG_NAME")

    @property
    def version(self) -> str:
        return self.scalar("PKG_VERSION")

    @property
    def features(self) -> Tuple[str, ...]:
        return self.collection("FEATURES")

    @property
    def ci_platform(self) -> Optional[CIPlatform]:
        """The CI platform of the build, or None when none was detected."""
        return CIPlatform.from_value(self.scalar("CI_PLATFORM"))

    def feature_enabled(self, feature: str) -> bool:
        """Check whether a feature was enabled, ignoring case."""
        return feature.lower() in self.collection("FEATURES_LOWERCASE")

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary of fact values in catalog order."""
        result = {}
        for fact in self:
            value = fact.value
            result[fact.name] = list(value) if fact.kind == FactKind.COLLECTION else value
        return result


@lru_cache(maxsize=None)
def get_build_info() -> BuildInfo:
    """Get the build facts of the installed package.

    Loaded on first use and cached for the life of the process.
    """
    return BuildInfo.from_module(importlib.import_module(BUILT_MODULE))


def load_built_file(path: Union[str, Path]) -> BuildInfo:
    """Load build facts from a generated module file outside the package.

    Args:
        path: Path to a module produced by ``buildfacts generate``

    Returns:
        BuildInfo: Validated view over the file's facts

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid Python or does not hold a
            complete, consistent fact set
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Generated build facts file not found: {path}")

    # Explicit loader: the file need not end in .py
    loader = importlib.machinery.SourceFileLoader(f"_buildfacts_{path.stem}", str(path))
    spec = importlib.util.spec_from_loader(loader.name, loader)
    module = importlib.util.module_from_spec(spec)
    try:
        loader.exec_module(module)
    except SyntaxError as e:
        raise ValueError(f"{path} is not a generated build facts module: {e}") from e
    return BuildInfo.from_module(module)


def read_fact(name: str) -> Any:
    """Read a scalar fact by name."""
    return get_build_info().scalar(name)


def read_collection(name: str) -> Tuple[str, ...]:
    """Read a collection fact by name."""
    return get_build_info().collection(name)


def read_joined(name: str) -> str:
    """Read the joined string form of a collection fact."""
    return get_build_info().joined(name)


def iter_facts() -> Iterator[BuildFact]:
    """Enumerate every build fact in catalog order."""
    return iter(get_build_info())


def feature_enabled(feature: str) -> bool:
    """Check whether a feature was enabled when the package was built."""
    return get_build_info().feature_enabled(feature)
