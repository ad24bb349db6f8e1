"""buildfacts: build provenance facts captured at build time and exposed at runtime."""

from .models import BuildFact, CIPlatform, FactKind, FACT_CATALOG
from .registry import (
    BuildInfo,
    feature_enabled,
    get_build_info,
    iter_facts,
    load_built_file,
    read_collection,
    read_fact,
    read_joined,
)
from .version import get_version


def __getattr__(name):
    # Resolved on access so importing the package never loads built.py
    if name == "__version__":
        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "BuildFact",
    "BuildInfo",
    "CIPlatform",
    "FactKind",
    "FACT_CATALOG",
    "feature_enabled",
    "get_build_info",
    "get_version",
    "iter_facts",
    "load_built_file",
    "read_collection",
    "read_fact",
    "read_joined",
]
