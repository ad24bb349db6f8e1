"""Tests for the read-only build facts registry."""
from __future__ import annotations

import dataclasses
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from buildfacts import (
    FACT_CATALOG,
    CIPlatform,
    FactKind,
    feature_enabled,
    get_build_info,
    iter_facts,
    load_built_file,
    read_collection,
    read_fact,
    read_joined,
)
from buildfacts.registry import BuildInfo
from buildfacts.version import format_version


def _assert_consistent(info: BuildInfo) -> None:
    for spec in FACT_CATALOG:
        if spec.kind != FactKind.JOINED:
            continue
        joined = info.joined(spec.name)
        collection = info.collection(spec.source)
        if collection:
            assert joined.split(",") == list(collection)
        else:
            assert joined == ""

    features = info.collection("FEATURES")
    assert info.collection("FEATURES_LOWERCASE") == tuple(f.lower() for f in features)

    parts = [info.scalar(f"PKG_VERSION_{p}") for p in ("MAJOR", "MINOR", "PATCH")]
    assert all(part.isascii() and part.isdigit() for part in parts)
    assert info.version == format_version(*parts, info.scalar("PKG_VERSION_PRE"))


def test_installed_facts_are_consistent() -> None:
    _assert_consistent(get_build_info())


def test_fixture_facts_are_consistent(rav1e_info: BuildInfo) -> None:
    _assert_consistent(rav1e_info)


def test_single_feature_scenario(rav1e_info: BuildInfo) -> None:
    assert rav1e_info.collection("FEATURES") == ("THREADING",)
    assert rav1e_info.collection("FEATURES_LOWERCASE") == ("threading",)
    assert rav1e_info.joined("FEATURES_STR") == "THREADING"
    assert rav1e_info.joined("FEATURES_LOWERCASE_STR") == "threading"


def test_empty_override_list_scenario(rav1e_info: BuildInfo) -> None:
    overrides = rav1e_info.collection("OVERRIDE_VARIABLES_USED")
    assert overrides == ()
    assert len(overrides) == 0
    assert rav1e_info.joined("OVERRIDE_VARIABLES_USED") == ""


def test_version_scenario(rav1e_info: BuildInfo) -> None:
    assert rav1e_info.scalar("PKG_VERSION_MAJOR") == "0"
    assert rav1e_info.scalar("PKG_VERSION_MINOR") == "8"
    assert rav1e_info.scalar("PKG_VERSION_PATCH") == "1"
    assert rav1e_info.scalar("PKG_VERSION_PRE") == ""
    assert rav1e_info.version == "0.8.1"


def test_fixture_scalar_types(rav1e_info: BuildInfo) -> None:
    assert rav1e_info.name == "rav1e"
    assert rav1e_info.scalar("TARGET") == "x86_64-pc-windows-msvc"
    assert rav1e_info.scalar("NUM_JOBS") == 24
    assert rav1e_info.scalar("DEBUG") is False
    assert rav1e_info.scalar("CFG_POINTER_WIDTH") == "64"
    assert rav1e_info.scalar("COMPILER").endswith("rustc.exe")


def test_absent_ci_platform_is_none_not_empty(rav1e_info: BuildInfo) -> None:
    assert rav1e_info.scalar("CI_PLATFORM") is None
    assert rav1e_info.ci_platform is None


def test_detected_ci_platform_maps_to_enum(rav1e_info: BuildInfo) -> None:
    values = rav1e_info.to_dict()
    values["CI_PLATFORM"] = "GitHub Actions"
    info = BuildInfo.from_mapping(values)
    assert info.ci_platform is CIPlatform.GITHUB_ACTIONS


def test_module_level_reads() -> None:
    assert read_fact("PKG_NAME") == "buildfacts"
    assert read_collection("FEATURES") == ("RICH", "YAML")
    assert read_joined("FEATURES") == read_joined("FEATURES_STR") == "RICH,YAML"
    assert [fact.name for fact in iter_facts()] == [spec.name for spec in FACT_CATALOG]


def test_feature_gate_ignores_case() -> None:
    assert feature_enabled("yaml")
    assert feature_enabled("YAML")
    assert not feature_enabled("threading")


def test_unknown_fact_raises_key_error() -> None:
    with pytest.raises(KeyError):
        read_fact("NOT_A_FACT")


def test_reading_with_wrong_kind_raises_type_error() -> None:
    with pytest.raises(TypeError):
        read_collection("PKG_NAME")
    with pytest.raises(TypeError):
        read_fact("FEATURES")
    with pytest.raises(TypeError):
        read_joined("PKG_NAME")


def test_build_info_is_cached_and_immutable() -> None:
    info = get_build_info()
    assert get_build_info() is info

    with pytest.raises(dataclasses.FrozenInstanceError):
        info.facts = {}  # type: ignore[misc]
    with pytest.raises(TypeError):
        info.facts["PKG_NAME"] = "other"  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.fact("PKG_NAME").value = "other"  # type: ignore[misc]


def test_concurrent_reads_are_identical() -> None:
    names = [spec.name for spec in FACT_CATALOG]
    expected = get_build_info().to_dict()

    def read_all(_: int) -> dict:
        info = get_build_info()
        return {name: info.fact(name).value for name in names}

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(read_all, range(200)))

    for result in results:
        assert {k: list(v) if isinstance(v, tuple) else v for k, v in result.items()} == expected


@pytest.mark.parametrize(
    "name, value",
    [
        ("FEATURES_STR", "THREADING,"),
        ("FEATURES_LOWERCASE", ("THREADING",)),
        ("PKG_VERSION", "0.8.2"),
        ("PKG_VERSION_MAJOR", "x"),
        ("PKG_VERSION_MAJOR", "\u0660"),
        ("CI_PLATFORM", ""),
        ("NUM_JOBS", True),
        ("DEBUG", "false"),
        ("FEATURES", ["THREADING", 3]),
    ],
)
def test_inconsistent_facts_are_rejected(rav1e_info: BuildInfo, name: str, value: object) -> None:
    values = rav1e_info.to_dict()
    values[name] = value
    with pytest.raises(ValueError):
        BuildInfo.from_mapping(values)


def test_missing_fact_is_rejected(rav1e_info: BuildInfo) -> None:
    values = rav1e_info.to_dict()
    del values["HOST"]
    with pytest.raises(ValueError, match="HOST"):
        BuildInfo.from_mapping(values)


def test_load_built_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_built_file(tmp_path / "missing.py")


def test_load_built_file_without_py_suffix(tmp_path: Path) -> None:
    target = tmp_path / "facts.txt"
    shutil.copy(Path(__file__).parent / "fixtures" / "rav1e_built.py", target)

    info = load_built_file(target)
    assert info.name == "rav1e"
    assert info.features == ("THREADING",)


def test_load_built_file_rejects_invalid_source(tmp_path: Path) -> None:
    target = tmp_path / "built.py"
    target.write_text("PKG_NAME = (\n", encoding="utf-8")
    with pytest.raises(ValueError, match="not a generated build facts module"):
        load_built_file(target)
