"""Tests for descriptor loading and scope resolution."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from skillship.config import (
    load_package_metadata,
    load_skill_descriptor,
    load_skill_source,
    resolve_scope,
    scope_from_env,
)
from skillship.exceptions import ConfigError
from skillship.model import Scope

from .conftest import write_source_package


def test_load_skill_source_reads_both_descriptors(tmp_path: Path) -> None:
    root = write_source_package(tmp_path / "pkg", name="foo", package="@x/foo", version="1.2.0")

    source = load_skill_source(root)

    assert source.descriptor.name == "foo"
    assert source.descriptor.package == "@x/foo"
    assert source.metadata.version == "1.2.0"
    assert source.asset_path == root.resolve() / "SKILL.md"


def test_load_skill_descriptor_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_skill_descriptor(tmp_path / ".claude-skill.json")


def test_load_skill_descriptor_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / ".claude-skill.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_skill_descriptor(path)


def test_load_skill_descriptor_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / ".claude-skill.json"
    path.write_text('["foo"]', encoding="utf-8")

    with pytest.raises(ConfigError, match="JSON object"):
        load_skill_descriptor(path)


@pytest.mark.parametrize(
    ("payload", "expected_match"),
    [
        ({"package": "@x/foo"}, "name"),
        ({"name": "foo"}, "package"),
        ({"name": "", "package": "@x/foo"}, "name"),
        ({"name": 3, "package": "@x/foo"}, "name"),
        ({"name": "../escape", "package": "@x/foo"}, "single directory name"),
        ({"name": "..", "package": "@x/foo"}, "single directory name"),
    ],
    ids=["missing_name", "missing_package", "empty_name", "non_string_name", "path_name", "dotdot_name"],
)
def test_load_skill_descriptor_rejects_invalid_fields(tmp_path: Path, payload: dict, expected_match: str) -> None:
    path = tmp_path / ".claude-skill.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_skill_descriptor(path)


def test_load_package_metadata_requires_version(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "@x/foo"}), encoding="utf-8")

    with pytest.raises(ConfigError, match="version"):
        load_package_metadata(path)


def test_load_package_metadata_ignores_extra_keys(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"version": "2.0.0", "scripts": {"postinstall": "x"}}), encoding="utf-8")

    assert load_package_metadata(path).version == "2.0.0"


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({"npm_config_global": "true"}, Scope.GLOBAL),
        ({"npm_config_global": "false"}, Scope.LOCAL),
        ({"npm_config_global": "TRUE"}, Scope.LOCAL),
        ({}, Scope.LOCAL),
    ],
    ids=["true", "false", "uppercase", "unset"],
)
def test_scope_from_env(environ: dict[str, str], expected: Scope) -> None:
    assert scope_from_env(environ) is expected


def test_resolve_scope_prefers_explicit_value() -> None:
    assert resolve_scope("local", {"npm_config_global": "true"}) is Scope.LOCAL
    assert resolve_scope("global", {}) is Scope.GLOBAL
    assert resolve_scope(None, {"npm_config_global": "true"}) is Scope.GLOBAL


@pytest.mark.parametrize("filename", [".claude-skill.json", "package.json"])
def test_load_skill_source_rejects_non_utf8_descriptor(tmp_path: Path, filename: str) -> None:
    root = write_source_package(tmp_path / "pkg")
    (root / filename).write_bytes(b"\xff")

    with pytest.raises(ConfigError, match="UTF-8"):
        load_skill_source(root)
