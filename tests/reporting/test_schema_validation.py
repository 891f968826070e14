"""Validate written manifests against the manifest JSON Schema."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from skillship.model import Scope
from skillship.operations import install_skill, uninstall_skill

from ..conftest import SourceFactory

MANIFEST_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "required": ["package", "version", "installed"],
        "properties": {
            "package": {"type": "string", "minLength": 1},
            "version": {"type": "string", "minLength": 1},
            "installed": {
                "type": "string",
                "pattern": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$",
            },
        },
    },
}


def _manifest(base: Path) -> object:
    return json.loads((base / ".skills-manifest.json").read_text(encoding="utf-8"))


def test_manifest_schema_is_valid() -> None:
    jsonschema.Draft202012Validator.check_schema(MANIFEST_SCHEMA)


@pytest.mark.parametrize("scope", [Scope.GLOBAL, Scope.LOCAL], ids=["global", "local"])
def test_installed_manifest_matches_schema(
    scope: Scope, make_source: SourceFactory, project_root: Path, home_dir: Path
) -> None:
    install_skill(make_source("foo"), scope, project_root=project_root, home=home_dir)
    install_skill(make_source("bar", package="@x/bar"), scope, project_root=project_root, home=home_dir)

    anchor = home_dir if scope is Scope.GLOBAL else project_root
    jsonschema.validate(_manifest(anchor / ".claude" / "skills"), MANIFEST_SCHEMA)


def test_emptied_manifest_matches_schema(make_source: SourceFactory, project_root: Path, home_dir: Path) -> None:
    source = make_source("foo")
    install_skill(source, Scope.LOCAL, project_root=project_root, home=home_dir)
    uninstall_skill(source.descriptor, Scope.LOCAL, project_root=project_root, home=home_dir)

    jsonschema.validate(_manifest(project_root / ".claude" / "skills"), MANIFEST_SCHEMA)
