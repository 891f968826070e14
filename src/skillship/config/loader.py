"""Loading of the descriptor files a package ships next to its skill."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from skillship.constants.paths import (
    DESCRIPTOR_FILENAME,
    PACKAGE_METADATA_FILENAME,
    RESERVED_SKILL_NAMES,
)
from skillship.exceptions import ConfigError
from skillship.io import load_json_file
from skillship.model import PackageMetadata, SkillDescriptor, SkillSource


def load_skill_source(root: Path) -> SkillSource:
    """Load the skill descriptor and package metadata from a package directory."""
    root = root.resolve()
    return SkillSource(
        root=root,
        descriptor=load_skill_descriptor(root / DESCRIPTOR_FILENAME),
        metadata=load_package_metadata(root / PACKAGE_METADATA_FILENAME),
    )


def load_skill_descriptor(path: Path) -> SkillDescriptor:
    """Load and validate ``.claude-skill.json``."""
    raw = _load_json_object(path)
    name = _require_string(raw, "name", path)
    if "/" in name or "\\" in name or name in RESERVED_SKILL_NAMES:
        raise ConfigError(f"name in {path} must be a single directory name, got {name!r}")
    return SkillDescriptor(name=name, package=_require_string(raw, "package", path))


def load_package_metadata(path: Path) -> PackageMetadata:
    """Load ``package.json`` and keep the fields the installer records."""
    raw = _load_json_object(path)
    return PackageMetadata(version=_require_string(raw, "version", path))


def _load_json_object(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Descriptor file not found: {path}")
    try:
        raw = load_json_file(path)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return raw


def _require_string(raw: dict[str, Any], key: str, path: Path) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} in {path} must be a non-empty string")
    return value
