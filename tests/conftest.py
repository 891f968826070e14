"""Shared pytest fixtures for skill source packages and install roots."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

from skillship.config import load_skill_source
from skillship.model import SkillSource

SKILL_MD_TEMPLATE = """---
name: {name}
description: Example skill used in tests
---

# {name}

Use this skill when testing.
"""

SourceFactory: TypeAlias = Callable[..., SkillSource]


def write_source_package(
    root: Path,
    *,
    name: str = "foo",
    package: str = "@x/foo",
    version: str = "1.2.0",
    skill_md: str | None = None,
) -> Path:
    """Write a minimal package directory shipping one skill."""
    root.mkdir(parents=True, exist_ok=True)
    (root / ".claude-skill.json").write_text(json.dumps({"name": name, "package": package}), encoding="utf-8")
    (root / "package.json").write_text(json.dumps({"name": package, "version": version}), encoding="utf-8")
    content = SKILL_MD_TEMPLATE.format(name=name) if skill_md is None else skill_md
    (root / "SKILL.md").write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Stand-in for the user's home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Stand-in for the current project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def make_source(tmp_path: Path) -> SourceFactory:
    """Factory writing a package under ``tmp_path/packages/<name>`` and loading it."""

    def _make(name: str = "foo", **kwargs: str) -> SkillSource:
        root = write_source_package(tmp_path / "packages" / name, name=name, **kwargs)
        return load_skill_source(root)

    return _make


def read_manifest(base_dir: Path) -> dict:
    """Parse the manifest under a skills base directory."""
    return json.loads((base_dir / ".skills-manifest.json").read_text(encoding="utf-8"))
