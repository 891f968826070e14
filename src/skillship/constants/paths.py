"""Filenames and directory names for skill sources and install roots."""

from __future__ import annotations

DESCRIPTOR_FILENAME: str = ".claude-skill.json"
PACKAGE_METADATA_FILENAME: str = "package.json"
SKILL_ASSET_FILENAME: str = "SKILL.md"

SKILLS_ROOT_PARTS: tuple[str, ...] = (".claude", "skills")
MANIFEST_FILENAME: str = ".skills-manifest.json"
MANIFEST_TEMP_PREFIX: str = ".tmp-skills-manifest-"
MANIFEST_TEMP_SUFFIX: str = ".json"

RESERVED_SKILL_NAMES: frozenset[str] = frozenset({".", ".."})
