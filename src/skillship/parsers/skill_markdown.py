"""Frontmatter parser for SKILL.md assets."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillship.constants.parsing import FRONTMATTER_ALT_DELIMITER, FRONTMATTER_DELIMITER
from skillship.exceptions import SkillParseError


def parse_skill_frontmatter(path: Path) -> dict[str, Any] | None:
    """Return the YAML frontmatter mapping of a SKILL.md file, or None if it has none."""
    raw_text = path.read_text(encoding="utf-8")
    lines = raw_text.lstrip("\ufeff").splitlines()

    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None

    frontmatter_end = _find_frontmatter_end(lines)
    if frontmatter_end is None:
        raise SkillParseError(f"Unterminated frontmatter block in {path}")

    frontmatter_text = "\n".join(lines[1:frontmatter_end])
    if not frontmatter_text.strip():
        return None
    try:
        payload = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as exc:
        raise SkillParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc

    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise SkillParseError(f"Frontmatter in {path} must be a YAML mapping")
    return payload


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None
