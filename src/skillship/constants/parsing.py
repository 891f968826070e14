"""Constants for SKILL.md frontmatter parsing."""

from __future__ import annotations

FRONTMATTER_DELIMITER: str = "---"
FRONTMATTER_ALT_DELIMITER: str = "..."
FRONTMATTER_NAME_KEY: str = "name"
