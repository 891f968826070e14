"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLSHIP"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLSHIP",
    "     // install packaged skills for Claude",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill installer"))
CHECKMARK: str = "✓"
