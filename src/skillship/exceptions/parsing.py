"""Parsing-related exceptions."""

from __future__ import annotations

from skillship.exceptions.base import SkillshipError


class SkillParseError(SkillshipError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""
