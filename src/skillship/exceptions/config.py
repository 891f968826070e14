"""Configuration-related exceptions."""

from __future__ import annotations

from skillship.exceptions.base import SkillshipError


class ConfigError(SkillshipError, ValueError):
    """Raised when a skill descriptor or package metadata file is invalid."""
