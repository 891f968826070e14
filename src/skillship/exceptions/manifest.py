"""Manifest-related exceptions."""

from __future__ import annotations

from skillship.exceptions.base import SkillshipError


class ManifestError(SkillshipError, ValueError):
    """Raised when the skills manifest cannot be read, parsed, or written."""
