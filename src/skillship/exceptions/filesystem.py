"""Filesystem-related exceptions."""

from __future__ import annotations

from skillship.exceptions.base import SkillshipError


class FsError(SkillshipError, OSError):
    """Raised when a skill directory or asset cannot be created, copied, or removed."""
