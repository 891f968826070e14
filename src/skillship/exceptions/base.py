"""Base exception for Skillship."""

from __future__ import annotations


class SkillshipError(Exception):
    """Base class for all Skillship errors."""
