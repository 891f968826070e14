"""Shared exception hierarchy for Skillship."""

from __future__ import annotations

from .base import SkillshipError
from .config import ConfigError
from .filesystem import FsError
from .manifest import ManifestError
from .parsing import SkillParseError

__all__ = [
    "ConfigError",
    "FsError",
    "ManifestError",
    "SkillParseError",
    "SkillshipError",
]
