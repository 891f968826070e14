"""Core data models for skill installation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from skillship.constants.paths import SKILL_ASSET_FILENAME
from skillship.exceptions import SkillshipError
from skillship.types import JsonObject, OperationName


class Scope(StrEnum):
    """Installation root a skill operation targets."""

    GLOBAL = "global"
    LOCAL = "local"


@dataclass(frozen=True)
class SkillDescriptor:
    """Skill identity declared by the shipping package."""

    name: str
    package: str


@dataclass(frozen=True)
class PackageMetadata:
    """Subset of the shipping package's metadata used for installs."""

    version: str


@dataclass(frozen=True)
class SkillSource:
    """A package directory that ships one installable skill."""

    root: Path
    descriptor: SkillDescriptor
    metadata: PackageMetadata

    @property
    def asset_path(self) -> Path:
        """Path of the SKILL.md document shipped by the package."""
        return self.root / SKILL_ASSET_FILENAME


@dataclass(frozen=True)
class ManifestEntry:
    """Installation record stored in the skills manifest."""

    package: str
    version: str
    installed: str

    def to_dict(self) -> JsonObject:
        return {
            "package": self.package,
            "version": self.version,
            "installed": self.installed,
        }


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single install or uninstall run."""

    operation: OperationName
    skill_name: str
    scope: Scope
    skill_path: Path
    version: str | None = None
    error: SkillshipError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
