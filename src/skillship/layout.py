"""Directory layout of an installation root."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillship.constants.paths import MANIFEST_FILENAME, SKILL_ASSET_FILENAME, SKILLS_ROOT_PARTS
from skillship.model import Scope


def resolve_base_dir(scope: Scope, *, project_root: Path, home: Path) -> Path:
    """Return ``<home>/.claude/skills`` or ``<project_root>/.claude/skills``."""
    anchor = home if scope is Scope.GLOBAL else project_root
    return anchor.joinpath(*SKILLS_ROOT_PARTS)


@dataclass(frozen=True)
class SkillLayout:
    """Paths touched when installing or removing one skill."""

    base_dir: Path
    skill_name: str

    @classmethod
    def for_scope(cls, skill_name: str, scope: Scope, *, project_root: Path, home: Path) -> SkillLayout:
        return cls(base_dir=resolve_base_dir(scope, project_root=project_root, home=home), skill_name=skill_name)

    @property
    def skill_dir(self) -> Path:
        return self.base_dir / self.skill_name

    @property
    def asset_path(self) -> Path:
        return self.skill_dir / SKILL_ASSET_FILENAME

    @property
    def manifest_path(self) -> Path:
        return self.base_dir / MANIFEST_FILENAME
