"""Remove an installed skill and its manifest entry."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from skillship.exceptions import FsError, SkillshipError
from skillship.layout import SkillLayout
from skillship.manifest import load_manifest, remove_entry, save_manifest
from skillship.model import OperationResult, Scope, SkillDescriptor

logger = logging.getLogger(__name__)


def uninstall_skill(
    descriptor: SkillDescriptor,
    scope: Scope,
    *,
    project_root: Path,
    home: Path,
) -> OperationResult:
    """Delete the skill directory, then drop its entry from the manifest.

    Both steps tolerate an already-absent target. The manifest is rewritten
    whenever it exists, and never created when it does not.
    """
    layout = SkillLayout.for_scope(descriptor.name, scope, project_root=project_root, home=home)
    try:
        _remove_skill_dir(layout.skill_dir)
        if layout.manifest_path.exists():
            manifest = load_manifest(layout.manifest_path)
            save_manifest(layout.manifest_path, remove_entry(manifest, descriptor.name))
    except SkillshipError as exc:
        logger.debug("Uninstall of %s aborted: %s", descriptor.name, exc)
        return OperationResult(
            operation="uninstall",
            skill_name=descriptor.name,
            scope=scope,
            skill_path=layout.skill_dir,
            error=exc,
        )

    return OperationResult(
        operation="uninstall",
        skill_name=descriptor.name,
        scope=scope,
        skill_path=layout.skill_dir,
    )


def _remove_skill_dir(path: Path) -> None:
    if not path.exists() and not path.is_symlink():
        return
    try:
        if path.is_symlink() or not path.is_dir():
            path.unlink(missing_ok=True)
        else:
            shutil.rmtree(path, onexc=_ignore_missing)
    except OSError as exc:
        raise FsError(f"Cannot remove skill directory {path}: {exc}") from exc
    logger.debug("Removed skill directory %s", path)


def _ignore_missing(function: object, path: str, exc: BaseException) -> None:
    if isinstance(exc, FileNotFoundError):
        return
    raise exc
