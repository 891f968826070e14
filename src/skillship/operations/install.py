"""Install a packaged skill into a scope's skills directory."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from skillship.exceptions import FsError, SkillParseError, SkillshipError
from skillship.layout import SkillLayout
from skillship.manifest import load_manifest, save_manifest, upsert_entry, utc_timestamp
from skillship.model import ManifestEntry, OperationResult, Scope, SkillSource
from skillship.parsers.skill_markdown import parse_skill_frontmatter

logger = logging.getLogger(__name__)


def install_skill(
    source: SkillSource,
    scope: Scope,
    *,
    project_root: Path,
    home: Path,
    clock: Callable[[], str] = utc_timestamp,
) -> OperationResult:
    """Copy the source's SKILL.md into place and register it in the manifest.

    Steps run in order and the first failure stops the run. Nothing done
    before the failure is rolled back: a created skill directory stays even
    when the manifest write fails afterwards.
    """
    name = source.descriptor.name
    layout = SkillLayout.for_scope(name, scope, project_root=project_root, home=home)
    try:
        _create_skill_dir(layout.skill_dir)
        _check_asset_frontmatter(source)
        _copy_asset(source.asset_path, layout.asset_path)

        entry = ManifestEntry(
            package=source.descriptor.package,
            version=source.metadata.version,
            installed=clock(),
        )
        manifest = load_manifest(layout.manifest_path)
        save_manifest(layout.manifest_path, upsert_entry(manifest, name, entry))
    except SkillshipError as exc:
        logger.debug("Install of %s aborted: %s", name, exc)
        return OperationResult(
            operation="install",
            skill_name=name,
            scope=scope,
            skill_path=layout.skill_dir,
            version=source.metadata.version,
            error=exc,
        )

    return OperationResult(
        operation="install",
        skill_name=name,
        scope=scope,
        skill_path=layout.skill_dir,
        version=source.metadata.version,
    )


def _create_skill_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FsError(f"Cannot create skill directory {path}: {exc}") from exc
    logger.debug("Ensured skill directory %s", path)


def _check_asset_frontmatter(source: SkillSource) -> None:
    """Warn when the shipped SKILL.md disagrees with the descriptor."""
    if not source.asset_path.is_file():
        return
    try:
        frontmatter = parse_skill_frontmatter(source.asset_path)
    except (SkillParseError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Skipping frontmatter check for %s: %s", source.asset_path, exc)
        return
    if frontmatter is None:
        return
    declared = frontmatter.get("name")
    if declared is not None and declared != source.descriptor.name:
        logger.warning(
            "SKILL.md frontmatter name %r does not match descriptor name %r",
            declared,
            source.descriptor.name,
        )


def _copy_asset(src: Path, dest: Path) -> None:
    try:
        shutil.copyfile(src, dest)
    except OSError as exc:
        raise FsError(f"Cannot copy {src} to {dest}: {exc}") from exc
    logger.debug("Copied %s to %s", src, dest)
