"""Read-only view of the skills installed in a scope."""

from __future__ import annotations

from pathlib import Path

from skillship.constants.paths import MANIFEST_FILENAME
from skillship.layout import resolve_base_dir
from skillship.manifest import load_manifest
from skillship.model import Scope
from skillship.types import Manifest


def list_installed(scope: Scope, *, project_root: Path, home: Path) -> Manifest:
    """Return the manifest for ``scope``; empty when nothing was ever installed."""
    base_dir = resolve_base_dir(scope, project_root=project_root, home=home)
    return load_manifest(base_dir / MANIFEST_FILENAME)
