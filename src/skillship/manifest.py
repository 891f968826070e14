"""Read-modify-write helpers for the per-scope skills manifest."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from skillship.constants.paths import MANIFEST_TEMP_PREFIX, MANIFEST_TEMP_SUFFIX
from skillship.exceptions import ManifestError
from skillship.io import load_json_file, write_json_atomic
from skillship.model import ManifestEntry
from skillship.types import Manifest

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def load_manifest(path: Path) -> Manifest:
    """Load the manifest at ``path``; a missing file is an empty manifest."""
    if not path.exists():
        return {}
    try:
        raw = load_json_file(path)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in manifest {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Manifest {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ManifestError(f"Manifest {path} must contain a JSON object")
    return raw


def save_manifest(path: Path, manifest: Manifest) -> None:
    """Overwrite ``path`` with the pretty-printed manifest."""
    try:
        write_json_atomic(
            path=path,
            payload=manifest,
            temp_prefix=MANIFEST_TEMP_PREFIX,
            temp_suffix=MANIFEST_TEMP_SUFFIX,
        )
    except OSError as exc:
        raise ManifestError(f"Cannot write manifest {path}: {exc}") from exc
    logger.debug("Wrote manifest %s (%d entries)", path, len(manifest))


def upsert_entry(manifest: Manifest, skill_name: str, entry: ManifestEntry) -> Manifest:
    """Return a copy of ``manifest`` with ``skill_name`` set to ``entry``."""
    updated = dict(manifest)
    updated[skill_name] = entry.to_dict()
    return updated


def remove_entry(manifest: Manifest, skill_name: str) -> Manifest:
    """Return a copy of ``manifest`` without ``skill_name``."""
    return {name: record for name, record in manifest.items() if name != skill_name}
