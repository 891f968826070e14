"""Human-readable status lines for skill operations."""

from __future__ import annotations

from skillship.constants.branding import CHECKMARK
from skillship.constants.reporting import (
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    EMPTY_MANIFEST_MESSAGE,
)
from skillship.model import OperationResult, Scope
from skillship.types import Manifest


def _colorize(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{ANSI_RESET}" if enabled else text


def render_success(result: OperationResult, *, color: bool = False) -> str:
    """Confirmation line printed to stdout after a successful operation."""
    mark = _colorize(CHECKMARK, ANSI_GREEN, color)
    if result.operation == "install":
        return f'{mark} Skill "{result.skill_name}" v{result.version} installed to {result.skill_path}'
    return f'{mark} Skill "{result.skill_name}" uninstalled'


def render_failure(result: OperationResult, *, color: bool = False) -> str:
    """Error line printed to stderr when an operation was aborted."""
    prefix = _colorize(f'Failed to {result.operation} skill "{result.skill_name}":', ANSI_RED, color)
    return f"{prefix} {result.error}"


def render_manifest(manifest: Manifest, scope: Scope, *, color: bool = False) -> str:
    """One line per installed skill, sorted by name."""
    if not manifest:
        return f"{EMPTY_MANIFEST_MESSAGE} ({scope})"

    lines = [_colorize(f"Installed skills ({scope})", ANSI_DIM, color)]
    width = max(len(name) for name in manifest)
    for name in sorted(manifest):
        record = manifest[name] if isinstance(manifest[name], dict) else {}
        version = record.get("version", "?")
        package = record.get("package", "?")
        installed = record.get("installed", "")
        lines.append(f"  {name:<{width}}  v{version}  {package}  {installed}".rstrip())
    return "\n".join(lines)
