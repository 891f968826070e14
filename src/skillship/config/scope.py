"""Scope resolution from CLI flags and the package manager environment."""

from __future__ import annotations

from collections.abc import Mapping

from skillship.constants.scope import GLOBAL_FLAG_ENV_VAR, GLOBAL_FLAG_TRUE
from skillship.model import Scope


def scope_from_env(environ: Mapping[str, str]) -> Scope:
    """Return GLOBAL when the package manager reports a global install."""
    if environ.get(GLOBAL_FLAG_ENV_VAR) == GLOBAL_FLAG_TRUE:
        return Scope.GLOBAL
    return Scope.LOCAL


def resolve_scope(explicit: str | None, environ: Mapping[str, str]) -> Scope:
    """Prefer an explicit ``--scope`` value, falling back to the environment."""
    if explicit is not None:
        return Scope(explicit)
    return scope_from_env(environ)
