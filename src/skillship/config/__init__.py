"""Descriptor loading and scope resolution for skill operations."""

from __future__ import annotations

from skillship.config.loader import load_package_metadata, load_skill_descriptor, load_skill_source
from skillship.config.scope import resolve_scope, scope_from_env

__all__ = [
    "load_package_metadata",
    "load_skill_descriptor",
    "load_skill_source",
    "resolve_scope",
    "scope_from_env",
]
