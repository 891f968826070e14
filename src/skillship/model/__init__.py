"""Core data models for Skillship."""

from .entities import (
    ManifestEntry,
    OperationResult,
    PackageMetadata,
    Scope,
    SkillDescriptor,
    SkillSource,
)

__all__ = [
    "ManifestEntry",
    "OperationResult",
    "PackageMetadata",
    "Scope",
    "SkillDescriptor",
    "SkillSource",
]
