"""Shared type aliases for Skillship."""

from .common import JsonObject, JsonScalar, JsonValue, Manifest, OperationName

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Manifest",
    "OperationName",
]
