"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

OperationName: TypeAlias = Literal["install", "uninstall"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
Manifest: TypeAlias = dict[str, JsonObject]
