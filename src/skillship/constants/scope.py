"""Scope selection constants."""

from __future__ import annotations

GLOBAL_FLAG_ENV_VAR: str = "npm_config_global"
GLOBAL_FLAG_TRUE: str = "true"
