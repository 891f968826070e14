"""Constants for stdout formatting and exit codes."""

from __future__ import annotations

ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_DIM: str = "\033[2m"

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_CONFIG_ERROR: int = 2

EMPTY_MANIFEST_MESSAGE: str = "No skills installed."
