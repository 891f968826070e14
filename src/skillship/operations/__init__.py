"""Skill install, uninstall, and listing operations."""

from .install import install_skill
from .listing import list_installed
from .uninstall import uninstall_skill

__all__ = ["install_skill", "list_installed", "uninstall_skill"]
