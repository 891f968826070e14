"""Terminal reporting for skill operations."""

from .stdout import render_failure, render_manifest, render_success

__all__ = ["render_failure", "render_manifest", "render_success"]
