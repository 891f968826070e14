"""Parsers for shipped skill assets."""

from .skill_markdown import parse_skill_frontmatter

__all__ = ["parse_skill_frontmatter"]
