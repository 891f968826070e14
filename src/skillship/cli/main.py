"""CLI entrypoint for Skillship."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillship import __version__
from skillship.cli.handlers import handle_install, handle_list, handle_uninstall
from skillship.constants.branding import CLI_DESCRIPTION
from skillship.model import Scope

_HANDLERS = {
    "install": handle_install,
    "uninstall": handle_uninstall,
    "list": handle_list,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillship",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    install = subparsers.add_parser("install", help="Install the skill shipped by a package")
    _add_source_flag(install)
    _add_scope_flags(install)

    uninstall = subparsers.add_parser("uninstall", help="Remove the skill shipped by a package")
    _add_source_flag(uninstall)
    _add_scope_flags(uninstall)

    listing = subparsers.add_parser("list", help="List skills recorded in a scope's manifest")
    _add_scope_flags(listing)

    return parser


def _add_source_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--source",
        type=Path,
        default=Path.cwd(),
        help="Package directory holding .claude-skill.json, package.json and SKILL.md (default: cwd)",
    )


def _add_scope_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--scope",
        choices=[scope.value for scope in Scope],
        default=None,
        help="Install root: global (~/.claude/skills) or local (<project-root>/.claude/skills). "
        "Defaults to global when npm_config_global=true, else local",
    )
    parser.add_argument(
        "-p",
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project directory used for the local scope (default: cwd)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    return _HANDLERS[args.command](args)


def install_hook() -> int:
    """Package lifecycle hook: ``skillship install`` with default flags."""
    return main(["install"])


def uninstall_hook() -> int:
    """Package lifecycle hook: ``skillship uninstall`` with default flags."""
    return main(["uninstall"])


if __name__ == "__main__":
    raise SystemExit(main())
