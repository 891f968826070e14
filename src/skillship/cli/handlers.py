"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from skillship.config import load_skill_descriptor, load_skill_source, resolve_scope
from skillship.constants.paths import DESCRIPTOR_FILENAME
from skillship.constants.reporting import EXIT_CONFIG_ERROR, EXIT_FAILURE, EXIT_OK
from skillship.exceptions import ConfigError, ManifestError
from skillship.model import OperationResult
from skillship.operations import install_skill, list_installed, uninstall_skill
from skillship.reporting import render_failure, render_manifest, render_success


def handle_install(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> int:
    """Run ``skillship install``."""
    try:
        source = load_skill_source(args.source)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    result = install_skill(
        source,
        resolve_scope(args.scope, os.environ if environ is None else environ),
        project_root=args.project_root,
        home=Path.home(),
    )
    return _report(result, args)


def handle_uninstall(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> int:
    """Run ``skillship uninstall``."""
    try:
        descriptor = load_skill_descriptor(args.source.resolve() / DESCRIPTOR_FILENAME)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    result = uninstall_skill(
        descriptor,
        resolve_scope(args.scope, os.environ if environ is None else environ),
        project_root=args.project_root,
        home=Path.home(),
    )
    return _report(result, args)


def handle_list(args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> int:
    """Run ``skillship list``."""
    scope = resolve_scope(args.scope, os.environ if environ is None else environ)
    try:
        manifest = list_installed(scope, project_root=args.project_root, home=Path.home())
    except ManifestError as exc:
        print(f"Manifest error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    print(render_manifest(manifest, scope, color=_use_color(args)))
    return EXIT_OK


def _report(result: OperationResult, args: argparse.Namespace) -> int:
    color = _use_color(args)
    if not result.ok:
        print(render_failure(result, color=color), file=sys.stderr)
        return EXIT_FAILURE
    print(render_success(result, color=color))
    return EXIT_OK


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()
