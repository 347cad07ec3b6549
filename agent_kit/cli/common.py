"""Options and output shared by the ``init`` and ``update`` commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click

from agent_kit.core.results import CompositionReport
from agent_kit.core.settings import TEMPLATES_ENV_VAR, get_templates_dir
from agent_kit.helpers.helpers_logging import print_info, print_warning

F = TypeVar("F", bound=Callable[..., Any])


def workspace_options(func: F) -> F:
    """Attach ``--directory/-C`` and ``--templates-dir`` to a command."""
    func = click.option(
        "--templates-dir",
        envvar=TEMPLATES_ENV_VAR,
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help=f"Template catalog to copy from (env: {TEMPLATES_ENV_VAR}).",
    )(func)
    func = click.option(
        "--directory",
        "-C",
        type=click.Path(file_okay=False, path_type=Path),
        default=Path("."),
        show_default=True,
        help="Workspace root to set up.",
    )(func)
    return func


def resolve_templates_root(templates_dir: Path | None) -> Path:
    """Return the template catalog or raise a ClickException when it is missing."""
    templates_root = get_templates_dir(templates_dir)
    if not templates_root.is_dir():
        raise click.ClickException(f"Template catalog not found: {templates_root}")
    return templates_root


def print_report_warnings(report: CompositionReport) -> None:
    """List failed optional steps and the count of skipped ones."""
    for failure in report.failures:
        print_warning(f"{failure.step}: {failure.message}")
    if report.skipped:
        print_info(f"{len(report.skipped)} step(s) skipped")
