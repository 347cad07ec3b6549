"""``agent-kit update``: re-sync rules and skills from agent-kit-skill.json."""

from __future__ import annotations

from pathlib import Path

import click

from agent_kit.cli.common import (
    print_report_warnings,
    resolve_templates_root,
    workspace_options,
)
from agent_kit.core.composer import WorkspaceComposer
from agent_kit.helpers.helpers_logging import (
    print_error,
    print_header,
    print_success,
)


@click.command("update")
@workspace_options
def update_cmd(directory: Path, templates_dir: Path | None) -> int:
    """Update Agent Kit files based on agent-kit-skill.json.

    Only rules, skills, knowledge and workflows are refreshed; downloaded
    codebases and docker files are left alone.
    """
    templates_root = resolve_templates_root(templates_dir)

    print_header("Reloading configuration...")
    report = WorkspaceComposer(templates_root, directory).update()
    if not report.ok:
        print_error(f"Update failed: {report.error}")
        return 1

    print_report_warnings(report)
    print_success("Configuration reloaded successfully!")
    return 0
