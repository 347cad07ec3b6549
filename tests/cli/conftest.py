"""Shared fixtures for CLI tests.

Commands are driven in-process through click's ``CliRunner`` with
``standalone_mode=False`` so the integer exit status returned by each
command is visible as ``result.return_value``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from agent_kit.cli.commands import _click_cli

RunAgentKit = Callable[..., Result]


@pytest.fixture()
def run_agent_kit(templates_root: Path, workspace: Path) -> RunAgentKit:
    """Invoke ``agent-kit <args>`` against the fake catalog and workspace."""

    def _run(*args: str, input: str | None = None, workspace_dir: Path | None = None) -> Result:
        root = workspace_dir or workspace
        argv = [*args, "-C", str(root), "--templates-dir", str(templates_root)]
        return CliRunner().invoke(
            _click_cli,
            argv,
            input=input,
            standalone_mode=False,
            env={"NO_COLOR": "1"},
        )

    return _run
