"""
Main entry point for the ``agent-kit`` command.

Running ``agent-kit`` without a subcommand starts ``init``.
"""

from __future__ import annotations

import sys

import click

from agent_kit import __version__
from agent_kit.cli.init_command import init_cmd
from agent_kit.cli.update_command import update_cmd


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="agent-kit")
@click.pass_context
def _click_cli(ctx: click.Context) -> int | None:
    """Set up AI agent rules and skills for Cursor, Windsurf and Antigravity."""
    if ctx.invoked_subcommand is None:
        return ctx.invoke(init_cmd)
    return None


_click_cli.add_command(init_cmd)
_click_cli.add_command(update_cmd)


def main() -> int:
    """Main CLI entry point."""
    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="agent-kit",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
