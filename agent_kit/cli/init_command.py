"""
``agent-kit init``: ask the setup questions and materialize the workspace.

Every question can be answered up front with an option; only the missing
answers are prompted for.

Usage:
    # Fully interactive
    agent-kit init

    # Non-interactive fullstack setup with docker assets
    agent-kit init --ide cursor --language en --project-type fullstack \\
        --stack nextjs-nestjs --database postgresql --environment containerized \\
        --roles implementer,reviewer --no-download
"""

from __future__ import annotations

from pathlib import Path

import click

from agent_kit.cli.common import (
    print_report_warnings,
    resolve_templates_root,
    workspace_options,
)
from agent_kit.core.catalog import (
    DATABASE_PROJECT_TYPES,
    DATABASES,
    ENVIRONMENTS,
    IDES,
    LANGUAGE_VARIANTS,
    LANGUAGES,
    PROJECT_TYPES,
    ROLES,
    VARIANT_STACKS,
    Stack,
    parse_stack,
    stack_sides,
    stacks_for_project_type,
)
from agent_kit.core.composer import WorkspaceComposer
from agent_kit.core.project_config import ProjectConfig
from agent_kit.core.settings import CONFIG_FILENAME, slugify_project_name
from agent_kit.helpers.helpers_logging import (
    Colors,
    paint,
    print_error,
    print_header,
    print_success,
)

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "welcome": "🚀 Agent Kit Setup Wizard",
        "ide": "Which IDE are you using?",
        "project_type": "What type of project is this?",
        "stack": "Select your primary Tech Stack",
        "database": "Select your Database",
        "language_variant": "TypeScript (typed) or JavaScript (untyped)?",
        "environment": "Run the project containerized (Docker) or locally?",
        "roles": "Roles to include (comma-separated, 'none' for no roles)",
        "download": "Download starter codebase template?",
        "setting_up": "Setting up your Agent Kit...",
        "success": "Setup complete! Agent Kit is ready.",
        "failed": "Setup failed!",
        "config_created": f"Config file created: {CONFIG_FILENAME}",
        "next_steps": "Next Steps:",
    },
    "vi": {
        "welcome": "🚀 Trình Cài Đặt Agent Kit",
        "ide": "Bạn đang sử dụng IDE nào?",
        "project_type": "Loại dự án của bạn là gì?",
        "stack": "Chọn Tech Stack chính",
        "database": "Chọn Database",
        "language_variant": "TypeScript (typed) hay JavaScript (untyped)?",
        "environment": "Chạy dự án bằng Docker (containerized) hay trên máy (local)?",
        "roles": "Các vai trò (phân tách bằng dấu phẩy, 'none' nếu không có)",
        "download": "Tải template codebase mẫu?",
        "setting_up": "Đang cài đặt Agent Kit...",
        "success": "Cài đặt hoàn tất! Agent Kit đã sẵn sàng.",
        "failed": "Cài đặt thất bại!",
        "config_created": f"File config đã tạo: {CONFIG_FILENAME}",
        "next_steps": "Bước tiếp theo:",
    },
}

NEXT_STEPS: dict[str, tuple[str, ...]] = {
    "cursor": (
        "Open .cursorrules to see active rules",
        "Type / in Chat to use Skills",
        f"Edit {CONFIG_FILENAME} to customize settings",
    ),
    "windsurf": (
        "Check AGENTS.md in root",
        "Use @skill-name in Cascade",
        f"Edit {CONFIG_FILENAME} to customize settings",
    ),
    "antigravity": (
        "Check .agent/rules/ for loaded rules",
        "Use /skill-name to invoke skills",
        f"Edit {CONFIG_FILENAME} to customize settings",
    ),
}


def parse_roles(value: str | tuple[str, ...]) -> tuple[str, ...]:
    """Parse ``implementer,reviewer`` (or ``none``) into a tuple of role ids."""
    if isinstance(value, tuple):
        return value
    text = value.strip().lower()
    if text in ("", "none"):
        return ()

    roles: list[str] = []
    for item in text.split(","):
        role = item.strip()
        if not role:
            continue
        if role not in ROLES:
            raise click.BadParameter(
                f"unknown role '{role}' (choose from {', '.join(ROLES)})",
                param_hint="'--roles'",
            )
        if role not in roles:
            roles.append(role)
    return tuple(roles)


def _ask_choice(message: str, choices: tuple[str, ...]) -> str:
    return click.prompt(
        message,
        type=click.Choice(choices),
        default=choices[0],
        show_choices=True,
    )


def _resolve_stack(project_type: str, stack: str | None, msg: dict[str, str]) -> Stack:
    choices = stacks_for_project_type(project_type)
    if not choices:
        if stack:
            raise click.UsageError(f"--stack does not apply to {project_type} projects")
        return None
    if stack is None:
        stack = _ask_choice(msg["stack"], choices)
    elif stack not in choices:
        raise click.BadParameter(
            f"'{stack}' is not a {project_type} stack (choose from {', '.join(choices)})",
            param_hint="'--stack'",
        )
    return parse_stack(project_type, stack)


def collect_config(
    workspace_root: Path,
    ide: str | None,
    language: str | None,
    project_type: str | None,
    stack: str | None,
    database: str | None,
    language_variant: str | None,
    environment: str | None,
    roles: str | None,
    download: bool | None,
) -> ProjectConfig:
    """Prompt for every answer not supplied as an option."""
    if language is None:
        language = _ask_choice("Select language / Chọn ngôn ngữ", LANGUAGES)
    msg = MESSAGES[language]
    print_header(msg["welcome"])

    if ide is None:
        ide = _ask_choice(msg["ide"], IDES)
    if project_type is None:
        project_type = _ask_choice(msg["project_type"], PROJECT_TYPES)

    resolved_stack = _resolve_stack(project_type, stack, msg)

    if project_type in DATABASE_PROJECT_TYPES:
        if database is None:
            database = _ask_choice(msg["database"], DATABASES)
    elif database is not None:
        raise click.UsageError(
            "--database only applies to backend and fullstack projects"
        )

    if any(side in VARIANT_STACKS for side in stack_sides(resolved_stack)):
        if language_variant is None:
            language_variant = _ask_choice(msg["language_variant"], LANGUAGE_VARIANTS)
    else:
        language_variant = language_variant or "typed"

    if resolved_stack is None:
        environment = environment or "local"
    elif environment is None:
        environment = _ask_choice(msg["environment"], ENVIRONMENTS)

    if roles is None:
        role_ids = click.prompt(
            msg["roles"],
            default=",".join(ROLES),
            value_proc=parse_roles,
        )
    else:
        role_ids = parse_roles(roles)

    if resolved_stack is None:
        download = False
    elif download is None:
        download = click.confirm(msg["download"], default=False)

    return ProjectConfig(
        ide=ide,
        project_type=project_type,
        stack=resolved_stack,
        database=database,
        language_variant=language_variant,
        environment=environment,
        roles=role_ids,
        download_requested=download,
        language=language,
        project_name=slugify_project_name(workspace_root.resolve().name),
    )


@click.command("init")
@click.option("--ide", type=click.Choice(IDES), help="IDE integration to set up.")
@click.option("--language", type=click.Choice(LANGUAGES), help="Language of prompts and context file.")
@click.option("--project-type", type=click.Choice(PROJECT_TYPES), help="Kind of project.")
@click.option("--stack", help="Stack id, or a pair key like nextjs-nestjs for fullstack.")
@click.option("--database", type=click.Choice(DATABASES), help="Database (backend/fullstack).")
@click.option("--language-variant", type=click.Choice(LANGUAGE_VARIANTS),
              help="typed (TypeScript) or untyped (JavaScript) generator flavour.")
@click.option("--environment", type=click.Choice(ENVIRONMENTS),
              help="containerized writes Dockerfile and docker-compose.yml.")
@click.option("--roles", help="Comma-separated roles, or 'none'.")
@click.option("--download/--no-download", default=None,
              help="Download a starter codebase with the stack's generator.")
@workspace_options
def init_cmd(
    ide: str | None,
    language: str | None,
    project_type: str | None,
    stack: str | None,
    database: str | None,
    language_variant: str | None,
    environment: str | None,
    roles: str | None,
    download: bool | None,
    directory: Path,
    templates_dir: Path | None,
) -> int:
    """Initialize Agent Kit in a workspace."""
    templates_root = resolve_templates_root(templates_dir)
    directory.mkdir(parents=True, exist_ok=True)

    config = collect_config(
        directory,
        ide=ide,
        language=language,
        project_type=project_type,
        stack=stack,
        database=database,
        language_variant=language_variant,
        environment=environment,
        roles=roles,
        download=download,
    )
    msg = MESSAGES[config.language]

    print_header(msg["setting_up"])
    composer = WorkspaceComposer(templates_root, directory)
    report = composer.initialize(config)

    if not report.ok:
        print_error(f"{msg['failed']} {report.error}")
        return 1

    print_report_warnings(report)
    print_success(msg["success"])
    print("\n" + paint(Colors.CYAN, f"📄 {msg['config_created']}"))
    print("\n" + paint(Colors.YELLOW, msg["next_steps"]))
    for index, step in enumerate(NEXT_STEPS[config.ide], start=1):
        print(f"{index}. {step}")
    return 0
