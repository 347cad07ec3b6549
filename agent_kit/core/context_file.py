"""Project context markdown read by the agent at the start of a session."""

from __future__ import annotations

from agent_kit.core.catalog import StackPair
from agent_kit.core.project_config import ProjectConfig

_NOT_SET = "N/A"


def _stack_label(config: ProjectConfig) -> str:
    if isinstance(config.stack, StackPair):
        return f"{config.stack.frontend} + {config.stack.backend}"
    return config.stack or _NOT_SET


def _roles_label(config: ProjectConfig) -> str:
    return ", ".join(config.roles) if config.roles else _NOT_SET


def _render_en(config: ProjectConfig) -> str:
    return f"""# Project Context

## Basic Information
- **IDE:** {config.ide}
- **Project Type:** {config.project_type}
- **Tech Stack:** {_stack_label(config)}
- **Database:** {config.database or _NOT_SET}
- **Roles:** {_roles_label(config)}
- **Language:** English

## Instructions for AI Agent

When responding:
1. Use English for all responses
2. Follow rules learned from skills/rules folders
3. Apply Clean Code and SOLID principles
4. Read agent-kit-skill.json to understand project context

## Focus Modes

Use these commands to switch modes:
- `/backend` - Focus on API and database
- `/frontend` - Focus on UI/UX
- `/devops` - Focus on infrastructure
- `/debug` - Focus on bug fixing
- `/reviewer` - Focus on code review
- `/architect` - Focus on system design
"""


def _render_vi(config: ProjectConfig) -> str:
    return f"""# Ngữ Cảnh Dự Án

## Thông Tin Cơ Bản
- **IDE:** {config.ide}
- **Loại Dự Án:** {config.project_type}
- **Tech Stack:** {_stack_label(config)}
- **Database:** {config.database or _NOT_SET}
- **Vai Trò:** {_roles_label(config)}
- **Ngôn Ngữ:** Tiếng Việt

## Hướng Dẫn Cho AI Agent

Khi trả lời, hãy:
1. Sử dụng tiếng Việt cho tất cả phản hồi
2. Tuân theo các quy tắc đã học trong thư mục skills/rules
3. Áp dụng Clean Code và SOLID principles
4. Đọc file agent-kit-skill.json để hiểu context dự án

## Focus Modes (Chế Độ Tập Trung)

Sử dụng các lệnh sau để chuyển chế độ:
- `/backend` - Tập trung vào API và database
- `/frontend` - Tập trung vào UI/UX
- `/devops` - Tập trung vào infrastructure
- `/debug` - Tập trung vào sửa lỗi
- `/reviewer` - Tập trung vào review code
- `/architect` - Tập trung vào thiết kế hệ thống
"""


def render_context_file(config: ProjectConfig) -> str:
    """Return the context markdown in the configured language."""
    if config.language == "vi":
        return _render_vi(config)
    return _render_en(config)
