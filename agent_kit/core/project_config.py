"""Configuration value and its persisted form, ``agent-kit-skill.json``.

The persisted document is written in full on ``init``. ``update`` rebuilds a
configuration from a subset of its fields (ide, projectType, techStack,
database, roles, language) and only bumps ``updatedAt`` when rewriting it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from agent_kit.core.catalog import (
    PROJECT_TYPES,
    Stack,
    StackPair,
    parse_stack,
)
from agent_kit.core.settings import CONFIG_FILENAME, CONFIG_VERSION, DEFAULT_PROJECT_NAME

FOCUS_MODES: tuple[str, ...] = (
    *PROJECT_TYPES,
    "debug",
    "reviewer",
    "architect",
)


@dataclass(frozen=True)
class ProjectConfig:
    """Validated answers of one ``init`` run."""

    ide: str
    project_type: str
    stack: Stack = None
    database: str | None = None
    language_variant: str = "typed"
    environment: str = "local"
    roles: tuple[str, ...] = ()
    download_requested: bool = False
    language: str = "en"
    project_name: str = DEFAULT_PROJECT_NAME

    def __post_init__(self) -> None:
        is_pair = isinstance(self.stack, StackPair)
        if (self.project_type == "fullstack") != is_pair:
            raise ValueError(
                f"Stack {self.stack!r} does not fit project type '{self.project_type}'"
            )

    @property
    def containerized(self) -> bool:
        return self.environment == "containerized"

    @property
    def has_database(self) -> bool:
        return self.database not in (None, "none")


# ============================================================================
# Prompt catalog
# ============================================================================

_TEMPLATE_PROMPTS: dict[str, dict[str, Any]] = {
    "en": {
        "_description": (
            "List of template prompts to use with AI Agent. Copy and modify as needed."
        ),
        "general": [
            "Read agent-kit-skill.json and understand project context before responding",
            "Create a [feature name] with full validation and error handling",
            "Explain code in [filename] and suggest improvements",
        ],
        "backend": [
            "/backend Create CRUD API for [entity name] with DTO validation",
            "/backend Design database schema for [feature name]",
            "/backend Optimize N+1 query in [filename]",
            "/backend Create authentication middleware with JWT",
        ],
        "frontend": [
            "/frontend Create [component name] with responsive design",
            "/frontend Optimize performance for [page name]",
            "/frontend Add loading state and error handling for [component]",
            "/frontend Refactor state management using React Query",
        ],
        "debug": [
            "/debug Analyze error: [paste error message]",
            "/debug Find root cause of 'Cannot read property of undefined'",
            "/debug Fix memory leak in component [component name]",
            "/debug Debug API returning 500 Internal Server Error",
        ],
        "reviewer": [
            "/reviewer Review code in this PR: [paste code or file path]",
            "/reviewer Check security issues in [filename]",
            "/reviewer Evaluate code quality and suggest improvements",
            "/reviewer Review database migration before deploy",
        ],
        "architect": [
            "/architect Design system architecture for [feature]",
            "/architect Analyze trade-offs between [option A] and [option B]",
            "/architect Create ADR for decision to use [technology]",
            "/architect Design microservices for [system name]",
        ],
        "devops": [
            "/devops Create Dockerfile for [tech stack] application",
            "/devops Design CI/CD pipeline with GitHub Actions",
            "/devops Configure Kubernetes deployment",
            "/devops Optimize Docker image size",
        ],
    },
    "vi": {
        "_description": (
            "Danh sách các prompt mẫu để sử dụng với AI Agent. Copy và chỉnh sửa theo nhu cầu."
        ),
        "general": [
            "Hãy đọc file agent-kit-skill.json và hiểu context dự án trước khi trả lời",
            "Tạo một [tên feature] với đầy đủ validation và error handling",
            "Giải thích code trong file [tên file] và đề xuất cải tiến",
        ],
        "backend": [
            "/backend Tạo CRUD API cho entity [tên entity] với DTO validation",
            "/backend Thiết kế database schema cho tính năng [tên feature]",
            "/backend Tối ưu hóa query N+1 trong [tên file]",
            "/backend Tạo authentication middleware với JWT",
        ],
        "frontend": [
            "/frontend Tạo component [tên component] với responsive design",
            "/frontend Tối ưu hóa performance cho trang [tên page]",
            "/frontend Thêm loading state và error handling cho [component]",
            "/frontend Refactor state management sử dụng React Query",
        ],
        "debug": [
            "/debug Phân tích lỗi: [paste error message]",
            "/debug Tìm nguyên nhân lỗi 'Cannot read property of undefined'",
            "/debug Fix memory leak trong component [tên component]",
            "/debug Debug API trả về 500 Internal Server Error",
        ],
        "reviewer": [
            "/reviewer Review code trong PR này: [paste code hoặc file path]",
            "/reviewer Kiểm tra security issues trong [tên file]",
            "/reviewer Đánh giá code quality và đề xuất cải tiến",
            "/reviewer Review database migration trước khi deploy",
        ],
        "architect": [
            "/architect Thiết kế system architecture cho tính năng [feature]",
            "/architect Phân tích trade-offs giữa [option A] và [option B]",
            "/architect Tạo ADR cho quyết định sử dụng [technology]",
            "/architect Thiết kế microservices cho hệ thống [tên system]",
        ],
        "devops": [
            "/devops Tạo Dockerfile cho ứng dụng [tech stack]",
            "/devops Thiết kế CI/CD pipeline với GitHub Actions",
            "/devops Cấu hình Kubernetes deployment",
            "/devops Tối ưu Docker image size",
        ],
    },
}


def template_prompts(language: str) -> dict[str, Any]:
    """Return a copy of the prompt catalog for ``language`` (English fallback)."""
    catalog = _TEMPLATE_PROMPTS.get(language, _TEMPLATE_PROMPTS["en"])
    return {key: list(value) if isinstance(value, list) else value
            for key, value in catalog.items()}


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _stack_to_json(stack: Stack) -> str | list[str] | None:
    if isinstance(stack, StackPair):
        return [stack.frontend, stack.backend]
    return stack


# ============================================================================
# Persistence
# ============================================================================


def config_path(workspace_root: Path) -> Path:
    return workspace_root / CONFIG_FILENAME


def build_persisted(config: ProjectConfig, timestamp: str | None = None) -> dict[str, Any]:
    """Return the full ``agent-kit-skill.json`` document for ``config``."""
    now = timestamp or utc_now()
    return {
        "version": CONFIG_VERSION,
        "ide": config.ide,
        "language": config.language,
        "projectType": config.project_type,
        "techStack": _stack_to_json(config.stack),
        "database": config.database,
        "roles": list(config.roles),
        "languageVariant": config.language_variant,
        "environment": config.environment,
        "downloadCodebase": config.download_requested,
        "focusModes": {
            "enabled": True,
            "default": config.project_type,
            "available": list(FOCUS_MODES),
        },
        "templatePrompts": template_prompts(config.language),
        "createdAt": now,
        "updatedAt": now,
    }


def write_persisted(workspace_root: Path, document: dict[str, Any]) -> Path:
    """Write ``document`` as 2-space indented JSON; always a full rewrite."""
    path = config_path(workspace_root)
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path


def save_config(workspace_root: Path, config: ProjectConfig) -> Path:
    return write_persisted(workspace_root, build_persisted(config))


def load_config(workspace_root: Path) -> dict[str, Any] | None:
    """Return the persisted document, or None when the file is absent."""
    path = config_path(workspace_root)
    if not path.exists():
        return None
    with path.open(encoding="utf-8") as f:
        document = json.load(f)
    if not isinstance(document, dict):
        raise ValueError(f"{CONFIG_FILENAME} must contain a JSON object")
    return document


def config_from_persisted(
    document: dict[str, Any],
    project_name: str = DEFAULT_PROJECT_NAME,
) -> ProjectConfig:
    """Rebuild the configuration ``update`` needs from a persisted document.

    Only ide, projectType, techStack, database, roles and language are read;
    environment, languageVariant and downloadCodebase keep their defaults.
    """
    project_type = document.get("projectType")
    ide = document.get("ide")
    if not ide or not project_type:
        raise ValueError(f"{CONFIG_FILENAME} is missing 'ide' or 'projectType'")

    return ProjectConfig(
        ide=str(ide),
        project_type=str(project_type),
        stack=parse_stack(str(project_type), document.get("techStack")),
        database=document.get("database"),
        roles=tuple(document.get("roles") or ()),
        language=document.get("language") or "en",
        project_name=project_name,
    )
