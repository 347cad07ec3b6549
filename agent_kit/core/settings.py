"""Tool-level settings: template catalog location and persisted file names."""

from __future__ import annotations

import os
import re
from pathlib import Path

TEMPLATES_ENV_VAR = "AGENT_KIT_TEMPLATES_DIR"
CONFIG_FILENAME = "agent-kit-skill.json"
CONFIG_VERSION = "1.0.0"
DEFAULT_PROJECT_NAME = "app"


def bundled_templates_dir() -> Path:
    """Return the template catalog shipped inside the package."""
    import agent_kit

    return Path(agent_kit.__file__).parent / "templates"


def get_templates_dir(override: str | Path | None = None) -> Path:
    """Resolve the template catalog: explicit path, env var, then bundled copy."""
    if override:
        return Path(override).expanduser().resolve()
    env_value = os.environ.get(TEMPLATES_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser().resolve()
    return bundled_templates_dir()


def slugify_project_name(name: str) -> str:
    """Lowercase ``name`` and collapse anything outside ``[a-z0-9]`` to single dashes."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or DEFAULT_PROJECT_NAME
