"""``.env`` generation for downloaded codebases.

Values mirror the credentials of the compose database services so a codebase
started outside docker talks to the same database. Writing merges into an
existing ``.env``: known keys are rewritten in place, missing keys appended,
everything else (e.g. Laravel's ``APP_KEY``) is kept. Running it twice yields
the same file.
"""

from __future__ import annotations

import re
from pathlib import Path

from agent_kit.core.codegen_tables import DATABASE_SERVICES, DB_PASSWORD, DB_USER

ENV_FILENAME = ".env"
LOCAL_HOST = "localhost"

_LARAVEL_CONNECTIONS = {
    "postgresql": "pgsql",
    "mysql": "mysql",
    "mongodb": "mongodb",
    "sqlite": "sqlite",
}

_URL_SCHEMES = {
    "postgresql": "postgresql",
    "mysql": "mysql",
}

_ENV_LINE_RE = re.compile(r"^\s*(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=")


def _laravel_values(database: str, project_name: str) -> dict[str, str]:
    connection = _LARAVEL_CONNECTIONS.get(database)
    if connection is None:
        return {}
    if database == "sqlite":
        return {"DB_CONNECTION": connection, "DB_DATABASE": "database/database.sqlite"}

    service = DATABASE_SERVICES[database]
    return {
        "DB_CONNECTION": connection,
        "DB_HOST": LOCAL_HOST,
        "DB_PORT": str(service.port),
        "DB_DATABASE": project_name,
        "DB_USERNAME": DB_USER,
        "DB_PASSWORD": DB_PASSWORD,
    }


def render_env_values(stack: str, database: str | None, project_name: str) -> dict[str, str]:
    """Return the env assignments for a stack/database pair.

    Returns an empty mapping for ``none`` and unknown databases.
    """
    if not database or database == "none":
        return {}

    if stack == "laravel":
        return _laravel_values(database, project_name)

    if database == "sqlite":
        return {"DATABASE_URL": f"file:./{project_name}.db"}

    if database == "mongodb":
        port = DATABASE_SERVICES["mongodb"].port
        return {"MONGO_URI": f"mongodb://{LOCAL_HOST}:{port}/{project_name}"}

    scheme = _URL_SCHEMES.get(database)
    if scheme is None:
        return {}

    port = DATABASE_SERVICES[database].port
    return {
        "DATABASE_URL": (
            f"{scheme}://{DB_USER}:{DB_PASSWORD}@{LOCAL_HOST}:{port}/{project_name}"
        ),
        "DB_HOST": LOCAL_HOST,
        "DB_PORT": str(port),
        "DB_USER": DB_USER,
        "DB_PASSWORD": DB_PASSWORD,
        "DB_NAME": project_name,
    }


def merge_env_text(existing: str, values: dict[str, str]) -> str:
    """Merge ``values`` into ``.env`` text, keeping unrelated lines."""
    remaining = dict(values)
    lines: list[str] = []
    for line in existing.splitlines():
        match = _ENV_LINE_RE.match(line)
        if match and match.group(1) in values:
            key = match.group(1)
            if key in remaining:
                lines.append(f"{key}={remaining.pop(key)}")
            # Duplicate assignment of a managed key: drop it
            continue
        lines.append(line)

    lines.extend(f"{key}={value}" for key, value in remaining.items())
    return "\n".join(lines) + "\n"


def write_env_file(
    stack: str,
    database: str | None,
    project_name: str,
    target_root: Path,
) -> Path | None:
    """Write or update ``target_root/.env``.

    Returns:
        Path of the written file, or None when there was nothing to write.
    """
    values = render_env_values(stack, database, project_name)
    if not values:
        return None

    env_path = target_root / ENV_FILENAME
    existing = env_path.read_text(encoding="utf-8") if env_path.exists() else ""
    env_path.write_text(merge_env_text(existing, values), encoding="utf-8")
    return env_path
