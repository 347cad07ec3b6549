"""Shared fixtures for the Agent Kit test suite.

Provides a minimal Template Source Repository, an isolated workspace
directory and a fake external-generator runner, so no test ever calls
``npx``/``composer`` or touches the bundled templates.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from agent_kit.core.fetcher import STAGING_PREFIX

# Skills present in the fake catalog. Everything else is "missing".
CATALOG_SKILLS: tuple[str, ...] = (
    "project-standards",
    "role-implementer",
    "role-reviewer",
    "backend-nestjs",
    "backend-laravel",
    "backend-go",
    "frontend-nextjs",
    "frontend-vue",
    "frontend-react",
    "devops-docker",
    "devops-cicd",
)

DEFAULT_GENERATED_FILES: dict[str, str] = {
    "package.json": '{"name": "generated"}\n',
    "README.md": "generated readme\n",
    "src/App.tsx": "export default function App() { return null }\n",
    "app/page.tsx": "export default function Home() { return null }\n",
}


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture()
def templates_root(tmp_path: Path) -> Path:
    """Build a fake template catalog.

    Layout::

        templates/
            cursorrules.template, agents.md.template, antigravity-rules.md.template
            knowledge/kb.md  rules/style.md  workflows/release.md
            skills/<CATALOG_SKILLS>/SKILL.md
            .agent/README.md  .agent/memory/notes.md
    """
    root = tmp_path / "templates"
    _write(root / "cursorrules.template", "cursor rules v1\n")
    _write(root / "agents.md.template", "agents v1\n")
    _write(root / "antigravity-rules.md.template", "antigravity v1\n")
    _write(root / "knowledge" / "kb.md", "knowledge\n")
    _write(root / "rules" / "style.md", "style rule\n")
    _write(root / "workflows" / "release.md", "release workflow\n")
    for skill in CATALOG_SKILLS:
        _write(root / "skills" / skill / "SKILL.md", f"# {skill}\n")
    _write(root / ".agent" / "README.md", "prepackaged readme\n")
    _write(root / ".agent" / "memory" / "notes.md", "prepackaged notes\n")
    return root


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """Empty workspace root named ``My Shop`` (slug: ``my-shop``)."""
    root = tmp_path / "My Shop"
    root.mkdir()
    return root


class FakeRunner:
    """Stands in for ``subprocess.run``-based command execution.

    A generator call (any command carrying the staging name) creates the
    staging directory with ``files`` unless told otherwise. Any other call
    is treated as the install step and creates ``node_modules``.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        exit_code: int = 0,
        install_exit_code: int = 0,
        create_output: bool = True,
    ) -> None:
        self.files = DEFAULT_GENERATED_FILES if files is None else files
        self.exit_code = exit_code
        self.install_exit_code = install_exit_code
        self.create_output = create_output
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, cmd: list[str], cwd: Path) -> int:
        self.calls.append((list(cmd), Path(cwd)))
        staging = next((arg for arg in cmd if arg.startswith(STAGING_PREFIX)), None)
        if staging is None:
            if self.install_exit_code == 0:
                (Path(cwd) / "node_modules").mkdir(exist_ok=True)
            return self.install_exit_code

        if self.exit_code == 0 and self.create_output:
            for rel_path, content in self.files.items():
                _write(Path(cwd) / staging / rel_path, content)
        return self.exit_code

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _cwd in self.calls]


@pytest.fixture()
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for ``FakeRunner`` instances."""
    return FakeRunner


def staging_dirs(root: Path) -> list[Path]:
    """Return leftover staging directories directly under ``root``."""
    return [path for path in root.iterdir() if path.name.startswith(STAGING_PREFIX)]


@pytest.fixture()
def find_staging() -> Callable[[Path], list[Path]]:
    return staging_dirs
