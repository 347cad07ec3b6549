"""Fetch-and-Merge Protocol: run a starter-codebase generator and merge its output.

One ``fetch`` call runs strictly in this order:

1. resolve the stack to a generator argument template (unsupported: no-op failure)
2. pick a unique staging directory name under the target root
3. run the generator in the target root, output streamed live
4. move every top-level staging entry into the target root (overwrite),
   then remove the staging directory
5. run the package install when the dependency directory is missing
6. apply at most one stack-specific content rewrite
7. write ``.env`` when a database was chosen

Any exception in steps 3-7 removes the staging directory on a best-effort
basis and yields a failed ``StepResult``. The move in step 4 is not atomic:
a failure part-way through leaves the entries moved so far in place.

Once step 4 completes the result carries ``merged=True``, even when it
failed. A failed install does not stop steps 6 and 7, since the codebase is
already in place; it only turns the result into a failure.
"""

from __future__ import annotations

import shutil
import subprocess
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from agent_kit.core.envfile import write_env_file
from agent_kit.core.results import StepResult
from agent_kit.helpers.helpers_logging import (
    print_error,
    print_info,
    print_success,
)

STAGING_PREFIX = "agent-kit-staging"

CommandRunner = Callable[[list[str], Path], int]


@dataclass(frozen=True)
class GeneratorSpec:
    """Argument template for an external generator; ``{target}`` is the staging name."""

    typed: tuple[str, ...]
    untyped: tuple[str, ...] | None = None

    def command(self, target: str, language_variant: str = "typed") -> list[str]:
        template = self.typed
        if language_variant == "untyped" and self.untyped is not None:
            template = self.untyped
        return [arg.format(target=target) for arg in template]


@dataclass(frozen=True)
class InstallStep:
    """Install command run when ``store_dir`` is absent from the target root."""

    store_dir: str
    command: tuple[str, ...]


@dataclass(frozen=True)
class ContentRewrite:
    """Replace the first existing candidate file with fixed content."""

    candidates: tuple[str, ...]
    content: str


_VITE = ("npm", "create", "vite@latest", "{target}", "--", "--template")

GENERATORS: MappingProxyType[str, GeneratorSpec] = MappingProxyType({
    "nestjs": GeneratorSpec(
        typed=("npx", "-y", "@nestjs/cli", "new", "{target}",
               "--package-manager", "npm", "--skip-git"),
        untyped=("npx", "-y", "@nestjs/cli", "new", "{target}",
                 "--package-manager", "npm", "--skip-git", "--language", "js"),
    ),
    "laravel": GeneratorSpec(
        typed=("composer", "create-project", "laravel/laravel", "{target}"),
    ),
    "nextjs": GeneratorSpec(
        typed=("npx", "-y", "create-next-app@latest", "{target}", "--typescript",
               "--eslint", "--tailwind", "--no-src-dir", "--app",
               "--import-alias", "@/*", "--use-npm"),
        untyped=("npx", "-y", "create-next-app@latest", "{target}", "--javascript",
                 "--eslint", "--tailwind", "--no-src-dir", "--app",
                 "--import-alias", "@/*", "--use-npm"),
    ),
    "react": GeneratorSpec(typed=(*_VITE, "react-ts"), untyped=(*_VITE, "react")),
    "vue": GeneratorSpec(typed=(*_VITE, "vue-ts"), untyped=(*_VITE, "vue")),
    "nuxt": GeneratorSpec(
        typed=("npx", "-y", "nuxi@latest", "init", "{target}", "--packageManager", "npm"),
    ),
    "angular": GeneratorSpec(
        typed=("npx", "-y", "@angular/cli@latest", "new", "{target}",
               "--defaults", "--skip-git"),
    ),
    "express": GeneratorSpec(
        typed=("npx", "-y", "express-generator", "--no-view", "{target}"),
    ),
})

_NPM_INSTALL = InstallStep(store_dir="node_modules", command=("npm", "install"))

INSTALL_STEPS: MappingProxyType[str, InstallStep] = MappingProxyType({
    "react": _NPM_INSTALL,
    "vue": _NPM_INSTALL,
    "express": _NPM_INSTALL,
})

CONTENT_REWRITES: MappingProxyType[str, ContentRewrite] = MappingProxyType({
    "react": ContentRewrite(
        candidates=("src/App.tsx", "src/App.jsx"),
        content=(
            "function App() {\n"
            "  return <h1>Hello from Agent Kit React</h1>\n"
            "}\n"
            "\n"
            "export default App\n"
        ),
    ),
    "vue": ContentRewrite(
        candidates=("src/App.vue",),
        content="<template>\n  <h1>Hello from Agent Kit Vue</h1>\n</template>\n",
    ),
    "nextjs": ContentRewrite(
        candidates=("app/page.tsx", "app/page.js"),
        content=(
            "export default function Home() {\n"
            "  return <h1>Hello from Agent Kit Next.js</h1>\n"
            "}\n"
        ),
    ),
})


def run_command(cmd: list[str], cwd: Path) -> int:
    """Run a command with inherited stdio and return its exit code."""
    result = subprocess.run(cmd, cwd=cwd, check=False)
    return result.returncode


def _new_staging_name() -> str:
    return f"{STAGING_PREFIX}-{uuid.uuid4().hex[:8]}"


def _remove_staging(staging: Path) -> None:
    """Best-effort removal; errors are swallowed."""
    shutil.rmtree(staging, ignore_errors=True)


def merge_staging(staging: Path, target_root: Path) -> list[str]:
    """Move every top-level entry of ``staging`` into ``target_root``.

    Same-named entries in the target are replaced. The staging directory is
    removed once empty.

    Returns:
        Names of the merged entries.
    """
    merged: list[str] = []
    for entry in sorted(staging.iterdir()):
        dest = target_root / entry.name
        if dest.is_dir() and not dest.is_symlink():
            shutil.rmtree(dest)
        elif dest.exists() or dest.is_symlink():
            dest.unlink()
        shutil.move(str(entry), str(dest))
        merged.append(entry.name)
    staging.rmdir()
    return merged


class CodebaseFetcher:
    """Runs generators into a staging directory and merges the result."""

    def __init__(
        self,
        run_command: CommandRunner = run_command,
        generators: Mapping[str, GeneratorSpec] = GENERATORS,
        installs: Mapping[str, InstallStep] = INSTALL_STEPS,
        rewrites: Mapping[str, ContentRewrite] = CONTENT_REWRITES,
        staging_name: Callable[[], str] = _new_staging_name,
    ) -> None:
        self.run_command = run_command
        self.generators = generators
        self.installs = installs
        self.rewrites = rewrites
        self.staging_name = staging_name

    def supports(self, stack: str | None) -> bool:
        return stack is not None and stack in self.generators

    def fetch(
        self,
        stack: str,
        target_root: Path,
        language_variant: str = "typed",
        database: str | None = None,
        project_name: str = "app",
    ) -> StepResult:
        """Download the starter codebase for ``stack`` into ``target_root``."""
        step = f"fetch:{stack}"
        spec = self.generators.get(stack)
        if spec is None:
            return StepResult.failure(step, f"No codebase generator for stack '{stack}'")

        target_root.mkdir(parents=True, exist_ok=True)
        staging_name = self.staging_name()
        staging = target_root / staging_name

        print_info(f"Downloading {stack} codebase into {target_root} ... this may take a while.")
        merged: list[str] | None = None
        try:
            exit_code = self.run_command(spec.command(staging_name, language_variant), target_root)
            if exit_code != 0:
                _remove_staging(staging)
                print_error(f"Generator for {stack} exited with code {exit_code}")
                return StepResult.failure(step, f"generator exited with code {exit_code}")

            if not staging.is_dir():
                print_error(f"Generator for {stack} produced no output")
                return StepResult.failure(
                    step, "generator reported success but produced no output",
                )

            merged = merge_staging(staging, target_root)

            install_error = self._install(stack, target_root)

            self._rewrite(stack, target_root)

            if database:
                env_path = write_env_file(stack, database, project_name, target_root)
                if env_path is not None:
                    print_success(f"Wrote {env_path.name} for {database}")
        except Exception as e:
            _remove_staging(staging)
            print_error(f"Failed to download codebase for {stack}: {e}")
            result = StepResult.failure(step, str(e))
            return result if merged is None else result.with_merge()

        if install_error is not None:
            return StepResult.failure(step, install_error).with_merge()

        print_success(f"Codebase for {stack} downloaded ({len(merged)} entries merged)")
        result = StepResult.success(step, f"{len(merged)} entries merged into {target_root}")
        return result.with_merge()

    def _install(self, stack: str, target_root: Path) -> str | None:
        """Run the install step if needed; return an error message or None."""
        install = self.installs.get(stack)
        if install is None or (target_root / install.store_dir).exists():
            return None

        print_info(f"Installing dependencies: {' '.join(install.command)}")
        exit_code = self.run_command(list(install.command), target_root)
        if exit_code != 0:
            print_error(f"Dependency install for {stack} exited with code {exit_code}")
            return f"install exited with code {exit_code}"
        return None

    def _rewrite(self, stack: str, target_root: Path) -> None:
        rewrite = self.rewrites.get(stack)
        if rewrite is None:
            return
        for candidate in rewrite.candidates:
            path = target_root / candidate
            if path.is_file():
                path.write_text(rewrite.content, encoding="utf-8")
                return
