"""Filesystem copy primitives used by the Workspace Composer.

Each helper returns a ``StepResult`` instead of raising: a missing source is a
skip, an ``OSError`` while copying is a failure of that one step only.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from agent_kit.core.results import StepResult


def copy_file(src: Path, dest: Path, step: str) -> StepResult:
    """Copy one file, replacing ``dest`` if present."""
    if not src.is_file():
        return StepResult.skip(step, f"template not found: {src.name}")
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
    except OSError as e:
        return StepResult.failure(step, f"could not copy {src.name}: {e}")
    return StepResult.success(step, f"Copied {step}")


def copy_tree(src: Path, dest: Path, step: str) -> StepResult:
    """Copy a directory over ``dest``; same-named files are overwritten."""
    if not src.is_dir():
        return StepResult.skip(step, f"template not found: {src.name}")
    try:
        shutil.copytree(src, dest, dirs_exist_ok=True)
    except OSError as e:
        return StepResult.failure(step, f"could not copy {src.name}: {e}")
    return StepResult.success(step, f"Copied {step}")


def replace_tree(src: Path, dest: Path, step: str) -> StepResult:
    """Replace ``dest`` wholesale with a copy of ``src``."""
    if not src.is_dir():
        return StepResult.skip(step, f"template not found: {src.name}")
    try:
        if dest.is_dir() and not dest.is_symlink():
            shutil.rmtree(dest)
        elif dest.exists() or dest.is_symlink():
            dest.unlink()
        shutil.copytree(src, dest)
    except OSError as e:
        return StepResult.failure(step, f"could not replace {dest.name}: {e}")
    return StepResult.success(step, f"Replaced {step}")


def merge_tree(src: Path, dest: Path, step: str) -> StepResult:
    """Copy files from ``src`` into ``dest`` without overwriting existing files."""
    if not src.is_dir():
        return StepResult.skip(step, f"template not found: {src.name}")

    copied = 0
    kept = 0
    try:
        for source_file in sorted(src.rglob("*")):
            if source_file.is_dir():
                continue
            target_file = dest / source_file.relative_to(src)
            if target_file.exists():
                kept += 1
                continue
            target_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source_file, target_file)
            copied += 1
    except OSError as e:
        return StepResult.failure(step, f"could not merge {src.name}: {e}")
    return StepResult.success(step, f"Merged {step}: {copied} copied, {kept} kept")


def write_if_missing(root: Path, files: dict[str, str], step: str) -> list[StepResult]:
    """Write each relative path under ``root`` unless it already exists."""
    results: list[StepResult] = []
    for rel_path, content in files.items():
        file_path = root / rel_path
        if file_path.exists():
            results.append(StepResult.skip(step, f"{rel_path} already exists"))
            continue
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            results.append(StepResult.failure(step, f"could not write {rel_path}: {e}"))
            continue
        results.append(StepResult.success(step, f"Created file: {rel_path}"))
    return results
