"""Filesystem layout of each supported IDE integration."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

SKELETON_DIRS: tuple[str, ...] = ("rules", "skills", "knowledge", "workflows")

# Subtrees replaced wholesale from the template catalog on every run
REPLACED_SUBTREES: tuple[str, ...] = ("knowledge", "rules", "workflows")


@dataclass(frozen=True)
class IdeTarget:
    """Where one IDE keeps its agent files, relative to the workspace root."""

    ide: str
    root: str
    entry_template: str
    entry_destination: str
    context_file: str
    # Template directory merged into ``root`` without overwriting, if any
    prepackaged_tree: str | None = None

    def skeleton(self) -> tuple[str, ...]:
        return tuple(f"{self.root}/{name}" for name in SKELETON_DIRS)


IDE_TARGETS: MappingProxyType[str, IdeTarget] = MappingProxyType({
    "cursor": IdeTarget(
        ide="cursor",
        root=".cursor",
        entry_template="cursorrules.template",
        entry_destination=".cursorrules",
        context_file="cursor-project-config.md",
    ),
    "windsurf": IdeTarget(
        ide="windsurf",
        root=".windsurf",
        entry_template="agents.md.template",
        entry_destination="AGENTS.md",
        context_file=".windsurf/project-config.md",
    ),
    "antigravity": IdeTarget(
        ide="antigravity",
        root=".agent",
        entry_template="antigravity-rules.md.template",
        entry_destination=".agent/AGENTS.md",
        context_file=".agent/PROJECT_CONTEXT.md",
        prepackaged_tree=".agent",
    ),
})


def get_ide_target(ide: str) -> IdeTarget:
    """Return the layout for ``ide``; raises KeyError for unknown IDEs."""
    try:
        return IDE_TARGETS[ide]
    except KeyError:
        raise KeyError(f"Unknown IDE '{ide}'") from None
