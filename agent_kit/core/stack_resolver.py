"""Stack Resolver: maps a scalar stack id to the skill bundles it needs."""

from __future__ import annotations

from collections.abc import Mapping

from agent_kit.core.catalog import STACK_SKILLS, Stack, stack_sides


class StackResolver:
    """Scalar stack id -> skill bundle names, from an injected table."""

    def __init__(self, skill_table: Mapping[str, tuple[str, ...]] = STACK_SKILLS) -> None:
        self.skill_table = skill_table

    def resolve(self, stack_id: str) -> tuple[str, ...]:
        """Return the skill names for ``stack_id``; unknown ids give ``()``."""
        return tuple(self.skill_table.get(stack_id, ()))


def resolve_stack_skills(resolver: StackResolver, stack: Stack) -> tuple[str, ...]:
    """Resolve every side of a selection; ordered union without duplicates."""
    skills: list[str] = []
    for side in stack_sides(stack):
        for skill in resolver.resolve(side):
            if skill not in skills:
                skills.append(skill)
    return tuple(skills)
