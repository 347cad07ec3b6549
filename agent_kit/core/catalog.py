"""Selection catalog: IDE targets, project types, stacks, databases, roles.

All lookup tables are read-only (``MappingProxyType``) and are passed into the
Codegen Module and Stack Resolver at construction time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple, Union


class StackPair(NamedTuple):
    """Ordered (frontend, backend) selection used by fullstack projects."""

    frontend: str
    backend: str


Stack = Union[str, StackPair, None]

# ============================================================================
# Choices
# ============================================================================

IDES: tuple[str, ...] = ("cursor", "windsurf", "antigravity")
LANGUAGES: tuple[str, ...] = ("en", "vi")
PROJECT_TYPES: tuple[str, ...] = ("backend", "frontend", "devops", "fullstack", "mobile")
DATABASES: tuple[str, ...] = ("postgresql", "mysql", "mongodb", "sqlite", "none")
LANGUAGE_VARIANTS: tuple[str, ...] = ("typed", "untyped")
ENVIRONMENTS: tuple[str, ...] = ("containerized", "local")
ROLES: tuple[str, ...] = ("implementer", "architect", "reviewer", "debugger")

BACKEND_STACKS: tuple[str, ...] = ("nestjs", "laravel", "go", "python", "express")
FRONTEND_STACKS: tuple[str, ...] = ("nextjs", "vue", "nuxt", "react", "angular")
MOBILE_STACKS: tuple[str, ...] = ("flutter", "react-native", "swiftui", "android")

FULLSTACK_PAIRS: MappingProxyType[str, StackPair] = MappingProxyType({
    "nextjs-nestjs": StackPair("nextjs", "nestjs"),
    "nuxt-laravel": StackPair("nuxt", "laravel"),
    "react-express": StackPair("react", "express"),
})

# Stacks whose generators offer both a TypeScript and a JavaScript flavour
VARIANT_STACKS: frozenset[str] = frozenset({"nextjs", "react", "vue", "nestjs"})

# Project types that get a database question
DATABASE_PROJECT_TYPES: frozenset[str] = frozenset({"backend", "fullstack"})

# Project types that always receive the devops skill bundles
DEVOPS_PROJECT_TYPES: frozenset[str] = frozenset({"backend", "fullstack", "devops"})

_STACKS_BY_TYPE: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "backend": BACKEND_STACKS,
    "frontend": FRONTEND_STACKS,
    "mobile": MOBILE_STACKS,
    "fullstack": tuple(FULLSTACK_PAIRS),
    "devops": (),
})

# ============================================================================
# Stack -> skill bundle names
# ============================================================================

STACK_SKILLS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "nestjs": ("backend-nestjs",),
    "laravel": ("backend-laravel",),
    "go": ("backend-go",),
    "python": ("backend-python",),
    "express": ("backend-express",),
    "nextjs": ("frontend-nextjs",),
    "vue": ("frontend-vue",),
    "nuxt": ("frontend-vue",),
    "react": ("frontend-react",),
    "angular": ("frontend-angular",),
    "flutter": ("mobile-flutter",),
    "react-native": ("mobile-react-native",),
    "swiftui": ("mobile-swiftui",),
    "android": ("mobile-android",),
})

PROJECT_STANDARDS_SKILL = "project-standards"
DEVOPS_SKILLS: tuple[str, ...] = ("devops-docker", "devops-cicd")


def role_skill(role: str) -> str:
    """Return the skill bundle name for a role id."""
    return f"role-{role}"


def stacks_for_project_type(project_type: str) -> tuple[str, ...]:
    """Return the stack menu keys offered for a project type."""
    return _STACKS_BY_TYPE.get(project_type, ())


def parse_stack(project_type: str, value: object) -> Stack:
    """Turn a menu key or persisted value into a scalar stack or ``StackPair``.

    Fullstack accepts either a menu key (``"nextjs-nestjs"``) or a two-element
    list as stored in ``agent-kit-skill.json``.
    """
    if value is None or value == "":
        return None
    if project_type == "fullstack":
        if isinstance(value, StackPair):
            return value
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return StackPair(str(value[0]), str(value[1]))
        if isinstance(value, str) and value in FULLSTACK_PAIRS:
            return FULLSTACK_PAIRS[value]
        raise ValueError(f"Not a fullstack pair: {value!r}")
    if isinstance(value, str):
        return value
    raise ValueError(f"Not a stack identifier: {value!r}")


def stack_sides(stack: Stack) -> tuple[str, ...]:
    """Return the scalar stack ids making up a selection, frontend first."""
    if stack is None:
        return ()
    if isinstance(stack, StackPair):
        return (stack.frontend, stack.backend)
    return (stack,)


def primary_stack(stack: Stack) -> str | None:
    """Return the stack that owns the runtime container (backend for pairs)."""
    if isinstance(stack, StackPair):
        return stack.backend
    return stack
