"""Codegen Module: Dockerfile, compose file and scaffold file rendering.

Pure functions over the static tables in ``codegen_tables`` and ``scaffolds``.
Nothing here touches the filesystem and nothing raises for unknown input:
unknown stacks fall back to the default Dockerfile and port, unknown databases
contribute no service.

Example:
    from agent_kit.core.codegen import render_compose, render_dockerfile

    dockerfile = render_dockerfile("go")
    compose = render_compose("shop", "go", "postgresql")
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field

import yaml

from agent_kit.core.catalog import Stack, StackPair, primary_stack
from agent_kit.core.codegen_tables import (
    DATABASE_SERVICES,
    DEFAULT_APP_PORT,
    DEFAULT_DOCKERFILE_STACK,
    DOCKERFILES,
    STACK_PORTS,
    DatabaseService,
    DockerfileSpec,
)
from agent_kit.core.scaffolds import SCAFFOLDS

APP_SERVICE = "app"
BACKEND_DIR = "backend"
FRONTEND_DIR = "frontend"


@dataclass(frozen=True)
class ServiceSpec:
    """One compose service."""

    name: str
    image: str | None = None
    build_context: str | None = None
    dockerfile: str = "Dockerfile"
    container_name: str | None = None
    restart: str | None = None
    ports: tuple[str, ...] = ()
    volumes: tuple[str, ...] = ()
    environment: tuple[str, ...] | Mapping[str, str] = ()
    depends_on: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Return the compose mapping for this service, empty keys omitted."""
        block: dict[str, object] = {}
        if self.build_context is not None:
            block["build"] = {"context": self.build_context, "dockerfile": self.dockerfile}
        if self.image is not None:
            block["image"] = self.image
        if self.container_name:
            block["container_name"] = self.container_name
        if self.restart:
            block["restart"] = self.restart
        if self.environment:
            if isinstance(self.environment, Mapping):
                block["environment"] = dict(self.environment)
            else:
                block["environment"] = list(self.environment)
        if self.ports:
            block["ports"] = list(self.ports)
        if self.volumes:
            block["volumes"] = list(self.volumes)
        if self.depends_on:
            block["depends_on"] = list(self.depends_on)
        return block


@dataclass(frozen=True)
class ComposeDocument:
    """Compose file contents: services in order plus named volumes."""

    services: tuple[ServiceSpec, ...]
    volumes: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict[str, object]:
        doc: dict[str, object] = {
            "services": {service.name: service.to_dict() for service in self.services},
        }
        if self.volumes:
            doc["volumes"] = {name: {} for name in self.volumes}
        return doc


def format_dockerfile(spec: DockerfileSpec) -> str:
    """Render a ``DockerfileSpec`` to Dockerfile text."""
    lines = [f"FROM {spec.base_image}", "", f"WORKDIR {spec.workdir}", ""]
    for step in spec.steps:
        lines.append(step)
        lines.append("")
    lines.append(f"CMD {json.dumps(list(spec.cmd))}")
    return "\n".join(lines) + "\n"


def format_compose(document: ComposeDocument) -> str:
    """Render a ``ComposeDocument`` to YAML text."""
    return yaml.safe_dump(
        document.to_dict(),
        sort_keys=False,
        default_flow_style=False,
    )


class Codegen:
    """Renders runtime artifacts from injected lookup tables."""

    def __init__(
        self,
        dockerfiles: Mapping[str, DockerfileSpec] = DOCKERFILES,
        ports: Mapping[str, int] = STACK_PORTS,
        databases: Mapping[str, DatabaseService] = DATABASE_SERVICES,
        scaffolds: Mapping[str, Mapping[str, str]] = SCAFFOLDS,
        default_stack: str = DEFAULT_DOCKERFILE_STACK,
        default_port: int = DEFAULT_APP_PORT,
    ) -> None:
        self.dockerfiles = dockerfiles
        self.ports = ports
        self.databases = databases
        self.scaffolds = scaffolds
        self.default_stack = default_stack
        self.default_port = default_port

    def dockerfile_spec(self, stack: Stack) -> DockerfileSpec:
        key = primary_stack(stack)
        spec = self.dockerfiles.get(key) if key else None
        return spec or self.dockerfiles[self.default_stack]

    def render_dockerfile(self, stack: Stack) -> str:
        """Return Dockerfile text; pairs render their backend side."""
        return format_dockerfile(self.dockerfile_spec(stack))

    def app_port(self, stack: Stack) -> int:
        key = primary_stack(stack)
        if key is None:
            return self.default_port
        return self.ports.get(key, self.default_port)

    def database_service(self, database: str | None) -> DatabaseService | None:
        """Return the service record, or None for sqlite/none/unknown."""
        if not database:
            return None
        return self.databases.get(database)

    def build_compose(
        self,
        project_name: str,
        stack: Stack,
        database: str | None,
    ) -> ComposeDocument:
        port = self.app_port(stack)
        spec = self.dockerfile_spec(stack)
        context = f"./{BACKEND_DIR}" if isinstance(stack, StackPair) else "."
        db = self.database_service(database)

        volumes = [f"{context}:{spec.workdir}"]
        if spec.base_image.startswith("node"):
            volumes.append(f"{spec.workdir}/node_modules")

        environment = ["NODE_ENV=development"]
        depends_on: tuple[str, ...] = ()
        if db is not None:
            environment.extend(db.app_env(project_name))
            depends_on = (db.service,)
        environment.append(f"PORT={port}")

        app = ServiceSpec(
            name=APP_SERVICE,
            build_context=context,
            container_name=f"{project_name}-app",
            restart="unless-stopped",
            ports=(f"{port}:{port}",),
            volumes=tuple(volumes),
            environment=tuple(environment),
            depends_on=depends_on,
        )
        if db is None:
            return ComposeDocument(services=(app,))

        db_service = ServiceSpec(
            name=db.service,
            image=db.image,
            restart="always",
            environment=db.service_env(project_name),
            ports=(f"{db.port}:{db.port}",),
            volumes=(f"{db.volume}:{db.data_path}",),
        )
        return ComposeDocument(services=(app, db_service), volumes=(db.volume,))

    def render_compose(self, project_name: str, stack: Stack, database: str | None) -> str:
        """Return docker-compose.yml text with an ``app`` and optional database service."""
        return format_compose(self.build_compose(project_name, stack, database))

    def scaffold_files(self, stack: Stack) -> dict[str, str]:
        """Return relative path -> content for a stack (empty if unknown).

        For a ``StackPair`` the paths are prefixed with ``frontend/`` and
        ``backend/``.
        """
        if stack is None:
            return {}
        if isinstance(stack, StackPair):
            files: dict[str, str] = {}
            for side_dir, side in ((FRONTEND_DIR, stack.frontend), (BACKEND_DIR, stack.backend)):
                for rel_path, content in self.scaffolds.get(side, {}).items():
                    files[f"{side_dir}/{rel_path}"] = content
            return files
        return dict(self.scaffolds.get(stack, {}))


_DEFAULT_CODEGEN = Codegen()


def render_dockerfile(stack: Stack) -> str:
    """Render the Dockerfile for ``stack`` using the built-in tables."""
    return _DEFAULT_CODEGEN.render_dockerfile(stack)


def render_compose(project_name: str, stack: Stack, database: str | None) -> str:
    """Render docker-compose.yml using the built-in tables."""
    return _DEFAULT_CODEGEN.render_compose(project_name, stack, database)


def scaffold_files(stack: Stack) -> dict[str, str]:
    """Return the built-in scaffold file set for ``stack``."""
    return _DEFAULT_CODEGEN.scaffold_files(stack)
