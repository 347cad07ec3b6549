"""Tests for Dockerfile, compose and scaffold rendering."""

from __future__ import annotations

from types import MappingProxyType

import pytest
import yaml

from agent_kit.core.catalog import StackPair
from agent_kit.core.codegen import (
    Codegen,
    render_compose,
    render_dockerfile,
    scaffold_files,
)
from agent_kit.core.codegen_tables import DOCKERFILES, STACK_PORTS, DockerfileSpec


class TestRenderDockerfile:

    def test_nestjs_uses_node_image_and_npm_install(self) -> None:
        text = render_dockerfile("nestjs")
        assert text.startswith("FROM node:18-alpine\n\nWORKDIR /app\n")
        assert "RUN npm install" in text
        assert text.endswith('CMD ["npm", "run", "start:dev"]\n')

    @pytest.mark.parametrize(
        ("stack", "image"),
        [
            ("laravel", "php:8.2-fpm"),
            ("go", "golang:1.21-alpine"),
            ("python", "python:3.9"),
            ("react", "node:18-alpine"),
        ],
    )
    def test_base_image_is_pinned_per_stack_family(self, stack: str, image: str) -> None:
        assert render_dockerfile(stack).splitlines()[0] == f"FROM {image}"

    @pytest.mark.parametrize("stack", sorted(DOCKERFILES))
    def test_every_dockerfile_stack_has_from_and_port(self, stack: str) -> None:
        """Each Dockerfile stack renders a FROM line and has an app port."""
        assert render_dockerfile(stack).startswith("FROM ")
        assert stack in STACK_PORTS

    def test_laravel_workdir(self) -> None:
        assert "WORKDIR /var/www" in render_dockerfile("laravel")

    @pytest.mark.parametrize("stack", ["flutter", "unknown-stack", None])
    def test_unknown_stack_is_byte_identical_to_default(self, stack: str | None) -> None:
        assert render_dockerfile(stack) == render_dockerfile("nestjs")

    def test_pair_renders_backend_side(self) -> None:
        assert render_dockerfile(StackPair("nuxt", "laravel")) == render_dockerfile("laravel")

    def test_injected_table(self) -> None:
        codegen = Codegen(
            dockerfiles=MappingProxyType({
                "tiny": DockerfileSpec(base_image="busybox", steps=("COPY . .",), cmd=("sh",)),
            }),
            default_stack="tiny",
        )
        assert codegen.render_dockerfile("whatever") == (
            "FROM busybox\n\nWORKDIR /app\n\nCOPY . .\n\nCMD [\"sh\"]\n"
        )


class TestRenderCompose:

    def test_without_database_only_app_service(self) -> None:
        doc = yaml.safe_load(render_compose("shop", "go", None))
        assert list(doc["services"]) == ["app"]
        assert "volumes" not in doc
        app = doc["services"]["app"]
        assert app["build"] == {"context": ".", "dockerfile": "Dockerfile"}
        assert app["ports"] == ["8080:8080"]
        assert app["environment"] == ["NODE_ENV=development", "PORT=8080"]
        assert "depends_on" not in app

    def test_unknown_stack_defaults_to_port_3000(self) -> None:
        doc = yaml.safe_load(render_compose("shop", "flutter", None))
        assert doc["services"]["app"]["ports"] == ["3000:3000"]

    @pytest.mark.parametrize(
        ("database", "service", "port"),
        [
            ("postgresql", "postgres", 5432),
            ("mysql", "mysql", 3306),
            ("mongodb", "mongo", 27017),
        ],
    )
    def test_database_contributes_service_env_and_depends_on(
        self, database: str, service: str, port: int,
    ) -> None:
        doc = yaml.safe_load(render_compose("shop", "nestjs", database))
        services = doc["services"]
        assert list(services) == ["app", service]

        app = services["app"]
        assert app["depends_on"] == [service]
        assert app["environment"][0] == "NODE_ENV=development"
        assert app["environment"][-1] == "PORT=3000"
        db_env = " ".join(app["environment"][1:-1])
        assert service in db_env
        assert str(port) in db_env

        db = services[service]
        assert db["ports"] == [f"{port}:{port}"]
        volume_name = db["volumes"][0].split(":", 1)[0]
        assert doc["volumes"] == {volume_name: {}}

    def test_postgres_uses_project_name_as_database(self) -> None:
        doc = yaml.safe_load(render_compose("shop", "nestjs", "postgresql"))
        assert doc["services"]["postgres"]["environment"]["POSTGRES_DB"] == "shop"
        assert "DB_NAME=shop" in doc["services"]["app"]["environment"]

    @pytest.mark.parametrize("database", ["sqlite", "none", None, "oracle"])
    def test_non_service_databases_contribute_nothing(self, database: str | None) -> None:
        assert render_compose("shop", "nestjs", database) == render_compose("shop", "nestjs", None)

    def test_pair_builds_from_backend_dir(self) -> None:
        doc = yaml.safe_load(render_compose("shop", StackPair("nuxt", "laravel"), "mysql"))
        app = doc["services"]["app"]
        assert app["build"]["context"] == "./backend"
        assert app["ports"] == ["8000:8000"]
        assert app["volumes"] == ["./backend:/var/www"]

    def test_node_stacks_keep_container_node_modules(self) -> None:
        doc = yaml.safe_load(render_compose("shop", "express", None))
        assert doc["services"]["app"]["volumes"] == [".:/app", "/app/node_modules"]

    def test_keys_keep_insertion_order(self) -> None:
        text = render_compose("shop", "nestjs", "postgresql")
        assert text.index("services:") < text.index("volumes:\n  postgres_data")
        assert text.index("  app:") < text.index("  postgres:")


class TestScaffoldFiles:

    def test_go_files(self) -> None:
        files = scaffold_files("go")
        assert set(files) == {"main.go", "go.mod"}
        assert "package main" in files["main.go"]

    @pytest.mark.parametrize("stack", ["nuxt", "flutter", "unknown", None])
    def test_unknown_stack_has_no_files(self, stack: str | None) -> None:
        assert scaffold_files(stack) == {}

    def test_returns_fresh_copy(self) -> None:
        files = scaffold_files("python")
        files["main.py"] = "mutated"
        files["extra.py"] = ""
        assert scaffold_files("python")["main.py"] != "mutated"
        assert "extra.py" not in scaffold_files("python")

    def test_pair_prefixes_each_side(self) -> None:
        files = scaffold_files(StackPair("react", "express"))
        assert "frontend/package.json" in files
        assert "backend/index.js" in files
        assert "backend/package.json" in files
        assert not any(path.startswith("/") for path in files)
