"""Static tables behind the Codegen Module.

Dockerfile recipes are single-stage and pin a base image tag per stack family.
Database services are a closed table: every supported database contributes a
service block, env assignments for ``app`` and a ``depends_on`` entry, all
derived from one ``DatabaseService`` record so the three stay consistent.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class DockerfileSpec:
    """Template values for a single-stage Dockerfile."""

    base_image: str
    steps: tuple[str, ...]
    cmd: tuple[str, ...]
    workdir: str = "/app"


@dataclass(frozen=True)
class DatabaseService:
    """Compose contribution of one database choice."""

    service: str
    image: str
    port: int
    volume: str
    data_path: str
    environment: tuple[tuple[str, str], ...] = ()
    # App env assignments; ``{project}`` is replaced with the project name
    app_environment: tuple[str, ...] = ()

    def app_env(self, project_name: str) -> list[str]:
        """Return the ``KEY=value`` entries appended to the app service."""
        return [entry.format(project=project_name) for entry in self.app_environment]

    def service_env(self, project_name: str) -> dict[str, str]:
        """Return the database container's own environment mapping."""
        return {key: value.format(project=project_name) for key, value in self.environment}


_NODE_INSTALL = ("COPY package*.json ./", "RUN npm install", "COPY . .")

DOCKERFILES: MappingProxyType[str, DockerfileSpec] = MappingProxyType({
    "nestjs": DockerfileSpec(
        base_image="node:18-alpine",
        steps=_NODE_INSTALL,
        cmd=("npm", "run", "start:dev"),
    ),
    "laravel": DockerfileSpec(
        base_image="php:8.2-fpm",
        workdir="/var/www",
        steps=(
            "RUN apt-get update && apt-get install -y \\\n"
            "    git \\\n"
            "    curl \\\n"
            "    libpng-dev \\\n"
            "    libonig-dev \\\n"
            "    libxml2-dev \\\n"
            "    zip \\\n"
            "    unzip",
            "RUN docker-php-ext-install pdo_mysql mbstring exif pcntl bcmath gd",
            "COPY --from=composer:latest /usr/bin/composer /usr/bin/composer",
        ),
        cmd=("php", "artisan", "serve", "--host=0.0.0.0", "--port=8000"),
    ),
    "go": DockerfileSpec(
        base_image="golang:1.21-alpine",
        steps=(
            "COPY go.mod ./",
            "COPY go.sum* ./",
            "RUN go mod download",
            "COPY . .",
            "RUN go build -o main .",
        ),
        cmd=("./main",),
    ),
    "python": DockerfileSpec(
        base_image="python:3.9",
        steps=(
            "COPY requirements.txt ./",
            "RUN pip install --no-cache-dir -r requirements.txt",
            "COPY . .",
        ),
        cmd=("uvicorn", "main:app", "--host", "0.0.0.0", "--port", "8000"),
    ),
    "express": DockerfileSpec(
        base_image="node:18-alpine",
        steps=_NODE_INSTALL,
        cmd=("node", "index.js"),
    ),
    "nextjs": DockerfileSpec(
        base_image="node:18-alpine",
        steps=_NODE_INSTALL,
        cmd=("npm", "run", "dev"),
    ),
    "react": DockerfileSpec(
        base_image="node:18-alpine",
        steps=_NODE_INSTALL,
        cmd=("npm", "run", "dev", "--", "--host", "0.0.0.0"),
    ),
    "vue": DockerfileSpec(
        base_image="node:18-alpine",
        steps=_NODE_INSTALL,
        cmd=("npm", "run", "dev", "--", "--host", "0.0.0.0"),
    ),
    "nuxt": DockerfileSpec(
        base_image="node:18-alpine",
        steps=_NODE_INSTALL,
        cmd=("npm", "run", "dev", "--", "--host", "0.0.0.0"),
    ),
    "angular": DockerfileSpec(
        base_image="node:18-alpine",
        steps=_NODE_INSTALL,
        cmd=("npm", "start", "--", "--host", "0.0.0.0", "--disable-host-check"),
    ),
})

DEFAULT_DOCKERFILE_STACK = "nestjs"

STACK_PORTS: MappingProxyType[str, int] = MappingProxyType({
    "nestjs": 3000,
    "laravel": 8000,
    "go": 8080,
    "python": 8000,
    "express": 3000,
    "nextjs": 3000,
    "vue": 5173,
    "nuxt": 3000,
    "react": 5173,
    "angular": 4200,
})

DEFAULT_APP_PORT = 3000

# Fixed development credentials, shared with the .env generator
DB_USER = "user"
DB_PASSWORD = "password"

DATABASE_SERVICES: MappingProxyType[str, DatabaseService] = MappingProxyType({
    "postgresql": DatabaseService(
        service="postgres",
        image="postgres:15-alpine",
        port=5432,
        volume="postgres_data",
        data_path="/var/lib/postgresql/data",
        environment=(
            ("POSTGRES_USER", DB_USER),
            ("POSTGRES_PASSWORD", DB_PASSWORD),
            ("POSTGRES_DB", "{project}"),
        ),
        app_environment=(
            "DB_HOST=postgres",
            "DB_PORT=5432",
            f"DB_USER={DB_USER}",
            f"DB_PASSWORD={DB_PASSWORD}",
            "DB_NAME={project}",
        ),
    ),
    "mysql": DatabaseService(
        service="mysql",
        image="mysql:8.0",
        port=3306,
        volume="mysql_data",
        data_path="/var/lib/mysql",
        environment=(
            ("MYSQL_ROOT_PASSWORD", DB_PASSWORD),
            ("MYSQL_DATABASE", "{project}"),
            ("MYSQL_USER", DB_USER),
            ("MYSQL_PASSWORD", DB_PASSWORD),
        ),
        app_environment=(
            "DB_HOST=mysql",
            "DB_PORT=3306",
            f"DB_USER={DB_USER}",
            f"DB_PASSWORD={DB_PASSWORD}",
            "DB_DATABASE={project}",
        ),
    ),
    "mongodb": DatabaseService(
        service="mongo",
        image="mongo:latest",
        port=27017,
        volume="mongo_data",
        data_path="/data/db",
        app_environment=("MONGO_URI=mongodb://mongo:27017/{project}",),
    ),
})
