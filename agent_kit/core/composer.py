"""Workspace Composer: materializes an agent workspace from a configuration.

``initialize`` runs a full ``init`` in a fixed order:

(a) optional codebase download (one fetch, or frontend then backend)
(b) IDE composition (skeleton, entry file, shared subtrees, skills)
(c) Dockerfile, compose file and scaffolds for containerized setups
(d) persisted configuration
(e) context file

Downloads complete before any template is copied, so stack-specific rewrites
made by the fetcher are never clobbered. A failure in one optional step is
recorded in the report and composition continues; an unexpected exception
marks the whole report failed. Nothing written before the failure is rolled
back.
"""

from __future__ import annotations

from pathlib import Path

from agent_kit.core.catalog import (
    DEVOPS_PROJECT_TYPES,
    DEVOPS_SKILLS,
    PROJECT_STANDARDS_SKILL,
    StackPair,
    role_skill,
)
from agent_kit.core.codegen import BACKEND_DIR, FRONTEND_DIR, Codegen
from agent_kit.core.context_file import render_context_file
from agent_kit.core.fetcher import CodebaseFetcher
from agent_kit.core.ide_targets import REPLACED_SUBTREES, get_ide_target
from agent_kit.core.project_config import (
    ProjectConfig,
    config_from_persisted,
    load_config,
    save_config,
    utc_now,
    write_persisted,
)
from agent_kit.core.results import CompositionReport, StepResult
from agent_kit.core.settings import CONFIG_FILENAME, slugify_project_name
from agent_kit.core.stack_resolver import StackResolver, resolve_stack_skills
from agent_kit.helpers.fs_ops import (
    copy_file,
    copy_tree,
    merge_tree,
    replace_tree,
    write_if_missing,
)
from agent_kit.helpers.helpers_logging import (
    print_info,
    print_skip,
    print_success,
    print_warning,
)

DOCKERFILE_NAME = "Dockerfile"
COMPOSE_FILENAME = "docker-compose.yml"


def announce(result: StepResult) -> StepResult:
    """Print one step result in the console style of the CLI."""
    if result.skipped:
        print_skip(f"Skipped: {result.message}")
    elif result.ok:
        print_success(result.message or result.step)
    else:
        print_warning(f"{result.step} failed: {result.message}")
    return result


class WorkspaceComposer:
    """Composes one workspace root from a template catalog."""

    def __init__(
        self,
        templates_root: Path,
        workspace_root: Path,
        resolver: StackResolver | None = None,
        codegen: Codegen | None = None,
        fetcher: CodebaseFetcher | None = None,
    ) -> None:
        self.templates_root = templates_root
        self.workspace_root = workspace_root
        self.resolver = resolver or StackResolver()
        self.codegen = codegen or Codegen()
        self.fetcher = fetcher or CodebaseFetcher()

    # ------------------------------------------------------------------
    # IDE composition
    # ------------------------------------------------------------------

    def skill_names(self, config: ProjectConfig) -> list[str]:
        """Skill bundles for ``config`` in copy order, without duplicates."""
        names = [PROJECT_STANDARDS_SKILL]
        names.extend(role_skill(role) for role in config.roles)
        names.extend(resolve_stack_skills(self.resolver, config.stack))
        if config.project_type in DEVOPS_PROJECT_TYPES:
            names.extend(DEVOPS_SKILLS)

        ordered: list[str] = []
        for name in names:
            if name not in ordered:
                ordered.append(name)
        return ordered

    def compose_ide(self, config: ProjectConfig) -> list[StepResult]:
        """Materialize the IDE root, entry file, shared subtrees and skills."""
        target = get_ide_target(config.ide)
        ide_root = self.workspace_root / target.root

        print_info(f"Setting up {config.ide} workspace in {target.root}/")
        for rel_dir in target.skeleton():
            (self.workspace_root / rel_dir).mkdir(parents=True, exist_ok=True)

        results: list[StepResult] = []
        if target.prepackaged_tree:
            results.append(announce(merge_tree(
                self.templates_root / target.prepackaged_tree,
                ide_root,
                target.prepackaged_tree,
            )))

        results.append(announce(copy_file(
            self.templates_root / target.entry_template,
            self.workspace_root / target.entry_destination,
            target.entry_destination,
        )))

        for subtree in REPLACED_SUBTREES:
            results.append(announce(replace_tree(
                self.templates_root / subtree,
                ide_root / subtree,
                f"{target.root}/{subtree}",
            )))

        skills_src = self.templates_root / "skills"
        skills_dest = ide_root / "skills"
        for name in self.skill_names(config):
            results.append(announce(copy_tree(
                skills_src / name,
                skills_dest / name,
                f"skills/{name}",
            )))

        return results

    # ------------------------------------------------------------------
    # init
    # ------------------------------------------------------------------

    def _fetch_targets(self, config: ProjectConfig) -> list[tuple[str, str, Path, str | None]]:
        """(side dir, stack id, target root, database) for each download."""
        stack = config.stack
        database = config.database if config.has_database else None
        if isinstance(stack, StackPair):
            return [
                (FRONTEND_DIR, stack.frontend, self.workspace_root / FRONTEND_DIR, None),
                (BACKEND_DIR, stack.backend, self.workspace_root / BACKEND_DIR, database),
            ]
        if stack is None:
            return []
        return [("", stack, self.workspace_root, database)]

    def download(self, config: ProjectConfig) -> tuple[list[StepResult], set[str]]:
        """Fetch each side sequentially; returns results and the side dirs holding a merged codebase."""
        results: list[StepResult] = []
        downloaded: set[str] = set()
        for side_dir, stack_id, target_root, database in self._fetch_targets(config):
            result = self.fetcher.fetch(
                stack_id,
                target_root,
                language_variant=config.language_variant,
                database=database,
                project_name=config.project_name,
            )
            if not result.ok and not self.fetcher.supports(stack_id):
                print_warning(f"Codebase download is not available for {stack_id}")
            results.append(result)
            if result.merged:
                downloaded.add(side_dir)
        return results, downloaded

    def write_runtime_files(
        self,
        config: ProjectConfig,
        downloaded: set[str],
    ) -> list[StepResult]:
        """Write Dockerfile and compose file, plus scaffolds for sides not downloaded."""
        stack = config.stack
        results: list[StepResult] = []

        if isinstance(stack, StackPair):
            dockerfile_rel = f"{BACKEND_DIR}/{DOCKERFILE_NAME}"
        else:
            dockerfile_rel = DOCKERFILE_NAME
        dockerfile_path = self.workspace_root / dockerfile_rel
        dockerfile_path.parent.mkdir(parents=True, exist_ok=True)
        dockerfile_path.write_text(self.codegen.render_dockerfile(stack), encoding="utf-8")
        results.append(announce(StepResult.success("dockerfile", f"Created file: {dockerfile_rel}")))

        compose_path = self.workspace_root / COMPOSE_FILENAME
        compose_path.write_text(
            self.codegen.render_compose(config.project_name, stack, config.database),
            encoding="utf-8",
        )
        results.append(announce(StepResult.success("compose", f"Created file: {COMPOSE_FILENAME}")))

        files = self.codegen.scaffold_files(stack)
        if isinstance(stack, StackPair):
            files = {
                rel_path: content
                for rel_path, content in files.items()
                if rel_path.split("/", 1)[0] not in downloaded
            }
        elif "" in downloaded:
            files = {}

        for result in write_if_missing(self.workspace_root, files, "scaffold"):
            results.append(announce(result))
        return results

    def initialize(self, config: ProjectConfig) -> CompositionReport:
        """Run a full ``init`` and return its report."""
        report = CompositionReport()
        try:
            downloaded: set[str] = set()
            if config.download_requested and config.stack is not None:
                fetch_results, downloaded = self.download(config)
                report.extend(fetch_results)

            report.extend(self.compose_ide(config))

            if config.containerized and config.stack is not None:
                report.extend(self.write_runtime_files(config, downloaded))

            config_file = save_config(self.workspace_root, config)
            report.add(announce(StepResult.success("config", f"Created file: {config_file.name}")))

            target = get_ide_target(config.ide)
            context_path = self.workspace_root / target.context_file
            context_path.parent.mkdir(parents=True, exist_ok=True)
            context_path.write_text(render_context_file(config), encoding="utf-8")
            report.add(announce(StepResult.success("context", f"Created file: {target.context_file}")))
        except Exception as e:
            report.fail(str(e))
        return report

    # ------------------------------------------------------------------
    # update
    # ------------------------------------------------------------------

    def update(self) -> CompositionReport:
        """Re-sync IDE files from ``agent-kit-skill.json``.

        Only the IDE composition runs; downloads, Dockerfiles and scaffolds
        are never touched. The persisted document is rewritten with a new
        ``updatedAt``.
        """
        report = CompositionReport()
        try:
            document = load_config(self.workspace_root)
            if document is None:
                report.fail(f"{CONFIG_FILENAME} not found. Run 'agent-kit init' first.")
                return report

            project_name = slugify_project_name(self.workspace_root.resolve().name)
            config = config_from_persisted(document, project_name=project_name)
            report.extend(self.compose_ide(config))

            document["updatedAt"] = utc_now()
            write_persisted(self.workspace_root, document)
            report.add(announce(StepResult.success("config", f"Updated file: {CONFIG_FILENAME}")))
        except Exception as e:
            report.fail(str(e))
        return report
