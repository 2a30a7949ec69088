"""Main scaffolding orchestrator.

Takes a ``RunRequest`` and produces a React + Vite project wired for
Tailwind CSS and DaisyUI. Steps run strictly in sequence; the first failure
propagates and nothing after it runs.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from create_react_daisy.config import ScaffoldConfig
from create_react_daisy.errors import SubprocessFailure
from create_react_daisy.models import RunRequest
from create_react_daisy.reporter import ProgressReporter
from create_react_daisy.scaffolder.config_writer import write_configs
from create_react_daisy.scaffolder.initializer import ProjectInitializer
from create_react_daisy.scaffolder.templates import app_path, write_app


class ProjectGenerator:
    """Runs one scaffolding request end to end.

    The sequence is: create directory, ``<pm> create vite``, ``<pm> install``,
    add the styling dev dependencies, write the Tailwind/PostCSS/CSS files,
    and write ``src/App.<jsx|tsx>`` from the chosen template.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        reporter: ProgressReporter | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.reporter = reporter or ProgressReporter(self.config)
        self.initializer = ProjectInitializer(self.config)

    # -- Public API --------------------------------------------------------

    async def generate(self, request: RunRequest) -> Path:
        """Generate the project described by *request*.

        Returns:
            Path to the generated project root.

        Raises:
            SubprocessFailure: An external command exited non-zero.
            FilesystemFailure: A directory or file could not be written.
            UnknownTemplateError: The template key has no catalog entry.
        """
        project_path = request.project_path(self.config.cwd)
        self.reporter.start(request, project_path)

        # 1. Create the project directory
        existed = project_path.exists()
        self.initializer.ensure_directory(project_path)

        try:
            # 2-4. External tools
            await self._run_external_steps(request, project_path)
        except SubprocessFailure:
            # only a directory this run created is removed
            if self.config.cleanup_on_failure and not existed:
                self._cleanup(project_path)
            raise

        # 5. Tailwind / PostCSS / index.css
        self.reporter.step("Writing Tailwind CSS and PostCSS configuration...")
        write_configs(project_path)

        # 6. Application entry point
        target = app_path(project_path, request.language)
        self.reporter.step(
            f"Writing {request.template.label} template to src/{target.name}..."
        )
        write_app(project_path, request.template, request.language)

        self.reporter.success(request, project_path)
        return project_path

    # -- Steps -------------------------------------------------------------

    async def _run_external_steps(self, request: RunRequest, project_path: Path) -> None:
        self.reporter.step("Initializing project with Vite...")
        await self.initializer.scaffold_base(request.project_name, request.language)

        self.reporter.step("Installing dependencies...")
        await self.initializer.install_base_dependencies(project_path)

        self.reporter.step("Installing Tailwind CSS and DaisyUI...")
        await self.initializer.install_styling_deps(project_path)

    def _cleanup(self, project_path: Path) -> None:
        """Best-effort removal of a partially created project."""
        self.reporter.warning(f"Removing partially created project at {project_path}")
        shutil.rmtree(project_path, ignore_errors=True)
