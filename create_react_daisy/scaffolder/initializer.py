"""External-tool steps: project directory, Vite skeleton, dependencies.

Every command inherits the operator's terminal and must exit with code 0;
anything else raises :class:`SubprocessFailure` and ends the run.
"""

from __future__ import annotations

from pathlib import Path

from create_react_daisy.config import ScaffoldConfig
from create_react_daisy.errors import SubprocessFailure
from create_react_daisy.models import Language
from create_react_daisy.utils import ensure_dir, format_command, run_command


async def _run_checked(cmd: list[str], cwd: str | Path) -> None:
    """Run *cmd* attached to the terminal; raise on a non-zero exit code."""
    returncode, _, stderr = await run_command(cmd, cwd=cwd, capture=False)
    if returncode != 0:
        raise SubprocessFailure(format_command(cmd), returncode, stderr)


class ProjectInitializer:
    """Drives the package manager for one project.

    Attributes:
        config: Package-manager settings.
    """

    def __init__(self, config: ScaffoldConfig) -> None:
        self.config = config

    def ensure_directory(self, project_path: str | Path) -> Path:
        """Create *project_path* and parents; a no-op if it already exists.

        An existing directory with unrelated content is not detected here;
        ``<pm> create vite`` reports that itself.
        """
        return ensure_dir(project_path)

    async def scaffold_base(self, project_name: str, language: Language) -> None:
        """Run ``<pm> create vite`` from the parent directory."""
        cmd = self.config.create_command(project_name, language)
        await _run_checked(cmd, cwd=self.config.cwd)

    async def install_base_dependencies(self, project_path: str | Path) -> None:
        """Run ``<pm> install`` inside the project."""
        await _run_checked(self.config.install_command(), cwd=project_path)

    async def install_styling_deps(self, project_path: str | Path) -> None:
        """Add Tailwind CSS, PostCSS, Autoprefixer and DaisyUI as dev dependencies."""
        await _run_checked(self.config.add_dev_command(), cwd=project_path)
