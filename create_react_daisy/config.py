"""Scaffolder configuration.

Typed settings for the external tools the scaffolder drives. All settings use
Pydantic v2 models so they are validated at construction time and can be
overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from create_react_daisy.models import Language

PackageManager = Literal["npm", "pnpm", "yarn"]

DEFAULT_STYLING_PACKAGES: list[str] = ["tailwindcss", "postcss", "autoprefixer", "daisyui"]

_TRUTHY = {"1", "true", "yes", "on"}


class ScaffoldConfig(BaseModel):
    """Global scaffolder configuration.

    Instances are created once by the CLI entry point and passed to
    ``ProjectGenerator``.
    """

    package_manager: PackageManager = Field(default="npm")
    vite_package: str = Field(
        default="vite@latest", description="Package handed to `<pm> create`"
    )
    styling_packages: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STYLING_PACKAGES),
        min_length=1,
        description="Development dependencies added after the base install",
    )
    cleanup_on_failure: bool = Field(
        default=False,
        description="Remove the project directory when an external command fails",
    )
    cwd: Path = Field(default_factory=Path.cwd)

    # ------------------------------------------------------------------
    # Command builders
    # ------------------------------------------------------------------

    def create_command(self, project_name: str, language: Language) -> list[str]:
        """Command that lays down the Vite project skeleton.

        npm needs a ``--`` separator so the template flag reaches Vite.
        """
        if self.package_manager == "npm":
            return [
                "npm", "create", self.vite_package, project_name,
                "--", "--template", language.value,
            ]
        package = self.vite_package.split("@", 1)[0] or self.vite_package
        return [
            self.package_manager, "create", package, project_name,
            "--template", language.value,
        ]

    def install_command(self) -> list[str]:
        """Command that installs the base dependencies."""
        return [self.package_manager, "install"]

    def add_dev_command(self, packages: list[str] | None = None) -> list[str]:
        """Command that adds *packages* (default: styling packages) as dev deps."""
        packages = list(packages) if packages is not None else list(self.styling_packages)
        if self.package_manager == "npm":
            return ["npm", "install", "-D", *packages]
        return [self.package_manager, "add", "-D", *packages]

    def run_script_command(self, script: str) -> str:
        """Shell text an operator types to run a ``package.json`` script."""
        return f"{self.package_manager} run {script}"

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            CRD_PACKAGE_MANAGER, CRD_VITE_PACKAGE, CRD_STYLING_PACKAGES,
            CRD_CLEANUP_ON_FAILURE.

        Keyword *overrides* win over the environment; ``None`` values are
        ignored so CLI flags that were not given fall through.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CRD_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CRD_PACKAGE_MANAGER"].strip()
        if os.environ.get("CRD_VITE_PACKAGE"):
            kwargs["vite_package"] = os.environ["CRD_VITE_PACKAGE"].strip()
        if os.environ.get("CRD_STYLING_PACKAGES"):
            kwargs["styling_packages"] = [
                p.strip() for p in os.environ["CRD_STYLING_PACKAGES"].split(",") if p.strip()
            ]
        if os.environ.get("CRD_CLEANUP_ON_FAILURE"):
            kwargs["cleanup_on_failure"] = (
                os.environ["CRD_CLEANUP_ON_FAILURE"].strip().lower() in _TRUTHY
            )

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
