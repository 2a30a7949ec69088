"""Data model for a single scaffolding run."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_NAME_REQUIRED = "Project name is required"


class Language(str, Enum):
    """Language variant; the value is the Vite ``--template`` flag."""

    JAVASCRIPT = "react"
    TYPESCRIPT = "react-ts"

    @property
    def label(self) -> str:
        return "TypeScript" if self is Language.TYPESCRIPT else "JavaScript"

    @property
    def is_typescript(self) -> bool:
        return self is Language.TYPESCRIPT

    @property
    def app_extension(self) -> str:
        """File extension of the application entry point."""
        return "tsx" if self.is_typescript else "jsx"


class TemplateKey(str, Enum):
    """UI templates offered for ``src/App.<ext>``."""

    BASIC = "basic"
    DASHBOARD = "dashboard"
    LANDING = "landing"
    ECOMMERCE = "ecommerce"
    BLOG = "blog"

    @property
    def label(self) -> str:
        return TEMPLATE_LABELS[self]


TEMPLATE_LABELS: dict[TemplateKey, str] = {
    TemplateKey.BASIC: "Basic",
    TemplateKey.DASHBOARD: "Dashboard",
    TemplateKey.LANDING: "Landing Page",
    TemplateKey.ECOMMERCE: "E-commerce",
    TemplateKey.BLOG: "Blog",
}


class RunRequest(BaseModel):
    """Answers gathered from the operator for one run."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory name of the new project")
    language: Language = Field(default=Language.JAVASCRIPT)
    template: TemplateKey = Field(default=TemplateKey.BASIC)

    @field_validator("project_name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError(PROJECT_NAME_REQUIRED)
        return value

    def project_path(self, cwd: str | Path | None = None) -> Path:
        """Return ``cwd / project_name`` (``cwd`` defaults to the process CWD)."""
        base = Path(cwd) if cwd is not None else Path.cwd()
        return base / self.project_name
