"""Shared pytest fixtures for the create-react-daisy test suite.

Provides reusable fixtures for:
- Scaffold configuration rooted in a temporary directory
- Quiet reporters that record Rich output
- A fake package manager standing in for ``run_command``
- Scripted prompt answers
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from create_react_daisy.config import ScaffoldConfig
from create_react_daisy.models import Language, RunRequest, TemplateKey
from create_react_daisy.reporter import ProgressReporter


# ---------------------------------------------------------------------------
# Configuration & requests
# ---------------------------------------------------------------------------

@pytest.fixture
def scaffold_config(tmp_path: Path) -> ScaffoldConfig:
    """npm configuration whose working directory is ``tmp_path``."""
    return ScaffoldConfig(cwd=tmp_path)


@pytest.fixture
def ts_dashboard_request() -> RunRequest:
    return RunRequest(
        project_name="demo",
        language=Language.TYPESCRIPT,
        template=TemplateKey.DASHBOARD,
    )


@pytest.fixture
def js_basic_request() -> RunRequest:
    return RunRequest(project_name="demo")


# ---------------------------------------------------------------------------
# Output capture
# ---------------------------------------------------------------------------

def _recording_console() -> Console:
    return Console(file=io.StringIO(), width=300, color_system=None, force_terminal=False)


@pytest.fixture
def reporter(scaffold_config: ScaffoldConfig) -> ProgressReporter:
    """Reporter writing to in-memory consoles (``.console`` and ``.err_console``)."""
    return ProgressReporter(
        scaffold_config,
        console=_recording_console(),
        err_console=_recording_console(),
    )


# ---------------------------------------------------------------------------
# Fake package manager
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_package_manager():
    """Factory for an ``AsyncMock`` replacing ``run_command``.

    The fake behaves like ``npm create vite`` by laying down a minimal
    skeleton (``src/App.jsx`` and ``src/index.css``) in ``cwd / <name>``.
    Pass ``fail_on`` to make the first command containing that argument exit
    with ``returncode``.

    Usage:
        def test_run(fake_package_manager):
            fake = fake_package_manager(fail_on="install")
            with patch("create_react_daisy.scaffolder.initializer.run_command", fake):
                ...
    """
    def factory(fail_on: str | None = None, returncode: int = 1) -> AsyncMock:
        async def _run(cmd: list[str], cwd: Any = None, **kwargs: Any) -> tuple[int, str, str]:
            if fail_on is not None and fail_on in cmd:
                return returncode, "", ""
            if "create" in cmd:
                name = cmd[cmd.index("create") + 2]
                src = Path(cwd) / name / "src"
                src.mkdir(parents=True, exist_ok=True)
                (src / "App.jsx").write_text("// vite default\n", encoding="utf-8")
                (src / "index.css").write_text(":root {}\n", encoding="utf-8")
            return 0, "", ""

        return AsyncMock(side_effect=_run)

    return factory


# ---------------------------------------------------------------------------
# Prompt answers
# ---------------------------------------------------------------------------

@pytest.fixture
def scripted_answers():
    """Factory for an ``ask`` replacement returning fixed answers."""
    def factory(**answers: Any):
        calls: list[list[Any]] = []

        def _ask(questions):
            calls.append(list(questions))
            return dict(answers)

        _ask.calls = calls
        return _ask

    return factory
