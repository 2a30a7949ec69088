"""Unit tests for ScaffoldConfig (create_react_daisy.config).

Tests cover:
- Defaults
- Command builders for npm, pnpm and yarn
- from_env parsing and overrides
- Validation errors for unsupported package managers
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from create_react_daisy.config import DEFAULT_STYLING_PACKAGES, ScaffoldConfig
from create_react_daisy.models import Language

pytestmark = pytest.mark.unit

_CLEAN_ENV = {
    k: v for k, v in os.environ.items() if not k.startswith("CRD_")
}


class TestDefaults:
    def test_default_values(self):
        config = ScaffoldConfig()
        assert config.package_manager == "npm"
        assert config.vite_package == "vite@latest"
        assert config.styling_packages == DEFAULT_STYLING_PACKAGES
        assert config.cleanup_on_failure is False
        assert config.cwd == Path.cwd()

    def test_styling_packages(self):
        assert set(DEFAULT_STYLING_PACKAGES) == {
            "tailwindcss", "postcss", "autoprefixer", "daisyui",
        }

    def test_styling_packages_not_shared(self):
        first = ScaffoldConfig()
        first.styling_packages.append("extra")
        assert "extra" not in ScaffoldConfig().styling_packages

    def test_invalid_package_manager(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(package_manager="bower")

    def test_empty_styling_packages_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(styling_packages=[])


class TestNpmCommands:
    def test_create_javascript(self):
        cmd = ScaffoldConfig().create_command("demo", Language.JAVASCRIPT)
        assert cmd == ["npm", "create", "vite@latest", "demo", "--", "--template", "react"]

    def test_create_typescript(self):
        cmd = ScaffoldConfig().create_command("demo", Language.TYPESCRIPT)
        assert cmd[-2:] == ["--template", "react-ts"]

    def test_install(self):
        assert ScaffoldConfig().install_command() == ["npm", "install"]

    def test_add_dev(self):
        assert ScaffoldConfig().add_dev_command() == [
            "npm", "install", "-D", "tailwindcss", "postcss", "autoprefixer", "daisyui",
        ]

    def test_add_dev_explicit_packages(self):
        assert ScaffoldConfig().add_dev_command(["a"]) == ["npm", "install", "-D", "a"]

    def test_run_script(self):
        assert ScaffoldConfig().run_script_command("dev") == "npm run dev"


class TestOtherPackageManagers:
    @pytest.mark.parametrize("pm", ["pnpm", "yarn"])
    def test_create_has_no_separator(self, pm: str):
        cmd = ScaffoldConfig(package_manager=pm).create_command("demo", Language.JAVASCRIPT)
        assert cmd == [pm, "create", "vite", "demo", "--template", "react"]

    @pytest.mark.parametrize("pm", ["pnpm", "yarn"])
    def test_add_dev_uses_add(self, pm: str):
        cmd = ScaffoldConfig(package_manager=pm).add_dev_command()
        assert cmd[:3] == [pm, "add", "-D"]

    def test_run_script(self):
        assert ScaffoldConfig(package_manager="pnpm").run_script_command("build") == "pnpm run build"


class TestFromEnv:
    def test_defaults_without_env(self):
        with patch.dict(os.environ, _CLEAN_ENV, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.package_manager == "npm"
        assert config.cleanup_on_failure is False

    def test_reads_variables(self):
        env = {
            **_CLEAN_ENV,
            "CRD_PACKAGE_MANAGER": "pnpm",
            "CRD_VITE_PACKAGE": "vite@5",
            "CRD_STYLING_PACKAGES": "tailwindcss, daisyui ,",
            "CRD_CLEANUP_ON_FAILURE": "yes",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ScaffoldConfig.from_env()
        assert config.package_manager == "pnpm"
        assert config.vite_package == "vite@5"
        assert config.styling_packages == ["tailwindcss", "daisyui"]
        assert config.cleanup_on_failure is True

    def test_cleanup_falsy(self):
        env = {**_CLEAN_ENV, "CRD_CLEANUP_ON_FAILURE": "0"}
        with patch.dict(os.environ, env, clear=True):
            assert ScaffoldConfig.from_env().cleanup_on_failure is False

    def test_overrides_win(self):
        env = {**_CLEAN_ENV, "CRD_PACKAGE_MANAGER": "pnpm"}
        with patch.dict(os.environ, env, clear=True):
            config = ScaffoldConfig.from_env(package_manager="yarn")
        assert config.package_manager == "yarn"

    def test_none_overrides_ignored(self):
        env = {**_CLEAN_ENV, "CRD_PACKAGE_MANAGER": "pnpm"}
        with patch.dict(os.environ, env, clear=True):
            config = ScaffoldConfig.from_env(package_manager=None, cleanup_on_failure=None)
        assert config.package_manager == "pnpm"

    def test_invalid_env_value(self):
        env = {**_CLEAN_ENV, "CRD_PACKAGE_MANAGER": "bower"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValidationError):
                ScaffoldConfig.from_env()
