"""Tailwind, PostCSS and stylesheet configuration files.

The three files are written with fixed content, replacing whatever the Vite
skeleton shipped. Writing them again produces identical files.
"""

from __future__ import annotations

from pathlib import Path

from create_react_daisy.utils import write_text

DAISYUI_THEMES: tuple[str, ...] = (
    "light",
    "dark",
    "cupcake",
    "bumblebee",
    "emerald",
    "corporate",
    "synthwave",
    "retro",
    "cyberpunk",
)

CONTENT_GLOBS: tuple[str, ...] = (
    "./index.html",
    "./src/**/*.{js,ts,jsx,tsx}",
)

TAILWIND_LAYERS: tuple[str, ...] = ("base", "components", "utilities")


def tailwind_config() -> str:
    """Contents of ``tailwind.config.js``."""
    content = "\n".join(f'    "{glob}",' for glob in CONTENT_GLOBS)
    themes = ", ".join(f'"{theme}"' for theme in DAISYUI_THEMES)
    return (
        "/** @type {import('tailwindcss').Config} */\n"
        "export default {\n"
        "  content: [\n"
        f"{content}\n"
        "  ],\n"
        "  theme: {\n"
        "    extend: {},\n"
        "  },\n"
        '  plugins: [require("daisyui")],\n'
        "  daisyui: {\n"
        f"    themes: [{themes}],\n"
        "  },\n"
        "}\n"
    )


def postcss_config() -> str:
    """Contents of ``postcss.config.js``."""
    return (
        "export default {\n"
        "  plugins: {\n"
        "    tailwindcss: {},\n"
        "    autoprefixer: {},\n"
        "  },\n"
        "}\n"
    )


def index_css() -> str:
    """Contents of ``src/index.css``; layer order matters to the cascade."""
    return "".join(f"@tailwind {layer};\n" for layer in TAILWIND_LAYERS)


def config_files(project_path: str | Path) -> dict[Path, str]:
    """Map each generated config path to its content."""
    root = Path(project_path)
    return {
        root / "tailwind.config.js": tailwind_config(),
        root / "postcss.config.js": postcss_config(),
        root / "src" / "index.css": index_css(),
    }


def write_configs(project_path: str | Path) -> list[Path]:
    """Write the three config files and return their paths in write order.

    Raises:
        FilesystemFailure: If any file cannot be written.
    """
    return [write_text(path, content) for path, content in config_files(project_path).items()]
