"""CLI entry point for ``create-react-daisy``.

Usage::

    create-react-daisy
    python -m create_react_daisy --package-manager pnpm
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from create_react_daisy import __version__
from create_react_daisy.config import ScaffoldConfig
from create_react_daisy.errors import ScaffoldCancelled, ScaffoldError
from create_react_daisy.prompts import AskFn, ask, collect_run_request
from create_react_daisy.reporter import ProgressReporter
from create_react_daisy.scaffolder import ProjectGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-react-daisy",
        description="Create a React + Vite project with Tailwind CSS and DaisyUI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "All project details are asked interactively.\n\n"
            "Environment:\n"
            "  CRD_PACKAGE_MANAGER     npm, pnpm or yarn (default: npm)\n"
            "  CRD_VITE_PACKAGE        package passed to `create` (default: vite@latest)\n"
            "  CRD_STYLING_PACKAGES    comma-separated dev dependencies\n"
            "  CRD_CLEANUP_ON_FAILURE  remove the project directory if a command fails\n"
        ),
    )
    parser.add_argument(
        "--package-manager",
        choices=["npm", "pnpm", "yarn"],
        default=None,
        help="Package manager to drive (overrides CRD_PACKAGE_MANAGER)",
    )
    parser.add_argument(
        "--cleanup-on-failure",
        action="store_true",
        default=None,
        help="Remove the project directory when an external command fails",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: list[str] | None = None, ask_fn: AskFn = ask) -> int:
    """Parse *argv*, run the prompts and the generator; return the exit code."""
    args = build_parser().parse_args(argv)
    reporter = ProgressReporter()

    try:
        config = ScaffoldConfig.from_env(
            package_manager=args.package_manager,
            cleanup_on_failure=args.cleanup_on_failure,
        )
    except ValidationError as exc:
        reporter.failure(f"Invalid configuration: {exc}")
        return 1
    reporter.config = config

    try:
        request = collect_run_request(ask_fn)
    except ScaffoldCancelled:
        reporter.cancelled()
        return 1

    generator = ProjectGenerator(config, reporter)
    try:
        asyncio.run(generator.generate(request))
    except KeyboardInterrupt:
        reporter.failure("Interrupted")
        return 1
    except ScaffoldError as exc:
        reporter.failure(str(exc))
        return 1
    except Exception as exc:  # noqa: BLE001
        reporter.failure(f"{type(exc).__name__}: {exc}")
        return 1

    return 0


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
