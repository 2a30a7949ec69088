"""Exception hierarchy for the scaffolder.

Every failure is fatal to the run. The CLI catches :class:`ScaffoldError`,
reports it, and exits with status 1.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure that aborts a scaffolding run."""


class ScaffoldCancelled(ScaffoldError):
    """Raised when the operator aborts the prompt sequence."""

    def __init__(self, message: str = "Project creation cancelled") -> None:
        super().__init__(message)


class SubprocessFailure(ScaffoldError):
    """Raised when an external command exits with a non-zero code."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed (exit {returncode}): {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class FilesystemFailure(ScaffoldError):
    """Raised when a directory cannot be created or a file cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not write {self.path}: {reason}")


class UnknownTemplateError(ScaffoldError):
    """Raised when a template key has no entry in the catalog.

    This indicates the prompt choices and the catalog drifted apart, not an
    operator mistake.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown template: {key}")
