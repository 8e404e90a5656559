"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class CreateAppError(RuntimeError):
    """Base class for every error the scaffolder reports to the user."""

    fatal = True
    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnsupportedRuntimeError(CreateAppError):
    """Raised when the interpreter is older than the supported minimum."""


class InvalidNameError(CreateAppError):
    """Raised when the requested project name cannot be used."""

    def __init__(
        self,
        name: str,
        problems: Sequence[str],
        *,
        suggestion: str | None = None,
    ) -> None:
        self.name = name
        self.problems = tuple(problems)
        self.suggestion = suggestion
        lines = [f"Cannot create a project named '{name}':"]
        lines.extend(f"  * {problem}" for problem in self.problems)
        if suggestion:
            lines.append(f"Please choose a different project name, for example '{suggestion}'.")
        else:
            lines.append("Please choose a different project name.")
        super().__init__("\n".join(lines))


class DirectoryExistsError(CreateAppError):
    """Raised when the target directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory {path} already exists, refusing to overwrite.")


class SubprocessFailureError(CreateAppError):
    """Raised when a required external command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        super().__init__(f"Command '{' '.join(self.command)}' failed with exit code {returncode}.")


class ScratchDirectoryError(CreateAppError):
    """Raised when the staging directory would overlap the project or working directory."""

    def __init__(self, scratch_dir: Path, protected: Path) -> None:
        self.scratch_dir = scratch_dir
        self.protected = protected
        super().__init__(
            f"Refusing to use {scratch_dir} as the template staging directory: "
            f"it overlaps {protected}, which would be deleted or copied into itself."
        )


class ManifestRewriteError(CreateAppError):
    """Raised when the project manifest cannot be read or parsed."""

    fatal = False


class RepoReinitError(CreateAppError):
    """Raised when the fresh version control history cannot be created."""

    fatal = False


__all__ = [
    "CreateAppError",
    "DirectoryExistsError",
    "InvalidNameError",
    "ManifestRewriteError",
    "RepoReinitError",
    "ScratchDirectoryError",
    "SubprocessFailureError",
    "UnsupportedRuntimeError",
]
