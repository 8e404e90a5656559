"""Configuration values shared by the command line interface and the scaffolder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_COMMIT_MESSAGE",
    "MANIFEST_FILENAME",
    "PROGRAM_NAME",
    "SCRATCH_DIR_ENV",
    "Invocation",
    "ScaffoldContext",
]


PROGRAM_NAME = "create-node-app"
MANIFEST_FILENAME = "package.json"
DEFAULT_COMMIT_MESSAGE = "initial commit"
SCRATCH_DIR_ENV = "CREATE_NODE_APP_SCRATCH_DIR"

_PACKAGE_DIR = Path(__file__).resolve().parent


class Invocation(BaseModel):
    """Arguments of a single run, fixed once the command line is parsed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_name: str = Field(..., description="Name of the project and of its directory.")
    template_source: str = Field(..., min_length=1, description="Repository URL or path cloned as the template.")
    verbose: bool = Field(False, description="Emit debug logging while scaffolding.")


@dataclass(slots=True)
class ScaffoldContext:
    """Process level state resolved once and passed through the pipeline.

    Attributes
    ----------
    cwd:
        Directory in which the project directory is created.
    scratch_dir:
        Staging directory the template is cloned into. It is wiped on every
        run.
    program_name:
        The tool's own package name; projects may not reuse it.
    manifest_name:
        File name of the package manifest inside the template.
    commit_message:
        Message of the commit that starts the new project's history.
    """

    cwd: Path
    scratch_dir: Path
    program_name: str = PROGRAM_NAME
    manifest_name: str = MANIFEST_FILENAME
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    @classmethod
    def from_environment(
        cls,
        *,
        cwd: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ScaffoldContext":
        """Build a context from the working directory and environment variables."""

        environ = os.environ if environ is None else environ
        working_dir = Path(cwd) if cwd is not None else Path.cwd()

        override = environ.get(SCRATCH_DIR_ENV, "").strip()
        scratch_dir = Path(override).expanduser() if override else _PACKAGE_DIR / "template"

        return cls(cwd=working_dir.resolve(), scratch_dir=scratch_dir.resolve())
