"""Create a project from a remote template repository."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import Invocation, ScaffoldContext
from .errors import (
    CreateAppError,
    DirectoryExistsError,
    ManifestRewriteError,
    RepoReinitError,
    ScratchDirectoryError,
    SubprocessFailureError,
)
from .manifest import rename_manifest
from .naming import check_project_name, project_directory_name
from .probe import PackageManager, detect_package_manager
from .runner import CommandRunner, SubprocessRunner, check_call

__all__ = ["Outcome", "ProjectScaffolder", "ScaffoldResult"]


LOGGER = logging.getLogger(__name__)

VCS_METADATA = ".git"


class Outcome(str, Enum):
    COMPLETED = "completed"
    PARTIALLY_COMPLETED = "partially-completed"


@dataclass(slots=True)
class ScaffoldResult:
    """Summary of a finished run."""

    name: str
    project_path: Path
    package_manager: PackageManager
    warnings: list[CreateAppError] = field(default_factory=list)

    @property
    def outcome(self) -> Outcome:
        return Outcome.PARTIALLY_COMPLETED if self.warnings else Outcome.COMPLETED


class ProjectScaffolder:
    """Clone a template into a new directory and turn it into a fresh project.

    Every step blocks until it has finished. Fatal errors propagate to the
    caller and leave whatever was already written on disk in place.
    """

    def __init__(self, context: ScaffoldContext, runner: CommandRunner | None = None) -> None:
        self.context = context
        self.runner = runner or SubprocessRunner()

    def create(self, invocation: Invocation) -> ScaffoldResult:
        name = check_project_name(invocation.target_name, self.context.program_name)
        package_manager = detect_package_manager(self.context.cwd, self.runner)
        project_path = self.context.cwd / project_directory_name(name)

        self.check_scratch_directory(project_path)

        LOGGER.info("Template repository: %s", invocation.template_source)
        self.create_project_directory(project_path)
        self.reset_scratch_directory()
        self.clone_template(invocation.template_source, project_path)
        self.copy_template(project_path)

        result = ScaffoldResult(name=name, project_path=project_path, package_manager=package_manager)

        try:
            rename_manifest(project_path, name, filename=self.context.manifest_name)
        except ManifestRewriteError as exc:
            LOGGER.error("%s", exc)
            result.warnings.append(exc)

        self.install_dependencies(project_path, package_manager)

        try:
            self.reinitialize_repository(project_path)
        except RepoReinitError as exc:
            LOGGER.error("%s", exc)
            result.warnings.append(exc)

        return result

    def create_project_directory(self, project_path: Path) -> None:
        try:
            project_path.mkdir()
        except FileExistsError as exc:
            raise DirectoryExistsError(project_path) from exc

    def check_scratch_directory(self, project_path: Path) -> None:
        """Reject a staging directory whose removal or copy would touch kept files.

        The staging directory may not be, or contain, the working directory,
        and may neither contain nor lie inside the project directory.
        """

        scratch_dir = self.context.scratch_dir.resolve()
        cwd = self.context.cwd.resolve()
        project_path = project_path.resolve()
        if scratch_dir == cwd or scratch_dir in cwd.parents:
            raise ScratchDirectoryError(scratch_dir, cwd)
        if scratch_dir == project_path or scratch_dir in project_path.parents or project_path in scratch_dir.parents:
            raise ScratchDirectoryError(scratch_dir, project_path)

    def reset_scratch_directory(self) -> None:
        scratch_dir = self.context.scratch_dir
        if scratch_dir.exists():
            shutil.rmtree(scratch_dir)
        scratch_dir.mkdir(parents=True)

    def clone_template(self, template_source: str, project_path: Path) -> None:
        check_call(
            self.runner,
            ["git", "clone", "--", template_source, str(self.context.scratch_dir)],
            cwd=project_path,
        )

    def copy_template(self, project_path: Path) -> None:
        """Copy the staged clone, including hidden files, into ``project_path``."""

        shutil.copytree(self.context.scratch_dir, project_path, symlinks=True, dirs_exist_ok=True)

    def install_dependencies(self, project_path: Path, package_manager: PackageManager) -> None:
        LOGGER.info("Installing packages. This might take a couple of minutes.")
        check_call(self.runner, package_manager.install_command, cwd=project_path)

    def reinitialize_repository(self, project_path: Path) -> None:
        """Replace the template's history with a single initial commit."""

        try:
            metadata = project_path / VCS_METADATA
            if metadata.is_dir() and not metadata.is_symlink():
                shutil.rmtree(metadata)
            elif metadata.exists() or metadata.is_symlink():
                metadata.unlink()

            for command in (
                ["git", "init"],
                ["git", "add", "."],
                ["git", "commit", "-m", self.context.commit_message],
            ):
                check_call(self.runner, command, cwd=project_path)
        except (OSError, SubprocessFailureError) as exc:
            raise RepoReinitError(f"Could not initialise a fresh git repository in {project_path}: {exc}") from exc
