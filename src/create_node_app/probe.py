"""Read-only probes of the environment the tool runs in."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Sequence

from .errors import UnsupportedRuntimeError
from .runner import CommandRunner

__all__ = ["MINIMUM_PYTHON", "PackageManager", "check_runtime", "detect_package_manager"]


LOGGER = logging.getLogger(__name__)

MINIMUM_PYTHON = (3, 10)

YARN_LOCKFILE = "yarn.lock"


class PackageManager(str, Enum):
    """Package managers able to install the template's dependencies."""

    NPM = "npm"
    YARN = "yarnpkg"

    @property
    def install_command(self) -> tuple[str, ...]:
        return (self.value, "install")

    @property
    def display_command(self) -> str:
        """Name shown to the user in the next-step instructions."""

        return "yarn" if self is PackageManager.YARN else "npm"

    @property
    def run_command(self) -> str:
        return "yarn" if self is PackageManager.YARN else "npm run"


def check_runtime(
    version_info: Sequence[int] | None = None,
    minimum: tuple[int, int] = MINIMUM_PYTHON,
) -> None:
    """Refuse to continue on interpreters older than ``minimum``."""

    current = tuple(version_info if version_info is not None else sys.version_info)[:2]
    if current < minimum:
        found = ".".join(str(part) for part in current)
        required = ".".join(str(part) for part in minimum)
        raise UnsupportedRuntimeError(
            f"You are using Python {found}, which is not supported by create-node-app.\n\n"
            f"Please update to Python {required} or higher."
        )


def detect_package_manager(cwd: Path, runner: CommandRunner) -> PackageManager:
    """Choose yarn when a lockfile or a working binary is present, npm otherwise."""

    if (cwd / YARN_LOCKFILE).is_file():
        LOGGER.debug("Found %s in %s, using yarn", YARN_LOCKFILE, cwd)
        return PackageManager.YARN

    try:
        returncode = runner.run([PackageManager.YARN.value, "--version"], cwd=cwd, quiet=True)
    except OSError as exc:
        LOGGER.debug("Could not probe yarnpkg: %s", exc)
        returncode = None
    if returncode == 0:
        LOGGER.debug("yarnpkg is available, using yarn")
        return PackageManager.YARN

    LOGGER.debug("Falling back to npm")
    return PackageManager.NPM
