"""Execution of external commands such as ``git`` and the package manager."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from .errors import SubprocessFailureError

__all__ = ["CommandRunner", "SubprocessRunner", "check_call", "COMMAND_NOT_FOUND"]


LOGGER = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


class CommandRunner(ABC):
    """Capability used by the scaffolder to run external programs."""

    @abstractmethod
    def run(self, args: Sequence[str], *, cwd: Path, quiet: bool = False) -> int:
        """Run ``args`` inside ``cwd`` and return the exit status.

        When ``quiet`` is ``False`` the command shares the caller's standard
        streams. Quiet runs discard all output and are used for probes.
        """


class SubprocessRunner(CommandRunner):
    """Run commands with :func:`subprocess.run`, blocking until they exit."""

    def run(self, args: Sequence[str], *, cwd: Path, quiet: bool = False) -> int:
        command = [str(arg) for arg in args]
        LOGGER.debug("Running %s in %s", " ".join(command), cwd)
        stream = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                stdin=stream,
                stdout=stream,
                stderr=stream,
                check=False,
            )
        except FileNotFoundError:
            LOGGER.debug("Executable %s was not found on PATH", command[0])
            return COMMAND_NOT_FOUND
        return result.returncode


def check_call(runner: CommandRunner, args: Sequence[str], *, cwd: Path) -> None:
    """Run ``args`` and raise :class:`SubprocessFailureError` on failure."""

    returncode = runner.run(args, cwd=cwd)
    if returncode != 0:
        raise SubprocessFailureError(args, returncode)
