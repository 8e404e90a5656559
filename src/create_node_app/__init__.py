"""Create new projects from git template repositories.

The package clones a template into a fresh directory, renames the package
declared in its ``package.json``, installs its dependencies and starts a new
git history. It can be used programmatically through
:class:`ProjectScaffolder` or via the ``create-node-app`` command.

Public names are imported on first access so that the command line entry
point can check the interpreter version before any module that needs a
recent Python is loaded.
"""

from __future__ import annotations

from importlib import import_module

_EXPORTS = {
    "CommandRunner": "runner",
    "CreateAppError": "errors",
    "DirectoryExistsError": "errors",
    "InvalidNameError": "errors",
    "Invocation": "config",
    "ManifestRewriteError": "errors",
    "Outcome": "scaffold",
    "PackageManager": "probe",
    "ProjectScaffolder": "scaffold",
    "RepoReinitError": "errors",
    "ScaffoldContext": "config",
    "ScaffoldResult": "scaffold",
    "ScratchDirectoryError": "errors",
    "SubprocessFailureError": "errors",
    "SubprocessRunner": "runner",
    "UnsupportedRuntimeError": "errors",
}

__all__ = sorted(_EXPORTS)

__version__ = "0.1.0"


def __getattr__(name: str):
    try:
        module = _EXPORTS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
    return getattr(import_module(f".{module}", __name__), name)
