"""Command line interface for create-node-app."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from . import __version__
from .config import PROGRAM_NAME, Invocation, ScaffoldContext
from .errors import CreateAppError
from .runner import CommandRunner
from .scaffold import Outcome, ProjectScaffolder, ScaffoldResult

LOGGER = logging.getLogger(__name__)

PACKAGE_LOGGER = "create_node_app"


def _attach_log_handler(verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s <project-directory> <template-url> [options]",
        description="Create a new project from a git template repository",
        epilog="Only <project-directory> is required.",
    )
    parser.add_argument("project_directory", metavar="project-directory", help="Name of the project to create")
    parser.add_argument("template_url", metavar="template-url", help="Git repository cloned as the template")
    parser.add_argument("--verbose", action="store_true", help="print additional logs")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_summary(result: ScaffoldResult) -> str:
    """Return the next-step instructions printed after a run."""

    command = result.package_manager.display_command
    run = result.package_manager.run_command
    lines = [
        "",
        f"Success! Created {result.name} at {result.project_path}",
        "Inside that directory, you can run several commands:",
        "",
        f"  {command} dev",
        "    Starts the App development servers.",
        "",
        f"  {run} build",
        "    Containerizes and build the app.",
        "",
        f"  {command} test",
        "    Starts the test runner.",
        "",
        f"  {run} eject-www",
        "    Removes the Create React App tools and copies build dependencies,",
        "    configuration files and scripts into the app directory. If you do",
        "    this, you can't go back!",
        "",
        "We suggest that you begin by typing:",
        "",
        f"  cd {result.project_path.name}",
        f"  {command} start",
        "",
    ]
    if result.outcome is Outcome.PARTIALLY_COMPLETED:
        lines.append(f"Finished with {len(result.warnings)} warning(s), see the messages above.")
        lines.append("")
    lines.append("Happy hacking!")
    return "\n".join(lines)


def main(
    argv: Sequence[str] | None = None,
    *,
    runner: CommandRunner | None = None,
    context: ScaffoldContext | None = None,
) -> int:
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    try:
        invocation = Invocation(
            target_name=args.project_directory,
            template_source=args.template_url,
            verbose=args.verbose,
        )
    except ValidationError:
        parser.error("template-url must not be empty")

    handler = _attach_log_handler(invocation.verbose)
    try:
        if unknown:
            LOGGER.debug("Ignoring unknown options: %s", " ".join(unknown))
        scaffolder = ProjectScaffolder(context or ScaffoldContext.from_environment(), runner)
        try:
            result = scaffolder.create(invocation)
        except CreateAppError as exc:
            LOGGER.error("%s", exc)
            return exc.exit_code
    finally:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)

    print(format_summary(result))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
