"""Console entry point that checks the interpreter before loading the CLI.

Only modules that import on any Python 3 release are loaded here; the
argument parser and scaffolder are imported once the version check passes.
"""

from __future__ import annotations

import sys

from .errors import UnsupportedRuntimeError
from .probe import check_runtime


def main(argv=None) -> int:
    try:
        check_runtime()
    except UnsupportedRuntimeError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code

    from .cli import main as cli_main

    return cli_main(argv)
