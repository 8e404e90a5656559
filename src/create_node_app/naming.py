"""Project name checks and string normalisation helpers."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable

from .errors import InvalidNameError

__all__ = [
    "MAX_NAME_LENGTH",
    "RESERVED_NAMES",
    "check_project_name",
    "name_problems",
    "project_directory_name",
    "slugify",
]


MAX_NAME_LENGTH = 214

RESERVED_NAMES = frozenset({"node_modules", "favicon.ico"})

NODE_BUILTINS = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "worker_threads",
        "zlib",
    }
)

_SEPARATORS = re.compile(r"[\s\-]+")
_URL_SAFE = re.compile(r"^[A-Za-z0-9\-_.!~*'()]+$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")
_SCOPED_NAME = re.compile(r"^@([^/]+)/(.+)$")


def slugify(value: str | Iterable[str], *, separator: str = "-", allow_unicode: bool = False) -> str:
    """Create a filesystem and URL friendly slug from ``value``.

    Parameters
    ----------
    value:
        The text to normalise. When an iterable of strings is provided the values
        are joined with spaces before slugification.
    separator:
        The character used to join individual words.
    allow_unicode:
        When ``True`` unicode characters are preserved. Otherwise the result is
        restricted to ASCII.
    """

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        value = " ".join(str(part) for part in value)

    text = str(value)
    if not allow_unicode:
        text = unicodedata.normalize("NFKD", text)
        text = text.encode("ascii", "ignore").decode("ascii")
    else:
        text = unicodedata.normalize("NFKC", text)

    text = re.sub(r"[\s]+", " ", text)
    text = re.sub(r"[^\w\-. ]", "", text, flags=re.UNICODE)
    text = text.strip().lower().lstrip("._")

    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator)


def _segment_problems(segment: str, label: str) -> list[str]:
    problems: list[str] = []
    if segment.startswith("."):
        problems.append(f"{label} cannot start with a period")
    if segment.startswith("_"):
        problems.append(f"{label} cannot start with an underscore")
    if segment != segment.lower():
        problems.append(f"{label} can no longer contain capital letters")
    if _SPECIAL_CHARACTERS.search(segment):
        problems.append(f"{label} can no longer contain special characters (\"~'!()*\")")
    if not _URL_SAFE.match(segment):
        problems.append(f"{label} can only contain URL-friendly characters")
    return problems


def name_problems(name: str, program_name: str) -> list[str]:
    """Return every reason why ``name`` cannot be used for a new project."""

    if not name:
        return ["name length must be greater than zero"]

    problems: list[str] = []
    if name != name.strip():
        problems.append("name cannot contain leading or trailing spaces")
    if len(name) > MAX_NAME_LENGTH:
        problems.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")

    lowered = name.lower()
    if lowered == program_name.lower():
        problems.append(f"name collides with the tool itself ('{program_name}')")
    if lowered in RESERVED_NAMES:
        problems.append(f"{lowered} is a reserved name")
    if lowered in NODE_BUILTINS:
        problems.append(f"{lowered} is a core module name")

    scoped = _SCOPED_NAME.match(name)
    if scoped:
        scope, package = scoped.groups()
        problems.extend(_segment_problems(scope, "scope"))
        problems.extend(_segment_problems(package, "name"))
    else:
        problems.extend(_segment_problems(name.strip(), "name"))

    return problems


def check_project_name(name: str, program_name: str) -> str:
    """Validate ``name`` and return it unchanged.

    Raises :class:`~create_node_app.errors.InvalidNameError` listing every
    problem found, together with a slug based suggestion when one exists.
    """

    problems = name_problems(name, program_name)
    if not problems:
        return name

    suggestion = slugify(project_directory_name(name)) or None
    if suggestion is not None and name_problems(suggestion, program_name):
        suggestion = None
    raise InvalidNameError(name, problems, suggestion=suggestion)


def project_directory_name(name: str) -> str:
    """Return the directory name used on disk for the package ``name``."""

    scoped = _SCOPED_NAME.match(name)
    if scoped:
        return scoped.group(2)
    return name
