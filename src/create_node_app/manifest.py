"""Rewriting the package identity stored in the project manifest."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from .config import MANIFEST_FILENAME
from .errors import ManifestRewriteError

__all__ = ["dump_manifest", "load_manifest", "rename_manifest"]


def _reject_constant(token: str) -> float:
    raise ValueError(f"{token} is not valid JSON")


def load_manifest(path: Path) -> dict:
    """Parse the manifest at ``path``, preserving key order.

    ``NaN`` and ``Infinity`` are rejected as they are not part of JSON.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestRewriteError(f"Could not read {path}: {exc}") from exc

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ManifestRewriteError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(document, dict):
        raise ManifestRewriteError(f"{path} does not contain a JSON object")
    return document


def dump_manifest(document: dict) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)


def _replace_contents(path: Path, data: bytes) -> None:
    descriptor, temporary = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(descriptor, "wb") as handle:
            handle.write(data)
        os.chmod(temporary, path.stat().st_mode & 0o777)
        os.replace(temporary, path)
    except BaseException:
        Path(temporary).unlink(missing_ok=True)
        raise


def rename_manifest(project_path: Path, name: str, *, filename: str = MANIFEST_FILENAME) -> Path:
    """Set the ``name`` field of the manifest inside ``project_path``.

    All other fields keep their values and order. The new contents are
    encoded in full and swapped in with :func:`os.replace`, so a manifest
    that cannot be parsed or encoded stays untouched.
    """

    manifest_path = project_path / filename
    document = load_manifest(manifest_path)
    document["name"] = name
    try:
        data = dump_manifest(document).encode("utf-8")
    except ValueError as exc:
        raise ManifestRewriteError(f"Could not serialize {manifest_path}: {exc}") from exc

    try:
        _replace_contents(manifest_path, data)
    except OSError as exc:
        raise ManifestRewriteError(f"Could not write {manifest_path}: {exc}") from exc
    return manifest_path
