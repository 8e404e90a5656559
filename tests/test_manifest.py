from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_node_app.errors import ManifestRewriteError
from create_node_app.manifest import rename_manifest


def _write(project: Path, text: str) -> Path:
    manifest = project / "package.json"
    manifest.write_text(text, encoding="utf-8")
    return manifest


def test_rename_overwrites_name_and_preserves_order(tmp_path: Path):
    _write(tmp_path, '{"version": "1.0.0", "name": "template", "private": true, "scripts": {"dev": "x"}}')

    manifest = rename_manifest(tmp_path, "foo")

    text = manifest.read_text(encoding="utf-8")
    assert list(json.loads(text)) == ["version", "name", "private", "scripts"]
    assert json.loads(text) == {"version": "1.0.0", "name": "foo", "private": True, "scripts": {"dev": "x"}}
    assert text == (
        "{\n"
        '  "version": "1.0.0",\n'
        '  "name": "foo",\n'
        '  "private": true,\n'
        '  "scripts": {\n'
        '    "dev": "x"\n'
        "  }\n"
        "}"
    )


def test_rename_adds_missing_name_last(tmp_path: Path):
    _write(tmp_path, '{"version": "1.0.0"}')
    rename_manifest(tmp_path, "foo")
    assert list(json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))) == ["version", "name"]


def test_rename_keeps_non_ascii_text(tmp_path: Path):
    _write(tmp_path, '{"name": "t", "description": "Démo ☕"}')
    rename_manifest(tmp_path, "foo")
    assert "Démo ☕" in (tmp_path / "package.json").read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "text",
    [
        '{"name": "template",',
        "[1, 2, 3]",
        "",
        '{"name": "t", "weight": NaN}',
        '{"name": "t", "limit": -Infinity}',
    ],
)
def test_broken_manifest_is_left_untouched(tmp_path: Path, text: str):
    manifest = _write(tmp_path, text)
    original = manifest.read_bytes()

    with pytest.raises(ManifestRewriteError):
        rename_manifest(tmp_path, "foo")

    assert manifest.read_bytes() == original


def test_missing_manifest_raises(tmp_path: Path):
    with pytest.raises(ManifestRewriteError) as excinfo:
        rename_manifest(tmp_path, "foo")

    assert excinfo.value.fatal is False


def test_unencodable_manifest_is_left_untouched(tmp_path: Path):
    manifest = _write(tmp_path, '{"name": "t", "description": "\\ud83d"}')
    original = manifest.read_bytes()

    with pytest.raises(ManifestRewriteError) as excinfo:
        rename_manifest(tmp_path, "foo")

    assert "Could not serialize" in str(excinfo.value)
    assert manifest.read_bytes() == original
    assert [path.name for path in tmp_path.iterdir()] == ["package.json"]


def test_rename_keeps_file_mode(tmp_path: Path):
    manifest = _write(tmp_path, '{"name": "t"}')
    manifest.chmod(0o644)

    rename_manifest(tmp_path, "foo")

    assert manifest.stat().st_mode & 0o777 == 0o644
    assert [path.name for path in tmp_path.iterdir()] == ["package.json"]
