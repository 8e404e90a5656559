from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from create_node_app.config import (
    MANIFEST_FILENAME,
    PROGRAM_NAME,
    SCRATCH_DIR_ENV,
    Invocation,
    ScaffoldContext,
)


def test_invocation_is_immutable():
    invocation = Invocation(target_name="foo", template_source="https://example.com/t.git")
    assert invocation.verbose is False

    with pytest.raises(ValidationError):
        invocation.target_name = "bar"


def test_invocation_rejects_unknown_fields_and_empty_template():
    with pytest.raises(ValidationError):
        Invocation.model_validate({"target_name": "foo", "template_source": "x", "extra": 1})

    with pytest.raises(ValidationError):
        Invocation(target_name="foo", template_source="")


def test_context_defaults_scratch_dir_next_to_package(tmp_path: Path):
    context = ScaffoldContext.from_environment(cwd=tmp_path, environ={})
    assert context.cwd == tmp_path.resolve()
    assert context.scratch_dir.name == "template"
    assert context.scratch_dir.parent.name == "create_node_app"
    assert context.program_name == PROGRAM_NAME
    assert context.manifest_name == MANIFEST_FILENAME


def test_context_reads_scratch_dir_override(tmp_path: Path):
    override = tmp_path / "staging"
    context = ScaffoldContext.from_environment(cwd=tmp_path, environ={SCRATCH_DIR_ENV: str(override)})
    assert context.scratch_dir == override.resolve()


def test_context_ignores_blank_override(tmp_path: Path):
    context = ScaffoldContext.from_environment(cwd=tmp_path, environ={SCRATCH_DIR_ENV: "  "})
    assert context.scratch_dir.name == "template"
