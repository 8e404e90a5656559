from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from create_node_app.config import SCRATCH_DIR_ENV, ScaffoldContext  # noqa: E402
from tests.fixtures.fake_runner import RecordingRunner  # noqa: E402
from tests.fixtures.node_template import write_template  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_scratch_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the staging directory out of the installed package."""

    scratch = tmp_path / "scratch"
    monkeypatch.setenv(SCRATCH_DIR_ENV, str(scratch))
    return scratch


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    return write_template(tmp_path / "remote-template")


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture()
def context(workspace: Path, isolated_scratch_dir: Path) -> ScaffoldContext:
    return ScaffoldContext(cwd=workspace, scratch_dir=isolated_scratch_dir)


@pytest.fixture()
def runner(template_dir: Path) -> RecordingRunner:
    # yarnpkg is reported missing so runs pick npm unless a test says otherwise
    return RecordingRunner(returncodes={("yarnpkg",): 127}, template_dir=template_dir)
