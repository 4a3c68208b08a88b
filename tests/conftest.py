from __future__ import annotations

import io
import json
import logging
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

from pipeline.orchestrator import BundleSizePipeline
from pipeline.settings import ToolSettings
from tools.core_cmd import CmdResult, CommandError

ENTRY_SOURCE = (
    "import {AppRegistry} from 'react-native';\n"
    "import App from './App';\n"
    "AppRegistry.registerComponent('BundleSize', () => App);\n"
)


class FakeToolchain:
    """Stands in for npx/yarn: records commands and writes the files the real tools would."""

    def __init__(self, sizes: Optional[Dict[str, int]] = None, fail_on: Optional[str] = None) -> None:
        self.sizes = sizes or {"original": 1_000_000, "withPackages": 1_250_000}
        self.fail_on = fail_on
        self.calls: List[Tuple[List[str], Optional[Path]]] = []

    @staticmethod
    def kind(cmd: List[str]) -> str:
        if cmd[1:2] == ["add"]:
            return "add"
        if "init" in cmd[:4]:
            return "init"
        if "--bundle-output" in cmd:
            return "bundle"
        if "--html" in cmd:
            return "visualize"
        return "other"

    def commands(self, kind: str) -> List[List[str]]:
        return [cmd for cmd, _ in self.calls if self.kind(cmd) == kind]

    def __call__(self, cmd, cwd=None) -> CmdResult:
        cmd = list(cmd)
        self.calls.append((cmd, cwd))
        kind = self.kind(cmd)

        if kind == self.fail_on:
            res = CmdResult(1, 0.0, " ".join(cmd), "", f"{kind} exploded")
            raise CommandError(res, cwd=cwd)

        if kind == "init":
            project_dir = Path(cmd[cmd.index("--directory") + 1])
            project_dir.mkdir(parents=True)
            (project_dir / "index.js").write_text(ENTRY_SOURCE, encoding="utf-8")
        elif kind == "bundle":
            bundle = Path(cwd) / cmd[cmd.index("--bundle-output") + 1]
            bundle.write_bytes(b"x" * self.sizes[bundle.stem])
            (Path(cwd) / cmd[cmd.index("--sourcemap-output") + 1]).write_text("{}", encoding="utf-8")
        elif kind == "visualize":
            Path(cmd[cmd.index("--html") + 1]).write_text("<html></html>", encoding="utf-8")

        return CmdResult(0, 0.0, " ".join(cmd), "", "")


def fake_resolve(name: str, fallbacks=None) -> str:
    return f"/fake/bin/{name}"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """bundle_size_cli.main reconfigures logging; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def temp_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Route tempfile.mkdtemp into the test's tmp_path."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A user project directory (the cwd for package.json lookup)."""
    d = tmp_path / "app"
    d.mkdir()
    return d


@pytest.fixture
def write_manifest(project_dir: Path):
    def _write(dependencies: Dict[str, str], name: str = "package.json") -> Path:
        path = project_dir / name
        path.write_text(json.dumps({"name": "app", "dependencies": dependencies}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_pipeline(temp_root: Path):
    def _make(toolchain: FakeToolchain, settings: Optional[ToolSettings] = None):
        out, err = io.StringIO(), io.StringIO()
        pipeline = BundleSizePipeline(settings, runner=toolchain, resolve=fake_resolve, out=out, err=err)
        return pipeline, out, err

    return _make
