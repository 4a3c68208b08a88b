"""tools/react_native/runner.py

Tool-specific execution plumbing for the React Native CLI.
Keeps CLI quirks (``--yes``, ``--version`` only when pinned, Metro bundle
flags) close to the tool.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pipeline.manifest import FRAMEWORK_PACKAGE
from pipeline.models import LATEST, BundleArtifact, Workspace
from pipeline.settings import ToolSettings
from tools.core_cmd import CmdResult, CommandRunner, run_checked


def build_init_command(
    settings: ToolSettings,
    *,
    version: str,
    workspace: Workspace,
    npx_bin: Optional[str] = None,
) -> List[str]:
    """``npx --yes react-native@<ver> init <Name> --directory <dir> [--version <ver>]``"""
    cmd = [
        npx_bin or settings.npx,
        "--yes",
        f"{FRAMEWORK_PACKAGE}@{version}",
        "init",
        settings.project_name,
        "--directory",
        str(workspace.project_dir),
    ]
    if version != LATEST:
        cmd += ["--version", version]
    return cmd


def init_project(
    settings: ToolSettings,
    *,
    version: str,
    workspace: Workspace,
    npx_bin: Optional[str] = None,
    runner: CommandRunner = run_checked,
) -> CmdResult:
    cmd = build_init_command(settings, version=version, workspace=workspace, npx_bin=npx_bin)
    return runner(cmd, cwd=workspace.root)


def build_bundle_command(
    settings: ToolSettings,
    artifact: BundleArtifact,
    *,
    npx_bin: Optional[str] = None,
) -> List[str]:
    """Production (``--dev false``) bundle for the single target platform."""
    return [
        npx_bin or settings.npx,
        FRAMEWORK_PACKAGE,
        "bundle",
        "--entry-file",
        settings.entry_file,
        "--platform",
        settings.platform,
        "--dev",
        "false",
        "--bundle-output",
        artifact.bundle.name,
        "--sourcemap-output",
        artifact.sourcemap.name,
    ]


def bundle_app(
    settings: ToolSettings,
    *,
    workspace: Workspace,
    name: str,
    npx_bin: Optional[str] = None,
    runner: CommandRunner = run_checked,
) -> BundleArtifact:
    """Bundle the sample app into ``<project_dir>/<name>.jsbundle`` (+ ``.map``)."""
    artifact = BundleArtifact.in_dir(workspace.project_dir, name)
    cmd = build_bundle_command(settings, artifact, npx_bin=npx_bin)
    runner(cmd, cwd=Path(workspace.project_dir))
    return artifact
