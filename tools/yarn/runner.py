"""tools/yarn/runner.py

``yarn add`` inside the sample app.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pipeline.models import Workspace
from pipeline.settings import ToolSettings
from tools.core_cmd import CmdResult, CommandRunner, run_checked


def build_add_command(
    settings: ToolSettings,
    specs: Sequence[str],
    *,
    package_manager_bin: Optional[str] = None,
) -> List[str]:
    if not specs:
        raise ValueError("Nothing to add: dependency list is empty.")
    return [package_manager_bin or settings.package_manager, "add", *specs]


def add_dependencies(
    settings: ToolSettings,
    specs: Sequence[str],
    *,
    workspace: Workspace,
    package_manager_bin: Optional[str] = None,
    runner: CommandRunner = run_checked,
) -> CmdResult:
    """Add ``name@version`` specs to the sample app (cwd = project dir)."""
    cmd = build_add_command(settings, specs, package_manager_bin=package_manager_bin)
    return runner(cmd, cwd=workspace.project_dir)
