"""pipeline.workspace

Temporary directories owned by one run.

* The workspace (sample app) is removed at the end of the run unless debug
  mode asks to keep it for inspection.
* The report directory (HTML visualizations) is always kept.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from pipeline.models import Workspace

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "bundle-size-"
REPORT_PREFIX = "bundle-size-report-"


def create_workspace(project_name: str) -> Workspace:
    """Create a fresh temp dir; the generator creates ``<root>/<project_name>``."""
    root = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX))
    logger.debug("Created workspace %s", root)
    return Workspace(root=root, project_dir=root / project_name)


def create_report_dir() -> Path:
    return Path(tempfile.mkdtemp(prefix=REPORT_PREFIX))


def remove_workspace(workspace: Workspace) -> None:
    """Delete the workspace tree. Missing directories are fine."""
    if workspace.root.exists():
        shutil.rmtree(workspace.root)
        logger.debug("Removed workspace %s", workspace.root)
