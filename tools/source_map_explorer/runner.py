"""tools/source_map_explorer/runner.py

Render one HTML treemap per bundle with source-map-explorer.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from pipeline.models import BundleArtifact
from pipeline.settings import ToolSettings
from tools.core_cmd import CommandRunner, run_checked

logger = logging.getLogger(__name__)


def build_explore_command(
    settings: ToolSettings,
    artifact: BundleArtifact,
    output: Path,
    *,
    npx_bin: Optional[str] = None,
) -> List[str]:
    return [
        npx_bin or settings.npx,
        settings.visualizer_package,
        str(artifact.bundle),
        str(artifact.sourcemap),
        "--html",
        str(output),
    ]


def generate_explorer(
    settings: ToolSettings,
    artifact: BundleArtifact,
    output_dir: Path,
    *,
    npx_bin: Optional[str] = None,
    runner: CommandRunner = run_checked,
) -> Path:
    """Write ``<output_dir>/<artifact.name>.html`` and return its path."""
    output = Path(output_dir) / f"{artifact.name}.html"
    cmd = build_explore_command(settings, artifact, output, npx_bin=npx_bin)
    runner(cmd, cwd=artifact.bundle.parent)
    return output


def generate_explorers(
    settings: ToolSettings,
    artifacts: Sequence[BundleArtifact],
    output_dir: Path,
    *,
    npx_bin: Optional[str] = None,
    runner: CommandRunner = run_checked,
) -> List[Path]:
    """Run the visualizer for every artifact concurrently.

    All invocations run to completion before the first failure (in input
    order) is re-raised.
    """
    with ThreadPoolExecutor(max_workers=max(1, len(artifacts))) as pool:
        futures = [
            pool.submit(generate_explorer, settings, a, output_dir, npx_bin=npx_bin, runner=runner)
            for a in artifacts
        ]

    outputs: List[Path] = []
    errors: List[BaseException] = []
    for artifact, fut in zip(artifacts, futures):
        err = fut.exception()
        if err is not None:
            logger.debug("Visualizer failed for %s: %s", artifact.name, err)
            errors.append(err)
        else:
            outputs.append(fut.result())

    if errors:
        raise errors[0]
    return outputs
