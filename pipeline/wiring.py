"""pipeline.wiring

This module is the **composition root** for the Python runtime.

"Composition root" means: the single place where we *assemble* the running
application from its building blocks:

- load environment variables (``.env`` in the working directory)
- configure logging
- resolve tool settings
- build the pipeline object

Keeping this wiring in one place prevents configuration and dependency setup
from being duplicated across entrypoints (CLI, scripts, CI).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pipeline.orchestrator import BundleSizePipeline
from pipeline.settings import load_settings

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def load_env(cwd: Optional[Path] = None) -> bool:
    """Load ``<cwd>/.env`` without overriding variables already exported."""
    env_path = Path(cwd or Path.cwd()) / ".env"
    if not env_path.is_file():
        return False
    return bool(load_dotenv(env_path, override=False))


def configure_logging(debug: bool) -> None:
    """DEBUG with ``--debug`` (every external command is logged), WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def build_pipeline(
    *,
    config_path: Optional[Path] = None,
    cwd: Optional[Path] = None,
    load_dotenv_file: bool = True,
) -> BundleSizePipeline:
    """Build the pipeline with settings from defaults, YAML and the environment."""
    if load_dotenv_file:
        load_env(cwd)

    settings = load_settings(config_path, cwd=cwd)
    return BundleSizePipeline(settings)
