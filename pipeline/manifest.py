"""pipeline.manifest

Read the user's ``package.json`` so the sample app can start from the same
dependencies.

Only two things matter here:

* the ``react-native`` version (the sample app is generated with it)
* every other runtime dependency, minus ``react-native`` and ``react``
  which the generated app already ships
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from pipeline.models import ManifestInfo
from tools.io import read_json

logger = logging.getLogger(__name__)

FRAMEWORK_PACKAGE = "react-native"
FRAMEWORK_PACKAGES = frozenset({FRAMEWORK_PACKAGE, "react"})


class ManifestError(ValueError):
    """The manifest exists but cannot seed a sample app."""


def read_manifest(path: Path) -> ManifestInfo:
    """Parse ``path`` and return the framework version plus remaining deps.

    Raises
    ------
    OSError
        The file cannot be read.
    ManifestError
        The file is not a JSON object or has no ``react-native`` dependency.
    """
    path = Path(path)
    try:
        data = read_json(path)
    except ValueError as e:
        raise ManifestError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object.")

    raw_deps = data.get("dependencies") or {}
    if not isinstance(raw_deps, dict):
        raise ManifestError(f"'dependencies' in {path} must be an object.")

    version = raw_deps.get(FRAMEWORK_PACKAGE)
    if version is None:
        raise ManifestError("This is not a React Native project.")

    dependencies: Dict[str, str] = {
        str(name): str(spec) for name, spec in raw_deps.items() if name not in FRAMEWORK_PACKAGES
    }
    logger.debug("Manifest %s: react-native@%s, %d other dependencies", path, version, len(dependencies))

    return ManifestInfo(path=path, framework_version=str(version), dependencies=dependencies)
