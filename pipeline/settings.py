"""pipeline.settings

External tool configuration.

Settings are layered, lowest precedence first:

1. built-in defaults (:class:`ToolSettings` field defaults)
2. an optional YAML file (``--config`` or ``./bundle-size.yaml``)
3. ``BUNDLE_SIZE_*`` environment variables (``.env`` is loaded beforehand)

Example ``bundle-size.yaml``::

    package_manager: /opt/homebrew/bin/yarn
    project_name: SizeProbe
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

DEFAULT_CONFIG_FILENAME = "bundle-size.yaml"

ENV_OVERRIDES: Dict[str, str] = {
    "BUNDLE_SIZE_NPX": "npx",
    "BUNDLE_SIZE_PACKAGE_MANAGER": "package_manager",
    "BUNDLE_SIZE_PROJECT_NAME": "project_name",
}


class SettingsError(ValueError):
    """Raised when a settings file cannot be used."""


@dataclass(frozen=True)
class ToolSettings:
    """Executables and fixed names used to drive the external tools."""

    npx: str = "npx"
    package_manager: str = "yarn"
    project_name: str = "BundleSize"
    platform: str = "ios"
    entry_file: str = "index.js"
    visualizer_package: str = "source-map-explorer"


def _load_yaml_overrides(path: Path) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise SettingsError(f"Settings file must contain a mapping: {path}")

    known = {f.name for f in fields(ToolSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise SettingsError(f"Unknown settings in {path}: {', '.join(unknown)}")

    return {k: str(v) for k, v in raw.items() if v is not None}


def load_settings(
    config_path: Optional[Path] = None,
    *,
    cwd: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ToolSettings:
    """Resolve :class:`ToolSettings` from defaults, YAML and the environment.

    An explicit ``config_path`` must exist; the implicit
    ``./bundle-size.yaml`` is only used when present.
    """
    settings = ToolSettings()
    env = os.environ if environ is None else environ

    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise SettingsError(f"Settings file not found: {path}")
    else:
        path = Path(cwd or Path.cwd()) / DEFAULT_CONFIG_FILENAME

    if path.is_file():
        settings = replace(settings, **_load_yaml_overrides(path))

    from_env = {field: env[var] for var, field in ENV_OVERRIDES.items() if env.get(var)}
    if from_env:
        settings = replace(settings, **from_env)

    return settings
