"""pipeline.models

Lightweight data structures used across the pipeline.

These dataclasses provide a small, explicit vocabulary for:
- what the user asked for (RunConfig)
- what their package.json declares (ManifestInfo)
- where the sample app lives (Workspace)
- what the bundler produced (BundleArtifact) and how the two compare
  (SizeComparison)

All of them are frozen: the pipeline passes them forward, it never edits them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

LATEST = "latest"

ORIGINAL_BUNDLE_NAME = "original"
WITH_PACKAGES_BUNDLE_NAME = "withPackages"


@dataclass(frozen=True)
class RunConfig:
    """Parsed command line.

    ``package_json`` is the boolean-or-path option:
    - ``False``: do not seed the sample app from a manifest
    - ``True``: use ``./package.json``
    - a path: use that file
    """

    packages: Tuple[str, ...]
    package_json: Union[bool, Path] = True
    react_native_version: Optional[str] = None
    debug: bool = False
    config_path: Optional[Path] = None

    @property
    def uses_manifest(self) -> bool:
        return self.package_json is not False

    def manifest_path(self, cwd: Optional[Path] = None) -> Optional[Path]:
        if self.package_json is False:
            return None
        if self.package_json is True:
            return (cwd or Path.cwd()).resolve() / "package.json"
        return Path(self.package_json)

    @property
    def packages_label(self) -> str:
        return " ".join(self.packages)


@dataclass(frozen=True)
class ManifestInfo:
    """What we learned from the user's package.json."""

    path: Path
    framework_version: str
    # name -> version specifier, framework packages already removed
    dependencies: Dict[str, str] = field(default_factory=dict)

    @property
    def dependency_names(self) -> Tuple[str, ...]:
        return tuple(self.dependencies.keys())


@dataclass(frozen=True)
class Workspace:
    """Temporary directory owning the generated sample app."""

    root: Path
    project_dir: Path


@dataclass(frozen=True)
class BundleArtifact:
    """One bundler output: the bundle plus its source map."""

    name: str
    bundle: Path
    sourcemap: Path

    @classmethod
    def in_dir(cls, directory: Path, name: str) -> "BundleArtifact":
        return cls(
            name=name,
            bundle=Path(directory) / f"{name}.jsbundle",
            sourcemap=Path(directory) / f"{name}.map",
        )


@dataclass(frozen=True)
class SizeComparison:
    original_bytes: int
    with_packages_bytes: int

    @property
    def delta_bytes(self) -> int:
        return self.with_packages_bytes - self.original_bytes

    @property
    def percent(self) -> int:
        # Rounded half-up: 1_000_000 -> 1_250_000 bytes is 25.
        if self.original_bytes <= 0:
            raise ValueError("Original bundle is empty; cannot compute a percentage.")
        return math.floor(self.with_packages_bytes * 100 / self.original_bytes - 100 + 0.5)


@dataclass(frozen=True)
class RunResult:
    """Everything a successful run produced."""

    comparison: SizeComparison
    original_report: Path
    with_packages_report: Path
    report_dir: Path
    workspace: Workspace
    workspace_kept: bool
