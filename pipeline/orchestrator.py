"""pipeline.orchestrator

The bundle-size measurement, stage by stage.

Order
-----
1. read package.json (optional)
2. locate npx / package manager
3. create the workspace and generate the sample app
4. add + import the manifest's dependencies (optional)
5. bundle -> ``original``
6. add + import the requested packages
7. bundle -> ``withPackages``
8. compare sizes
9. render both bundles with the visualizer

Each stage runs through :func:`cli.ui.action`, so the first failure ends the
process with exit code 1. The workspace is removed on the way out unless
debug mode is on.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from cli.ui import action
from pipeline.imports import (
    ORIGINAL_ALIAS_PREFIX,
    PACKAGE_ALIAS_PREFIX,
    count_injected_imports,
    inject_imports,
)
from pipeline.manifest import read_manifest
from pipeline.models import (
    LATEST,
    ORIGINAL_BUNDLE_NAME,
    WITH_PACKAGES_BUNDLE_NAME,
    ManifestInfo,
    RunConfig,
    RunResult,
    Workspace,
)
from pipeline.packages import (
    install_specs_for_dependencies,
    install_specs_for_packages,
    names_to_import,
)
from pipeline.settings import ToolSettings
from pipeline.sizes import compare_bundles, format_report
from pipeline.workspace import create_report_dir, create_workspace, remove_workspace
from tools.core_cmd import CommandRunner, run_checked, which_or_raise
from tools.react_native import bundle_app, init_project
from tools.source_map_explorer import generate_explorers
from tools.yarn import add_dependencies

logger = logging.getLogger(__name__)

# Common install locations outside a login shell's PATH.
NODE_FALLBACKS = ["/opt/homebrew/bin", "/usr/local/bin"]

ExecutableResolver = Callable[..., str]


class BundleSizePipeline:
    """Runs one measurement for a :class:`~pipeline.models.RunConfig`.

    ``runner`` and ``resolve`` are the only seams to the outside world
    (subprocess and PATH lookup); tests swap them for fakes.
    """

    def __init__(
        self,
        settings: Optional[ToolSettings] = None,
        *,
        runner: CommandRunner = run_checked,
        resolve: ExecutableResolver = which_or_raise,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.settings = settings or ToolSettings()
        self.runner = runner
        self.resolve = resolve
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _stage(self, config: RunConfig, text: str, fn, caption=None):
        return action(text, fn, debug=config.debug, caption=caption, out=self.out, err=self.err)

    def _resolve(self, name: str) -> str:
        return self.resolve(name, fallbacks=[str(Path(d) / Path(name).name) for d in NODE_FALLBACKS])

    def run(self, config: RunConfig, *, cwd: Optional[Path] = None) -> RunResult:
        if not config.packages:
            raise ValueError("You must provide at least one package to add.")

        settings = self.settings
        manifest: Optional[ManifestInfo] = None

        manifest_path = config.manifest_path(cwd)
        if manifest_path is not None:
            label = f"Reading package.json {manifest_path}" if config.debug else "Reading package.json"
            manifest = self._stage(
                config,
                label,
                lambda: read_manifest(manifest_path),
                caption=lambda m: f"Found react-native@{m.framework_version}",
            )

        version = config.react_native_version or (manifest.framework_version if manifest else LATEST)

        npx_bin, pm_bin = self._stage(
            config,
            f"Locating {settings.npx} and {settings.package_manager}",
            lambda: (self._resolve(settings.npx), self._resolve(settings.package_manager)),
            caption=(lambda bins: " ".join(bins)) if config.debug else None,
        )

        workspace = self._stage(
            config,
            "Creating a temporary directory",
            lambda: create_workspace(settings.project_name),
            caption=(lambda ws: str(ws.project_dir)) if config.debug else None,
        )

        try:
            result = self._measure(config, workspace, manifest, version, npx_bin, pm_bin)
        finally:
            if not config.debug:
                remove_workspace(workspace)

        return result

    def _measure(
        self,
        config: RunConfig,
        workspace: Workspace,
        manifest: Optional[ManifestInfo],
        version: str,
        npx_bin: str,
        pm_bin: str,
    ) -> RunResult:
        settings = self.settings
        runner = self.runner
        entry_file = workspace.project_dir / settings.entry_file

        self._stage(
            config,
            f"Creating a sample app with react-native@{version}",
            lambda: init_project(settings, version=version, workspace=workspace, npx_bin=npx_bin, runner=runner),
        )

        existing: List[str] = []
        if manifest is not None and manifest.dependencies:
            existing = list(manifest.dependency_names)
            n = len(existing)
            self._stage(
                config,
                f"Adding {n} dependencies from your package.json to the sample app",
                lambda: add_dependencies(
                    settings,
                    install_specs_for_dependencies(manifest.dependencies),
                    workspace=workspace,
                    package_manager_bin=pm_bin,
                    runner=runner,
                ),
            )
            self._stage(
                config,
                f"Importing {n} dependencies from your package.json to the sample app",
                lambda: inject_imports(entry_file, existing, alias_prefix=ORIGINAL_ALIAS_PREFIX),
            )

        original = self._stage(
            config,
            "Bundling sample app",
            lambda: bundle_app(
                settings, workspace=workspace, name=ORIGINAL_BUNDLE_NAME, npx_bin=npx_bin, runner=runner
            ),
        )

        label = config.packages_label
        self._stage(
            config,
            f"Adding {label}",
            lambda: add_dependencies(
                settings,
                install_specs_for_packages(config.packages),
                workspace=workspace,
                package_manager_bin=pm_bin,
                runner=runner,
            ),
        )

        to_import = names_to_import(config.packages, already_imported=existing)
        self._stage(
            config,
            f"Importing {label}",
            lambda: inject_imports(entry_file, to_import, alias_prefix=PACKAGE_ALIAS_PREFIX),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s has %d synthetic imports", entry_file, count_injected_imports(entry_file))

        with_packages = self._stage(
            config,
            "Bundling sample app again",
            lambda: bundle_app(
                settings, workspace=workspace, name=WITH_PACKAGES_BUNDLE_NAME, npx_bin=npx_bin, runner=runner
            ),
        )

        comparison = self._stage(config, "Comparing size of bundles", lambda: compare_bundles(original, with_packages))

        def render():
            report_dir = create_report_dir()
            outputs = generate_explorers(
                settings, [original, with_packages], report_dir, npx_bin=npx_bin, runner=runner
            )
            return report_dir, outputs

        report_dir, (original_html, with_packages_html) = self._stage(
            config, "Generating source map explorer reports", render
        )

        print("", file=self.out)
        print(format_report(comparison, label), file=self.out)
        print("", file=self.out)
        print(f"Original source map explorer: {original_html}", file=self.out)
        print(f"With {label}: {with_packages_html}", file=self.out, flush=True)

        return RunResult(
            comparison=comparison,
            original_report=original_html,
            with_packages_report=with_packages_html,
            report_dir=report_dir,
            workspace=workspace,
            workspace_kept=config.debug,
        )
