"""tools/react_native

React Native CLI plumbing: generate the sample app and bundle it.
"""

from __future__ import annotations

from .runner import build_bundle_command, build_init_command, bundle_app, init_project

__all__ = ["build_bundle_command", "build_init_command", "bundle_app", "init_project"]
