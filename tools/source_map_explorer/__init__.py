"""tools/source_map_explorer

Bundle visualizer plumbing (HTML treemaps from bundle + source map).
"""

from __future__ import annotations

from .runner import build_explore_command, generate_explorer, generate_explorers

__all__ = ["build_explore_command", "generate_explorer", "generate_explorers"]
