"""tools/yarn

Package manager plumbing for the sample app.
"""

from __future__ import annotations

from .runner import add_dependencies, build_add_command

__all__ = ["add_dependencies", "build_add_command"]
