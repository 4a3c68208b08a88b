"""CLI argument builder modules.

The top-level :mod:`bundle_size_cli` is intentionally kept thin. Flags are
registered by small "arg builder" functions housed here:

- :func:`cli.args.base.add_base_args`

and the parsed namespace is turned into an immutable
:class:`pipeline.models.RunConfig` by :func:`cli.args.base.config_from_args`.
"""

from __future__ import annotations

__all__ = [
    "base",
]
