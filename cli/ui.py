"""cli.ui

Progress reporting for pipeline stages.

Every stage is wrapped by :func:`action`:

    ⏳ Bundling sample app ...
    ✅ Bundling sample app

On failure the stage is marked ``❌``, the error detail is printed to stderr
only in debug mode, and the process exits with status 1. No stage ever runs
after a failed one.
"""

from __future__ import annotations

import sys
import traceback
from typing import Callable, Optional, TextIO, TypeVar

from tools.core_cmd import CommandError

T = TypeVar("T")


def format_error(err: BaseException, *, with_traceback: bool = False) -> str:
    """Full error text shown in debug mode."""
    lines = [f"{type(err).__name__}: {err}"]
    if isinstance(err, CommandError):
        if err.cwd is not None:
            lines.append(f"  cwd: {err.cwd}")
        if err.output:
            lines.append(err.output)
    if with_traceback:
        lines.append("".join(traceback.format_exception(type(err), err, err.__traceback__)).rstrip())
    return "\n".join(lines)


def action(
    text: str,
    fn: Callable[[], T],
    *,
    debug: bool = False,
    caption: Optional[Callable[[T], Optional[str]]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> T:
    """Run ``fn`` as one labelled stage and return its result.

    ``caption`` may turn the result into a short string appended to the
    success line (e.g. ``Found react-native@0.73.2``).
    """
    out = out or sys.stdout
    err = err or sys.stderr

    print(f"⏳ {text} ...", file=out, flush=True)
    try:
        result = fn()
    except Exception as e:
        print(f"❌ {text}", file=out, flush=True)
        if debug:
            print(format_error(e, with_traceback=True), file=err, flush=True)
        raise SystemExit(1) from e

    suffix = caption(result) if caption is not None else None
    print(f"✅ {text}{' ' + suffix if suffix else ''}", file=out, flush=True)
    return result
