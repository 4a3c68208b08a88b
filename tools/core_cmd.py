"""tools/core_cmd.py

Command-execution helpers shared across tool adapters.

This module deliberately avoids tool-specific knowledge. It provides:

* :func:`which_or_raise` - resolve executables reliably across environments.
* :func:`run_cmd` - run subprocesses (no shell=True) and capture output.
* :func:`run_checked` - same, but raise :class:`CommandError` on non-zero exit.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

# Keep error messages readable; npm/yarn can print thousands of lines.
_OUTPUT_TAIL_CHARS = 4000


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str
    stdout: str
    stderr: str


class CommandError(RuntimeError):
    """An external command exited with a non-zero status."""

    def __init__(self, result: CmdResult, *, cwd: Optional[Path] = None) -> None:
        self.result = result
        self.cwd = cwd
        super().__init__(f"Command failed with exit code {result.exit_code}: {result.command_str}")

    @property
    def output(self) -> str:
        """Tail of the captured stderr (falls back to stdout)."""
        text = (self.result.stderr or self.result.stdout or "").strip()
        return text[-_OUTPUT_TAIL_CHARS:]


# A runner takes the argv list and an optional working directory.
CommandRunner = Callable[..., CmdResult]


def which_or_raise(bin_name: str, fallbacks: Optional[List[str]] = None) -> str:
    """Locate an executable and return its absolute path.

    Node tooling is frequently installed via nvm/volta/brew, so PATH alone is
    not always enough.
    """
    found = shutil.which(bin_name)
    if found:
        return found

    for candidate in fallbacks or []:
        p = Path(candidate)
        if p.exists() and os.access(str(p), os.X_OK):
            return str(p)

    raise FileNotFoundError(
        f"Executable '{bin_name}' not found on PATH.\n"
        f"Install it and ensure it's available to this Python process.\n"
        f"Tried fallbacks: {fallbacks or []}"
    )


def run_cmd(
    cmd: List[str],
    *,
    cwd: Optional[Path] = None,
    env: Optional[Dict[str, str]] = None,
) -> CmdResult:
    """Run a subprocess and capture stdout/stderr (no ``shell=True``).

    Never raises on non-zero exit codes; only raises on execution errors
    (e.g. binary not found).
    """
    command_str = " ".join(cmd)
    logger.debug("Running: %s (cwd=%s)", command_str, cwd or os.getcwd())
    t0 = time.time()

    # If env is provided, merge it onto the current process environment.
    env2 = None
    if env is not None:
        env2 = os.environ.copy()
        env2.update(env)

    proc = subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        text=True,
        capture_output=True,
        env=env2,
    )
    elapsed = time.time() - t0
    logger.debug("Exit code %s after %.1fs: %s", proc.returncode, elapsed, command_str)

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=elapsed,
        command_str=command_str,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )


def run_checked(cmd: List[str], *, cwd: Optional[Path] = None) -> CmdResult:
    """Run ``cmd`` and raise :class:`CommandError` unless it exits 0."""
    res = run_cmd(cmd, cwd=cwd)
    if res.exit_code != 0:
        raise CommandError(res, cwd=cwd)
    return res
