"""tools/io.py

Tiny filesystem helpers used across the pipeline.

Design
------
- This module is intentionally small.
- It contains ONLY filesystem IO (no import/dedup policy).
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """Read JSON from disk (UTF-8)."""
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def prepend_text(path: Path, text: str) -> None:
    """Insert ``text`` at the top of ``path``, keeping the existing content below.

    The new content is written to a sibling temp file first and then moved
    into place so a failed write never truncates the original file.
    """
    path = Path(path)
    original = path.read_text(encoding="utf-8")
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(text + original, encoding="utf-8")
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()
