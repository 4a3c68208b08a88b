"""pipeline.imports

Force the bundler to include packages by importing them from the entry file.

Metro only bundles what is reachable from the entry file, so installing a
package is not enough: every package we want measured gets an
``import * as Alias from 'name';`` line at the top of ``index.js``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from tools.io import prepend_text

ORIGINAL_ALIAS_PREFIX = "OriginalPackage"
PACKAGE_ALIAS_PREFIX = "Package"


def build_import_lines(names: Sequence[str], *, alias_prefix: str) -> List[str]:
    """One import per package, aliased ``<prefix><index>`` to avoid clashes."""
    return [f"import * as {alias_prefix}{i} from '{name}';" for i, name in enumerate(names)]


def inject_imports(entry_file: Path, names: Sequence[str], *, alias_prefix: str) -> int:
    """Prepend import lines for ``names`` to ``entry_file``.

    Returns the number of lines written. An empty ``names`` leaves the file
    untouched.
    """
    lines = build_import_lines(names, alias_prefix=alias_prefix)
    if lines:
        prepend_text(entry_file, "\n".join(lines) + "\n")
    return len(lines)


def count_injected_imports(entry_file: Path) -> int:
    """Count the synthetic imports at the top of ``entry_file``."""
    prefixes = (f"import * as {ORIGINAL_ALIAS_PREFIX}", f"import * as {PACKAGE_ALIAS_PREFIX}")
    count = 0
    for line in Path(entry_file).read_text(encoding="utf-8").splitlines():
        if line.startswith(prefixes):
            count += 1
    return count
