"""pipeline.packages

Pure helpers for npm package identifiers.

Requested packages may carry a version (``lodash@4``) or a scope
(``@react-navigation/native@6.1.0``). The package manager receives
``name@version`` pairs; import statements need the bare name.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Tuple

from pipeline.models import LATEST

__all__ = [
    "split_package_spec",
    "package_name",
    "format_dependency",
    "install_specs_for_packages",
    "install_specs_for_dependencies",
    "names_to_import",
]


def split_package_spec(spec: str) -> Tuple[str, Optional[str]]:
    """Split ``name[@version]`` into ``(name, version)``.

    Examples
    --------
    "lodash" -> ("lodash", None)
    "lodash@4.17.21" -> ("lodash", "4.17.21")
    "@scope/pkg@^1" -> ("@scope/pkg", "^1")
    """
    s = (spec or "").strip()
    if not s:
        raise ValueError("Empty package identifier.")

    at = s.find("@", 1) if s.startswith("@") else s.find("@")
    if at <= 0:
        return s, None

    version = s[at + 1:].strip()
    return s[:at], version or None


def package_name(spec: str) -> str:
    return split_package_spec(spec)[0]


def format_dependency(name: str, version: Optional[str]) -> str:
    return f"{name}@{version or LATEST}"


def install_specs_for_packages(packages: Iterable[str]) -> List[str]:
    """``name@version`` for each requested package (``latest`` when unpinned)."""
    return [format_dependency(*split_package_spec(p)) for p in packages]


def install_specs_for_dependencies(dependencies: Mapping[str, str]) -> List[str]:
    return [format_dependency(name, version) for name, version in dependencies.items()]


def names_to_import(packages: Iterable[str], *, already_imported: Iterable[str] = ()) -> List[str]:
    """Bare package names to import, in request order.

    Names already imported (the manifest's dependencies) and repeated
    requests are dropped so each package is imported exactly once.
    """
    seen = set(already_imported)
    out: List[str] = []
    for spec in packages:
        name = package_name(spec)
        if name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out
