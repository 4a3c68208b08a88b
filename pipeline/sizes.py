"""pipeline.sizes

Bundle size comparison and the human-readable report.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Tuple

from pipeline.models import BundleArtifact, SizeComparison

_UNITS = ("B", "kB", "MB", "GB", "TB")


def format_size(num_bytes: int) -> str:
    """Decimal (SI) size, two decimals at most: 250000 -> '250 kB'."""
    sign = "-" if num_bytes < 0 else ""
    value = float(abs(num_bytes))
    unit = _UNITS[0]
    for unit in _UNITS:
        if value < 1000 or unit == _UNITS[-1]:
            break
        value /= 1000

    if unit == "B":
        return f"{sign}{int(value)} B"
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{sign}{text} {unit}"


def _bundle_size(path: Path) -> int:
    size = Path(path).stat().st_size
    if size == 0:
        raise ValueError(f"Bundle is empty: {path}")
    return size


def read_bundle_sizes(original: BundleArtifact, with_packages: BundleArtifact) -> Tuple[int, int]:
    """Stat both bundles concurrently; any failure propagates."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        f_original = pool.submit(_bundle_size, original.bundle)
        f_with = pool.submit(_bundle_size, with_packages.bundle)
        return f_original.result(), f_with.result()


def compare_bundles(original: BundleArtifact, with_packages: BundleArtifact) -> SizeComparison:
    original_bytes, with_bytes = read_bundle_sizes(original, with_packages)
    return SizeComparison(original_bytes=original_bytes, with_packages_bytes=with_bytes)


def format_report(comparison: SizeComparison, packages_label: str) -> str:
    delta_text = format_size(comparison.delta_bytes)
    return (
        f"📦 The original bundle is: {format_size(comparison.original_bytes)}\n"
        f"📦 The bundle with {packages_label} is: {format_size(comparison.with_packages_bytes)}\n"
        f"⚖️  Therefore, {packages_label} adds {delta_text} ({comparison.percent:+d}%) to the JavaScript bundle"
    )
