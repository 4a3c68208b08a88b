from __future__ import annotations

from pathlib import Path

import pytest

from pipeline.models import BundleArtifact, SizeComparison
from pipeline.sizes import compare_bundles, format_report, format_size


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (0, "0 B"),
        (999, "999 B"),
        (1_000, "1 kB"),
        (1_536, "1.54 kB"),
        (250_000, "250 kB"),
        (1_250_000, "1.25 MB"),
        (3_000_000_000, "3 GB"),
        (-12_500, "-12.5 kB"),
    ],
)
def test_format_size(num_bytes, expected) -> None:
    assert format_size(num_bytes) == expected


def test_delta_and_percent() -> None:
    c = SizeComparison(original_bytes=1_000_000, with_packages_bytes=1_250_000)
    assert c.delta_bytes == 250_000
    assert c.percent == 25


def test_percent_rounds_half_up_and_can_shrink() -> None:
    assert SizeComparison(original_bytes=200, with_packages_bytes=201).percent == 1  # 0.5%
    assert SizeComparison(original_bytes=1_000, with_packages_bytes=900).percent == -10


def test_compare_bundles_reads_both_files(tmp_path: Path) -> None:
    original = BundleArtifact.in_dir(tmp_path, "original")
    with_packages = BundleArtifact.in_dir(tmp_path, "withPackages")
    original.bundle.write_bytes(b"a" * 1_000_000)
    with_packages.bundle.write_bytes(b"b" * 1_250_000)

    c = compare_bundles(original, with_packages)

    assert (c.original_bytes, c.with_packages_bytes) == (1_000_000, 1_250_000)


def test_compare_bundles_missing_file(tmp_path: Path) -> None:
    original = BundleArtifact.in_dir(tmp_path, "original")
    original.bundle.write_bytes(b"a")
    with pytest.raises(FileNotFoundError):
        compare_bundles(original, BundleArtifact.in_dir(tmp_path, "withPackages"))


def test_compare_bundles_rejects_empty_bundle(tmp_path: Path) -> None:
    original = BundleArtifact.in_dir(tmp_path, "original")
    with_packages = BundleArtifact.in_dir(tmp_path, "withPackages")
    original.bundle.write_bytes(b"")
    with_packages.bundle.write_bytes(b"b")
    with pytest.raises(ValueError, match="empty"):
        compare_bundles(original, with_packages)


def test_format_report() -> None:
    report = format_report(SizeComparison(1_000_000, 1_250_000), "lodash dayjs")
    assert report.splitlines() == [
        "📦 The original bundle is: 1 MB",
        "📦 The bundle with lodash dayjs is: 1.25 MB",
        "⚖️  Therefore, lodash dayjs adds 250 kB (+25%) to the JavaScript bundle",
    ]
