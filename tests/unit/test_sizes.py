"""
Unit tests - size parsing, formatting and the run summary
"""

import pytest

from dbsizegen.errors import MalformedSizeError
from dbsizegen.sizes import (
    ONE_GB,
    ONE_KB,
    ONE_MB,
    RunSummary,
    ProgressSnapshot,
    format_elapsed,
    format_schema_sizes,
    format_size,
    format_summary,
    parse_size,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("128MB", 128 * ONE_MB),
        ("10KB", 10 * ONE_KB),
        ("1.5GB", int(1.5 * ONE_GB)),
        ("512B", 512),
        ("0.5 KB", 512),
        ("2K", 2 * ONE_KB),
        ("3Mi", 3 * ONE_MB),
        ("1Gi", ONE_GB),
    ],
)
def test_parse_size(text, expected):
    assert parse_size(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize("text", ["10XB", "MB", "", "12", "-5MB", "1.2.3GB", "5 mb", "tenMB"])
def test_parse_size_rejects_malformed(text):
    with pytest.raises(MalformedSizeError):
        parse_size(text)


@pytest.mark.unit
def test_malformed_size_is_a_value_error():
    """Callers handling ValueError also catch a bad size"""
    with pytest.raises(ValueError):
        parse_size("10XB")


@pytest.mark.unit
def test_format_size_unit_boundaries():
    """A value stays in the smaller unit up to and including the threshold"""
    assert format_size(0) == "0.000 B"
    assert format_size(ONE_KB) == "1024.000 B"
    assert format_size(ONE_KB + 1) == "1.001 KB"
    assert format_size(ONE_MB) == "1024.000 KB"
    assert format_size(ONE_MB + ONE_KB) == "1.001 MB"
    assert format_size(ONE_GB) == "1024.000 MB"
    assert format_size(2 * ONE_GB) == "2.000 GB"


@pytest.mark.unit
@pytest.mark.parametrize("n", [-1, -ONE_GB, 0, 1, 999, ONE_KB * 7, ONE_MB * 300, ONE_GB * 40])
def test_format_size_never_negative_and_known_unit(n):
    value, unit = format_size(n).split(" ")
    assert float(value) >= 0
    assert unit in {"B", "KB", "MB", "GB"}


@pytest.mark.unit
@pytest.mark.parametrize("text", ["128MB", "10KB", "1.5GB", "512B", "3GB", "64KB"])
def test_formatted_size_parses_back(text):
    n = parse_size(text)
    assert parse_size(format_size(n)) == n


@pytest.mark.unit
def test_progress_snapshot_percent():
    snap = ProgressSnapshot(timestamp=0.0, current_bytes=1500, initial_bytes=500, target_bytes=2000)

    assert snap.inserted_bytes == 1000
    assert snap.percent == 50.0


@pytest.mark.unit
def test_summary_guards_zero_elapsed():
    summary = RunSummary(elapsed=0.0, initial_bytes=0, final_bytes=4096, peak_workers=2)

    assert summary.bytes_inserted == 4096
    assert summary.throughput == 0.0


@pytest.mark.unit
def test_summary_throughput():
    summary = RunSummary(elapsed=2.0, initial_bytes=1000, final_bytes=1000 + 4 * ONE_MB, peak_workers=1)

    assert summary.throughput == 2 * ONE_MB


@pytest.mark.unit
def test_format_summary_lists_every_figure():
    summary = RunSummary(
        elapsed=65.5,
        initial_bytes=0,
        final_bytes=2 * ONE_MB,
        peak_workers=4,
        rows_inserted=1234,
        rows_failed=3,
        retries=7,
    )

    text = format_summary(summary)

    assert "Total data inserted: 2.000 MB" in text
    assert "Total time taken: 1m5.500s" in text
    assert "Peak concurrent workers: 4" in text
    assert "Rows inserted: 1,234" in text
    assert "Rows failed: 3" in text
    assert "Connection retries: 7" in text


@pytest.mark.unit
def test_format_elapsed():
    assert format_elapsed(0) == "0.000s"
    assert format_elapsed(3725.25) == "1h2m5.250s"


@pytest.mark.unit
def test_format_schema_sizes():
    text = format_schema_sizes([("mysql", 2 * ONE_MB), ("sampleData", 512)])

    assert "Current Database Sizes" in text
    assert "sampleData: 512.000 B" in text
