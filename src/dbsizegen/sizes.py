"""
Size parsing/formatting and the end-of-run report.

Units are binary multiples (1 KB = 1024 B). format_size() shows a value in
the smaller unit up to and including the threshold, so exactly 1024 bytes is
"1024.000 B" and 1025 bytes is "1.001 KB".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from dbsizegen.errors import MalformedSizeError

ONE_KB = 1024
ONE_MB = 1024 * 1024
ONE_GB = 1024 * 1024 * 1024

UNITS = {
    "B": 1,
    "K": ONE_KB,
    "KB": ONE_KB,
    "M": ONE_MB,
    "MB": ONE_MB,
    "Mi": ONE_MB,
    "G": ONE_GB,
    "GB": ONE_GB,
    "Gi": ONE_GB,
}

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*([A-Za-z]+)\s*$")


# -----------------------------
# Parse / format
# -----------------------------
def parse_size(text: str) -> int:
    m = _SIZE_RE.match(text or "")
    if not m:
        raise MalformedSizeError(
            f"expected <number><unit> (e.g. 128MB, 1.5GB), got {text!r}"
        )
    amount, unit = m.groups()
    if unit not in UNITS:
        raise MalformedSizeError(
            f"expected data unit to be one of (B, KB, MB, GB). Found: {unit}"
        )
    return int(float(amount) * UNITS[unit])


def format_size(size: float) -> str:
    size = max(0.0, float(size))
    if size <= ONE_KB:
        return f"{size:.3f} B"
    if size <= ONE_MB:
        return f"{size / ONE_KB:.3f} KB"
    if size <= ONE_GB:
        return f"{size / ONE_MB:.3f} MB"
    return f"{size / ONE_GB:.3f} GB"


# -----------------------------
# Progress / summary
# -----------------------------
@dataclass(frozen=True)
class ProgressSnapshot:
    timestamp: float
    current_bytes: int
    initial_bytes: int
    target_bytes: int

    @property
    def inserted_bytes(self) -> int:
        return self.current_bytes - self.initial_bytes

    @property
    def percent(self) -> float:
        if self.target_bytes <= 0:
            return 100.0
        return self.inserted_bytes * 100.0 / self.target_bytes


@dataclass(frozen=True)
class RunSummary:
    elapsed: float
    initial_bytes: int
    final_bytes: int
    peak_workers: int
    rows_inserted: int = 0
    rows_failed: int = 0
    retries: int = 0

    @property
    def bytes_inserted(self) -> int:
        return self.final_bytes - self.initial_bytes

    @property
    def throughput(self) -> float:
        # elapsed rounds to 0 for tiny targets
        if self.elapsed <= 0:
            return 0.0
        return max(0, self.bytes_inserted) / self.elapsed


def format_elapsed(seconds: float) -> str:
    seconds = max(0.0, seconds)
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    if h:
        return f"{int(h)}h{int(m)}m{s:.3f}s"
    if m:
        return f"{int(m)}m{s:.3f}s"
    return f"{s:.3f}s"


def format_summary(summary: RunSummary) -> str:
    lines = [
        "",
        "=========================== Summary ===========================",
        f"{'Total data inserted':>35}: {format_size(summary.bytes_inserted)}",
        f"{'Total time taken':>35}: {format_elapsed(summary.elapsed)}",
        f"{'Speed':>35}: {format_size(summary.throughput)}/s",
        f"{'Peak concurrent workers':>35}: {summary.peak_workers}",
        f"{'Rows inserted':>35}: {summary.rows_inserted:,}",
        f"{'Rows failed':>35}: {summary.rows_failed:,}",
        f"{'Connection retries':>35}: {summary.retries:,}",
    ]
    return "\n".join(lines)


def format_schema_sizes(rows: Iterable[Tuple[str, int]]) -> str:
    lines = ["", "====================== Current Database Sizes ================="]
    for schema, size in rows:
        lines.append(f"{schema:>35}: {format_size(size)}")
    return "\n".join(lines)
