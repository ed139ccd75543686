from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .walker import ScanResult

OTHER = "other"
COLLAPSE_THRESHOLD = 0.01  # shares below 1% fold into OTHER unless verbose


@dataclass(frozen=True)
class StatEntry:
    ext: str
    count: int = 0
    size: int = 0

    def metric(self, by_size: bool) -> int:
        return self.size if by_size else self.count


def safe_share(value: float, total: float) -> float:
    if total == 0:
        return 0.0
    return value / total


def aggregate_stats(result: ScanResult, by_size: bool = False, verbose: bool = False) -> List[StatEntry]:
    """
    Turn raw per-extension totals into display rows, largest first.

    Only the chosen metric is carried on each row; the other field stays 0.
    Without `verbose`, extensions holding less than 1% of the total are
    summed into a single 'other' row.
    """
    total = result.total_bytes if by_size else result.total_files
    stats: List[StatEntry] = []
    other = 0

    for ext, totals in result.by_ext.items():
        value = totals.size if by_size else totals.count
        if not verbose and safe_share(value, total) < COLLAPSE_THRESHOLD:
            other += value
            continue
        stats.append(_make_entry(ext, value, by_size))

    if other > 0:
        stats.append(_make_entry(OTHER, other, by_size))

    # list.sort is stable, so equal rows keep first-seen order.
    stats.sort(key=lambda s: s.metric(by_size), reverse=True)
    return stats


def _make_entry(ext: str, value: int, by_size: bool) -> StatEntry:
    if by_size:
        return StatEntry(ext=ext, size=value)
    return StatEntry(ext=ext, count=value)
