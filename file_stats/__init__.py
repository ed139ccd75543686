from .config import ScanConfig, parse_size, split_list
from .exceptions import FileStatsError, ScanError
from .filters import NO_EXTENSION, extension_key, should_count, should_descend
from .walker import ExtTotals, ScanResult, WalkResult, iter_files, scan_directory
from .aggregate import OTHER, StatEntry, aggregate_stats
from .presenter import human_readable_size, print_report, render_report

__all__ = [
    "ScanConfig",
    "parse_size",
    "split_list",
    "FileStatsError",
    "ScanError",
    "NO_EXTENSION",
    "extension_key",
    "should_count",
    "should_descend",
    "ExtTotals",
    "ScanResult",
    "WalkResult",
    "iter_files",
    "scan_directory",
    "OTHER",
    "StatEntry",
    "aggregate_stats",
    "human_readable_size",
    "print_report",
    "render_report",
]
