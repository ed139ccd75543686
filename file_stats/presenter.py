from __future__ import annotations

"""
Text rendering for scan results.

render_report() builds the report as plain lines so it can be tested
without a terminal; print_report() sends those lines through a rich
Console with markup, emoji and highlighting disabled, since extension
keys such as '[noext]' would otherwise be read as markup.
"""

import sys
from typing import List, Optional

from rich.console import Console

from .aggregate import StatEntry, aggregate_stats, safe_share
from .config import ScanConfig
from .walker import ScanResult

BAR_WIDTH = 40
BAR_FILL = "█"
BAR_EMPTY = "-"
NO_MATCHES = "No files matched criteria."
BREAKDOWN_HEADER = "File type breakdown:"

_UNITS = (("TB", 1024**4), ("GB", 1024**3), ("MB", 1024**2), ("KB", 1024))


def make_console(stderr: bool = False) -> Console:
    """
    Interactive terminals get a normal console; captured or piped output a wide, unstyled one.

    Both never wrap: each report line is written whole whatever the terminal width.
    """
    stream = sys.stderr if stderr else sys.stdout
    try:
        if stream.isatty():
            return Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)
    except (AttributeError, ValueError):
        pass
    return Console(
        stderr=stderr, width=200, force_terminal=False, no_color=True,
        markup=False, emoji=False, highlight=False, soft_wrap=True,
    )


def human_readable_size(num_bytes: int) -> str:
    """
    Format a byte count with binary units and two decimals.

    Examples:
        0 -> "0 B"
        1023 -> "1023 B"
        2048 -> "2.00 KB"
        1572864 -> "1.50 MB"
    """
    for unit, factor in _UNITS:
        if num_bytes >= factor:
            return f"{num_bytes / factor:.2f} {unit}"
    return f"{int(num_bytes)} B"


def percentage(entry: StatEntry, result: ScanResult, by_size: bool, human: bool) -> float:
    total = result.total_bytes if by_size else result.total_files
    percent = safe_share(entry.metric(by_size), total) * 100
    if human:
        percent = float(int(percent + 0.5))
    return percent


def format_entry(entry: StatEntry, percent: float, no_bar: bool) -> str:
    if no_bar:
        return "%-10s %5.0f%%" % (entry.ext, percent)
    filled = int(percent / 100 * BAR_WIDTH)
    bar = BAR_FILL * filled + BAR_EMPTY * (BAR_WIDTH - filled)
    return "%-10s |%s| %5.2f%%" % (entry.ext, bar, percent)


def render_report(config: ScanConfig, result: ScanResult) -> List[str]:
    if result.is_empty:
        return [NO_MATCHES]

    if config.size_only:
        return [human_readable_size(result.total_bytes)]

    lines: List[str] = []
    if config.show_size:
        lines.append(f"Directory size: {human_readable_size(result.total_bytes)}")
    if not config.no_bar:
        lines.append(BREAKDOWN_HEADER)

    for entry in aggregate_stats(result, by_size=config.by_size, verbose=config.verbose):
        percent = percentage(entry, result, config.by_size, config.human)
        lines.append(format_entry(entry, percent, config.no_bar))
    return lines


def print_report(config: ScanConfig, result: ScanResult, console: Optional[Console] = None) -> None:
    console = console or make_console()
    for line in render_report(config, result):
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
