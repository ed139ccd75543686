from __future__ import annotations

import re
import sys

import pytest

from file_stats.aggregate import StatEntry
from file_stats.config import ScanConfig
from file_stats.presenter import (
    BAR_WIDTH,
    BREAKDOWN_HEADER,
    NO_MATCHES,
    format_entry,
    human_readable_size,
    make_console,
    percentage,
    print_report,
    render_report,
)
from file_stats.walker import ScanResult, scan_directory


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1.00 KB"),
        (2048, "2.00 KB"),
        (1536, "1.50 KB"),
        (1024**2, "1.00 MB"),
        (5 * 1024**3 // 2, "2.50 GB"),
        (3 * 1024**4, "3.00 TB"),
        (2048 * 1024**4, "2048.00 TB"),
    ],
)
def test_human_readable_size(num_bytes, expected):
    assert human_readable_size(num_bytes) == expected


@pytest.mark.parametrize("num_bytes", [1, 999, 1024, 1500, 98_765, 3_000_000, 7 * 1024**3 + 12345, 5 * 1024**4])
def test_human_readable_size_round_trips(num_bytes):
    multipliers = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3, "TB": 1024**4}
    number, unit = human_readable_size(num_bytes).split()
    value = float(number)
    assert value * multipliers[unit] == pytest.approx(num_bytes, abs=0.005 * multipliers[unit])
    assert multipliers[unit] <= num_bytes
    bigger = [m for m in multipliers.values() if m > multipliers[unit]]
    assert all(m > num_bytes for m in bigger)


def test_format_entry_no_bar():
    assert format_entry(StatEntry("py", count=3), 75.0, no_bar=True) == "py            75%"
    assert format_entry(StatEntry("[noext]", count=1), 4.4, no_bar=True) == "[noext]        4%"


def test_format_entry_bar():
    line = format_entry(StatEntry("bin", size=5000), 98.814, no_bar=False)
    assert line == "bin        |" + "█" * 39 + "-" + "| 98.81%"


def test_format_entry_bar_bounds():
    full = format_entry(StatEntry("go", count=1), 100.0, no_bar=False)
    empty = format_entry(StatEntry("go", count=1), 0.0, no_bar=False)
    assert full.count("█") == BAR_WIDTH and "-" not in full.split("|")[1]
    assert empty.split("|")[1] == "-" * BAR_WIDTH
    assert full.endswith("100.00%")
    assert empty.endswith("  0.00%")


def test_percentage_human_rounds_half_up():
    result = ScanResult()
    result.add("a", 1)
    result.add("b", 1)
    result.add("b", 1)
    result.add("b", 1)
    result.add("c", 1)
    result.add("c", 1)
    result.add("c", 1)
    result.add("c", 1)
    # a = 1/8 = 12.5%
    entry = StatEntry("a", count=1)
    assert percentage(entry, result, by_size=False, human=False) == 12.5
    assert percentage(entry, result, by_size=False, human=True) == 13.0


def test_percentage_zero_total():
    assert percentage(StatEntry("x", size=0), ScanResult(), by_size=True, human=False) == 0.0


def test_render_report_bysize_scenario(sample_tree):
    cfg = ScanConfig(directory=str(sample_tree), by_size=True)
    lines = render_report(cfg, scan_directory(cfg))
    assert lines[0] == BREAKDOWN_HEADER
    assert lines[1].startswith("bin ")
    assert lines[1].endswith("98.81%")
    assert lines[2].startswith("txt ")
    assert lines[2].endswith("1.19%")


def test_render_report_nobar_human(sample_tree):
    cfg = ScanConfig(directory=str(sample_tree), no_bar=True, human=True)
    lines = render_report(cfg, scan_directory(cfg))
    assert lines == ["txt           75%", "bin           25%"]


def test_render_report_show_size(sample_tree):
    cfg = ScanConfig(directory=str(sample_tree), show_size=True, no_bar=True)
    lines = render_report(cfg, scan_directory(cfg))
    assert lines[0] == "Directory size: 4.94 KB"
    assert BREAKDOWN_HEADER not in lines


def test_render_report_size_only(sample_tree):
    cfg = ScanConfig(directory=str(sample_tree), size_only=True, show_size=True)
    assert render_report(cfg, scan_directory(cfg)) == ["4.94 KB"]


def test_render_report_empty_wins_over_other_flags():
    for cfg in (ScanConfig(), ScanConfig(size_only=True), ScanConfig(show_size=True, by_size=True)):
        assert render_report(cfg, ScanResult()) == [NO_MATCHES]


def test_print_report_writes_plain_text(sample_tree, capsys):
    cfg = ScanConfig(directory=str(sample_tree), verbose=True)
    result = scan_directory(cfg)
    result.add("[noext]", 1)
    print_report(cfg, result)
    out = capsys.readouterr().out
    assert "\x1b[" not in out
    assert re.search(r"^\[noext\]\s+\|", out, re.MULTILINE)
    assert out.splitlines()[0] == BREAKDOWN_HEADER


def test_terminal_console_never_wraps_lines(tmp_path, capsys, monkeypatch, make_file):
    make_file(tmp_path / "a.averyveryverylongextensionname", 10)
    monkeypatch.setenv("COLUMNS", "50")
    monkeypatch.setattr(sys.stdout, "isatty", lambda: True)

    console = make_console()
    assert console.soft_wrap is True

    cfg = ScanConfig(directory=str(tmp_path))
    expected = render_report(cfg, scan_directory(cfg))
    assert len(expected[1]) > 50

    print_report(cfg, scan_directory(cfg), console)
    out = re.sub(r"\x1b\[[0-9;?]*[A-Za-z]", "", capsys.readouterr().out)
    assert out.splitlines() == expected
