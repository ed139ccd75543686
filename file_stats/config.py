from __future__ import annotations

"""
Scan configuration and the small parsing helpers used to build it.

ScanConfig is built once by the CLI and handed, unchanged, to the walker,
the aggregator and the presenter.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class ScanConfig:
    directory: str = "."
    verbose: bool = False
    no_bar: bool = False
    show_size: bool = False
    size_only: bool = False
    include_hidden: bool = False
    human: bool = False
    by_size: bool = False
    min_size: int = 0   # 0 = no lower bound
    max_size: int = 0   # 0 = no upper bound
    exclude_exts: FrozenSet[str] = field(default_factory=frozenset)
    exclude_dirs: FrozenSet[str] = field(default_factory=frozenset)


_UNIT_MAP = {
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "m": 1024**2,
    "mb": 1024**2,
    "g": 1024**3,
    "gb": 1024**3,
    "t": 1024**4,
    "tb": 1024**4,
}


def parse_size(raw: Optional[str]) -> int:
    """
    Parse a size threshold into bytes.

    Accepted forms (case-insensitive):
    - "123" -> 123 bytes
    - "64K", "64KB", "500M", "2G", "1T"

    None or an empty string means "no bound" and returns 0.
    Raises ValueError on negative or malformed input.
    """
    if raw is None:
        return 0
    s = raw.strip()
    if not s:
        return 0
    if s.startswith("-"):
        raise ValueError(f"Size must not be negative: {raw}")

    i = 0
    n = len(s)
    while i < n and (s[i].isdigit() or s[i] == "."):
        i += 1
    num_str = s[:i]
    unit_str = s[i:].strip().lower()

    try:
        value = float(num_str)
    except ValueError as e:
        raise ValueError(f"Invalid size value: {raw}") from e

    if not unit_str:
        return int(value)
    if unit_str not in _UNIT_MAP:
        raise ValueError(f"Unknown size unit in '{raw}'; expected one of K, M, G, T (optional 'B').")
    return int(value * _UNIT_MAP[unit_str])


def split_list(values: Iterable[str], strip_dots: bool = False) -> FrozenSet[str]:
    """
    Flatten repeated comma-separated option values into a set.

    Items are whitespace-trimmed; with strip_dots the leading dots of
    extensions are removed ("  .md" -> "md"). Empty items are dropped.
    """
    out = set()
    for value in values:
        for part in str(value).split(","):
            item = part.strip()
            if strip_dots:
                item = item.lstrip(".")
            if item:
                out.add(item)
    return frozenset(out)
