"""
Directory traversal for file_stats.

iter_files() walks a tree depth-first and yields one WalkResult per file,
carrying either the file's size or the OSError that prevented reading it.
scan_directory() consumes that stream, warns about and skips per-entry
errors, applies the count filters and accumulates totals per extension.

Only a root that cannot be listed at all is fatal; it raises ScanError
before anything is yielded.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from .config import ScanConfig
from .exceptions import ScanError
from .filters import extension_key, should_count, should_descend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkResult:
    path: str
    name: str
    size: int = 0
    error: Optional[OSError] = None


@dataclass
class ExtTotals:
    count: int = 0
    size: int = 0


@dataclass
class ScanResult:
    by_ext: Dict[str, ExtTotals] = field(default_factory=dict)
    total_files: int = 0
    total_bytes: int = 0
    skipped: int = 0

    def add(self, ext: str, size: int) -> None:
        """Count one file of `size` bytes under `ext`, keeping grand totals in step."""
        totals = self.by_ext.setdefault(ext, ExtTotals())
        totals.count += 1
        totals.size += size
        self.total_files += 1
        self.total_bytes += size

    @property
    def is_empty(self) -> bool:
        return self.total_files == 0 and self.total_bytes == 0


def _base_name(path: str) -> str:
    return os.path.basename(os.path.normpath(path))


def iter_files(root: str, config: ScanConfig) -> Iterator[WalkResult]:
    """
    Lazily yield a WalkResult for every file under `root`.

    Directories whose base name is excluded are pruned, the root included.
    Unreadable sub-directories and files that cannot be stat'ed (broken
    links, permission errors, entries deleted mid-walk) are yielded with
    `error` set rather than raised.

    Raises ScanError immediately, not on first iteration, if `root` does not
    exist, is not a directory or cannot be listed.
    """
    root = os.fspath(root)
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise ScanError(root, exc) from exc
    return _walk(root, config)


def _walk(root: str, config: ScanConfig) -> Iterator[WalkResult]:
    if not should_descend(_base_name(root), config):
        logger.debug("Root %s is an excluded directory; nothing to scan", root)
        return

    errors: List[OSError] = []

    def drain() -> Iterator[WalkResult]:
        while errors:
            exc = errors.pop(0)
            path = exc.filename if exc.filename is not None else root
            yield WalkResult(path=os.fspath(path), name=_base_name(os.fspath(path)), error=exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=errors.append):
        yield from drain()

        # Prune in place so os.walk never enters excluded subtrees.
        kept = sorted(d for d in dirnames if should_descend(d, config))
        if len(kept) != len(dirnames):
            logger.debug("Pruned %d director(ies) under %s", len(dirnames) - len(kept), dirpath)
        dirnames[:] = kept

        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            try:
                st = os.stat(path)
            except OSError as exc:
                yield WalkResult(path=path, name=name, error=exc)
                continue
            yield WalkResult(path=path, name=name, size=st.st_size)

    yield from drain()


def scan_directory(config: ScanConfig) -> ScanResult:
    """Walk config.directory and accumulate per-extension totals."""
    result = ScanResult()
    for item in iter_files(config.directory, config):
        if item.error is not None:
            logger.warning("Skipping %s due to error: %s", item.path, item.error)
            result.skipped += 1
            continue
        if not should_count(item.name, item.size, config):
            continue
        result.add(extension_key(item.name), item.size)

    logger.debug(
        "scan_directory: root=%s files=%d bytes=%d exts=%d skipped=%d",
        config.directory, result.total_files, result.total_bytes, len(result.by_ext), result.skipped,
    )
    return result
