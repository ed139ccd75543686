from __future__ import annotations

import os


class FileStatsError(Exception):
    """Base class for errors raised by file_stats."""


class ScanError(FileStatsError):
    """The scan root could not be walked at all."""

    def __init__(self, root: str, cause: OSError):
        self.root = os.fspath(root)
        self.cause = cause
        super().__init__(str(cause))
