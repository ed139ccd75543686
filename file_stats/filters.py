from __future__ import annotations

"""Predicates deciding which directories are walked and which files are counted."""

import os

from .config import ScanConfig

NO_EXTENSION = "[noext]"


def extension_key(name: str) -> str:
    """
    Return the aggregation key for a file name.

    'a.tar.gz' -> 'gz', 'Makefile' -> '[noext]', '.bashrc' -> '[noext]'.
    Case is preserved. A trailing dot ('notes.') has an empty suffix and
    also maps to '[noext]'.
    """
    ext = os.path.splitext(name)[1]
    return ext[1:] or NO_EXTENSION


def should_descend(dir_name: str, config: ScanConfig) -> bool:
    return dir_name not in config.exclude_dirs


def should_count(name: str, size: int, config: ScanConfig) -> bool:
    if not config.include_hidden and name.startswith("."):
        return False
    if config.min_size > 0 and size < config.min_size:
        return False
    if config.max_size > 0 and size > config.max_size:
        return False
    return extension_key(name) not in config.exclude_exts
