#!/usr/bin/env python
"""
Main CLI entry point for the file-stats tool.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Sequence, Tuple

from .config import ScanConfig, parse_size, split_list
from .exceptions import ScanError
from .presenter import make_console, print_report
from .walker import scan_directory

LOG_LEVEL_ENV = "FILE_STATS_LOG_LEVEL"
VALUE_FLAGS = ("--minsize", "--maxsize", "--exclude", "--excludedir")

logger = logging.getLogger(__name__)


def _size_arg(raw: str) -> int:
    if not raw.strip():
        raise argparse.ArgumentTypeError("a size value is required")
    try:
        return parse_size(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="file-stats",
        usage="file-stats [options] [directory]",
        description="Report the distribution of file extensions under a directory, "
                    "by file count or by cumulative size.",
        allow_abbrev=False,
    )
    p.add_argument("directory", nargs="*", default=[],
                   help="Directory to scan (default: current directory). The last one given wins.")
    p.add_argument("--verbose", action="store_true",
                   help="Show all file types, including those <1%%.")
    p.add_argument("--nobar", dest="no_bar", action="store_true",
                   help="Suppress bar chart output, print percentages only.")
    p.add_argument("--size", dest="show_size", action="store_true",
                   help="Print total directory size.")
    p.add_argument("--sizeonly", dest="size_only", action="store_true",
                   help="Only print directory size and exit.")
    p.add_argument("--include-hidden", action="store_true",
                   help="Include hidden files in stats.")
    p.add_argument("--human", action="store_true",
                   help="Round percentages to whole numbers.")
    p.add_argument("--minsize", dest="min_size", metavar="BYTES", type=_size_arg, default=0,
                   help="Only include files >= this size (bytes, or with a K/M/G/T suffix).")
    p.add_argument("--maxsize", dest="max_size", metavar="BYTES", type=_size_arg, default=0,
                   help="Only include files <= this size (bytes, or with a K/M/G/T suffix).")
    p.add_argument("--exclude", metavar="EXTS", action="append", default=[],
                   help="Comma-separated list of extensions to exclude. Repeatable.")
    p.add_argument("--excludedir", metavar="DIRS", action="append", default=[],
                   help="Comma-separated list of directory names to exclude. Repeatable.")
    p.add_argument("--bysize", dest="by_size", action="store_true",
                   help="Sort results by file size instead of count.")
    return p


def parse_args(argv: Sequence[str] | None = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse the command line, returning (args, ignored).

    Any --key=value whose key is not a value flag is tolerated and returned
    in `ignored`, including on/off flags such as --verbose=true, which
    therefore stay off. Any other unrecognized token is a usage error.
    """
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    ignored = [
        tok for tok in argv
        if tok.startswith("--") and "=" in tok and tok.split("=", 1)[0] not in VALUE_FLAGS
    ]
    args, unknown = parser.parse_known_intermixed_args([tok for tok in argv if tok not in ignored])
    if unknown:
        parser.error("unrecognized arguments: %s" % " ".join(unknown))
    return args, ignored


def config_from_args(args: argparse.Namespace) -> ScanConfig:
    return ScanConfig(
        directory=args.directory[-1] if args.directory else ".",
        verbose=args.verbose,
        no_bar=args.no_bar,
        show_size=args.show_size,
        size_only=args.size_only,
        include_hidden=args.include_hidden,
        human=args.human,
        by_size=args.by_size,
        min_size=args.min_size,
        max_size=args.max_size,
        exclude_exts=split_list(args.exclude, strip_dots=True),
        exclude_dirs=split_list(args.excludedir),
    )


def _configure_logging() -> None:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    args, ignored = parse_args(argv)
    _configure_logging()
    for tok in ignored:
        logger.debug("Ignoring unknown option %s", tok)

    config = config_from_args(args)
    try:
        result = scan_directory(config)
    except ScanError as e:
        make_console(stderr=True).print(f"Error walking directory: {e}")
        return 1

    print_report(config, result, make_console())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
