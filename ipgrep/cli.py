#!/usr/bin/env python3
"""
cli.py

Scan one or more files for valid IPv4/IPv6 addresses and print them per file.

Usage:
    ipgrep [file ...]
    cat access.log | ipgrep -
    ipgrep --help

Notes:
 - Files are split on whitespace and on any punctuation except '.' and ':'.
 - Every word must be a complete address literal; '127.0.0.1.' is not.
 - A file that cannot be opened aborts the run (exit 1) before anything is
   scanned. Read errors and empty files are reported at the end (exit 0).
"""
from __future__ import annotations
import sys

from .constants import PROG, HELP_FLAGS, END_OF_OPTIONS
from .logging_setup import init_logger, log_info, log_error
from .render import print_usage, print_error, report
from .scan import open_sources, scan_all

def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if not argv or argv[0] in HELP_FLAGS:
        print_usage()
        return 0

    init_logger()
    # every argument is a source; a leading "--" is dropped so "-"-prefixed names can follow
    files = argv[1:] if argv[0] == END_OF_OPTIONS else argv
    log_info(f"{PROG} started with {len(files)} source(s)")

    # If any input file cannot be opened, quit before scanning anything.
    try:
        sources = open_sources(files)
    except OSError as e:
        log_error(f"cannot open {e.filename}: {e}")
        print_error(str(e.filename), e.strerror or str(e))
        return 1

    results = scan_all(sources)
    failed = report(results)
    log_info(f"done: {len(results) - failed} scanned, {failed} failed")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
