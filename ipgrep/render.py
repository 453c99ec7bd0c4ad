from __future__ import annotations
import sys
from typing import Iterable

from rich.console import Console
from rich.text import Text

from .constants import PROG, USAGE, LOG_ENV, DEBUG_ENV
from .scan import ScanResult

# -------------------------------------------------------------------
# Output helpers: results on stdout, errors on stderr
# -------------------------------------------------------------------

def _stderr_console() -> Console:
    # built per call so colour detection follows whatever sys.stderr is now
    return Console(stderr=True, highlight=False)

def err(msg: str) -> None:
    """Print one error line to stderr; red when stderr is a colour terminal."""
    _stderr_console().print(Text(msg, style="red"), soft_wrap=True)

def print_error(source: str, reason: str) -> None:
    err(f"{PROG}: error: {source}: {reason}")

def print_usage() -> None:
    print(USAGE.format(prog=PROG, log_env=LOG_ENV, debug_env=DEBUG_ENV), file=sys.stderr)

def print_results(results: Iterable[ScanResult]) -> list[ScanResult]:
    """
    Print every successful result as a '# results for' block and return
    the failed ones, in the order given.
    """
    failed: list[ScanResult] = []
    for r in results:
        if not r.ok:
            failed.append(r)
            continue
        print(f"# results for {r.source}:")
        for ip in r.addresses:
            print(ip)
        print()
    return failed

def print_errors(failed: list[ScanResult]) -> None:
    if not failed:
        return
    print("# errors:", file=sys.stderr)
    for r in failed:
        err(r.render())

def report(results: Iterable[ScanResult]) -> int:
    """Print results then errors; returns the number of failed sources."""
    failed = print_results(results)
    sys.stdout.flush()
    print_errors(failed)
    return len(failed)
