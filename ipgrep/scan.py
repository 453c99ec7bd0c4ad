"""Per-source scan pipeline and the concurrent fan-out over sources.

Each source is read once into memory, split into candidate words, and every
word is tested as an address literal. Sources are scanned independently on a
thread pool; the only synchronization is the final join.
"""
from __future__ import annotations
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Optional

from .constants import PROG, STDIN_ARG, STDIN_NAME, EMPTY_SOURCE_REASON, MAX_WORKERS
from .logging_setup import log_debug, log_error, log_timing
from .parsing import IPAddress, iter_words, parse_ip


class EmptySourceError(Exception):
    """Recorded on a ScanResult when a source produced no bytes."""

    def __init__(self, reason: str = EMPTY_SOURCE_REASON):
        super().__init__(reason)


@dataclass
class Source:
    """A named, readable binary stream. The scan task that receives it closes it."""

    name: str
    stream: BinaryIO

    def close(self) -> None:
        self.stream.close()


@dataclass
class ScanResult:
    """Outcome of scanning one source.

    Attributes:
        source: Display name of the source
        addresses: Parsed addresses in first-seen order (duplicates kept)
        error: OSError from reading, or EmptySourceError; None on success
    """

    source: str
    addresses: list[IPAddress] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def reason(self) -> str:
        if self.error is None:
            return ""
        if isinstance(self.error, OSError) and self.error.strerror:
            return self.error.strerror
        return str(self.error)

    def render(self) -> str:
        """Error line for this result, or "" when the scan succeeded."""
        if self.error is None:
            return ""
        return f"{PROG}: error: {self.source}: {self.reason()}"


@log_timing
def scan(source: Source) -> ScanResult:
    """Read source fully and collect every word that parses as an address.

    Returns:
        ScanResult with error set when the read fails or the source is empty;
        otherwise the addresses (possibly none) in token order.

    Note:
        Does not close the stream; see scan_source().
    """
    res = ScanResult(source=source.name)
    try:
        data = source.stream.read()
    except OSError as e:
        res.error = e
        log_error(f"read failed for {source.name}: {e}")
        return res
    if not data:
        res.error = EmptySourceError()
        log_error(f"{source.name}: {EMPTY_SOURCE_REASON}")
        return res

    words = 0
    for word in iter_words(data):
        words += 1
        ip = parse_ip(word)
        if ip is not None:
            res.addresses.append(ip)
    log_debug(f"{source.name}: {len(data)} bytes, {words} words, {len(res.addresses)} addresses")
    return res


def scan_source(source: Source) -> ScanResult:
    """Scan source and release its stream on every exit path."""
    with source.stream:
        return scan(source)


def open_source(path: str) -> Source:
    if path == STDIN_ARG:
        # closefd=False: closing the task's handle must not close fd 0
        return Source(STDIN_NAME, open(sys.stdin.fileno(), "rb", closefd=False))
    return Source(path, open(path, "rb"))


def open_sources(paths: Iterable[str]) -> list[Source]:
    """Open every path up front.

    Raises:
        OSError: for the first path that cannot be opened; the sources opened
        before it are closed first. The exception's filename is set to the
        failing path.
    """
    sources: list[Source] = []
    for p in paths:
        try:
            sources.append(open_source(p))
        except OSError as e:
            for s in sources:
                s.close()
            if e.filename is None:
                e.filename = p
            raise
    return sources


def scan_all(sources: list[Source], max_workers: Optional[int] = None) -> list[ScanResult]:
    """Scan every source concurrently, one task each, on at most MAX_WORKERS threads.

    Waits for all tasks before returning. Results come back in the order of
    `sources`, whatever order the tasks finish in.
    """
    if not sources:
        return []
    workers = max_workers or min(len(sources), MAX_WORKERS)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix=PROG) as pool:
        futures = [pool.submit(scan_source, s) for s in sources]
        return [f.result() for f in futures]
