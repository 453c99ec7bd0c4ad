from __future__ import annotations
import ipaddress, re, sys, unicodedata
from functools import lru_cache
from typing import Iterator, Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

# '.' and ':' are punctuation but appear inside address literals
_KEEP = frozenset(".:")

# ====== Tokenizer ======
def is_delimiter(ch: str) -> bool:
    """
    True for whitespace and for punctuation/symbol characters other than
    '.' and ':'. "Punctuation" means any Unicode P* or S* category, which
    covers every character of string.punctuation ('=', '>', '$', ...).
    """
    if ch in _KEEP:
        return False
    return ch.isspace() or unicodedata.category(ch)[0] in "PS"

@lru_cache(maxsize=None)
def _word_re() -> re.Pattern[str]:
    """Compiled `[^<delimiters>]+`, the class built once from is_delimiter()."""
    ranges: list[tuple[int, int]] = []
    start = None
    for cp in range(sys.maxunicode + 1):
        if is_delimiter(chr(cp)):
            if start is None:
                start = cp
        elif start is not None:
            ranges.append((start, cp - 1))
            start = None
    if start is not None:
        ranges.append((start, sys.maxunicode))
    cls = "".join(
        re.escape(chr(a)) if a == b else f"{re.escape(chr(a))}-{re.escape(chr(b))}"
        for a, b in ranges
    )
    return re.compile(f"[^{cls}]+")

def iter_words(buffer: bytes) -> Iterator[bytes]:
    """
    Yield maximal runs of non-delimiter bytes, left to right.
    Bytes that are not valid UTF-8 are carried through surrogateescape and
    count as non-delimiters.
    """
    text = buffer.decode("utf-8", errors="surrogateescape")
    for m in _word_re().finditer(text):
        yield m.group().encode("utf-8", errors="surrogateescape")

def split_words(buffer: bytes) -> list[bytes]:
    """Return the candidate words of buffer (never empty ones)."""
    return list(iter_words(buffer))

# ====== Validator ======
def parse_ip(word: bytes) -> Optional[IPAddress]:
    """
    Parse a whole word as an IPv4 or IPv6 literal; None when it isn't one.

    Strictness is that of the ipaddress module: four decimal octets 0-255
    without leading zeros, or RFC 4291 text form with at most one '::' and
    an optional dotted-quad tail. No partial matches, no '%scope' suffix.
    IPv4-mapped IPv6 (::ffff:a.b.c.d) comes back as the IPv4 address.
    """
    try:
        s = word.decode("ascii")
    except UnicodeDecodeError:
        return None
    if "%" in s:
        return None
    try:
        ip = ipaddress.ip_address(s)
    except ValueError:
        return None
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip

def is_ip(word: bytes) -> bool:
    return parse_ip(word) is not None
