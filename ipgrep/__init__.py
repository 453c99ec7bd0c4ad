"""ipgrep: extract IPv4/IPv6 address literals from arbitrary text files."""
from .constants import PROG, USAGE
from .logging_setup import init_logger
from .parsing import IPAddress, is_delimiter, iter_words, split_words, parse_ip, is_ip
from .scan import EmptySourceError, Source, ScanResult, scan, scan_source, open_source, open_sources, scan_all
from .render import print_results, print_errors, report

__version__ = "0.1.0"
