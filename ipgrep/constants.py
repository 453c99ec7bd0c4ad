"""Centralized application constants.

Program name, usage text, and the environment variables that control
logging. Nothing here changes what gets extracted or printed to stdout.
"""

PROG: str = "ipgrep"
"""Program name used in usage text and error lines."""

STDIN_ARG: str = "-"
"""Source argument that selects standard input."""

STDIN_NAME: str = "<stdin>"
"""Display name for the standard input source."""

HELP_FLAGS: tuple[str, ...] = ("-h", "-help", "--help")
"""First-argument flags that print usage and exit."""

END_OF_OPTIONS: str = "--"
"""Leading argument that is skipped rather than opened."""

EMPTY_SOURCE_REASON: str = "empty file"
"""Reason reported for a source that produced no bytes."""

MAX_WORKERS: int = 32
"""Upper bound on scan threads; extra sources queue for a free worker."""


# ========== Logging configuration (env only) ==========
LOG_ENV: str = "IPGREP_LOG"
"""Path of the log file; logging stays disabled when unset."""

DEBUG_ENV: str = "IPGREP_DEBUG"
"""Truthy value switches the log level from INFO to DEBUG."""

LOG_ROTATION: str = "1 MB"
LOG_RETENTION: int = 3


USAGE: str = """
usage: {prog} [file ...]

{prog} scans one or more input files for valid IPv4 or IPv6 addresses and prints
the result. It accepts text files in any format (newline-delimited, JSON, YAML,
etc.) so long as the files contain IPs separated either by whitespace or by any
punctuation character other than '.' or ':'. Use '-' to read standard input.

For example, these are all valid input:

    10.10.10.2 https://webserver.com
    {{"ip": "172.16.2.84"}}
    log -> time=13:10, event=foo, addr=192.168.0.2, desc="a foo went bar"
    IP address 8.8.8.8 is for Google DNS.

{prog} would extract 10.10.10.2, 172.16.2.84, 192.168.0.2, and 8.8.8.8 from the
above. However, given this input:

    There's no place like 127.0.0.1.

{prog} extracts nothing: the final '.' renders the address invalid, and this
utility doesn't try quite that hard.

Environment:
  {log_env}    write a log file to this path (off by default)
  {debug_env}  log at DEBUG level when set to 1/true/yes/on
"""
