import os, sys, time, functools

from loguru import logger as _log

from .constants import LOG_ENV, DEBUG_ENV, LOG_ROTATION, LOG_RETENTION

# ## === Logging setup ===
# Controlled via env (no CLI flags):
#   IPGREP_LOG    -> path to log file (unset: logging disabled)
#   IPGREP_DEBUG  -> when set to a truthy value, enables DEBUG (else INFO)
# Logs go to file only; stdout/stderr carry results and errors alone.

def env_truthy(name: str, default: bool = False) -> bool:
    v = os.environ.get(name)
    if v is None:
        return default
    return v.strip().lower() in {"1","true","yes","y","on"}

def init_logger() -> None:
    # loguru ships with a stderr sink; drop it so nothing leaks onto the console
    _log.remove()
    log_path = os.environ.get(LOG_ENV)
    if not log_path:
        return
    level = "DEBUG" if env_truthy(DEBUG_ENV, False) else "INFO"
    try:
        _log.add(log_path, level=level, rotation=LOG_ROTATION, retention=LOG_RETENTION,
                 enqueue=False, backtrace=False, diagnose=False)
    except (OSError, ValueError) as e:
        print(f"warning: logging disabled, cannot use {log_path}: {e}", file=sys.stderr)
        return
    _log.info("Logger initialized (loguru) at {} with level {}", log_path, level)

def log_info(msg: str) -> None:
    _log.opt(depth=1).info(msg)

def log_debug(msg: str) -> None:
    _log.opt(depth=1).debug(msg)

def log_error(msg: str) -> None:
    _log.opt(depth=1).error(msg)

def log_timing(fn):
    @functools.wraps(fn)
    def _wrap(*args, **kwargs):
        t0 = time.perf_counter()
        try:
            return fn(*args, **kwargs)
        finally:
            dt = (time.perf_counter() - t0) * 1000.0
            log_debug(f"{fn.__name__} took {dt:.1f} ms")
    return _wrap
