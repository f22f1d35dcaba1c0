# asset_tracker/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

_configured = False

FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env_int(name: str, default: int, problems: list) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        problems.append(f"Invalid {name}={raw!r}; using default {default}.")
        return default


def _env_level(problems: list) -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        problems.append(f"Unknown LOG_LEVEL={name!r}; using INFO.")
        return logging.INFO
    return level


def setup_logging():
    """
    Configure the root logger once from LOG_* env vars.
    Console logging goes to stderr and is off unless LOG_TO_STDERR=true,
    since stdout belongs to the menu. Bad values fall back to defaults
    and are reported once the handlers exist.
    """
    global _configured
    if _configured:
        return

    problems: list = []
    level = _env_level(problems)
    log_to_file = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    log_file = os.getenv("LOG_FILE", "asset_tracker.log")
    log_max_bytes = _env_int("LOG_MAX_BYTES", 2 * 1024 * 1024, problems)
    log_backups = _env_int("LOG_BACKUPS", 3, problems)
    log_to_stderr = os.getenv("LOG_TO_STDERR", "false").lower() == "true"

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(FORMAT)

    # Leave existing handlers alone (e.g. a test runner's)
    if not root.handlers:
        if log_to_stderr:
            ch = logging.StreamHandler(sys.stderr)
            ch.setLevel(level)
            ch.setFormatter(formatter)
            root.addHandler(ch)

        if log_to_file:
            try:
                log_dir = os.path.dirname(log_file)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                fh = RotatingFileHandler(
                    log_file,
                    maxBytes=log_max_bytes,
                    backupCount=log_backups,
                    encoding="utf-8",
                )
                fh.setLevel(level)
                fh.setFormatter(formatter)
                root.addHandler(fh)
            except OSError as e:
                problems.append(f"Failed to initialize file logging at {log_file}: {e}")

        if not root.handlers:
            root.addHandler(logging.NullHandler())

    log = logging.getLogger(__name__)
    for problem in problems:
        log.warning(problem)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
