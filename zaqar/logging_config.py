"""
Logging setup for Zaqar.

All modules log under the ``zaqar`` namespace. Diagnostics go to stderr
so that command output on stdout (dry-run reports, ``source list``)
stays clean, and can optionally be copied to a rotating file.
"""

import logging
import logging.handlers
import sys

LOGGER_NAMESPACE = "zaqar"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | None = None, debug: bool = False) -> int:
    """
    Pick the effective log level.

    An explicit level wins; otherwise ``debug`` selects DEBUG and the
    default is INFO. Unrecognised names fall back to INFO.
    """
    if level is None:
        return logging.DEBUG if debug else logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _handlers(
    log_file: str | None,
    max_bytes: int,
    backup_count: int
) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        ))
    return handlers


def setup_logging(
    level: str | None = None,
    debug: bool = False,
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure the ``zaqar`` logger and return it.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Use DEBUG when no explicit level is given
        log_file: Also write to this file, rotated at ``max_bytes``
        max_bytes: Size at which the log file is rotated
        backup_count: Rotated files to keep
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    zaqar_logger = logging.getLogger(LOGGER_NAMESPACE)
    zaqar_logger.setLevel(resolve_level(level, debug))
    zaqar_logger.handlers.clear()
    for handler in _handlers(log_file, max_bytes, backup_count):
        handler.setFormatter(formatter)
        zaqar_logger.addHandler(handler)
    zaqar_logger.propagate = False

    return zaqar_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, placed under the ``zaqar`` namespace."""
    prefix = f"{LOGGER_NAMESPACE}."
    if name == LOGGER_NAMESPACE or name.startswith(prefix):
        return logging.getLogger(name)
    return logging.getLogger(prefix + name)
