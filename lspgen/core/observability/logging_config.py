"""
Logging configuration — one setup call for any process embedding lspgen.

Every module that does ``logger = logging.getLogger(__name__)`` inherits
this config. Generators log at DEBUG, the config loader at INFO.

Levels are resolved in precedence order:
    explicit argument  >  LSPGEN_LOG_LEVEL env var  >  WARNING (default)

Optional file output via LSPGEN_LOG_FILE / LSPGEN_LOG_FILE_LEVEL env vars.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

# ── Format strings ──────────────────────────────────────────────

_FMT_MINIMAL = "%(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

ENV_LEVEL = "LSPGEN_LOG_LEVEL"
ENV_FILE = "LSPGEN_LOG_FILE"
ENV_FILE_LEVEL = "LSPGEN_LOG_FILE_LEVEL"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the log file, defaults to ``level``.
    """
    numeric_level = parse_level(level)

    if numeric_level <= logging.DEBUG:
        console_fmt = logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_CONSOLE)
    elif numeric_level <= logging.INFO:
        console_fmt = logging.Formatter(_FMT_VERBOSE, datefmt=_DATEFMT_CONSOLE)
    else:
        console_fmt = logging.Formatter(_FMT_MINIMAL)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(console_fmt)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    effective_level = numeric_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)


def setup_logging_from_env(
    level: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Configure logging from LSPGEN_* environment variables.

    An explicit ``level`` wins over ``LSPGEN_LOG_LEVEL``.
    """
    env = os.environ if environ is None else environ
    setup_logging(
        level=level or env.get(ENV_LEVEL, "WARNING"),
        log_file=env.get(ENV_FILE),
        log_file_level=env.get(ENV_FILE_LEVEL),
    )


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant, WARNING if unknown."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
