"""
logging.py - Global logging configuration

Foundation Layer

Structured logging on stderr with optional ANSI colors:
- Color-coded log levels (DEBUG=gray, INFO=green, WARNING=yellow, ERROR=red)
- Timestamps with consistent formatting
- Logger name visible
- Structured key=value pairs rendered inline

stdout is never touched: the stdio transport owns it for JSON-RPC frames
and the CLI prints results there.

Example output:
    2026-01-21 10:30:45 [INFO    ] ui_guidelines.handler: tools/call name=search_guidelines
    2026-01-21 10:30:46 [WARNING ] ui_guidelines.docs: Documentation fetch failed error=timed out

Usage:
    from ui_guidelines.foundation.config.logging import configure_logging, get_logger
    configure_logging(level="INFO")
    logger = get_logger("ui_guidelines.my_module")
    logger.info("Starting...", transport="stdio")
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Any

import structlog


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    DIM = "\033[2m"
    BOLD = "\033[1m"
    REVERSE = "\033[7m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"

    BRIGHT_BLACK = "\033[90m"


LOG_COLORS = {
    "DEBUG": f"{Colors.BRIGHT_BLACK}{Colors.DIM}",
    "INFO": Colors.GREEN,
    "WARNING": Colors.YELLOW,
    "ERROR": f"{Colors.RED}{Colors.BOLD}",
    "CRITICAL": f"{Colors.RED}{Colors.BOLD}{Colors.REVERSE}",
}

RESET = Colors.RESET

# Keys rendered as part of the line prefix rather than as key=value pairs
_RESERVED_KEYS = ("logger", "logger_name", "event", "level", "timestamp", "_colors")


def format_log(
    _logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> str:
    """Render a log entry as a single line.

    Args:
        _logger: The logger instance (unused)
        method_name: The log method name (info, error, etc.)
        event_dict: The event dictionary containing event and other data

    Returns:
        Formatted log string, colored when colors are enabled
    """
    colors = event_dict.pop("_colors", None)
    if colors is None:
        colors = _force_colors

    msg = str(event_dict.get("event", ""))
    level = str(event_dict.get("level", method_name))

    if not colors:
        return _format_plain(level, msg, event_dict)
    return _format_rich(level, msg, event_dict)


def _logger_name(data: dict[str, Any]) -> str:
    return data.get("logger", "") or data.get("logger_name", "")


def _extra(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k not in _RESERVED_KEYS}


def _format_rich(level: str, msg: str, data: dict[str, Any]) -> str:
    """Format with ANSI colors."""
    level_upper = level.upper()
    color = LOG_COLORS.get(level_upper, "")
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    parts = [
        f"{Colors.BRIGHT_BLACK}{timestamp}{RESET}",
        f"{color}[{level_upper:<8}]{RESET}",
    ]

    name = _logger_name(data)
    if name:
        parts.append(f"{Colors.CYAN}{name}:{RESET}")

    parts.append(msg)

    for key, value in _extra(data).items():
        parts.append(f"{Colors.MAGENTA}{key}={RESET}{Colors.GREEN}{value}{RESET}")

    return " ".join(parts)


def _format_plain(level: str, msg: str, data: dict[str, Any]) -> str:
    """Format without colors."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    parts = [f"{timestamp} [{level.upper():<8}]"]

    name = _logger_name(data)
    if name:
        parts.append(f"{name}:")
    parts.append(msg)

    extra = _extra(data)
    if extra:
        parts.append(" ".join(f"{k}={v}" for k, v in extra.items()))

    return " ".join(parts)


def _setup_log_filters(level: int) -> None:
    """Quiet third-party loggers that would flood stderr."""
    noisy_loggers = [
        ("uvicorn", logging.WARNING),
        ("uvicorn.access", logging.WARNING),
        ("starlette", logging.WARNING),
        ("httpx", logging.WARNING if level > logging.DEBUG else logging.INFO),
        ("httpcore", logging.WARNING),
    ]

    for logger_name, log_lvl in noisy_loggers:
        logging.getLogger(logger_name).setLevel(log_lvl)


_configured = False
_force_colors = False
_verbose_level = logging.INFO


def configure_logging(
    level: str = "INFO",
    colors: bool | None = None,
    verbose: bool = False,
    force: bool = False,
) -> None:
    """Configure global logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        colors: Enable ANSI colors. If None, auto-detect from TTY.
        verbose: Enable verbose mode (DEBUG level)
        force: Force reconfiguration even if already configured
    """
    global _configured, _force_colors, _verbose_level

    if _configured and not force:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)
    if verbose:
        log_level = logging.DEBUG
    _verbose_level = log_level

    if colors is None:
        colors = sys.stderr.isatty()
    _force_colors = colors

    # 1. Standard logging: everything to stderr
    root_logger = logging.getLogger()
    root_logger.handlers = []

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(stderr_handler)
    root_logger.setLevel(log_level)

    # 2. Structlog renders the line, stdlib delivers it
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            format_log,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True

    _setup_log_filters(log_level)


def get_logger(name: str = "ui_guidelines") -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (usually the dotted module path)

    Returns:
        BoundLogger instance for structured logging
    """
    return structlog.get_logger(name)


def is_verbose() -> bool:
    """True if DEBUG level logging is enabled."""
    return _verbose_level <= logging.DEBUG


def get_log_level() -> str:
    """Get the current log level name."""
    return logging.getLevelName(_verbose_level)


__all__ = [
    "Colors",
    "configure_logging",
    "format_log",
    "get_log_level",
    "get_logger",
    "is_verbose",
]
