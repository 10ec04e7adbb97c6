"""
Centralized logging configuration for NamAstra.

Every service writes one line per record:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: "TRACE", "DEBUG" or "INFO" (default)
               - TRACE: prompt and raw collaborator payloads
               - DEBUG: per-constraint matcher counts, merged filters
    LOG_LEVEL_SEARCH, LOG_LEVEL_PARSER, LOG_LEVEL_ASTROLOGY, LOG_LEVEL_API:
               override the level of one component, e.g. LOG_LEVEL_SEARCH=DEBUG
               shows matcher counts without the parser's prompt traces

Usage:
    from namastra.logging_config import configure_logging, get_logger

    configure_logging(source="api")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from datetime import UTC, datetime

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

NOISY_LOGGERS = ("httpx", "httpcore", "openai")

# Component name (as used in LOG_LEVEL_<COMPONENT>) -> logger names it covers
COMPONENT_LOGGERS: dict[str, tuple[str, ...]] = {
    "search": ("namastra.search",),
    "parser": (
        "namastra.integration.openai_provider",
        "namastra.integration.provider_factory",
        "namastra.prompts",
    ),
    "astrology": ("namastra.integration.astrology",),
    "api": ("api",),
}


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


logging.Logger.trace = _trace  # type: ignore[attr-defined]


class ISO8601Formatter(logging.Formatter):
    """Formatter producing UTC ISO8601 timestamps and a bracketed source tag."""

    def __init__(self, source: str = "namastra"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"{timestamp} [{self.source}] {record.levelname} {message}"


class HealthCheckFilter(logging.Filter):
    """Drop access-log lines for health probes unless DEBUG is enabled."""

    HEALTH_PATHS = {"/health", "/api/health"}

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno <= logging.DEBUG:
            return True
        message = record.getMessage()
        return all(not (path in message and ("GET" in message or "200" in message)) for path in self.HEALTH_PATHS)


def _parse_level(value: str) -> int | None:
    value = value.strip().upper()
    if value == "TRACE":
        return TRACE
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else None


def component_levels_from_env() -> dict[str, int]:
    """Read LOG_LEVEL_<COMPONENT> overrides; unknown level names are ignored."""
    levels: dict[str, int] = {}
    for component in COMPONENT_LOGGERS:
        raw = os.getenv(f"LOG_LEVEL_{component.upper()}")
        if not raw:
            continue
        level = _parse_level(raw)
        if level is not None:
            levels[component] = level
    return levels


def _level_from_env(debug: bool | None) -> int:
    level = _parse_level(os.getenv("LOG_LEVEL", ""))
    if level is not None:
        return level
    return logging.DEBUG if debug else logging.INFO


def configure_logging(
    source: str = "namastra",
    level: int | None = None,
    debug: bool | None = None,
    component_levels: Mapping[str, int] | None = None,
) -> logging.Logger:
    """Configure the root logger for a service component.

    Args:
        source: Tag shown in brackets (e.g., "api", "cli")
        level: Explicit level; when omitted it is read from LOG_LEVEL
        debug: Force DEBUG when LOG_LEVEL is unset
        component_levels: Per-component levels keyed by COMPONENT_LOGGERS
            name; when omitted they are read from LOG_LEVEL_<COMPONENT>

    Returns:
        The configured root logger
    """
    if level is None:
        level = _level_from_env(debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(TRACE)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())
    root_logger.addHandler(handler)

    # Uvicorn installs its own handlers; route them through ours so the filter applies
    for uvicorn_logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if component_levels is None:
        component_levels = component_levels_from_env()
    for component, logger_names in COMPONENT_LOGGERS.items():
        for name in logger_names:
            logging.getLogger(name).setLevel(component_levels.get(component, logging.NOTSET))

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
