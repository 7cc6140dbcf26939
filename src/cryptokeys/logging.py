"""JSON logging for cryptokeys.

Each record is one JSON object on stderr::

    {"level": "info", "ts": "...", "component": "cryptokeys.aes", "msg": "aes.generated", ...}

stdout is left to command output so printed descriptors stay parseable.
"""
from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

ROOT_COMPONENT = "cryptokeys"

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def resolve_level(level: str | None) -> int:
    """Map a level name to its numeric value; unknown names mean INFO."""
    if not level:
        return logging.INFO
    return _LEVELS.get(level.strip().upper(), logging.INFO)


def _component_and_msg(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("component", ROOT_COMPONENT)
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def configure_logging(level: str | None = None) -> None:
    numeric_level = resolve_level(level)
    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            _component_and_msg,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str = ROOT_COMPONENT) -> FilteringBoundLogger:
    """Logger whose records carry ``component``; usable before configuration."""
    return structlog.get_logger(component, component=component)


__all__ = ["ROOT_COMPONENT", "configure_logging", "get_logger", "resolve_level"]
