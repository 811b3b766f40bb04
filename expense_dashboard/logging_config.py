"""Structured logging setup shared by the dashboard modules."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config import LOG_JSON, LOG_LEVEL

_CONFIGURED = False


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None, *, force: bool = False) -> None:
    """Configure structlog on top of the stdlib logging module.

    Streamlit re-executes the app script on every interaction, so repeated
    calls are no-ops unless ``force`` is set.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    level_name = (level or LOG_LEVEL).upper()
    use_json = LOG_JSON if json_output is None else json_output

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.INFO),
        force=force,
    )
    logging.getLogger("expense_dashboard").setLevel(getattr(logging, level_name, logging.INFO))

    renderer = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound logger for ``name``."""
    return structlog.get_logger(name)
