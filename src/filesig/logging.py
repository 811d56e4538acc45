"""Structured logging setup for filesig.

Library callers get a quiet default: events are routed to the stdlib
``filesig`` logger, which carries a ``NullHandler``, so nothing is printed
unless the host configures logging. The CLI calls ``configure_logging`` to
switch to JSON (or console) lines on stderr, keeping stdout for command
output such as an armored key.
"""
from __future__ import annotations

import logging
import sys

import structlog

from .config import LoggingConfig

_ROOT_LOGGER = "filesig"


def install_library_default() -> None:
    """Route structlog through stdlib logging unless the host already configured it."""
    logging.getLogger(_ROOT_LOGGER).addHandler(logging.NullHandler())
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Emit one line per event on stderr at the configured level.

    JSON records carry ``ts``, ``level``, ``logger`` and ``msg``, plus the
    ``app``, ``version`` and ``profile`` context bound here and whatever
    fields the caller passed.
    """
    from . import __version__
    from .crypto.profile import PROFILE

    config = config or LoggingConfig()
    # LoggingConfig has already rejected unknown level names
    level = logging.getLevelName(config.normalized_level())

    logging.basicConfig(
        level=level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    renderer = structlog.processors.JSONRenderer() if config.json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(app=_ROOT_LOGGER, version=__version__, profile=PROFILE.name)


__all__ = ["configure_logging", "install_library_default"]
