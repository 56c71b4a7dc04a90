from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Any, Iterator, cast

import structlog
from structlog.dev import ConsoleRenderer
from structlog.stdlib import BoundLogger
from structlog.types import Processor

SERVICE_NAME_ENV = "UAS_SERVICE_NAME"
APP_VERSION_ENV = "APP_VERSION"


def _package_version() -> str:
    # Imported lazily; uasdata/__init__ imports modules that use this logger.
    try:
        from uasdata import __version__

        return __version__
    except ImportError:
        return os.getenv(APP_VERSION_ENV, "unknown")


def _coerce_level(level: str | int) -> int:
    """Translate "debug"/"INFO"/10 into a numeric logging level."""
    if isinstance(level, int):
        return level
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.upper()]
    except KeyError:
        raise ValueError(f"Invalid log level: {level}") from None


def configure_logging(level: str | int = "INFO", json_output: bool = True) -> None:
    """
    Route structlog events through stdlib logging to stderr.

    stdout stays free for command output. Loggers are not cached, so
    module-level loggers created at import time follow the latest
    configuration (including ``structlog.testing.capture_logs``).
    """
    renderer = structlog.processors.JSONRenderer() if json_output else ConsoleRenderer()
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    logging.basicConfig(level=_coerce_level(level), handlers=[handler], force=True)


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger with service name and package version bound."""
    service_name = os.getenv(SERVICE_NAME_ENV, "uasdata")
    version = os.getenv(APP_VERSION_ENV) or _package_version()
    # Initial values keep the proxy lazy so configure_logging() applies to
    # module-level loggers created at import time.
    return cast(
        BoundLogger,
        structlog.get_logger(name, service_name=service_name, version=version),
    )


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind contextual data (e.g. the store's data URL) for the duration of a block."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield
