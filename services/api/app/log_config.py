"""structlog configuration for the API.

Two output modes:
- Human (default): colored console output to stderr
- JSON (FORMVOICE_LOG_JSON=true): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

_TRUTHY = {"1", "true", "yes", "y"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Configure structlog processors and stderr output.

    Args:
        verbose: DEBUG level for app loggers. Defaults to FORMVOICE_LOG_VERBOSE, else INFO.
        log_json: JSON renderer instead of console renderer. Defaults to FORMVOICE_LOG_JSON.
    """
    if verbose is None:
        verbose = _env_flag("FORMVOICE_LOG_VERBOSE")
    if log_json is None:
        log_json = _env_flag("FORMVOICE_LOG_JSON")

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    app_level = logging.DEBUG if verbose else logging.INFO
    for name in ("services", "packages"):
        logging.getLogger(name).setLevel(app_level)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def quiet_unconfigured_logging() -> None:
    """Drop debug events until configure_logging runs.

    Library callers that never configure logging would otherwise get structlog's
    default stdout printer, which emits every debug event.
    """
    if not structlog.is_configured():
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))
