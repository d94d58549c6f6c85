"""structlog setup shared by the HTTP server and the CLI."""

import logging

import structlog


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    log_level = logging.getLevelNamesMapping()[level.upper()]

    logging.basicConfig(format="%(message)s", level=log_level, force=True)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )

    # Suppress noisy library loggers
    logging.getLogger("uvicorn.access").setLevel(max(log_level, logging.WARNING))
