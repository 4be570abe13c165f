from __future__ import annotations
import logging
import sys
import structlog

def configure_logging(debug: bool = True, json: bool = True, service: str = "chord-detect") -> None:
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service)
    timestamper = structlog.processors.TimeStamper(fmt="iso")

    # JSON for machine-readable logs, console renderer for local runs
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        cache_logger_on_first_use=True,
    )

    # also route stdlib logging -> stdout
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )
