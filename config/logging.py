"""
Structured logging setup using structlog.

Called once from settings. Application modules obtain loggers with
``structlog.get_logger(__name__)`` and log events as snake_case names with
keyword context, e.g.::

    logger.info("receipt_delivered", receipt_id=str(receipt.id))
"""
import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", is_debug: bool = False) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        is_debug: Human-readable console output instead of JSON lines
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if is_debug:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
