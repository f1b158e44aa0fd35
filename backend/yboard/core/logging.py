# backend/yboard/core/logging.py
"""
Logging structuré (structlog).

- DEBUG : rendu console coloré
- sinon : une ligne JSON par événement

Usage :
    logger = get_logger(__name__)
    logger.info("relation_moved", teacher_id=3, promo_module_id=7)
"""
import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger

from yboard.core.config import Settings

_NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "sqlalchemy", "asyncio", "passlib")


def setup_logging(settings: Settings) -> None:
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.DEBUG:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
        processors = [*shared_processors, renderer]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> FilteringBoundLogger:
    # PrintLoggerFactory ignore le nom : il est porté dans le contexte
    return structlog.get_logger(logger_name=name)
