"""Structured logging for the tokenizer.

Library modules log through get_logger(). Applications that want the
tokenizer's JSON or console output call configure_logging() once at startup.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from applepay_tokenizer.config import Settings

# Event keys whose values must never reach a log sink
SENSITIVE_KEYS = frozenset({"publishable_key", "authorization", "payment_data", "pk_token"})
REDACTED = "[redacted]"


def redact_sensitive_fields(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask publishable keys and payment blobs passed as log fields."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog from tokenizer settings.

    Args:
        settings: Source of log_level and log_json (defaults to environment settings)
    """
    if settings is None:
        settings = Settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_sensitive_fields,
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.log_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
