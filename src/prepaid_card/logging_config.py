"""Structured logging configuration using structlog.

The process hosting the card service (an API server, worker or script)
calls configure_logging() once at startup, before the first
card_service_scope() is opened. Library code only logs through
structlog.get_logger() and never configures logging itself.
"""

import logging
import sys

import structlog

from prepaid_card.config import settings

SECRET_KEYS = frozenset({"cvv"})
CARD_NUMBER_KEYS = frozenset({"card_number"})


def last4(card_number: str | None) -> str:
    """Return the loggable tail of a card number."""
    if not card_number:
        return ""
    return card_number[-4:]


def redact_card_data(logger, method_name, event_dict):
    """Drop CVVs and cut card numbers down to their last four digits."""
    for key in SECRET_KEYS & event_dict.keys():
        del event_dict[key]

    for key in CARD_NUMBER_KEYS & event_dict.keys():
        event_dict[key] = last4(event_dict[key])

    return event_dict


def configure_logging() -> None:
    """Configure structured logging for the card service process."""

    level = logging.getLevelName(settings.log_level.upper())

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.environment == "production"
        else structlog.dev.ConsoleRenderer(colors=True)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            redact_card_data,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Every entry carries the service and environment
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=settings.service_name,
        environment=settings.environment,
    )
