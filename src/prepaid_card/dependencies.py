"""Wiring for the card service.

Builds a CardService bound to a database session so a hosting boundary can
run each request as one unit of work. The host calls
prepaid_card.logging_config.configure_logging() once before opening scopes.
"""

from contextlib import contextmanager
from typing import Generator

import structlog
from sqlalchemy.orm import sessionmaker

from prepaid_card.domain.services import CardService
from prepaid_card.infrastructure.database import get_db_session
from prepaid_card.infrastructure.repository import CardRepository

logger = structlog.get_logger()


@contextmanager
def card_service_scope(
    session_factory: sessionmaker | None = None,
) -> Generator[CardService, None, None]:
    """Provide a CardService whose writes commit when the block exits cleanly.

    Usage:
        with card_service_scope() as card_service:
            card_service.find_by_customer_id("123456789")

    Args:
        session_factory: Optional session factory. If None, uses SessionLocal.

    Yields:
        CardService backed by a CardRepository
    """
    with get_db_session(session_factory) as session:
        logger.debug("card_service_scope_opened")
        yield CardService(CardRepository(session))
