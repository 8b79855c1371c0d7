"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- Sample card data and requests
- In-memory SQLite database setup
- Database session management
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from prepaid_card.domain.card import Card, CardStatus, CardType
from prepaid_card.infrastructure.database import drop_all_tables, init_db
from prepaid_card.schemas import CreateCardRequest, UpdateCardStatusRequest

from tests.constants import (
    CARD_COMPANY,
    CARD_ID,
    CARD_NAME,
    CARD_NUMBER,
    CUSTOMER_ID,
    CVV,
    EXP_MONTH,
    EXP_YEAR,
)


@pytest.fixture
def modified_date():
    """Fixed timestamp for stored cards."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def stored_card(modified_date):
    """A card as returned by the store (already persisted)."""
    return Card(
        id=1,
        card_id=CARD_ID,
        card_number=CARD_NUMBER,
        cvv=CVV,
        card_type=CardType.VISA,
        card_status=CardStatus.INACTIVE,
        exp_month=EXP_MONTH,
        exp_year=EXP_YEAR,
        card_name=CARD_NAME,
        card_company=CARD_COMPANY,
        customer_id=CUSTOMER_ID,
        created_date=modified_date,
        modified_date=modified_date,
    )


@pytest.fixture
def create_card_request():
    """Request to create the sample card."""
    return CreateCardRequest(
        card_id=CARD_ID,
        card_number=CARD_NUMBER,
        cvv=CVV,
        card_type=CardType.VISA.value,
        exp_month=EXP_MONTH,
        exp_year=EXP_YEAR,
        customer_id=CUSTOMER_ID,
        card_company=CARD_COMPANY,
        card_name=CARD_NAME,
    )


@pytest.fixture
def activate_request():
    """Request to activate the sample card with correct credentials."""
    return UpdateCardStatusRequest(
        card_number=CARD_NUMBER,
        cvv=CVV,
        customer_id=CUSTOMER_ID,
        card_status=CardStatus.ACTIVE.value,
    )


@pytest.fixture
def db_engine():
    """Create an in-memory SQLite engine with the card schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)

    yield engine

    drop_all_tables(engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    """Create a fresh database session for each test."""
    session = session_factory()

    yield session

    session.rollback()
    session.close()
