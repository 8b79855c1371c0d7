"""SQLAlchemy ORM models for Prepaid Card Service."""

from datetime import datetime

from sqlalchemy import (
    TIMESTAMP,
    CheckConstraint,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from prepaid_card.infrastructure.database import Base


class Card(Base):
    """
    Prepaid card records.

    card_number is unique; card_type and card_status hold enum names.
    """

    __tablename__ = "cards"

    # Surrogate key assigned on insert
    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True, comment="Card row ID"
    )

    card_id: Mapped[str] = mapped_column(
        String(64), nullable=False, comment="External card reference"
    )

    card_number: Mapped[str] = mapped_column(
        String(19), nullable=False, unique=True, comment="Card number (business key)"
    )

    cvv: Mapped[str] = mapped_column(
        String(4), nullable=False, comment="Card verification value"
    )

    card_type: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="Card network name (VISA, MASTERCARD)"
    )

    card_status: Mapped[str] = mapped_column(
        String(20), nullable=False, comment="Card status name (ACTIVE, INACTIVE)"
    )

    exp_month: Mapped[str] = mapped_column(String(2), nullable=False)
    exp_year: Mapped[str] = mapped_column(String(4), nullable=False)

    card_name: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="Name printed on the card"
    )

    card_company: Mapped[str] = mapped_column(
        String(100), nullable=False, comment="Issuing company"
    )

    # Owning customer
    customer_id: Mapped[str] = mapped_column(
        String(64), nullable=False, comment="Owning customer ID"
    )

    # Lifecycle timestamps
    created_date: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Card creation timestamp",
    )

    modified_date: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Last modification timestamp",
    )

    __table_args__ = (
        Index("idx_cards_customer_id", "customer_id"),
        CheckConstraint("card_type IN ('VISA', 'MASTERCARD')", name="ck_cards_card_type"),
        CheckConstraint("card_status IN ('ACTIVE', 'INACTIVE')", name="ck_cards_card_status"),
    )

    def __repr__(self) -> str:
        return f"<Card {self.id} - {self.card_type} ...{self.card_number[-4:]}>"
