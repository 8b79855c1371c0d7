"""Repository layer for prepaid card database operations.

This module provides the SQLAlchemy implementation of the CardStore
interface.
"""

from datetime import datetime, timezone

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from prepaid_card.domain.card import (
    Card,
    CardNotFoundError,
    CardStatus,
    CardType,
    DuplicateCardError,
)
from prepaid_card.domain.store import CardStore
from prepaid_card.infrastructure.models import Card as CardModel
from prepaid_card.logging_config import last4

logger = structlog.get_logger()


class CardRepository(CardStore):
    """Repository for card database operations.

    Writes are flushed, not committed; the session owner commits.
    """

    def __init__(self, session: Session):
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session

    def find_by_card_number(self, card_number: str) -> Card | None:
        logger.debug("finding_card_by_number", card_last4=last4(card_number))

        card_model = (
            self.session.query(CardModel)
            .filter(CardModel.card_number == card_number)
            .first()
        )

        if not card_model:
            return None

        return self._to_domain_entity(card_model)

    def find_by_customer_id(self, customer_id: str) -> list[Card]:
        logger.debug("finding_cards_by_customer", customer_id=customer_id)

        card_models = (
            self.session.query(CardModel)
            .filter(CardModel.customer_id == customer_id)
            .order_by(CardModel.id)
            .all()
        )

        return [self._to_domain_entity(model) for model in card_models]

    def save(self, card: Card) -> Card:
        """Insert a new card or update status of an existing one.

        Only card_status and modified_date are written on update.

        Raises:
            DuplicateCardError: If the card number is already stored
            CardNotFoundError: If the card to update doesn't exist
        """
        if card.id is None:
            return self._insert(card)
        return self._update(card)

    def _insert(self, card: Card) -> Card:
        card_model = CardModel(
            card_id=card.card_id,
            card_number=card.card_number,
            cvv=card.cvv,
            card_type=card.card_type.name,
            card_status=card.card_status.value,
            exp_month=card.exp_month,
            exp_year=card.exp_year,
            card_name=card.card_name,
            card_company=card.card_company,
            customer_id=card.customer_id,
            created_date=card.created_date,
            modified_date=card.modified_date,
        )

        try:
            self.session.add(card_model)
            self.session.flush()  # Flush to check for integrity errors
        except IntegrityError:
            # Lost the race with a concurrent insert of the same number
            self.session.rollback()
            logger.warning("card_insert_conflict", card_last4=last4(card.card_number))
            raise DuplicateCardError(card.card_number) from None

        logger.info("card_saved", id=card_model.id, card_last4=last4(card.card_number))
        return self._to_domain_entity(card_model)

    def _update(self, card: Card) -> Card:
        card_model = self.session.get(CardModel, card.id)

        if not card_model:
            raise CardNotFoundError(card.card_number)

        card_model.card_status = card.card_status.value
        card_model.modified_date = card.modified_date

        self.session.flush()
        logger.info(
            "card_updated",
            id=card_model.id,
            card_last4=last4(card_model.card_number),
            card_status=card_model.card_status,
        )
        return self._to_domain_entity(card_model)

    def _to_domain_entity(self, model: CardModel) -> Card:
        """Convert ORM model to domain entity.

        Args:
            model: SQLAlchemy ORM model

        Returns:
            Card domain entity
        """
        return Card(
            id=model.id,
            card_id=model.card_id,
            card_number=model.card_number,
            cvv=model.cvv,
            card_type=CardType[model.card_type],
            card_status=CardStatus(model.card_status),
            exp_month=model.exp_month,
            exp_year=model.exp_year,
            card_name=model.card_name,
            card_company=model.card_company,
            customer_id=model.customer_id,
            created_date=_as_utc(model.created_date),
            modified_date=_as_utc(model.modified_date),
        )


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
