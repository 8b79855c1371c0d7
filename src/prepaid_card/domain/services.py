"""Domain service for prepaid card business rules.

The service enforces card-number uniqueness on creation and checks the CVV
and owning customer before a status change. All persistence goes through the
injected CardStore. Results are returned as the CardResponse models from
prepaid_card.schemas.
"""

import structlog

from prepaid_card.domain.card import (
    Card,
    CardError,
    CardNotFoundError,
    CardType,
    DuplicateCardError,
)
from prepaid_card.domain.store import CardStore
from prepaid_card.logging_config import last4
from prepaid_card.schemas import (
    CardResponse,
    CreateCardRequest,
    UpdateCardStatusRequest,
)

logger = structlog.get_logger()


class CardService:
    """Card operations over a CardStore.

    Stateless apart from the store reference; build one per unit of work.
    """

    def __init__(self, store: CardStore):
        self.store = store

    def create_card(self, request: CreateCardRequest) -> CardResponse:
        """Register a new card.

        Args:
            request: Card details

        Returns:
            Response mapped from the persisted card

        Raises:
            DuplicateCardError: If the card number is already registered
            InvalidCardTypeError: If the card type code is unknown
        """
        logger.info(
            "create_card_requested",
            card_last4=last4(request.card_number),
            customer_id=request.customer_id,
        )

        if self.store.find_by_card_number(request.card_number) is not None:
            logger.warning("card_already_exists", card_last4=last4(request.card_number))
            raise DuplicateCardError(request.card_number)

        card = Card.create(
            card_id=request.card_id,
            card_number=request.card_number,
            cvv=request.cvv,
            card_type=CardType.from_code(request.card_type),
            exp_month=request.exp_month,
            exp_year=request.exp_year,
            card_name=request.card_name,
            card_company=request.card_company,
            customer_id=request.customer_id,
        )

        saved = self.store.save(card)

        logger.info("card_created", card_id=saved.card_id, card_last4=last4(saved.card_number))
        return CardResponse.from_card(saved)

    def update_card_status(
        self, card_number: str, request: UpdateCardStatusRequest
    ) -> None:
        """Change a card's status after verifying CVV and owner.

        Checks run in order: existence, cvv, customer. The first failure
        stops the update and nothing is saved.

        Args:
            card_number: Card to update
            request: Credentials and target status

        Raises:
            CardNotFoundError: If no card has this number
            VerificationFailedError: If cvv or customer_id doesn't match
        """
        logger.info(
            "update_card_status_requested",
            card_last4=last4(card_number),
            card_status=request.card_status.value,
        )

        card = self.store.find_by_card_number(card_number)
        if card is None:
            logger.warning("card_not_found", card_last4=last4(card_number))
            raise CardNotFoundError(card_number)

        try:
            card.verify_cvv(request.cvv)
            card.verify_customer(request.customer_id)
        except CardError as e:
            logger.warning(
                "card_verification_failed",
                card_last4=last4(card_number),
                error=str(e),
            )
            raise

        card.change_status(request.card_status)
        self.store.save(card)

        logger.info(
            "card_status_updated",
            card_last4=last4(card_number),
            card_status=card.card_status.value,
        )

    def find_by_card_number(self, card_number: str) -> CardResponse:
        """Look up a card by number.

        Raises:
            CardNotFoundError: If no card has this number
        """
        card = self.store.find_by_card_number(card_number)
        if card is None:
            logger.warning("card_not_found", card_last4=last4(card_number))
            raise CardNotFoundError(card_number)

        return CardResponse.from_card(card)

    def find_by_customer_id(self, customer_id: str) -> list[CardResponse]:
        """Look up all cards owned by a customer, in store order."""
        cards = self.store.find_by_customer_id(customer_id)
        logger.debug("cards_found_for_customer", customer_id=customer_id, count=len(cards))
        return [CardResponse.from_card(card) for card in cards]
