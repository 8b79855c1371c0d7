"""Card store interface.

The domain layer defines the persistence contract it needs here and the
infrastructure layer implements it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from prepaid_card.domain.card import Card


class CardStore(ABC):
    """Abstract store for prepaid card persistence."""

    @abstractmethod
    def find_by_card_number(self, card_number: str) -> Optional[Card]:
        """Retrieve a card by its card number.

        Args:
            card_number: Unique card number

        Returns:
            Card if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_customer_id(self, customer_id: str) -> list[Card]:
        """Retrieve all cards owned by a customer.

        Args:
            customer_id: Owning customer reference

        Returns:
            Cards in store order, empty if the customer has none
        """
        pass

    @abstractmethod
    def save(self, card: Card) -> Card:
        """Insert a new card or update an existing one.

        Args:
            card: Card to persist. A card without an id is inserted.

        Returns:
            The persisted card, with id assigned

        Raises:
            DuplicateCardError: If inserting a card number that already exists
            CardNotFoundError: If updating a card that no longer exists
        """
        pass
