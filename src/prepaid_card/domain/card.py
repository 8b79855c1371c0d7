"""Domain models for prepaid cards.

This module contains the card entity, its enumerations and the domain
exceptions raised by the card service. These models are independent of
infrastructure concerns.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class CardError(Exception):
    """Base exception for card-related errors."""

    pass


class DuplicateCardError(CardError):
    """Exception raised when a card number is already registered."""

    def __init__(self, card_number: str):
        self.card_number = card_number
        super().__init__(f"card already exists: {card_number}")


class CardNotFoundError(CardError):
    """Exception raised when no card exists for a card number."""

    def __init__(self, card_number: str):
        self.card_number = card_number
        super().__init__(f"can't find card with number {card_number}")


class VerificationFailedError(CardError):
    """Exception raised when update credentials don't match the stored card.

    Attributes:
        field: Which check failed, "cvv" or "customer"
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is not match")


class InvalidCardTypeError(CardError, ValueError):
    """Exception raised for an unknown card type code."""

    pass


class InvalidCardStatusError(CardError, ValueError):
    """Exception raised for an unknown card status name."""

    pass


class CardType(Enum):
    """Card network. Member values are the codes used in requests."""

    VISA = "1"
    MASTERCARD = "2"

    @classmethod
    def from_code(cls, code: str) -> "CardType":
        """Resolve a card type from its request code.

        Raises:
            InvalidCardTypeError: If the code is unknown
        """
        try:
            return cls(str(code).strip())
        except ValueError:
            raise InvalidCardTypeError(f"unknown card type code: {code}") from None


class CardStatus(str, Enum):
    """Card status."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    @classmethod
    def from_name(cls, name: str) -> "CardStatus":
        """Resolve a card status from its name, ignoring case.

        Raises:
            InvalidCardStatusError: If the name is unknown
        """
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise InvalidCardStatusError(f"unknown card status: {name}") from None


@dataclass
class Card:
    """Prepaid card entity.

    Attributes:
        card_id: External reference for the card
        card_number: Unique business key
        cvv: Verification code, only used to authorize status updates
        card_type: Card network
        card_status: Current status
        exp_month: Expiration month
        exp_year: Expiration year
        card_name: Name printed on the card
        card_company: Issuing company
        customer_id: Owning customer
        created_date: When the card was created
        modified_date: When the card was last changed
        id: Store-assigned surrogate key (None until first save)
    """

    card_id: str
    card_number: str
    cvv: str
    card_type: CardType
    card_status: CardStatus
    exp_month: str
    exp_year: str
    card_name: str
    card_company: str
    customer_id: str
    created_date: datetime
    modified_date: datetime
    id: Optional[int] = None

    def __post_init__(self):
        """Validate card fields."""
        if not self.card_number:
            raise ValueError("card_number cannot be empty")

        if not self.customer_id:
            raise ValueError("customer_id cannot be empty")

    @classmethod
    def create(
        cls,
        card_id: str,
        card_number: str,
        cvv: str,
        card_type: CardType,
        exp_month: str,
        exp_year: str,
        card_name: str,
        card_company: str,
        customer_id: str,
    ) -> "Card":
        """Create a new, not yet persisted, card.

        New cards start INACTIVE with both timestamps set to now.
        """
        now = datetime.now(timezone.utc)

        return cls(
            card_id=card_id,
            card_number=card_number,
            cvv=cvv,
            card_type=card_type,
            card_status=CardStatus.INACTIVE,
            exp_month=exp_month,
            exp_year=exp_year,
            card_name=card_name,
            card_company=card_company,
            customer_id=customer_id,
            created_date=now,
            modified_date=now,
        )

    def verify_cvv(self, cvv: str) -> None:
        """Raises VerificationFailedError if cvv doesn't match."""
        if self.cvv != cvv:
            raise VerificationFailedError("cvv")

    def verify_customer(self, customer_id: str) -> None:
        """Raises VerificationFailedError if customer_id doesn't match."""
        if self.customer_id != customer_id:
            raise VerificationFailedError("customer")

    def change_status(self, card_status: CardStatus) -> None:
        """Set a new status and refresh modified_date."""
        self.card_status = card_status
        self.modified_date = datetime.now(timezone.utc)
