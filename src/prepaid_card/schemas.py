"""Pydantic models for card requests and responses.

These are the external-facing shapes exchanged with whatever boundary hosts
the card service.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from prepaid_card.domain.card import Card, CardStatus, CardType


class CreateCardRequest(BaseModel):
    """Request model for creating a card."""

    card_id: str = Field(..., min_length=1, max_length=64, description="External card reference")
    card_number: str = Field(..., min_length=1, max_length=19, description="Card number")
    cvv: str = Field(..., min_length=1, max_length=4, description="Card verification value")
    card_type: str = Field(..., description="Card type code (1=VISA, 2=MASTERCARD)")
    exp_month: str = Field(..., min_length=1, max_length=2, description="Expiration month")
    exp_year: str = Field(..., min_length=1, max_length=4, description="Expiration year")
    customer_id: str = Field(..., min_length=1, max_length=64, description="Owning customer ID")
    card_company: str = Field(..., max_length=100, description="Issuing company")
    card_name: str = Field(..., max_length=255, description="Name printed on the card")

    @field_validator("card_type")
    @classmethod
    def check_card_type(cls, value: str) -> str:
        return CardType.from_code(value).value


class UpdateCardStatusRequest(BaseModel):
    """Request model for changing a card's status."""

    card_number: str = Field(..., max_length=19, description="Card number")
    cvv: str = Field(..., max_length=4, description="Card verification value")
    customer_id: str = Field(..., max_length=64, description="Owning customer ID")
    card_status: CardStatus = Field(..., description="Target status name")

    @field_validator("card_status", mode="before")
    @classmethod
    def normalize_card_status(cls, value):
        if isinstance(value, CardStatus):
            return value
        return CardStatus.from_name(value)


class CardResponse(BaseModel):
    """Response model for a card."""

    card_id: str
    card_number: str
    cvv: str
    card_type: str = Field(..., description="Card type name (e.g., VISA)")
    exp_year: str
    exp_month: str
    modified_date: datetime

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            card_id=card.card_id,
            card_number=card.card_number,
            cvv=card.cvv,
            card_type=card.card_type.name,
            exp_year=card.exp_year,
            exp_month=card.exp_month,
            modified_date=card.modified_date,
        )
