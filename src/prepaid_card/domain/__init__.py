"""Prepaid card domain layer.

This package contains the card entity, its enumerations and exceptions,
the card store interface and the card service.
"""

from prepaid_card.domain.card import (
    Card,
    CardError,
    CardNotFoundError,
    CardStatus,
    CardType,
    DuplicateCardError,
    InvalidCardStatusError,
    InvalidCardTypeError,
    VerificationFailedError,
)
from prepaid_card.domain.store import CardStore

__all__ = [
    # Card models
    "Card",
    "CardStatus",
    "CardType",
    # Card exceptions
    "CardError",
    "CardNotFoundError",
    "DuplicateCardError",
    "InvalidCardStatusError",
    "InvalidCardTypeError",
    "VerificationFailedError",
    # Store interface
    "CardStore",
]
