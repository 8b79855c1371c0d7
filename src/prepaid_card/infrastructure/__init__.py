"""Infrastructure layer exports."""

from prepaid_card.infrastructure.repository import CardRepository

__all__ = [
    "CardRepository",
]
