"""uno_engine/card.py"""

from dataclasses import dataclass
from typing import List

from .constants import (
    ALL_COLORS,
    ALL_VALUES,
    WILD,
    WILD_VALUES,
    SUIT_COLORS,
    COLORED_VALUES,
    ZERO,
    COPIES_OF_ZERO,
    COPIES_PER_COLORED_VALUE,
    COPIES_PER_WILD_VALUE,
)


@dataclass(frozen=True)
class Card:
    """Represents an UNO card by color and value. Equal cards are interchangeable."""

    color: str
    value: str

    def __post_init__(self):
        if self.color not in ALL_COLORS:
            raise ValueError(f"Invalid card color: '{self.color}'")
        if self.value not in ALL_VALUES:
            raise ValueError(f"Invalid card value: '{self.value}'")
        if (self.color == WILD) != (self.value in WILD_VALUES):
            raise ValueError(
                f"Value '{self.value}' cannot be paired with color '{self.color}'"
            )

    @classmethod
    def unchecked(cls, color: str, value: str) -> "Card":
        """Builds a card without validation, for lookups of arbitrary cards."""
        card = object.__new__(cls)
        object.__setattr__(card, "color", color)
        object.__setattr__(card, "value", value)
        return card

    def matches(self, other: "Card") -> bool:
        """True when color and value are the same."""
        return self.color == other.color and self.value == other.value

    def __str__(self) -> str:
        if self.color == WILD:
            return self.value
        return f"{self.color} {self.value}"

    def __repr__(self) -> str:
        return f"Card(color='{self.color}', value='{self.value}')"


# --- Standard Deck Creation ---
def create_standard_deck() -> List[Card]:
    """Creates the unshuffled 108-card UNO deck."""
    deck: List[Card] = []
    for color in SUIT_COLORS:
        for value in COLORED_VALUES:
            copies = COPIES_OF_ZERO if value == ZERO else COPIES_PER_COLORED_VALUE
            deck.extend(Card(color, value) for _ in range(copies))
    for value in WILD_VALUES:
        deck.extend(Card(WILD, value) for _ in range(COPIES_PER_WILD_VALUE))
    return deck
