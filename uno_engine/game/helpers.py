"""uno_engine/game/helpers.py"""

from typing import List

from ..card import Card
from .models import Player


def serialize_cards(cards: List[Card]) -> List[str]:
    return [str(card) for card in cards]


def card_from_player(player: Player, card: Card) -> int:
    """Index of the first card in the player's hand matching color and value, or -1."""
    for index, held in enumerate(player.cards):
        if held.matches(card):
            return index
    return -1
