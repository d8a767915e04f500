"""
uno_engine/game/deck.py

Shuffled deck construction and the draw pile replenish policy.
"""

import logging
import random
from typing import List, Optional

from ..card import Card, create_standard_deck
from .models import Game

logger = logging.getLogger(__name__)


def generate_shuffled_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Returns a fresh 108-card deck in uniformly random order."""
    deck = create_standard_deck()
    (rng or random).shuffle(deck)
    return deck


def replenish_draw_pile(game: Game, rng: Optional[random.Random] = None) -> int:
    """
    Refills an empty draw pile in place. Returns the number of cards added.

    All discards except the top one are shuffled into the draw pile. When
    there is nothing below the top discard, a brand new deck is shuffled in
    and the discard pile is left untouched.
    """
    if game.draw_pile:
        return 0

    if len(game.discard_pile) <= 1:
        game.draw_pile = generate_shuffled_deck(rng)
        logger.info(
            "Game %s: draw and discard piles exhausted. Started a fresh deck of %d cards.",
            game.id,
            len(game.draw_pile),
        )
        return len(game.draw_pile)

    top_card = game.discard_pile[-1]
    new_draw_pile = list(game.discard_pile[:-1])
    (rng or random).shuffle(new_draw_pile)
    game.draw_pile = new_draw_pile
    game.discard_pile = [top_card]
    logger.info(
        "Game %s: reshuffled %d discards into the draw pile, keeping %s on top.",
        game.id,
        len(game.draw_pile),
        top_card,
    )
    return len(game.draw_pile)
