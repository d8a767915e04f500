"""uno_engine/game/engine.py"""

import logging
import random
from typing import Optional

from ..card import Card
from ..config import UnoRulesConfig
from ..exceptions import (
    EmptyDrawPileError,
    EmptyGameError,
    NotParticipantError,
    NotYourTurnError,
)
from ..persistence import GameStore
from .deck import replenish_draw_pile
from .models import Game, Player

logger = logging.getLogger(__name__)


def draw_card_helper(game: Game, player: Player) -> Card:
    """Moves the top draw pile card into the player's hand. No turn checks, no saving."""
    if not game.draw_pile:
        raise EmptyDrawPileError(f"Game {game.id} has no card to draw")
    card = game.draw_pile.pop()
    player.cards.append(card)
    logger.debug("Game %s: %s drew %s.", game.id, player.id, card)
    return card


class DeckEngine:
    """
    Turn-aware drawing and dealing on top of a GameStore.

    Each operation loads the game, applies every check before touching any
    pile, mutates the loaded copy, and saves it once at the end.
    """

    def __init__(
        self,
        store: GameStore,
        rules: Optional[UnoRulesConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.rules = rules or UnoRulesConfig()
        self.rng = rng or random.Random()

    def _draw_with_replenish(self, game: Game, player: Player) -> Card:
        if not game.draw_pile:
            replenish_draw_pile(game, self.rng)
        return draw_card_helper(game, player)

    def draw_card(self, game_id: str, player_id: str) -> Game:
        """Draws one card for the player holding the turn and saves the game."""
        game = self.store.lookup_game(game_id)

        player = game.find_player(player_id)
        if player is None:
            logger.warning(
                "Player %s tried to draw in game %s without joining it.",
                player_id,
                game_id,
            )
            raise NotParticipantError()

        current = game.players[game.current_player]
        if current.id != player_id:
            logger.warning(
                "Player %s tried to draw in game %s, but it is %s's turn.",
                player_id,
                game_id,
                current.id,
            )
            raise NotYourTurnError()

        self._draw_with_replenish(game, player)
        self.store.save_game(game)
        return game

    def deal_cards(self, game_id: str) -> Game:
        """
        Deals a fresh starting hand to every player and saves the game.

        Cards already held are shuffled back into the draw pile first.

        Cards go out one at a time in seat order, so a replenish in the middle
        of the deal behaves exactly as it does for a regular draw.
        """
        game = self.store.lookup_game(game_id)
        hand_size = self.rules.hand_size

        returned = 0
        for player in game.players:
            returned += len(player.cards)
            game.draw_pile.extend(player.cards)
            player.cards = []
        if returned:
            self.rng.shuffle(game.draw_pile)
            logger.debug(
                "Game %s: shuffled %d held cards back into the draw pile.",
                game_id,
                returned,
            )

        for _ in range(hand_size):
            for player in game.players:
                self._draw_with_replenish(game, player)

        self.store.save_game(game)
        logger.info(
            "Game %s: dealt %d cards to each of %d players. Draw pile: %d.",
            game_id,
            hand_size,
            len(game.players),
            len(game.draw_pile),
        )
        return game

    def start_game(self, game_id: str) -> Game:
        """Deals hands and, if the discard pile is empty, turns the first card face up."""
        game = self.store.lookup_game(game_id)
        if not game.players:
            raise EmptyGameError(f"Game {game_id} has no players")

        game = self.deal_cards(game_id)
        if self.rules.flip_first_discard and not game.discard_pile:
            if not game.draw_pile:
                replenish_draw_pile(game, self.rng)
            game.discard_pile.append(game.draw_pile.pop())
            logger.info("Game %s: starting discard is %s.", game_id, game.top_discard)
        game.current_player = 0
        self.store.save_game(game)
        return game
