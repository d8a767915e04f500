"""
Tests for uno_engine/game/engine.py and uno_engine/game/helpers.py

Covers:
- card_from_player: index lookup without mutation
- draw_card_helper: raw draw
- DeckEngine.draw_card: lookups, membership and turn checks, both replenish branches
- DeckEngine.deal_cards: single and multi-player deals, mid-deal fallback
- DeckEngine.start_game: first discard
"""

import pytest

from uno_engine.card import Card
from uno_engine.config import UnoRulesConfig
from uno_engine.constants import NOT_PARTICIPANT_MESSAGE, NOT_YOUR_TURN_MESSAGE, ONE, RED
from uno_engine.exceptions import (
    EmptyDrawPileError,
    EmptyGameError,
    GameNotFoundError,
    NotFoundError,
    NotParticipantError,
    NotYourTurnError,
)
from uno_engine.game.deck import generate_shuffled_deck
from uno_engine.game.engine import DeckEngine, draw_card_helper
from uno_engine.game.helpers import card_from_player
from uno_engine.game.models import Game, Player


def _add_players(store, game, count):
    for i in range(count):
        player = store.create_player(f"Player {i + 2}")
        game = store.join_game(game.id, player.id)
    return game


# ===== card_from_player =====


class TestCardFromPlayer:
    def test_card_held(self):
        card = Card(RED, ONE)
        player = Player(id="ID 1", name="Player 1", cards=[card])
        assert card_from_player(player, card) == 0

    def test_card_not_held(self):
        player = Player(id="ID 1", name="Player 1", cards=[Card(RED, ONE)])
        assert card_from_player(player, Card.unchecked("orange", "whoops")) == -1

    def test_returns_first_match_without_mutating(self, rng):
        hand = generate_shuffled_deck(rng)[:10] + [Card(RED, ONE), Card(RED, ONE)]
        player = Player(id="p", name="P", cards=list(hand))
        index = card_from_player(player, Card(RED, ONE))
        assert player.cards[index] == Card(RED, ONE)
        assert all(card != Card(RED, ONE) for card in player.cards[:index])
        assert player.cards == hand

    def test_empty_hand(self):
        assert card_from_player(Player(id="p", name="P"), Card(RED, ONE)) == -1


# ===== draw_card_helper =====


class TestDrawCardHelper:
    def test_moves_top_card(self, game_with_player):
        game, _ = game_with_player
        player = game.players[0]
        top = game.draw_pile[-1]

        drawn = draw_card_helper(game, player)

        assert drawn == top
        assert player.cards == [top]
        assert len(game.draw_pile) == 107

    def test_empty_draw_pile_raises(self):
        game = Game(id="g")
        with pytest.raises(EmptyDrawPileError):
            draw_card_helper(game, Player(id="p", name="P"))

    def test_does_not_save(self, store, game_with_player):
        game, _ = game_with_player
        draw_card_helper(game, game.players[0])
        assert len(store.lookup_game(game.id).draw_pile) == 108


# ===== DeckEngine.draw_card =====


class TestDrawCard:
    def test_unknown_game(self, engine):
        with pytest.raises(GameNotFoundError):
            engine.draw_card("Bogus game id", "Bogus player id")

    def test_unknown_game_is_a_not_found_error(self, engine):
        with pytest.raises(NotFoundError):
            engine.draw_card("Bogus game id", "Bogus player id")

    def test_draw_with_full_deck(self, engine, store, game_with_player):
        game, player = game_with_player

        returned = engine.draw_card(game.id, player.id)
        stored = store.lookup_game(game.id)

        assert len(returned.players[returned.current_player].cards) == 1
        assert len(returned.draw_pile) == 107
        assert len(stored.players[stored.current_player].cards) == 1
        assert len(stored.draw_pile) == 107
        assert stored.card_count() == 108

    def test_reshuffle_keeps_top_discard(self, engine, store, game_with_player):
        game, player = game_with_player
        game = engine.draw_card(game.id, player.id)

        game.discard_pile.extend(game.draw_pile)
        game.draw_pile = []
        last_card = game.discard_pile[-1]
        store.save_game(game)

        game = engine.draw_card(game.id, player.id)

        assert len(game.players[game.current_player].cards) == 2
        assert len(game.draw_pile) == 105
        assert game.discard_pile == [last_card]
        assert game.card_count() == 108

    def test_fresh_deck_when_only_top_discard(self, engine, store, game_with_player):
        game, player = game_with_player
        game = engine.draw_card(game.id, player.id)

        game.discard_pile = [game.draw_pile.pop()]
        game.draw_pile = []
        last_card = game.discard_pile[-1]
        store.save_game(game)

        game = engine.draw_card(game.id, player.id)

        assert len(game.players[game.current_player].cards) == 2
        assert len(game.draw_pile) == 107
        assert game.discard_pile == [last_card]

    def test_fresh_deck_when_both_piles_empty(self, engine, store, game_with_player):
        game, player = game_with_player
        game.draw_pile = []
        store.save_game(game)

        game = engine.draw_card(game.id, player.id)

        assert len(game.draw_pile) == 107
        assert game.discard_pile == []

    def test_non_participant(self, engine, store, game_with_player):
        game, _ = game_with_player
        other = Player(id=" id 2 ", name="Name 2")

        with pytest.raises(NotParticipantError) as exc_info:
            engine.draw_card(game.id, other.id)

        assert str(exc_info.value) == NOT_PARTICIPANT_MESSAGE
        assert other.cards == []
        stored = store.lookup_game(game.id)
        assert len(stored.draw_pile) == 108
        assert stored.players[0].cards == []

    def test_not_your_turn(self, engine, store, game_with_player):
        game, player = game_with_player
        player2 = store.create_player("Player 2")
        game = store.join_game(game.id, player2.id)
        before = store.lookup_game(game.id)

        with pytest.raises(NotYourTurnError) as exc_info:
            engine.draw_card(game.id, player2.id)

        assert str(exc_info.value) == NOT_YOUR_TURN_MESSAGE
        assert store.lookup_game(game.id) == before

    def test_out_of_turn_does_not_reshuffle(self, engine, store, game_with_player):
        game, _ = game_with_player
        player2 = store.create_player("Player 2")
        game = store.join_game(game.id, player2.id)
        game.discard_pile = list(game.draw_pile)
        game.draw_pile = []
        store.save_game(game)

        with pytest.raises(NotYourTurnError):
            engine.draw_card(game.id, player2.id)

        stored = store.lookup_game(game.id)
        assert stored.draw_pile == []
        assert len(stored.discard_pile) == 108

    def test_turn_follows_current_player(self, engine, store, game_with_player):
        game, player = game_with_player
        player2 = store.create_player("Player 2")
        game = store.join_game(game.id, player2.id)
        game.current_player = 1
        store.save_game(game)

        game = engine.draw_card(game.id, player2.id)
        assert len(game.players[1].cards) == 1
        with pytest.raises(NotYourTurnError):
            engine.draw_card(game.id, player.id)

    def test_draw_does_not_advance_turn(self, engine, store, game_with_player):
        game, player = game_with_player
        _add_players(store, game, 1)
        game = engine.draw_card(game.id, player.id)
        assert game.current_player == 0


# ===== DeckEngine.deal_cards =====


class TestDealCards:
    def test_unknown_game(self, engine):
        with pytest.raises(GameNotFoundError):
            engine.deal_cards("Bogus game id")

    def test_single_player(self, engine, game_with_player):
        game, _ = game_with_player
        game = engine.deal_cards(game.id)
        assert len(game.players[game.current_player].cards) == 7
        assert len(game.draw_pile) == 101

    def test_five_players(self, engine, store, game_with_player):
        game, _ = game_with_player
        game = _add_players(store, game, 4)

        game = engine.deal_cards(game.id)

        assert len(game.players) == 5
        for player in game.players:
            assert len(player.cards) == 7
        assert len(game.draw_pile) == 73
        assert game.card_count() == 108

    def test_round_robin_order(self, engine, store, game_with_player):
        game, _ = game_with_player
        game = _add_players(store, game, 2)
        order = list(reversed(game.draw_pile))[:21]

        game = engine.deal_cards(game.id)

        for seat, player in enumerate(game.players):
            assert player.cards == order[seat::3]

    def test_redeal_replaces_hands(self, engine, store, game_with_player):
        game, _ = game_with_player
        game = _add_players(store, game, 1)
        engine.deal_cards(game.id)

        game = engine.deal_cards(game.id)

        for player in game.players:
            assert len(player.cards) == 7
        assert len(game.draw_pile) == 108 - 14
        assert game.card_count() == 108

    def test_redeal_single_player_keeps_every_card(self, engine, game_with_player):
        game, _ = game_with_player
        engine.deal_cards(game.id)

        game = engine.deal_cards(game.id)

        assert len(game.players[0].cards) == 7
        assert len(game.draw_pile) == 101
        assert game.card_count() == 108

    def test_fresh_deck_mid_deal(self, engine, store, game_with_player):
        game, _ = game_with_player
        game = _add_players(store, game, 4)
        game.draw_pile = game.draw_pile[:5]
        game.discard_pile = []
        store.save_game(game)

        game = engine.deal_cards(game.id)

        for player in game.players:
            assert len(player.cards) == 7
        assert len(game.draw_pile) == 78

    def test_reshuffle_mid_deal(self, engine, store, game_with_player):
        game, _ = game_with_player
        game = _add_players(store, game, 1)
        deck = list(game.draw_pile)
        game.draw_pile = deck[:4]
        game.discard_pile = deck[4:]
        top = game.discard_pile[-1]
        store.save_game(game)

        game = engine.deal_cards(game.id)

        assert game.discard_pile == [top]
        assert len(game.draw_pile) == 108 - 14 - 1
        assert game.card_count() == 108

    def test_is_not_turn_gated(self, engine, store, game_with_player):
        game, _ = game_with_player
        game = _add_players(store, game, 1)
        game.current_player = 1
        store.save_game(game)
        game = engine.deal_cards(game.id)
        assert [len(p.cards) for p in game.players] == [7, 7]

    def test_custom_hand_size(self, store, rng, game_with_player):
        game, _ = game_with_player
        engine = DeckEngine(store, rules=UnoRulesConfig(hand_size=3), rng=rng)
        game = engine.deal_cards(game.id)
        assert len(game.players[0].cards) == 3

    def test_saved(self, engine, store, game_with_player):
        game, _ = game_with_player
        engine.deal_cards(game.id)
        assert len(store.lookup_game(game.id).players[0].cards) == 7


# ===== DeckEngine.start_game =====


class TestStartGame:
    def test_flips_first_discard(self, engine, store, game_with_player):
        game, _ = game_with_player
        game = _add_players(store, game, 1)

        game = engine.start_game(game.id)

        assert len(game.discard_pile) == 1
        assert len(game.draw_pile) == 108 - 14 - 1
        assert game.card_count() == 108
        assert game.current_player == 0
        assert store.lookup_game(game.id).top_discard == game.top_discard

    def test_keeps_existing_discard(self, engine, store, game_with_player):
        game, _ = game_with_player
        game.discard_pile = [game.draw_pile.pop()]
        store.save_game(game)

        game = engine.start_game(game.id)

        assert len(game.discard_pile) == 1
        assert len(game.draw_pile) == 107 - 7

    def test_no_flip_when_disabled(self, store, rng, game_with_player):
        game, _ = game_with_player
        engine = DeckEngine(store, rules=UnoRulesConfig(flip_first_discard=False), rng=rng)
        game = engine.start_game(game.id)
        assert game.discard_pile == []

    def test_requires_players(self, engine, store):
        game = store.create_game()
        with pytest.raises(EmptyGameError):
            engine.start_game(game.id)

    def test_unknown_game(self, engine):
        with pytest.raises(GameNotFoundError):
            engine.start_game("Bogus game id")
