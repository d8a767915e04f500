"""
tests/conftest.py

Shared fixtures and bootstrap logic for all tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from uno_engine.game.deck import generate_shuffled_deck  # noqa: E402
from uno_engine.game.engine import DeckEngine  # noqa: E402
from uno_engine.persistence import GameStore  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return GameStore()


@pytest.fixture
def engine(store, rng):
    return DeckEngine(store, rng=rng)


@pytest.fixture
def game_with_player(store, rng):
    """A saved game with one seated player and a full shuffled draw pile."""
    game = store.create_game()
    player = store.create_player("Player 1")
    game = store.join_game(game.id, player.id)
    game.draw_pile = generate_shuffled_deck(rng)
    store.save_game(game)
    return game, player
