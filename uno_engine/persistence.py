# uno_engine/persistence.py
from typing import Dict, Optional
import copy
import logging
import os
import pickle
import uuid

import joblib

from .exceptions import AlreadyJoinedError, GameNotFoundError, PlayerNotFoundError
from .game.models import Game, Player

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class GameStore:
    """
    In-memory store for games and players.

    Lookups hand out deep copies and saves store deep copies, so a caller only
    changes stored state by saving. Not safe for concurrent writers.
    """

    def __init__(
        self,
        games: Optional[Dict[str, Game]] = None,
        players: Optional[Dict[str, Player]] = None,
    ):
        self._games: Dict[str, Game] = games if games is not None else {}
        self._players: Dict[str, Player] = players if players is not None else {}

    def create_game(self) -> Game:
        game = Game(id=_new_id())
        self.save_game(game)
        logger.debug("Created game %s", game.id)
        return game

    def create_player(self, name: str) -> Player:
        player = Player(id=_new_id(), name=name)
        self._players[player.id] = copy.deepcopy(player)
        logger.debug("Created player %s (%s)", player.id, name)
        return player

    def join_game(self, game_id: str, player_id: str) -> Game:
        """Seats the player at the end of the game's turn order and saves the game."""
        game = self.lookup_game(game_id)
        player = self.lookup_player(player_id)
        if game.player_index(player_id) >= 0:
            raise AlreadyJoinedError(
                f"Player '{player_id}' already joined game '{game_id}'"
            )
        game.players.append(player)
        self.save_game(game)
        logger.info("Player %s joined game %s (seat %d)", player_id, game_id, len(game.players) - 1)
        return game

    def lookup_game(self, game_id: str) -> Game:
        try:
            return copy.deepcopy(self._games[game_id])
        except KeyError:
            raise GameNotFoundError(game_id) from None

    def lookup_player(self, player_id: str) -> Player:
        try:
            return copy.deepcopy(self._players[player_id])
        except KeyError:
            raise PlayerNotFoundError(player_id) from None

    def save_game(self, game: Game) -> None:
        self._games[game.id] = copy.deepcopy(game)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._games

    def __len__(self) -> int:
        return len(self._games)

    # --- Snapshots ---

    def dump(self, filepath: str) -> None:
        """Saves every game and player to a joblib file."""
        parent_dir = os.path.dirname(filepath)
        # Handle case where filepath is just a filename (dirname is '')
        if parent_dir:
            os.makedirs(parent_dir, exist_ok=True)
        joblib.dump({"games": self._games, "players": self._players}, filepath)
        logger.info(
            "Store saved to %s (%d games, %d players)",
            filepath,
            len(self._games),
            len(self._players),
        )

    @classmethod
    def load(cls, filepath: str) -> "GameStore":
        """Loads a store snapshot. A missing or empty file gives an empty store."""
        if not os.path.exists(filepath):
            logger.info("Store file not found at %s. Starting fresh.", filepath)
            return cls()
        if os.path.getsize(filepath) == 0:
            logger.warning("Store file at %s is empty. Starting fresh.", filepath)
            return cls()
        try:
            data = joblib.load(filepath)
        except (OSError, pickle.UnpicklingError, EOFError, ValueError) as e:
            logger.error("Error loading store from %s: %s", filepath, e)
            raise
        logger.info("Store loaded from %s", filepath)
        return cls(games=data.get("games", {}), players=data.get("players", {}))
