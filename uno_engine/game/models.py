"""uno_engine/game/models.py"""

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

# Use TYPE_CHECKING guard for Card import
if TYPE_CHECKING:
    from ..card import Card


@dataclass
class Player:
    id: str
    name: str
    cards: List["Card"] = field(default_factory=list)


@dataclass
class Game:
    """
    Stored state of one UNO table.

    The top of the draw pile and of the discard pile are the ends of their lists.
    """

    id: str
    players: List[Player] = field(default_factory=list)
    draw_pile: List["Card"] = field(default_factory=list)
    discard_pile: List["Card"] = field(default_factory=list)
    current_player: int = 0

    @property
    def top_discard(self) -> Optional["Card"]:
        """Get the top card in the discard pile. Returns None if empty."""
        return self.discard_pile[-1] if self.discard_pile else None

    def player_index(self, player_id: str) -> int:
        """Seat index of the player, or -1 if they have not joined."""
        for index, player in enumerate(self.players):
            if player.id == player_id:
                return index
        return -1

    def find_player(self, player_id: str) -> Optional[Player]:
        index = self.player_index(player_id)
        return self.players[index] if index >= 0 else None

    def card_count(self) -> int:
        """Cards across both piles and every hand."""
        return (
            len(self.draw_pile)
            + len(self.discard_pile)
            + sum(len(player.cards) for player in self.players)
        )
