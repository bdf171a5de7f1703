from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .board import Board
from .types import Action, Hotel, PlayerId, Tile

if TYPE_CHECKING:
    from .rules import TurnResult


@dataclass(frozen=True)
class PlayerShares:
    tower: int = 0
    luxor: int = 0
    american: int = 0
    worldwide: int = 0
    festival: int = 0
    imperial: int = 0
    continental: int = 0

    def count(self, hotel: Hotel) -> int:
        return getattr(self, hotel.value)

    def add(self, hotel: Hotel, amount: int = 1) -> "PlayerShares":
        if amount < 0:
            raise ValueError("Shares are never sold back")
        return replace(self, **{hotel.value: self.count(hotel) + amount})

    def as_dict(self) -> Dict[Hotel, int]:
        return {hotel: self.count(hotel) for hotel in Hotel}


@dataclass(frozen=True)
class Player:
    player_id: PlayerId
    money: int
    shares: PlayerShares = field(default_factory=PlayerShares)
    tiles: Tuple[Tile, ...] = ()

    def holds(self, tile: Tile) -> bool:
        return tile in self.tiles

    def without_tile(self, tile: Tile) -> "Player":
        index = self.tiles.index(tile)
        return replace(self, tiles=self.tiles[:index] + self.tiles[index + 1 :])


@dataclass(frozen=True)
class MergeDecision:
    # Reserved for merger resolution; nothing populates it yet.
    player: PlayerId
    candidates: Tuple[Hotel, ...] = ()


@dataclass(frozen=True)
class GameState:
    board: Board
    players: Tuple[Player, ...]
    turn: PlayerId
    merge_decision: Optional[MergeDecision] = None

    @property
    def num_players(self) -> int:
        return len(self.players)

    def player(self, player_id: PlayerId) -> Optional[Player]:
        return next((p for p in self.players if p.player_id == player_id), None)

    def with_player(self, updated: Player) -> "GameState":
        players = tuple(updated if p.player_id == updated.player_id else p for p in self.players)
        return replace(self, players=players)

    def legal_actions(self) -> List[Action]:
        from .rules import legal_actions

        return legal_actions(self)

    def play(self, action: Action) -> "TurnResult":
        from .rules import play_turn

        return play_turn(self, action)

    def apply(self, action: Action) -> "GameState":
        from .rules import apply_action

        return apply_action(self, action)
