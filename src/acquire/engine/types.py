from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Optional

from .errors import InvalidPlayerError, InvalidTileError

ROWS = 9
COLS = 12
TILES = ROWS * COLS

ROW_LETTERS = "ABCDEFGHI"


class PlayerId(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6

    @classmethod
    def from_index(cls, index: int, num_players: int = 6) -> "PlayerId":
        if not 1 <= index <= min(num_players, len(cls)):
            raise InvalidPlayerError(f"Player index {index} out of range 1..{num_players}")
        return cls(index)


class PriceTier(str, Enum):
    CHEAP = "cheap"
    MEDIUM = "medium"
    SPENDY = "spendy"


class Hotel(str, Enum):
    TOWER = "tower"
    LUXOR = "luxor"
    AMERICAN = "american"
    WORLDWIDE = "worldwide"
    FESTIVAL = "festival"
    IMPERIAL = "imperial"
    CONTINENTAL = "continental"

    @property
    def tier(self) -> PriceTier:
        return HOTEL_TIERS[self]


HOTEL_TIERS: Dict[Hotel, PriceTier] = {
    Hotel.TOWER: PriceTier.CHEAP,
    Hotel.LUXOR: PriceTier.CHEAP,
    Hotel.AMERICAN: PriceTier.MEDIUM,
    Hotel.WORLDWIDE: PriceTier.MEDIUM,
    Hotel.FESTIVAL: PriceTier.MEDIUM,
    Hotel.IMPERIAL: PriceTier.SPENDY,
    Hotel.CONTINENTAL: PriceTier.SPENDY,
}


@dataclass(frozen=True, order=True)
class Tile:
    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < ROWS and 0 <= self.col < COLS):
            raise InvalidTileError(f"Tile ({self.row},{self.col}) is off the {ROWS}x{COLS} board")

    @property
    def label(self) -> str:
        """Printed tile name, column number first: row 0, col 0 is ``1A``."""
        return f"{self.col + 1}{ROW_LETTERS[self.row]}"

    @classmethod
    def parse(cls, label: str) -> "Tile":
        text = label.strip().upper()
        number, letter = text[:-1], text[-1:]
        if not number or any(ch not in "0123456789" for ch in number) or letter not in ROW_LETTERS:
            raise InvalidTileError(f"Cannot parse tile label {label!r}")
        return cls(row=ROW_LETTERS.index(letter), col=int(number) - 1)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Slot:
    row: int
    col: int
    has_tile: bool = False
    hotel: Optional[Hotel] = None

    def __post_init__(self) -> None:
        if self.hotel is not None and not self.has_tile:
            raise ValueError(f"Slot ({self.row},{self.col}) claims {self.hotel.value} without a tile")


class ActionType(str, Enum):
    PLACE_TILE = "place_tile"
    BUY_STOCKS = "buy_stocks"
    RESOLVE_MERGER = "resolve_merger"
    END_TURN = "end_turn"


@dataclass(frozen=True)
class Action:
    action_type: ActionType
    payload: Dict[str, object] = field(default_factory=dict)

    @classmethod
    def place_tile(cls, player: PlayerId, tile: Tile) -> "Action":
        return cls(ActionType.PLACE_TILE, {"player": player, "tile": tile})

    @classmethod
    def buy_stocks(
        cls,
        player: PlayerId,
        hotel1: Optional[Hotel] = None,
        hotel2: Optional[Hotel] = None,
        hotel3: Optional[Hotel] = None,
    ) -> "Action":
        return cls(
            ActionType.BUY_STOCKS,
            {"player": player, "hotel1": hotel1, "hotel2": hotel2, "hotel3": hotel3},
        )
