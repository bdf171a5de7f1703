from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from .board import Board
from .game_state import GameState
from .types import Hotel, PriceTier

MIN_CHAIN_SIZE = 2
PRICE_STEP = 100

BASE_PRICES: Dict[PriceTier, int] = {
    PriceTier.CHEAP: 200,
    PriceTier.MEDIUM: 300,
    PriceTier.SPENDY: 400,
}

# (largest chain size in the bracket, level); anything above the last bracket is level 8
PRICE_BRACKETS: List[Tuple[int, int]] = [
    (2, 0),
    (3, 1),
    (4, 2),
    (5, 3),
    (10, 4),
    (20, 5),
    (30, 6),
    (40, 7),
]
TOP_PRICE_LEVEL = 8


def base_price(hotel: Hotel) -> int:
    return BASE_PRICES[hotel.tier]


def price_level(chain_size: int) -> int:
    if chain_size < MIN_CHAIN_SIZE:
        raise ValueError(f"A chain needs at least {MIN_CHAIN_SIZE} tiles to have a price, got {chain_size}")
    for upper, level in PRICE_BRACKETS:
        if chain_size <= upper:
            return level
    return TOP_PRICE_LEVEL


def stock_price(hotel: Hotel, chain_size: int) -> int:
    return base_price(hotel) + PRICE_STEP * price_level(chain_size)


def hotel_chain_size(game: Union[GameState, Board], hotel: Hotel) -> int:
    board = game.board if isinstance(game, GameState) else game
    return board.chain_size(hotel)


def share_price(game: GameState, hotel: Optional[Hotel]) -> int:
    if hotel is None:
        return 0
    return stock_price(hotel, hotel_chain_size(game, hotel))
