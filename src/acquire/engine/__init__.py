"""Core game engine for Acquire."""

from .board import Board
from .config import GameConfig
from .dealing import choose_tiles, initial_slots, new_game
from .errors import (
    AcquireError,
    ConfigError,
    IllegalActionError,
    InsufficientTilesError,
    InvalidPlayerError,
    InvalidTileError,
)
from .game_state import GameState, MergeDecision, Player, PlayerShares
from .pricing import hotel_chain_size, share_price, stock_price
from .rules import Failure, RuleViolation, Success, TurnResult, compute_state, play_turn
from .types import Action, ActionType, Hotel, PlayerId, PriceTier, Slot, Tile

__all__ = [
    "Board",
    "GameConfig",
    "GameState",
    "MergeDecision",
    "Player",
    "PlayerShares",
    "Action",
    "ActionType",
    "Hotel",
    "PlayerId",
    "PriceTier",
    "Slot",
    "Tile",
    "Success",
    "Failure",
    "RuleViolation",
    "TurnResult",
    "AcquireError",
    "ConfigError",
    "IllegalActionError",
    "InsufficientTilesError",
    "InvalidPlayerError",
    "InvalidTileError",
    "choose_tiles",
    "initial_slots",
    "new_game",
    "compute_state",
    "play_turn",
    "hotel_chain_size",
    "share_price",
    "stock_price",
]
