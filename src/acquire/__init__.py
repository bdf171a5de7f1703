"""Rules engine for the Acquire hotel-chain board game."""

from .engine import GameConfig, GameState, compute_state, new_game, play_turn

__version__ = "0.1.0"

__all__ = ["GameConfig", "GameState", "compute_state", "new_game", "play_turn"]
