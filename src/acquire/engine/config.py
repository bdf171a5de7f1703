"""
Game configuration settings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .errors import ConfigError
from .types import TILES, PlayerId

MIN_PLAYERS = 2
MAX_PLAYERS = len(PlayerId)


@dataclass(frozen=True)
class GameConfig:
    """Configuration for an Acquire game."""

    num_players: int = 4
    hand_size: int = 6
    starting_money: int = 6000

    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        if not MIN_PLAYERS <= self.num_players <= MAX_PLAYERS:
            raise ConfigError(
                f"num_players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {self.num_players}"
            )
        if self.hand_size < 0:
            raise ConfigError(f"hand_size must be non-negative, got {self.hand_size}")
        if self.starting_money < 0:
            raise ConfigError(f"starting_money must be non-negative, got {self.starting_money}")
        # one board seed per player plus every hand
        needed = self.num_players * (self.hand_size + 1)
        if needed > TILES:
            raise ConfigError(f"Deal needs {needed} tiles but the board only has {TILES}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {key: data[key] for key in ("num_players", "hand_size", "starting_money", "seed") if key in data}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**known).validate()
