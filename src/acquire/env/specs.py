from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ObservationKey(str, Enum):
    OCCUPANCY = "occupancy"
    HOTELS = "hotels"
    PLAYERS = "players"
    TURN = "turn"


@dataclass(frozen=True)
class EnvSpec:
    num_players: int
    max_steps: int
    seed: int | None

    def to_dict(self) -> Dict[str, object]:
        return {
            "num_players": self.num_players,
            "max_steps": self.max_steps,
            "seed": self.seed,
        }


@dataclass(frozen=True)
class StepOutput:
    observation: Dict[str, object]
    ok: bool
    truncated: bool
    info: Dict[str, object]
