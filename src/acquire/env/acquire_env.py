from __future__ import annotations

import logging
from typing import Dict, Sequence, Union

import numpy as np

from acquire.engine.config import GameConfig
from acquire.engine.dealing import new_game
from acquire.engine.game_state import GameState
from acquire.engine.rules import Failure, compute_state
from acquire.engine.types import COLS, ROWS, Action, Hotel

from .specs import EnvSpec, ObservationKey, StepOutput

logger = logging.getLogger(__name__)

HOTEL_CODES: Dict[Hotel, int] = {hotel: code for code, hotel in enumerate(Hotel, start=1)}


class AcquireEnv:
    """Gym-style session wrapper around the Acquire engine."""

    def __init__(self, num_players: int = 4, max_steps: int = 500, seed: int | None = None):
        self.spec = EnvSpec(num_players=num_players, max_steps=max_steps, seed=seed)
        self._state: GameState | None = None
        self._steps = 0

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("Environment not reset")
        return self._state

    def reset(self, seed: int | None = None) -> Dict[str, object]:
        if seed is not None:
            self.spec = EnvSpec(
                num_players=self.spec.num_players,
                max_steps=self.spec.max_steps,
                seed=seed,
            )

        config = GameConfig(num_players=self.spec.num_players, seed=self.spec.seed)
        self._state = new_game(config)
        self._steps = 0
        logger.info("Reset Acquire env with %d players (seed=%s)", self.spec.num_players, self.spec.seed)
        return self._build_observation(self._state)

    def step(self, actions: Union[Action, Sequence[Action]]) -> StepOutput:
        if self._state is None:
            raise RuntimeError("Environment not reset")
        if isinstance(actions, Action):
            actions = [actions]

        result = compute_state(self._state, actions)
        self._steps += 1
        info: Dict[str, object] = {"step": self._steps}
        if isinstance(result, Failure):
            info["reason"] = result.reason
            info["message"] = result.message
        else:
            self._state = result.game

        return StepOutput(
            observation=self._build_observation(self._state),
            ok=not isinstance(result, Failure),
            truncated=self._steps >= self.spec.max_steps,
            info=info,
        )

    def _build_observation(self, state: GameState) -> Dict[str, object]:
        occupancy = np.zeros((ROWS, COLS), dtype=np.int8)
        hotels = np.zeros((ROWS, COLS), dtype=np.int8)
        for slot in state.board.slots:
            if slot.has_tile:
                occupancy[slot.row, slot.col] = 1
            if slot.hotel is not None:
                hotels[slot.row, slot.col] = HOTEL_CODES[slot.hotel]

        return {
            ObservationKey.OCCUPANCY.value: occupancy,
            ObservationKey.HOTELS.value: hotels,
            ObservationKey.PLAYERS.value: [
                {
                    "player_id": int(player.player_id),
                    "money": player.money,
                    "shares": {hotel.value: count for hotel, count in player.shares.as_dict().items()},
                    "hand_size": len(player.tiles),
                }
                for player in state.players
            ],
            ObservationKey.TURN.value: int(state.turn),
        }
