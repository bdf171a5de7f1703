from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, TypeVar

from ..utils.repro import make_rng
from .board import Board, board_coords
from .config import GameConfig
from .errors import InsufficientTilesError
from .game_state import GameState, Player, PlayerShares
from .types import PlayerId, Slot, Tile

logger = logging.getLogger(__name__)

T = TypeVar("T")


def all_tiles() -> List[Tile]:
    return [Tile(row, col) for row, col in board_coords()]


def choose_tiles(pool: Sequence[T], count: int, rng) -> Tuple[List[T], List[T]]:
    """Draw ``count`` items uniformly at random without replacement.

    ``rng`` only needs an ``integers(high)`` method returning a value in
    ``[0, high)``, so a ``numpy.random.Generator`` or a scripted fake both work.
    Returns ``(chosen, remaining)``; ``remaining`` keeps the pool's order.
    """
    if count < 0 or count > len(pool):
        raise InsufficientTilesError(f"Cannot draw {count} from a pool of {len(pool)}")
    remaining = list(pool)
    chosen: List[T] = []
    for _ in range(count):
        index = int(rng.integers(len(remaining)))
        chosen.append(remaining.pop(index))
    return chosen, remaining


def initial_slots(starting_tiles: Sequence[Tile]) -> Tuple[Slot, ...]:
    placed = set(starting_tiles)
    return tuple(
        Slot(row=row, col=col, has_tile=Tile(row, col) in placed, hotel=None)
        for row, col in board_coords()
    )


def new_player(player_id: PlayerId, tiles: Sequence[Tile], money: int) -> Player:
    return Player(player_id=player_id, money=money, shares=PlayerShares(), tiles=tuple(tiles))


def new_players(pool: Sequence[Tile], config: GameConfig, rng) -> Tuple[List[Player], List[Tile]]:
    players: List[Player] = []
    remaining = list(pool)
    for index in range(1, config.num_players + 1):
        hand, remaining = choose_tiles(remaining, config.hand_size, rng)
        players.append(
            new_player(PlayerId.from_index(index, config.num_players), hand, config.starting_money)
        )
    return players, remaining


def new_game(config: Optional[GameConfig] = None, rng=None) -> GameState:
    config = (config or GameConfig()).validate()
    if rng is None:
        rng = make_rng(config.seed)

    starting_tiles, remaining = choose_tiles(all_tiles(), config.num_players, rng)
    players, undealt = new_players(remaining, config, rng)
    logger.debug(
        "Dealt %d starting tiles and %d hands of %d; %d tiles left in the pool",
        len(starting_tiles),
        len(players),
        config.hand_size,
        len(undealt),
    )

    return GameState(
        board=Board(slots=initial_slots(starting_tiles)),
        players=tuple(players),
        turn=PlayerId.ONE,
        merge_decision=None,
    )
