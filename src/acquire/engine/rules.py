from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Union

from .errors import IllegalActionError
from .game_state import GameState, Player
from .pricing import MIN_CHAIN_SIZE, hotel_chain_size, share_price
from .types import Action, ActionType, Hotel, PlayerId, Tile

logger = logging.getLogger(__name__)

HOTEL_KEYS = ("hotel1", "hotel2", "hotel3")


@dataclass(frozen=True)
class RuleViolation:
    reason: str
    message: str = ""


@dataclass(frozen=True)
class Success:
    game: GameState

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    reason: str
    message: str

    @property
    def ok(self) -> bool:
        return False


TurnResult = Union[Success, Failure]


def _payload_player(action: Action) -> Optional[PlayerId]:
    player = action.payload.get("player")
    return player if isinstance(player, PlayerId) else None


def _payload_hotels(action: Action) -> List[Optional[Hotel]]:
    return [action.payload.get(key) for key in HOTEL_KEYS]


def _purchase_cost(state: GameState, hotels: Iterable[Optional[Hotel]]) -> int:
    return sum(share_price(state, hotel) for hotel in hotels)


def _validate_place_tile(state: GameState, action: Action) -> List[RuleViolation]:
    player_id = _payload_player(action)
    tile = action.payload.get("tile")
    if player_id is None or not isinstance(tile, Tile):
        return [RuleViolation("invalid_payload", "Error placing tile: payload needs a player and a tile")]
    if player_id != state.turn:
        return [
            RuleViolation(
                "not_players_turn",
                f"Error placing tile: player {player_id.name} does not have turn",
            )
        ]
    player = state.player(player_id)
    if player is None or not player.holds(tile):
        return [
            RuleViolation(
                "tile_not_held",
                f"Error placing tile: player {player_id.name} does not have tile {tile.label}",
            )
        ]
    return []


def _validate_buy_stocks(state: GameState, action: Action) -> List[RuleViolation]:
    player_id = _payload_player(action)
    if player_id is None:
        return [RuleViolation("invalid_payload", "Error buying stocks: payload needs a player")]
    hotels = _payload_hotels(action)
    if any(hotel is not None and not isinstance(hotel, Hotel) for hotel in hotels):
        return [RuleViolation("invalid_payload", "Error buying stocks: unknown hotel in payload")]
    if player_id != state.turn:
        return [
            RuleViolation(
                "not_players_turn",
                f"Error buying stocks: player {player_id.name} does not have turn",
            )
        ]
    player = state.player(player_id)
    if player is None:
        return [RuleViolation("unknown_player", f"Error buying stocks: no player {player_id.name}")]

    violations: List[RuleViolation] = []
    for hotel in hotels:
        if hotel is None:
            continue
        if hotel_chain_size(state, hotel) < MIN_CHAIN_SIZE:
            violations.append(
                RuleViolation(
                    "hotel_not_on_board",
                    f"Error buying stocks: {hotel.value} has no chain on the board",
                )
            )
    if violations:
        return violations

    cost = _purchase_cost(state, hotels)
    if cost > player.money:
        violations.append(
            RuleViolation(
                "insufficient_funds",
                f"Error buying stocks: player {player_id.name} has {player.money}, needs {cost}",
            )
        )
    return violations


def validate_action(state: GameState, action: Action) -> List[RuleViolation]:
    if action.action_type == ActionType.PLACE_TILE:
        return _validate_place_tile(state, action)
    if action.action_type == ActionType.BUY_STOCKS:
        return _validate_buy_stocks(state, action)
    return [
        RuleViolation(
            "unsupported_action",
            f"Unsupported action {action.action_type.value}",
        )
    ]


def _place_tile(state: GameState, player_id: PlayerId, tile: Tile) -> GameState:
    player = state.player(player_id)
    next_state = state.with_player(player.without_tile(tile))
    return replace(next_state, board=state.board.with_tile_placed(tile))


def _player_buy_stocks(state: GameState, player: Player, hotels: List[Optional[Hotel]]) -> Player:
    shares = player.shares
    for hotel in hotels:
        if hotel is not None:
            shares = shares.add(hotel)
    return replace(player, money=player.money - _purchase_cost(state, hotels), shares=shares)


def _buy_stocks(state: GameState, player_id: PlayerId, hotels: List[Optional[Hotel]]) -> GameState:
    # prices come from the board before the purchase
    return state.with_player(_player_buy_stocks(state, state.player(player_id), hotels))


def _resolve(state: GameState, action: Action) -> GameState:
    player_id = _payload_player(action)
    if action.action_type == ActionType.PLACE_TILE:
        return _place_tile(state, player_id, action.payload["tile"])
    return _buy_stocks(state, player_id, _payload_hotels(action))


def play_turn(state: GameState, action: Action) -> TurnResult:
    violations = validate_action(state, action)
    if violations:
        first = violations[0]
        logger.info("Rejected %s: %s", action.action_type.value, first.reason)
        return Failure(reason=first.reason, message=first.message)

    next_state = _resolve(state, action)
    logger.debug("Applied %s for %s", action.action_type.value, action.payload.get("player"))
    return Success(next_state)


def compute_state(last_state: GameState, actions: Iterable[Action]) -> TurnResult:
    result: TurnResult = Success(last_state)
    for action in actions:
        if isinstance(result, Failure):
            break
        result = play_turn(result.game, action)
    return result


def apply_action(state: GameState, action: Action) -> GameState:
    violations = validate_action(state, action)
    if violations:
        raise IllegalActionError(violations)
    return _resolve(state, action)


def legal_actions(state: GameState) -> List[Action]:
    player = state.player(state.turn)
    if player is None:
        return []

    actions: List[Action] = []
    for tile in player.tiles:
        if not state.board.has_tile(tile):
            actions.append(Action.place_tile(player.player_id, tile))
    for hotel in Hotel:
        if hotel_chain_size(state, hotel) < MIN_CHAIN_SIZE:
            continue
        if share_price(state, hotel) <= player.money:
            actions.append(Action.buy_stocks(player.player_id, hotel))
    return actions
