import numpy as np
import pytest

from acquire.engine.config import GameConfig
from acquire.engine.dealing import all_tiles, choose_tiles, new_game
from acquire.engine.errors import ConfigError, InsufficientTilesError, InvalidPlayerError
from acquire.engine.types import PlayerId
from acquire.utils.repro import make_rng


class ScriptedRng:
    def __init__(self, indices):
        self._indices = list(indices)

    def integers(self, high):
        index = self._indices.pop(0)
        assert 0 <= index < high
        return index


@pytest.mark.parametrize("count", [0, 1, 6, 50, 108])
def test_choose_tiles_partitions_pool(count):
    pool = all_tiles()
    chosen, remaining = choose_tiles(pool, count, np.random.default_rng(count))
    assert len(chosen) == count
    assert len(remaining) == len(pool) - count
    assert not set(chosen) & set(remaining)
    assert set(chosen) | set(remaining) == set(pool)


def test_choose_tiles_uses_injected_rng():
    chosen, remaining = choose_tiles(["a", "b", "c", "d"], 2, ScriptedRng([1, 0]))
    assert chosen == ["b", "a"]
    assert remaining == ["c", "d"]


def test_choose_tiles_rejects_oversized_draw():
    with pytest.raises(InsufficientTilesError):
        choose_tiles(["a", "b"], 3, np.random.default_rng(0))


def test_new_game_deal():
    game = new_game(GameConfig(seed=5))
    assert game.turn == PlayerId.ONE
    assert game.merge_decision is None
    assert [p.player_id for p in game.players] == [PlayerId.ONE, PlayerId.TWO, PlayerId.THREE, PlayerId.FOUR]

    on_board = game.board.placed_tiles()
    assert len(on_board) == 4

    seen = set(on_board)
    for player in game.players:
        assert player.money == 6000
        assert len(player.tiles) == 6
        assert all(player.shares.count(hotel) == 0 for hotel in player.shares.as_dict())
        assert not seen & set(player.tiles)
        seen |= set(player.tiles)
    assert all(slot.hotel is None for slot in game.board.slots)


def test_new_game_is_reproducible_with_seed():
    assert new_game(GameConfig(seed=11)) == new_game(GameConfig(seed=11))
    assert new_game(GameConfig(seed=11)) != new_game(GameConfig(seed=12))


def test_new_game_respects_config():
    game = new_game(GameConfig(num_players=3, hand_size=4, starting_money=1000, seed=1))
    assert len(game.players) == 3
    assert len(game.board.placed_tiles()) == 3
    assert all(len(p.tiles) == 4 and p.money == 1000 for p in game.players)


def test_config_validation():
    with pytest.raises(ConfigError):
        GameConfig(num_players=1).validate()
    with pytest.raises(ConfigError):
        GameConfig(num_players=7).validate()
    with pytest.raises(ConfigError):
        GameConfig(num_players=6, hand_size=20).validate()
    with pytest.raises(ConfigError):
        GameConfig.from_dict({"num_players": 4, "colour": "red"})
    config = GameConfig.from_dict({"num_players": 5, "seed": 9})
    assert config.to_dict() == {"num_players": 5, "hand_size": 6, "starting_money": 6000, "seed": 9}


def test_player_id_from_index():
    assert PlayerId.from_index(1, 4) == PlayerId.ONE
    assert PlayerId.from_index(4, 4) == PlayerId.FOUR
    with pytest.raises(InvalidPlayerError):
        PlayerId.from_index(0, 4)
    with pytest.raises(InvalidPlayerError):
        PlayerId.from_index(5, 4)


def test_seeded_generators_agree():
    game = new_game(GameConfig(seed=8), rng=make_rng(8))
    assert game == new_game(GameConfig(seed=8))
