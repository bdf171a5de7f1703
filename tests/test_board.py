import pytest

from acquire.engine.board import Board
from acquire.engine.config import GameConfig
from acquire.engine.dealing import initial_slots, new_game
from acquire.engine.errors import InvalidTileError
from acquire.engine.types import COLS, ROWS, Hotel, Slot, Tile


def _empty_board():
    return Board(slots=initial_slots([]))


def test_board_counts():
    game = new_game(GameConfig(seed=42))
    assert len(game.board.slots) == ROWS * COLS == 108
    coords = {(slot.row, slot.col) for slot in game.board.slots}
    assert len(coords) == 108


def test_initial_slots_mark_only_starting_tiles():
    starting = [Tile(0, 0), Tile(4, 7), Tile(8, 11)]
    slots = initial_slots(starting)
    assert len(slots) == ROWS * COLS
    for slot in slots:
        assert slot.has_tile == (Tile(slot.row, slot.col) in starting)
        assert slot.hotel is None


def test_tile_outside_board_is_rejected():
    with pytest.raises(InvalidTileError):
        Tile(ROWS, 0)
    with pytest.raises(InvalidTileError):
        Tile(0, COLS)
    with pytest.raises(InvalidTileError):
        Tile(-1, 3)


def test_tile_labels():
    assert Tile(0, 0).label == "1A"
    assert Tile(8, 11).label == "12I"
    assert Tile.parse("5c") == Tile(2, 4)
    assert Tile.parse(Tile(6, 9).label) == Tile(6, 9)
    with pytest.raises(InvalidTileError):
        Tile.parse("13A")
    with pytest.raises(InvalidTileError):
        Tile.parse("A1")
    with pytest.raises(InvalidTileError):
        Tile.parse("\u00b2A")
    with pytest.raises(InvalidTileError):
        Tile.parse("A")


def test_slot_hotel_requires_tile():
    with pytest.raises(ValueError):
        Slot(0, 0, has_tile=False, hotel=Hotel.LUXOR)


def test_placing_tile_returns_new_board():
    board = _empty_board()
    placed = board.with_tile_placed(Tile(3, 3))
    assert placed.has_tile(Tile(3, 3))
    assert not board.has_tile(Tile(3, 3))
    changed = [i for i, (a, b) in enumerate(zip(board.slots, placed.slots)) if a != b]
    assert changed == [3 * COLS + 3]


def test_neighbors_at_corner_and_center():
    board = _empty_board()
    assert set(board.neighbors(Tile(0, 0))) == {Tile(1, 0), Tile(0, 1)}
    assert len(board.neighbors(Tile(4, 5))) == 4


def test_chain_size_counts_largest_connected_group():
    board = _empty_board()
    board = board.with_hotel([Tile(0, 0), Tile(0, 1), Tile(1, 1)], Hotel.TOWER)
    board = board.with_hotel([Tile(5, 5), Tile(5, 6)], Hotel.TOWER)
    assert board.chain_size(Hotel.TOWER) == 3
    assert board.chain_size(Hotel.LUXOR) == 0


def test_diagonal_tiles_are_not_connected():
    board = _empty_board().with_hotel([Tile(2, 2), Tile(3, 3)], Hotel.FESTIVAL)
    assert board.chain_size(Hotel.FESTIVAL) == 1


def test_unclaimed_tiles_do_not_join_a_chain():
    board = _empty_board().with_hotel([Tile(2, 2), Tile(2, 3)], Hotel.AMERICAN)
    board = board.with_tile_placed(Tile(2, 4))
    assert board.chain_size(Hotel.AMERICAN) == 2
    assert board.chain_sizes()[Hotel.AMERICAN] == 2


def test_board_rejects_slots_out_of_row_major_order():
    slots = initial_slots([Tile(0, 0)])
    with pytest.raises(ValueError):
        Board(slots=tuple(reversed(slots)))
    with pytest.raises(ValueError):
        Board(slots=(slots[0],) + slots[:-1])
    with pytest.raises(ValueError):
        Board(slots=slots[:-1])
