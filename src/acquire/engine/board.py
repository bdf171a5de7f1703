from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .types import COLS, ROWS, Hotel, Slot, Tile

GRID_DIRECTIONS = [
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
]


def board_coords(rows: int = ROWS, cols: int = COLS) -> List[Tuple[int, int]]:
    return [(row, col) for row in range(rows) for col in range(cols)]


@dataclass(frozen=True)
class Board:
    slots: Tuple[Slot, ...]

    def __post_init__(self) -> None:
        if len(self.slots) != ROWS * COLS:
            raise ValueError(f"Board needs {ROWS * COLS} slots, got {len(self.slots)}")
        for index, slot in enumerate(self.slots):
            if (slot.row, slot.col) != divmod(index, COLS):
                raise ValueError(f"Slot {index} is at ({slot.row},{slot.col}); slots must be in row-major order")

    def _index(self, row: int, col: int) -> int:
        return row * COLS + col

    def slot_at(self, tile: Tile) -> Slot:
        return self.slots[self._index(tile.row, tile.col)]

    def has_tile(self, tile: Tile) -> bool:
        return self.slot_at(tile).has_tile

    def placed_tiles(self) -> List[Tile]:
        return [Tile(slot.row, slot.col) for slot in self.slots if slot.has_tile]

    def neighbors(self, tile: Tile) -> List[Tile]:
        result: List[Tile] = []
        for dr, dc in GRID_DIRECTIONS:
            row, col = tile.row + dr, tile.col + dc
            if 0 <= row < ROWS and 0 <= col < COLS:
                result.append(Tile(row, col))
        return result

    def with_slot(self, slot: Slot) -> "Board":
        slots = list(self.slots)
        slots[self._index(slot.row, slot.col)] = slot
        return Board(slots=tuple(slots))

    def with_tile_placed(self, tile: Tile) -> "Board":
        return self.with_slot(replace(self.slot_at(tile), has_tile=True))

    def with_hotel(self, tiles: Iterable[Tile], hotel: Optional[Hotel]) -> "Board":
        board = self
        for tile in tiles:
            board = board.with_slot(Slot(tile.row, tile.col, has_tile=True, hotel=hotel))
        return board

    def hotel_graph(self, hotel: Hotel) -> nx.Graph:
        owned = {
            Tile(slot.row, slot.col) for slot in self.slots if slot.has_tile and slot.hotel == hotel
        }
        graph = nx.Graph()
        graph.add_nodes_from(owned)
        for tile in owned:
            for neighbor in self.neighbors(tile):
                if neighbor in owned:
                    graph.add_edge(tile, neighbor)
        return graph

    def chain_size(self, hotel: Hotel) -> int:
        graph = self.hotel_graph(hotel)
        if graph.number_of_nodes() == 0:
            return 0
        return max(len(component) for component in nx.connected_components(graph))

    def chain_sizes(self) -> Dict[Hotel, int]:
        return {hotel: self.chain_size(hotel) for hotel in Hotel}
