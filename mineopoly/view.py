"""
Read-only board views handed to player strategies each turn.
"""

from typing import Dict, Mapping, Optional, Protocol

from mineopoly.board import Board
from mineopoly.items import InventoryItem
from mineopoly.tiles import Coordinate, TileType


class BoardView(Protocol):
    """What a strategy is allowed to see of the board on its turn."""

    @property
    def board_size(self) -> int: ...

    @property
    def items_on_ground(self) -> Mapping[InventoryItem, Coordinate]: ...

    @property
    def your_location(self) -> Coordinate: ...

    @property
    def other_player_location(self) -> Coordinate: ...

    def tile_type_at(self, location: Coordinate) -> Optional[TileType]:
        """Tile type at location, or None if it is off the board."""
        ...


class BoardSnapshot:
    """
    In-memory BoardView over a Board plus the dynamic state of one turn.

    The tile grid is copied so later changes to the board do not leak
    into a view that was already handed out.
    """

    def __init__(
        self,
        board: Board,
        your_location: Coordinate,
        other_player_location: Coordinate,
        items_on_ground: Optional[Mapping[InventoryItem, Coordinate]] = None,
    ):
        self._size = board.size
        self._tiles = [list(row) for row in board.tiles]
        self._your_location = Coordinate(*your_location)
        self._other_player_location = Coordinate(*other_player_location)
        self._items_on_ground: Dict[InventoryItem, Coordinate] = {
            item: Coordinate(*location) for item, location in (items_on_ground or {}).items()
        }

    @classmethod
    def from_board(
        cls,
        board: Board,
        is_red_player: bool,
        items_on_ground: Optional[Mapping[InventoryItem, Coordinate]] = None,
    ) -> "BoardSnapshot":
        """Snapshot at the start of a round, both players on their start tiles."""
        red, blue = board.red_start_location, board.blue_start_location
        if is_red_player:
            return cls(board, red, blue, items_on_ground)
        return cls(board, blue, red, items_on_ground)

    @property
    def board_size(self) -> int:
        return self._size

    @property
    def items_on_ground(self) -> Dict[InventoryItem, Coordinate]:
        return dict(self._items_on_ground)

    @property
    def your_location(self) -> Coordinate:
        return self._your_location

    @property
    def other_player_location(self) -> Coordinate:
        return self._other_player_location

    def tile_type_at(self, location: Coordinate) -> Optional[TileType]:
        x, y = location
        if not (0 <= x < self._size and 0 <= y < self._size):
            return None
        return self._tiles[(self._size - 1) - y][x]

    def __repr__(self) -> str:
        return (
            f"BoardSnapshot(size={self._size}, you={self._your_location}, "
            f"other={self._other_player_location}, items={len(self._items_on_ground)})"
        )
