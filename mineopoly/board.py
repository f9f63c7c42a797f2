"""
The Mineopoly game board.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from mineopoly.config import MIN_BOARD_SIZE
from mineopoly.exceptions import InvalidBoardSizeError, OutOfBoundsError
from mineopoly.tiles import Coordinate, ResourceType, TileType


def validate_board_size(board_size: int) -> None:
    """Raise InvalidBoardSizeError unless board_size is an even number >= 10."""
    if not isinstance(board_size, int) or isinstance(board_size, bool):
        raise InvalidBoardSizeError(f"Board size must be an integer, got {board_size!r}")
    if board_size < MIN_BOARD_SIZE or board_size % 2 != 0:
        raise InvalidBoardSizeError(
            f"Board size must be an even number >= {MIN_BOARD_SIZE}, got {board_size}"
        )


class Board:
    """
    A square grid of tiles.

    Tiles are stored row-major with the top row first: storage index
    [i][j] holds location (j, size - 1 - i), so MOVE_UP increases y.
    """

    def __init__(self, size: int, seed: Optional[int] = None):
        validate_board_size(size)
        self.size = size
        self.seed = seed
        self.tiles: List[List[TileType]] = [[TileType.EMPTY] * size for _ in range(size)]
        self.red_start_location: Optional[Coordinate] = None
        self.blue_start_location: Optional[Coordinate] = None

    @property
    def half_size(self) -> int:
        return self.size // 2

    def contains(self, location: Tuple[int, int]) -> bool:
        """Check if a location lies on the board."""
        x, y = location
        return 0 <= x < self.size and 0 <= y < self.size

    def _index(self, location: Tuple[int, int]) -> Tuple[int, int]:
        if not self.contains(location):
            raise OutOfBoundsError(f"{location} is outside a {self.size}x{self.size} board")
        x, y = location
        return (self.size - 1) - y, x

    def get_tile_type(self, location: Tuple[int, int]) -> TileType:
        """Get the tile type at the given location."""
        row, col = self._index(location)
        return self.tiles[row][col]

    def set_tile_type(self, location: Tuple[int, int], tile_type: TileType) -> None:
        """Replace the tile at the given location."""
        row, col = self._index(location)
        self.tiles[row][col] = tile_type

    def iter_tiles(self) -> Iterator[Tuple[Coordinate, TileType]]:
        """Yield (location, tile type) pairs, top row first."""
        for i, row in enumerate(self.tiles):
            y = (self.size - 1) - i
            for x, tile_type in enumerate(row):
                yield Coordinate(x, y), tile_type

    def get_locations(self, tile_type: TileType) -> List[Coordinate]:
        """Get all locations holding the given tile type."""
        return [location for location, t in self.iter_tiles() if t == tile_type]

    def get_market_locations(self, is_red: bool) -> List[Coordinate]:
        """Get the locations of one player's markets."""
        return self.get_locations(TileType.market(is_red))

    def count_resources(self) -> Dict[ResourceType, int]:
        """Count deposit tiles per resource type."""
        counts = {resource_type: 0 for resource_type in ResourceType}
        for _, tile_type in self.iter_tiles():
            if tile_type.resource_type is not None:
                counts[tile_type.resource_type] += 1
        return counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.tiles == other.tiles
            and self.red_start_location == other.red_start_location
            and self.blue_start_location == other.blue_start_location
        )

    def __repr__(self) -> str:
        return f"Board(size={self.size}, seed={self.seed})"
