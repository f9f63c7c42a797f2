"""
Public serialization of a generated Board.

Produces a stable, JSON-friendly description of a board for debugging
and replay comparisons.
"""

from __future__ import annotations

from typing import Any, Dict, List

from mineopoly.board import Board
from mineopoly.tiles import TileType

TILE_SYMBOLS: Dict[TileType, str] = {
    TileType.EMPTY: ".",
    TileType.RED_MARKET: "R",
    TileType.BLUE_MARKET: "B",
    TileType.RESOURCE_DIAMOND: "d",
    TileType.RESOURCE_EMERALD: "e",
    TileType.RESOURCE_RUBY: "r",
}


def board_rows(board: Board) -> List[str]:
    """One string per board row, top row first."""
    return ["".join(TILE_SYMBOLS[tile_type] for tile_type in row) for row in board.tiles]


def serialize_board(board: Board) -> Dict[str, Any]:
    """Serialize a Board into a public, stable JSON dict.

    The snapshot includes:
    - board_size and seed
    - both start locations and market locations
    - deposit counts per resource
    - the tile rows, top row first
    """
    return {
        "board_size": board.size,
        "seed": board.seed,
        "red_start_location": list(board.red_start_location),
        "blue_start_location": list(board.blue_start_location),
        "markets": {
            "red": [list(p) for p in board.get_market_locations(is_red=True)],
            "blue": [list(p) for p in board.get_market_locations(is_red=False)],
        },
        "resource_counts": {
            resource_type.value: count for resource_type, count in board.count_resources().items()
        },
        "rows": board_rows(board),
    }
