"""
Mineopoly Core

Seeded board generation and greedy player strategies for a two-player
mining game.
"""

from .actions import TurnAction
from .board import Board
from .config import GameConfig, RESOURCE_DATA, ResourceData
from .economy import Economy
from .generator import WorldGenerator, generate_board
from .items import InventoryItem
from .tiles import Coordinate, ResourceType, TileType
from .view import BoardSnapshot, BoardView

__all__ = [
    "TurnAction",
    "Board",
    "GameConfig",
    "RESOURCE_DATA",
    "ResourceData",
    "Economy",
    "WorldGenerator",
    "generate_board",
    "InventoryItem",
    "Coordinate",
    "ResourceType",
    "TileType",
    "BoardSnapshot",
    "BoardView",
]
