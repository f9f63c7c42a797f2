"""
Board tile definitions and coordinates.
"""

from enum import Enum
from typing import NamedTuple, Optional


class Coordinate(NamedTuple):
    """A board location. (0, 0) is the bottom-left tile."""

    x: int
    y: int

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


class ResourceType(Enum):
    """Kinds of resources that can be mined."""

    DIAMOND = "diamond"
    EMERALD = "emerald"
    RUBY = "ruby"


class TileType(Enum):
    """Types of tiles on the board."""

    EMPTY = "empty"
    RED_MARKET = "red_market"
    BLUE_MARKET = "blue_market"
    RESOURCE_DIAMOND = "resource_diamond"
    RESOURCE_EMERALD = "resource_emerald"
    RESOURCE_RUBY = "resource_ruby"

    @property
    def is_market(self) -> bool:
        return self in (TileType.RED_MARKET, TileType.BLUE_MARKET)

    @property
    def is_red_market(self) -> bool:
        return self == TileType.RED_MARKET

    @property
    def resource_type(self) -> Optional[ResourceType]:
        """The resource mined from this tile, or None if it is not a deposit."""
        return _DEPOSIT_RESOURCES.get(self)

    @classmethod
    def for_resource(cls, resource_type: ResourceType) -> "TileType":
        """Get the deposit tile for a resource type."""
        return _RESOURCE_DEPOSITS[resource_type]

    @classmethod
    def market(cls, is_red: bool) -> "TileType":
        return cls.RED_MARKET if is_red else cls.BLUE_MARKET


_RESOURCE_DEPOSITS = {
    ResourceType.DIAMOND: TileType.RESOURCE_DIAMOND,
    ResourceType.EMERALD: TileType.RESOURCE_EMERALD,
    ResourceType.RUBY: TileType.RESOURCE_RUBY,
}

_DEPOSIT_RESOURCES = {tile: resource for resource, tile in _RESOURCE_DEPOSITS.items()}
