"""
Game configuration settings and resource generation data.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from mineopoly.exceptions import InvalidConfigError
from mineopoly.tiles import ResourceType

if TYPE_CHECKING:
    from mineopoly.settings import MineopolySettings

MIN_BOARD_SIZE = 10
RANDOM_RESOURCE_CHANCE = 0.2
MAX_EMPTY_TILE_SEARCHES = 50


@dataclass(frozen=True)
class ResourceData:
    """Generation and pricing data for a resource type."""

    resource_type: ResourceType
    spawn_count_ratio: float
    min_spawn_radius_ratio: float
    max_spawn_radius_ratio: float
    base_price: int

    def __post_init__(self) -> None:
        if not 0 <= self.spawn_count_ratio <= 1:
            raise InvalidConfigError(
                f"{self.resource_type.value}: spawn_count_ratio must be within [0, 1]"
            )
        if not 0 <= self.min_spawn_radius_ratio <= self.max_spawn_radius_ratio:
            raise InvalidConfigError(
                f"{self.resource_type.value}: spawn radius ratios must satisfy 0 <= min <= max"
            )
        if self.base_price < 0:
            raise InvalidConfigError(f"{self.resource_type.value}: base_price must be >= 0")


# Rings of resources centered on the markets, rarer resources further out
RESOURCE_DATA: Dict[ResourceType, ResourceData] = {
    ResourceType.DIAMOND: ResourceData(ResourceType.DIAMOND, 0.02, 0.70, 1.00, 400),
    ResourceType.EMERALD: ResourceData(ResourceType.EMERALD, 0.04, 0.40, 0.80, 200),
    ResourceType.RUBY: ResourceData(ResourceType.RUBY, 0.06, 0.15, 0.55, 100),
}


@dataclass
class GameConfig:
    """Configuration for one round of Mineopoly."""

    board_size: int = 20
    max_inventory_size: int = 5
    winning_score: int = 12000

    seed: Optional[int] = None

    persist_score_across_rounds: bool = False
    seek_adjacent: bool = False

    def __post_init__(self) -> None:
        if self.board_size < MIN_BOARD_SIZE or self.board_size % 2 != 0:
            raise InvalidConfigError(
                f"board_size must be an even number >= {MIN_BOARD_SIZE}, got {self.board_size}"
            )
        if self.max_inventory_size < 1:
            raise InvalidConfigError("max_inventory_size must be >= 1")
        if self.winning_score < 1:
            raise InvalidConfigError("winning_score must be >= 1")

    @classmethod
    def from_settings(cls, settings: "MineopolySettings") -> "GameConfig":
        """Build a round configuration from environment settings."""
        return cls(
            board_size=settings.board_size,
            max_inventory_size=settings.max_inventory_size,
            winning_score=settings.winning_score,
            seed=settings.seed,
            persist_score_across_rounds=settings.persist_score_across_rounds,
            seek_adjacent=settings.seek_adjacent,
        )
