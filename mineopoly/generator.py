"""
Seeded board generation.

A generator given the same seed always produces the same board, so a
match can be replayed or a bug reproduced from its seed alone.
"""

import logging
import math
import random
from typing import Mapping, Optional

from mineopoly.board import Board, validate_board_size
from mineopoly.config import (
    MAX_EMPTY_TILE_SEARCHES,
    RANDOM_RESOURCE_CHANCE,
    RESOURCE_DATA,
    ResourceData,
)
from mineopoly.navigation import market_locations
from mineopoly.tiles import Coordinate, ResourceType, TileType

logger = logging.getLogger(__name__)


class WorldGenerator:
    """
    Builds boards from a seeded random number generator.

    Attributes:
        seed: The seed the generator was created with.
        rng: The generator's own random stream.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def generate_board(
        self,
        board_size: int,
        resources: Mapping[ResourceType, ResourceData] = RESOURCE_DATA,
    ) -> Board:
        """
        Fill a board with empty tiles, add the markets, then scatter resources.

        Args:
            board_size: Length and width of the board, even and >= 10.
            resources: Generation data per resource type, spawned in mapping order.
                Contaminated deposits are drawn from every ResourceType.

        Returns:
            A board ready for a round of Mineopoly.

        Raises:
            InvalidBoardSizeError: If board_size is odd or too small.
        """
        validate_board_size(board_size)

        board = Board(board_size, seed=self.seed)
        self._add_market_tiles(board)
        self._generate_resources(board, resources)

        counts = board.count_resources()
        logger.info(
            f"Generated {board_size}x{board_size} board (seed={self.seed}): "
            + ", ".join(f"{r.value}={n}" for r, n in counts.items())
        )
        return board

    def _add_market_tiles(self, board: Board) -> None:
        markets = market_locations(board.half_size)

        board.set_tile_type(markets.red_lower, TileType.RED_MARKET)
        board.set_tile_type(markets.red_upper, TileType.RED_MARKET)
        board.set_tile_type(markets.blue_lower, TileType.BLUE_MARKET)
        board.set_tile_type(markets.blue_upper, TileType.BLUE_MARKET)

        # Both players start on their lower market
        board.red_start_location = markets.red_lower
        board.blue_start_location = markets.blue_lower

    def _generate_resources(
        self, board: Board, resources: Mapping[ResourceType, ResourceData]
    ) -> None:
        num_tiles_on_board = board.size * board.size
        half_board_size = board.half_size
        resource_types = list(ResourceType)

        for resource_type, data in resources.items():
            # Halves round up
            num_to_spawn = math.floor(num_tiles_on_board * data.spawn_count_ratio + 0.5)
            min_radius = half_board_size * data.min_spawn_radius_ratio
            max_radius = half_board_size * data.max_spawn_radius_ratio

            skipped = 0
            for _ in range(num_to_spawn):
                location = self._find_empty_location(board, min_radius, max_radius)
                if location is None:
                    skipped += 1
                    continue

                # Rarely spawn any resource type, even one missing from the table
                type_to_spawn = resource_type
                if self.rng.random() <= RANDOM_RESOURCE_CHANCE:
                    type_to_spawn = resource_types[self.rng.randrange(len(resource_types))]

                board.set_tile_type(location, TileType.for_resource(type_to_spawn))

            if skipped:
                logger.debug(
                    f"Skipped {skipped}/{num_to_spawn} {resource_type.value} deposits: "
                    f"no empty tile after {MAX_EMPTY_TILE_SEARCHES} attempts"
                )

    def _find_empty_location(
        self, board: Board, min_radius: float, max_radius: float
    ) -> Optional[Coordinate]:
        """Sample the ring around the center until an empty tile turns up, or give up."""
        half_board_size = board.half_size
        for _ in range(MAX_EMPTY_TILE_SEARCHES):
            angle = self.rng.random() * (2 * math.pi)
            radius = self.rng.random() * (max_radius - min_radius) + min_radius
            candidate = Coordinate(
                int(radius * math.cos(angle)) + half_board_size,
                int(radius * math.sin(angle)) + half_board_size,
            )
            if board.contains(candidate) and board.get_tile_type(candidate) == TileType.EMPTY:
                return candidate
        return None


def generate_board(
    seed: Optional[int],
    board_size: int,
    resources: Mapping[ResourceType, ResourceData] = RESOURCE_DATA,
) -> Board:
    """Generate a board from a seed with a fresh WorldGenerator."""
    return WorldGenerator(seed).generate_board(board_size, resources)
