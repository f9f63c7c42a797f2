"""
Per-round player state owned by a strategy.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from mineopoly.actions import TurnAction
from mineopoly.items import InventoryItem
from mineopoly.navigation import MarketLocations
from mineopoly.tiles import Coordinate


class PlayerState:
    """Represents everything a strategy tracks about its own player."""

    def __init__(
        self,
        board_size: int,
        max_inventory_size: int,
        winning_score: int,
        start_location: Coordinate,
        is_red_player: bool,
        markets: MarketLocations,
    ):
        self.board_size = board_size
        self.max_inventory_size = max_inventory_size
        self.winning_score = winning_score
        self.start_location = start_location
        self.is_red_player = is_red_player
        self.markets = markets

        self.location = start_location
        self.other_player_location: Optional[Coordinate] = None
        self.inventory: List[InventoryItem] = []
        self.score = 0
        self.turn_number = 0

        self.going_to_market = False
        self.target_market: Optional[Coordinate] = None
        self.path_to_market: List[TurnAction] = []

    @property
    def half_board_size(self) -> int:
        return self.board_size // 2

    @property
    def is_inventory_full(self) -> bool:
        return len(self.inventory) >= self.max_inventory_size

    @property
    def own_markets(self) -> Tuple[Coordinate, Coordinate]:
        """The player's (lower, upper) markets."""
        if self.is_red_player:
            return self.markets.red_lower, self.markets.red_upper
        return self.markets.blue_lower, self.markets.blue_upper

    def clear_journey(self) -> None:
        """Forget any market-bound path."""
        self.going_to_market = False
        self.target_market = None
        self.path_to_market = []

    def reset_round(self, keep_score: bool) -> None:
        """Drop transient state at the end of a round."""
        self.inventory = []
        self.clear_journey()
        self.location = self.start_location
        self.other_player_location = None
        self.turn_number = 0
        if not keep_score:
            self.score = 0

    def __repr__(self) -> str:
        color = "red" if self.is_red_player else "blue"
        return (
            f"PlayerState({color}, location={self.location}, "
            f"inventory={len(self.inventory)}/{self.max_inventory_size}, "
            f"score={self.score}, going_to_market={self.going_to_market})"
        )


@dataclass
class RoundResult:
    """Outcome of one finished round."""

    round_number: int
    points_scored: int
    opponent_points_scored: int

    @property
    def won(self) -> bool:
        return self.points_scored > self.opponent_points_scored
