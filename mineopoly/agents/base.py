"""Base class for all Mineopoly player strategies."""

import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional

from mineopoly.actions import TurnAction
from mineopoly.board import validate_board_size
from mineopoly.economy import Economy
from mineopoly.events import EventLog, EventType
from mineopoly.exceptions import (
    InvalidConfigError,
    InvalidCoordinateError,
    InventoryFullError,
    StrategyNotInitializedError,
)
from mineopoly.items import InventoryItem
from mineopoly.navigation import market_locations
from mineopoly.player import PlayerState, RoundResult
from mineopoly.tiles import Coordinate
from mineopoly.view import BoardView

logger = logging.getLogger(__name__)


class MinePlayerStrategy(ABC):
    """
    Abstract base class for Mineopoly player strategies.

    The game engine calls `initialize_round` once per round, then
    `decide_action` once per turn, and reports inventory changes through
    the `on_*` callbacks. Subclasses implement `decide_action`.

    Attributes:
        name: The strategy's display name.
        persist_score_across_rounds: Keep the accumulated score when a round ends.
        state: Per-round player state, None until the first round starts.
        event_log: Events recorded across all rounds.
        round_results: Outcome of each finished round.
    """

    def __init__(self, name: str, persist_score_across_rounds: bool = False):
        """
        Initialize the strategy.

        Args:
            name: The strategy's display name.
            persist_score_across_rounds: Keep score between rounds instead of resetting it.
        """
        self.name = name
        self.persist_score_across_rounds = persist_score_across_rounds
        self.state: Optional[PlayerState] = None
        self.rng = random.Random()
        self.event_log = EventLog()
        self.round_results: List[RoundResult] = []

    def initialize_round(
        self,
        board_size: int,
        max_inventory_size: int,
        winning_score: int,
        start_location: Coordinate,
        is_red_player: bool,
        random_seed: Optional[int] = None,
    ) -> None:
        """
        Set up state at the start of a round.

        Args:
            board_size: The length and width of the square board.
            max_inventory_size: Maximum number of items the player can carry.
            winning_score: The first player to reach this score wins the round.
            start_location: The player's start tile, (0, 0) is the bottom left.
            is_red_player: True if this strategy plays red.
            random_seed: Seed for the strategy's random choices.
        """
        validate_board_size(board_size)
        if max_inventory_size < 1:
            raise InvalidConfigError("max_inventory_size must be >= 1")
        if start_location is None:
            raise InvalidCoordinateError("start_location is required")
        x, y = start_location
        if not (0 <= x < board_size and 0 <= y < board_size):
            raise InvalidCoordinateError(
                f"start_location {tuple(start_location)} is outside a {board_size}x{board_size} board"
            )

        previous_score = self.state.score if self.state is not None else 0

        self.state = PlayerState(
            board_size=board_size,
            max_inventory_size=max_inventory_size,
            winning_score=winning_score,
            start_location=Coordinate(*start_location),
            is_red_player=is_red_player,
            markets=market_locations(board_size // 2),
        )
        if self.persist_score_across_rounds:
            self.state.score = previous_score
        self.rng = random.Random(random_seed)

        self.event_log.log(
            EventType.ROUND_START,
            0,
            round_number=len(self.round_results) + 1,
            board_size=board_size,
            is_red_player=is_red_player,
            start_location=tuple(self.state.start_location),
        )

    @abstractmethod
    def decide_action(self, board_view: BoardView, economy: Economy, is_red_turn: bool) -> TurnAction:
        """
        Choose the action for this turn.

        Args:
            board_view: What the player can see of the board this turn.
            economy: Current resource prices.
            is_red_turn: Which player moves when both try to enter the same tile.

        Returns:
            The action this strategy wants to perform.
        """
        pass

    def on_item_received(self, item: InventoryItem) -> None:
        """Called when a PICK_UP on a mined resource gives the player an item."""
        state = self._require_state()
        if state.is_inventory_full:
            raise InventoryFullError(
                f"{self.name}: inventory already holds {len(state.inventory)} items"
            )
        state.inventory.append(item)
        self.event_log.log(
            EventType.ITEM_RECEIVED,
            state.turn_number,
            resource=item.resource_type.value,
            inventory_size=len(state.inventory),
        )

    def on_inventory_sold(self, total_sell_price: int) -> None:
        """Called when the player sells everything it carries at a market."""
        state = self._require_state()
        items_sold = len(state.inventory)
        state.inventory.clear()
        state.clear_journey()
        state.score += total_sell_price

        self.event_log.log(
            EventType.INVENTORY_SOLD,
            state.turn_number,
            items=items_sold,
            total_sell_price=total_sell_price,
            score=state.score,
        )
        logger.info(f"{self.name} sold {items_sold} items for {total_sell_price} (score {state.score})")

    def on_round_end(self, points_scored: int, opponent_points_scored: int) -> None:
        """Called at the end of every round with both players' scores."""
        state = self._require_state()
        result = RoundResult(len(self.round_results) + 1, points_scored, opponent_points_scored)
        self.round_results.append(result)

        self.event_log.log(
            EventType.ROUND_END,
            state.turn_number,
            round_number=result.round_number,
            points_scored=points_scored,
            opponent_points_scored=opponent_points_scored,
        )
        state.reset_round(keep_score=self.persist_score_across_rounds)

    @property
    def score(self) -> int:
        return self.state.score if self.state is not None else 0

    def _require_state(self) -> PlayerState:
        if self.state is None:
            raise StrategyNotInitializedError(f"{self.name}: initialize_round has not been called")
        return self.state

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', state={self.state!r})"
