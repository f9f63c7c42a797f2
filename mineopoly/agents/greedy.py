"""Greedy strategy that mines what it stands on and sells when full."""

import logging
from typing import Optional

from mineopoly.actions import TurnAction
from mineopoly.agents.base import MinePlayerStrategy
from mineopoly.config import GameConfig
from mineopoly.economy import Economy
from mineopoly.events import EventType
from mineopoly.navigation import (
    adjacent_points,
    adjacent_tile_types,
    blocked_adjacent_point,
    can_pick_up_here,
    find_nearest_market,
    is_minable_tile,
    path_to,
    step_toward_any,
)
from mineopoly.player import PlayerState
from mineopoly.view import BoardView

logger = logging.getLogger(__name__)

ALL_ACTIONS = list(TurnAction)


class GreedyMiningStrategy(MinePlayerStrategy):
    """
    Simple strategy with a fixed priority order.

    Priority order:
    1. Head for the nearest own market once the inventory is full
    2. Follow the queued path to that market
    3. Pick up an item lying on the current tile
    4. Mine the current tile
    5. Step onto an adjacent item or deposit (only with seek_adjacent)
    6. Any random action
    """

    def __init__(
        self,
        name: str = "GreedyMiner",
        persist_score_across_rounds: bool = False,
        seek_adjacent: bool = False,
    ):
        """
        Initialize the greedy strategy.

        Args:
            name: The strategy's display name.
            persist_score_across_rounds: Keep score between rounds instead of resetting it.
            seek_adjacent: Step towards adjacent items and deposits before moving at random.
        """
        super().__init__(name, persist_score_across_rounds)
        self.seek_adjacent = seek_adjacent

    @classmethod
    def from_config(cls, config: GameConfig, name: str = "GreedyMiner") -> "GreedyMiningStrategy":
        """Build a strategy with the behaviour switches of a game config."""
        return cls(
            name=name,
            persist_score_across_rounds=config.persist_score_across_rounds,
            seek_adjacent=config.seek_adjacent,
        )

    def decide_action(self, board_view: BoardView, economy: Economy, is_red_turn: bool) -> TurnAction:
        state = self._require_state()
        state.turn_number += 1
        state.location = board_view.your_location
        state.other_player_location = board_view.other_player_location

        action = self._market_action(state, economy)
        if action is not None:
            return action

        if can_pick_up_here(state.location, board_view.items_on_ground):
            return TurnAction.PICK_UP

        if is_minable_tile(board_view.tile_type_at(state.location)):
            return TurnAction.MINE

        if self.seek_adjacent:
            action = self._adjacent_action(state, board_view)
            if action is not None:
                return action

        return self.rng.choice(ALL_ACTIONS)

    def _market_action(self, state: PlayerState, economy: Economy) -> Optional[TurnAction]:
        """Next step towards the market, or None when not heading there."""
        if state.is_inventory_full and not state.going_to_market:
            self._plan_journey(state, economy)
        elif (
            state.going_to_market
            and not state.path_to_market
            and state.location != state.target_market
        ):
            # A contested move was discarded on the way; start over from here
            self._plan_journey(state, economy)

        if state.going_to_market and state.path_to_market:
            return state.path_to_market.pop(0)
        return None

    def _plan_journey(self, state: PlayerState, economy: Economy) -> None:
        market = find_nearest_market(state.location, state.is_red_player, state.half_board_size)
        state.target_market = market
        state.path_to_market = path_to(state.location, market)
        state.going_to_market = True

        self.event_log.log(
            EventType.PATH_PLANNED,
            state.turn_number,
            start=tuple(state.location),
            market=tuple(market),
            length=len(state.path_to_market),
            inventory_value=economy.value_of(state.inventory),
        )
        logger.debug(
            f"{self.name} heading from {state.location} to market {market} "
            f"({len(state.path_to_market)} moves)"
        )

    def _adjacent_action(self, state: PlayerState, board_view: BoardView) -> Optional[TurnAction]:
        """Step onto an adjacent item first, then an adjacent deposit, never onto the opponent."""
        neighbours = adjacent_points(state.location)
        blocked = blocked_adjacent_point(neighbours, state.other_player_location)

        action = step_toward_any(state.location, board_view.items_on_ground.values(), blocked)
        if action is not None:
            return action

        deposits = [
            point
            for point, tile_type in zip(neighbours, adjacent_tile_types(board_view, state.location))
            if is_minable_tile(tile_type)
        ]
        return step_toward_any(state.location, deposits, blocked)
