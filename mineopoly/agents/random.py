"""Random strategy that makes random moves."""

from mineopoly.actions import TurnAction
from mineopoly.agents.base import MinePlayerStrategy
from mineopoly.economy import Economy
from mineopoly.view import BoardView

ALL_ACTIONS = list(TurnAction)


class RandomStrategy(MinePlayerStrategy):
    """
    Baseline opponent that picks every action uniformly at random.
    """

    def __init__(self, name: str = "RandomMiner", persist_score_across_rounds: bool = False):
        super().__init__(name, persist_score_across_rounds)

    def decide_action(self, board_view: BoardView, economy: Economy, is_red_turn: bool) -> TurnAction:
        """
        Choose any action at random.

        Args:
            board_view: What the player can see of the board this turn.
            economy: Current resource prices.
            is_red_turn: Which player moves when both try to enter the same tile.

        Returns:
            The chosen action.
        """
        state = self._require_state()
        state.turn_number += 1
        state.location = board_view.your_location

        return self.rng.choice(ALL_ACTIONS)
