"""
Turn actions a player strategy can return.
"""

from enum import Enum
from typing import Optional, Tuple


class TurnAction(Enum):
    """Types of actions a player can take on a turn."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MINE = "mine"
    PICK_UP = "pick_up"
    IDLE = "idle"

    @property
    def is_movement(self) -> bool:
        """Check if this action moves the player."""
        return self in MOVEMENT_DELTAS

    @property
    def delta(self) -> Optional[Tuple[int, int]]:
        """Unit (dx, dy) step for movement actions, None otherwise."""
        return MOVEMENT_DELTAS.get(self)


MOVEMENT_DELTAS = {
    TurnAction.MOVE_UP: (0, 1),
    TurnAction.MOVE_DOWN: (0, -1),
    TurnAction.MOVE_LEFT: (-1, 0),
    TurnAction.MOVE_RIGHT: (1, 0),
}

MOVEMENT_ACTIONS = [
    TurnAction.MOVE_UP,
    TurnAction.MOVE_DOWN,
    TurnAction.MOVE_LEFT,
    TurnAction.MOVE_RIGHT,
]
