"""
Custom exception hierarchy for the Mineopoly core.

Provides typed errors that can be handled consistently across
the board generator, navigation helpers and player strategies.
"""


class MineopolyError(Exception):
    """Base exception for all game-related errors."""


class InvalidBoardSizeError(MineopolyError):
    """Board size is odd or smaller than the minimum playable size."""


class InvalidCoordinateError(MineopolyError):
    """Coordinate is missing, malformed or negative."""


class OutOfBoundsError(MineopolyError):
    """Coordinate lies outside the board."""


class InventoryFullError(MineopolyError):
    """Item received while the inventory is already at capacity."""


class StrategyNotInitializedError(MineopolyError):
    """Strategy used before initialize_round was called."""


class InvalidConfigError(MineopolyError):
    """Configuration validation failed."""
