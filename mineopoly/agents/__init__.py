from mineopoly.agents.base import MinePlayerStrategy
from mineopoly.agents.greedy import GreedyMiningStrategy
from mineopoly.agents.random import RandomStrategy

__all__ = [
    "MinePlayerStrategy",
    "GreedyMiningStrategy",
    "RandomStrategy",
]
