"""Shared test fixtures for Mineopoly tests."""

import pytest

from mineopoly.agents import GreedyMiningStrategy
from mineopoly.board import Board
from mineopoly.config import GameConfig
from mineopoly.economy import Economy
from mineopoly.generator import generate_board
from mineopoly.tiles import Coordinate


@pytest.fixture
def game_config():
    """Default round configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def generated_board(game_config):
    """A 20x20 board generated from the fixed seed."""
    return generate_board(game_config.seed, game_config.board_size)


@pytest.fixture
def blank_board():
    """A 20x20 board of empty tiles."""
    return Board(20)


@pytest.fixture
def economy():
    """Economy at base prices."""
    return Economy()


@pytest.fixture
def red_strategy(game_config):
    """Greedy strategy initialized as the red player on a 20x20 board."""
    strategy = GreedyMiningStrategy()
    strategy.initialize_round(
        game_config.board_size,
        game_config.max_inventory_size,
        game_config.winning_score,
        Coordinate(9, 9),
        True,
        random_seed=0,
    )
    return strategy
