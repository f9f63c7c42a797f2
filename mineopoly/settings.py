"""
Central application configuration using pydantic-settings.

This module provides typed access to environment-based defaults for
board generation, player strategies and logging.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MineopolySettings(BaseSettings):
    """
    Defaults for a round of Mineopoly.

    Environment variables (prefix: MINEOPOLY_):
        MINEOPOLY_BOARD_SIZE                  - Board length and width (default: 20)
        MINEOPOLY_MAX_INVENTORY_SIZE          - Items a player can carry (default: 5)
        MINEOPOLY_WINNING_SCORE               - Score that wins a round (default: 12000)
        MINEOPOLY_SEED                        - Board seed (default: random)
        MINEOPOLY_PERSIST_SCORE_ACROSS_ROUNDS - Keep strategy score between rounds (default: false)
        MINEOPOLY_SEEK_ADJACENT               - Step towards adjacent items/deposits (default: false)
        MINEOPOLY_LOG_LEVEL                   - Logging level name (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MINEOPOLY_",
    )

    board_size: int = Field(
        default=20,
        ge=10,
        description="Length and width of the square board; must be even.",
    )
    max_inventory_size: int = Field(
        default=5,
        gt=0,
        description="Maximum number of items a player can carry.",
    )
    winning_score: int = Field(
        default=12000,
        gt=0,
        description="The first player to reach this score wins the round.",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for board generation; random when unset.",
    )
    persist_score_across_rounds: bool = Field(
        default=False,
        description="Keep a strategy's accumulated score when a round ends.",
    )
    seek_adjacent: bool = Field(
        default=False,
        description="Let the greedy strategy step onto adjacent items and deposits.",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the CLI.",
    )

    @field_validator("board_size")
    @classmethod
    def board_size_even(cls, value: int) -> int:
        if value % 2 != 0:
            raise ValueError("board_size must be even")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Upper-case the level name, falling back to INFO when empty."""
        if not value:
            return "INFO"
        return str(value).upper()


@lru_cache
def get_settings() -> MineopolySettings:
    """Return cached settings instance."""
    return MineopolySettings()
