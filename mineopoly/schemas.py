from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class MarketSummary(BaseModel):
    red: List[Tuple[int, int]]
    blue: List[Tuple[int, int]]


class BoardSummary(BaseModel):
    board_size: int = Field(ge=10)
    seed: Optional[int] = None
    red_start_location: Tuple[int, int]
    blue_start_location: Tuple[int, int]
    markets: MarketSummary
    resource_counts: Dict[str, int] = Field(default_factory=dict)
    rows: List[str] = Field(default_factory=list)

    @field_validator("rows")
    @classmethod
    def rows_match_size(cls, value: List[str], info) -> List[str]:
        size = info.data.get("board_size")
        if size is not None and value:
            if len(value) != size or any(len(row) != size for row in value):
                raise ValueError(f"rows must form a {size}x{size} grid")
        return value


class PathResponse(BaseModel):
    start: Tuple[int, int]
    destination: Tuple[int, int]
    actions: List[str]
    length: int
