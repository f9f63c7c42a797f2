"""
Read-only resource price lookup.
"""

from typing import Dict, Iterable, Mapping, Optional

from mineopoly.config import RESOURCE_DATA, ResourceData
from mineopoly.items import InventoryItem
from mineopoly.tiles import ResourceType


class Economy:
    """
    Current sell prices for each resource type.

    The pricing model lives in the game engine; strategies only read prices.
    """

    def __init__(
        self,
        prices: Optional[Mapping[ResourceType, int]] = None,
        resources: Mapping[ResourceType, ResourceData] = RESOURCE_DATA,
    ):
        self._prices: Dict[ResourceType, int] = {
            resource_type: data.base_price for resource_type, data in resources.items()
        }
        if prices:
            self._prices.update(prices)

    @property
    def current_prices(self) -> Dict[ResourceType, int]:
        """Get a copy of the current price table."""
        return dict(self._prices)

    def get_price(self, resource_type: ResourceType) -> int:
        """Get the current sell price of one resource."""
        return self._prices[resource_type]

    def value_of(self, items: Iterable[InventoryItem]) -> int:
        """Total sell price of a collection of items."""
        return sum(self.get_price(item.resource_type) for item in items)

    def __repr__(self) -> str:
        prices = ", ".join(f"{r.value}={p}" for r, p in self._prices.items())
        return f"Economy({prices})"
