"""
Inventory items produced by mining.
"""

from mineopoly.tiles import ResourceType


class InventoryItem:
    """
    A mined resource lying on the ground or carried by a player.

    Items compare by identity: two rubies are different items.
    """

    def __init__(self, resource_type: ResourceType):
        self.resource_type = resource_type

    def __repr__(self) -> str:
        return f"InventoryItem({self.resource_type.value})"
