"""Inventory Kernel data models."""

from inventory_kernel.models.action import (
    GroundItemTarget,
    ItemTarget,
    NpcTarget,
    PlayerTarget,
    ResolvedAction,
    Target,
    TargetKind,
    WorldTileTarget,
)
from inventory_kernel.models.config import InventoryConfig
from inventory_kernel.models.item import ContainerSnapshot, Item

__all__ = [
    "ContainerSnapshot",
    "GroundItemTarget",
    "InventoryConfig",
    "Item",
    "ItemTarget",
    "NpcTarget",
    "PlayerTarget",
    "ResolvedAction",
    "Target",
    "TargetKind",
    "WorldTileTarget",
]
