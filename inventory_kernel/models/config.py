"""Inventory configuration — policy constants of the host client."""

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field


class InventoryConfig(BaseModel):
    """Configuration for the inventory service and its collaborators."""

    model_config = ConfigDict(frozen=True)

    container_id: int = 93                  # Player inventory container
    capacity: int = Field(ge=1, default=28)
    drop_batch_size: int = Field(ge=1, default=10)  # Drops realised per tick
    placeholder_item_id: int = 6512         # Rendered but logically empty slot

    primary_surface_id: int = 9764864       # Inventory items widget
    secondary_surface_id: int = 983043      # Bank-side inventory items widget

    equip_ordinal: int = 3
    equip_action_labels: Tuple[str, ...] = ("Wield", "Wear", "Equip")
    legacy_fallback_surface: Literal["primary", "secondary"] = "primary"

    case_sensitive_names: bool = True

    def is_placeholder(self, item_id: int) -> bool:
        return item_id == -1 or item_id == self.placeholder_item_id
