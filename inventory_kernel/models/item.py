"""Item and Container Snapshot — point-in-time view of a container's slots."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from inventory_kernel.errors import SnapshotError


class Item(BaseModel):
    """A single occupied slot in a container."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = ""
    slot: int = Field(ge=0)                 # Stable only within one snapshot
    quantity: int = Field(ge=0, default=1)
    canonical_id: Optional[int] = None      # Un-noted / base form, if different
    action_labels: Tuple[Optional[str], ...] = ()

    @property
    def canonical(self) -> int:
        """The id this item counts under once variant forms are collapsed."""
        return self.canonical_id if self.canonical_id is not None else self.id

    def has_action(self, label: str) -> bool:
        wanted = label.lower()
        return any(a is not None and a.lower() == wanted for a in self.action_labels)


class ContainerSnapshot(BaseModel):
    """
    Immutable, fixed-capacity view of a container at one instant.

    Empty slots are simply absent from `items`. Items are kept in slot
    order regardless of the order they were supplied in.
    """

    model_config = ConfigDict(frozen=True)

    container_id: int
    capacity: int = Field(ge=1)
    items: Tuple[Item, ...] = ()

    @field_validator("items")
    @classmethod
    def _order_by_slot(cls, items: Tuple[Item, ...]) -> Tuple[Item, ...]:
        return tuple(sorted(items, key=lambda i: i.slot))

    @model_validator(mode="after")
    def _check_slots(self) -> "ContainerSnapshot":
        if len(self.items) > self.capacity:
            raise SnapshotError(
                f"Container {self.container_id} holds {len(self.items)} items "
                f"but has capacity {self.capacity}"
            )
        seen = set()
        for item in self.items:
            if item.slot >= self.capacity:
                raise SnapshotError(
                    f"Slot {item.slot} is outside container capacity {self.capacity}"
                )
            if item.slot in seen:
                raise SnapshotError(f"Duplicate slot {item.slot} in container {self.container_id}")
            seen.add(item.slot)
        return self

    @property
    def empty_slot_count(self) -> int:
        return self.capacity - len(self.items)

    @property
    def is_full(self) -> bool:
        return self.empty_slot_count <= 0

    @property
    def is_empty(self) -> bool:
        return self.empty_slot_count == self.capacity

    def slot(self, index: int) -> Optional[Item]:
        """Get the item occupying a slot, if any."""
        for item in self.items:
            if item.slot == index:
                return item
        return None
