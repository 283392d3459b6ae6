"""
Boundary contracts — the live client collaborators the kernel talks to.

The kernel never reaches into the client directly. A host wires in
implementations of these interfaces when it builds an InventoryService.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from inventory_kernel.models.item import ContainerSnapshot


class ContainerSource(ABC):
    """Produces fresh container snapshots."""

    @abstractmethod
    def snapshot(self, container_id: int) -> ContainerSnapshot:
        """Capture the current contents of a container."""
        raise NotImplementedError


class ClientState(ABC):
    """Read-only client state flags. Polled on every resolution."""

    @abstractmethod
    def secondary_surface_open(self) -> bool:
        """True while the bank-like secondary surface is shown."""
        raise NotImplementedError


class WidgetIntrospector(ABC):
    """Read access to the rendered widget tree."""

    @abstractmethod
    def is_rendered(self, surface_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def child_count(self, surface_id: int) -> int:
        """Number of child widgets, 0 if the surface has none."""
        raise NotImplementedError

    @abstractmethod
    def child(self, surface_id: int, index: int) -> Any:
        """Opaque child handle for a slot, or None."""
        raise NotImplementedError


class InteractionBoundary(ABC):
    """
    Performs interactions against the live client.

    Every call is fire-and-forget: the effect is realised by the host
    on a later tick and nothing is reported back.
    """

    @abstractmethod
    def interact(self, ordinal: int, surface_id: int, slot: int, item_id: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_tile_object(
        self,
        surface_id: int,
        item_id: int,
        slot: int,
        object_id: int,
        x: int,
        y: int,
        is_widget_target: bool,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_ground_item(
        self,
        surface_id: int,
        item_id: int,
        slot: int,
        ground_item_id: int,
        x: int,
        y: int,
        is_widget_target: bool,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_player(self, surface_id: int, item_id: int, slot: int, player_index: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_npc(self, surface_id: int, item_id: int, slot: int, npc_index: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_widget(
        self,
        surface_id: int,
        item_id: int,
        slot: int,
        other_surface_id: int,
        other_item_id: int,
        other_slot: int,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def interact_named(self, widget: Any, actions: Sequence[str]) -> None:
        """Interact with a widget using the first of `actions` it offers."""
        raise NotImplementedError
