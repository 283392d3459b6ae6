"""
Target Surface Selector — picks the widget surface that must receive an
interaction under the current client state.

While the secondary (bank-side) surface is open it shadows the primary
inventory. Equipping through the primary surface in that state closes the
secondary view, so equips must go through the secondary surface's live
child widget whenever it can be found.
"""

import logging
from typing import Any, NamedTuple, Optional

from inventory_kernel.boundary.interfaces import ClientState, WidgetIntrospector
from inventory_kernel.models.config import InventoryConfig

logger = logging.getLogger(__name__)


class SurfaceSelection(NamedTuple):
    surface_id: int
    fallback_used: bool
    widget: Optional[Any] = None    # Live child handle on the secondary path


class SurfaceSelector:
    def __init__(
        self,
        client_state: ClientState,
        widgets: WidgetIntrospector,
        config: Optional[InventoryConfig] = None,
    ):
        self.client_state = client_state
        self.widgets = widgets
        self.config = config or InventoryConfig()

    def select(self, slot: int) -> SurfaceSelection:
        """
        Choose the surface for an interaction on `slot`.

        Secondary closed: primary surface.
        Secondary open and its widget holds `slot`: secondary surface with
        the slot's child handle.
        Secondary open but the widget is absent or too small: the legacy
        surface, flagged as a fallback.
        """
        if not self.client_state.secondary_surface_open():
            return SurfaceSelection(self.config.primary_surface_id, False)

        widget = self._secondary_child(slot)
        if widget is not None:
            return SurfaceSelection(self.config.secondary_surface_id, False, widget)

        logger.warning(
            "Secondary surface %d has no widget for slot %d, falling back to "
            "legacy %s surface with action index %d",
            self.config.secondary_surface_id,
            slot,
            self.config.legacy_fallback_surface,
            self.config.equip_ordinal,
        )
        return SurfaceSelection(self._legacy_surface_id(), True)

    def _secondary_child(self, slot: int) -> Optional[Any]:
        surface_id = self.config.secondary_surface_id
        if not self.widgets.is_rendered(surface_id):
            return None
        if slot >= self.widgets.child_count(surface_id):
            return None
        return self.widgets.child(surface_id, slot)

    def _legacy_surface_id(self) -> int:
        if self.config.legacy_fallback_surface == "secondary":
            return self.config.secondary_surface_id
        return self.config.primary_surface_id
