"""
Interaction Dispatcher — the single choke point that emits interactions.

Behavioral Contract:
- Never forwards a placeholder / empty-slot item id (silent no-op)
- One call is one interaction: no retries, no batching
- Emission is fire-and-forget; a failing boundary is logged, never raised
"""

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from inventory_kernel.boundary.interfaces import InteractionBoundary
from inventory_kernel.models.action import (
    GroundItemTarget,
    ItemTarget,
    NpcTarget,
    PlayerTarget,
    ResolvedAction,
    Target,
    WorldTileTarget,
)
from inventory_kernel.models.config import InventoryConfig

logger = logging.getLogger(__name__)


class InteractionDispatcher:
    def __init__(
        self,
        boundary: InteractionBoundary,
        config: Optional[InventoryConfig] = None,
    ):
        self.boundary = boundary
        self.config = config or InventoryConfig()

    def item_action(
        self,
        ordinal: Optional[int],
        surface_id: int,
        slot: int,
        item_id: int,
        target: Optional[Target] = None,
    ) -> bool:
        """Build and dispatch a ResolvedAction."""
        return self.dispatch(
            ResolvedAction(
                surface_id=surface_id,
                slot=slot,
                item_id=item_id,
                ordinal=ordinal,
                target=target,
            )
        )

    def dispatch(self, action: ResolvedAction) -> bool:
        """
        Emit one interaction.

        Returns True if the interaction was handed to the boundary.
        """
        if self.config.is_placeholder(action.item_id):
            return False

        if action.target is None and action.ordinal is None:
            raise ValueError("An interaction without a target needs an ordinal")

        call, args = self._boundary_call(action)
        try:
            call(*args)
        except Exception:
            logger.warning(
                "Interaction boundary failed for item %d in slot %d on surface %d",
                action.item_id,
                action.slot,
                action.surface_id,
                exc_info=True,
            )
            return False

        logger.debug(
            "Dispatched item %d slot %d surface %d ordinal %s target %s",
            action.item_id,
            action.slot,
            action.surface_id,
            action.ordinal,
            action.target.kind if action.target else None,
        )
        return True

    def interact_widget(self, widget: Any, actions: Sequence[str]) -> bool:
        """Named-action interaction against a live child widget."""
        try:
            self.boundary.interact_named(widget, tuple(actions))
        except Exception:
            logger.warning("Named interaction %s failed", list(actions), exc_info=True)
            return False
        return True

    def _boundary_call(self, action: ResolvedAction) -> Tuple[Callable[..., None], tuple]:
        """Pick the boundary entry point and arguments for an action."""
        target = action.target
        b = self.boundary
        base = (action.surface_id, action.item_id, action.slot)

        if target is None:
            return b.interact, (action.ordinal, action.surface_id, action.slot, action.item_id)
        if isinstance(target, WorldTileTarget):
            return b.on_tile_object, base + (
                target.object_id, target.x, target.y, target.is_widget_target,
            )
        if isinstance(target, GroundItemTarget):
            return b.on_ground_item, base + (
                target.item_id, target.x, target.y, target.is_widget_target,
            )
        if isinstance(target, PlayerTarget):
            return b.on_player, base + (target.index,)
        if isinstance(target, NpcTarget):
            return b.on_npc, base + (target.index,)
        if isinstance(target, ItemTarget):
            return b.on_widget, base + (target.surface_id, target.item_id, target.slot)
        raise TypeError(f"Unsupported target kind: {target!r}")
