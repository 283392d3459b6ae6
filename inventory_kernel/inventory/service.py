"""
Inventory Service — resolve a semantic request against the player
inventory and dispatch it.

Request flow:
  locate item (ItemQuery) -> resolve ordinal (ActionResolver)
  -> choose surface (SurfaceSelector, equips only) -> dispatch

Behavioral Contract:
- Every public operation captures a fresh snapshot; nothing is cached
- A missing item is a logged no-op, never an exception
- Equips are bank-safe: they never go through the primary surface while
  the secondary surface is open and usable
- Counting and containment queries are read-only
"""

import logging
import math
from typing import Iterable, List, Optional, Union

from inventory_kernel.boundary.interfaces import (
    ClientState,
    ContainerSource,
    InteractionBoundary,
    WidgetIntrospector,
)
from inventory_kernel.dispatch.dispatcher import InteractionDispatcher
from inventory_kernel.errors import ItemNotFoundError
from inventory_kernel.models.action import Target
from inventory_kernel.models.config import InventoryConfig
from inventory_kernel.models.item import ContainerSnapshot, Item
from inventory_kernel.query.item_query import ItemPredicate, ItemQuery
from inventory_kernel.resolver.action_resolver import (
    SEMANTIC_OVERRIDES,
    ActionResolver,
    is_equip_action,
)
from inventory_kernel.surface.selector import SurfaceSelector

logger = logging.getLogger(__name__)

Action = Union[str, int]

DROP_ORDINAL = SEMANTIC_OVERRIDES["drop"]


class InventoryService:
    """Inventory automation API over explicit client collaborators."""

    def __init__(
        self,
        source: ContainerSource,
        client_state: ClientState,
        boundary: InteractionBoundary,
        widgets: WidgetIntrospector,
        config: Optional[InventoryConfig] = None,
        resolver: Optional[ActionResolver] = None,
    ):
        self.config = config or InventoryConfig()
        self.source = source
        self.resolver = resolver or ActionResolver()
        self.selector = SurfaceSelector(client_state, widgets, self.config)
        self.dispatcher = InteractionDispatcher(boundary, self.config)

    # --- Snapshot and lookup ---

    def snapshot(self) -> ContainerSnapshot:
        return self.source.snapshot(self.config.container_id)

    def query(self) -> ItemQuery:
        return ItemQuery(self.snapshot())

    def items(self) -> List[Item]:
        return self.query().collect()

    def item_by_id(self, item_id: int) -> Optional[Item]:
        return self.query().with_id(item_id).first()

    def item_by_name(self, name: str) -> Optional[Item]:
        return self._named(self.query(), name).first()

    def item_matching(self, predicate: ItemPredicate) -> Optional[Item]:
        return self.query().keep_if(predicate).first()

    def _named(self, query: ItemQuery, *names: str) -> ItemQuery:
        return query.with_name(*names, case_sensitive=self.config.case_sensitive_names)

    def _require(self, query: ItemQuery, label: Union[int, str]) -> Optional[Item]:
        try:
            return query.require()
        except ItemNotFoundError:
            logger.warning("Item not found in inventory: %s", label)
            return None

    # --- Interaction ---

    def interact(self, item: Optional[Item], action: Action) -> bool:
        """
        Interact with an item by action name or explicit ordinal.

        Equip-type names are routed through the bank-safe wield path.
        Explicit ordinals skip resolution entirely.
        """
        if item is None:
            return False
        if isinstance(action, str):
            if is_equip_action(action):
                return self.wield(item)
            return self.item_action(item.slot, item.id, self.resolver.resolve(item, action))
        return self.item_action(item.slot, item.id, action)

    def interact_by_id(self, item_id: int, action: Action) -> bool:
        item = self._require(self.query().with_id(item_id), item_id)
        return self.interact(item, action)

    def interact_by_name(self, name: str, action: Action) -> bool:
        item = self._require(self._named(self.query(), name), name)
        return self.interact(item, action)

    def interact_first(self, item_ids: Iterable[int], ordinal: int) -> bool:
        """Interact with the first of `item_ids` present, in the order given."""
        item_ids = list(item_ids)
        snapshot = self.snapshot()
        for item_id in item_ids:
            item = ItemQuery(snapshot).with_id(item_id).first()
            if item is not None:
                return self.item_action(item.slot, item.id, ordinal)
        logger.warning("None of the items found in inventory: %s", item_ids)
        return False

    def item_action(self, slot: int, item_id: int, ordinal: int) -> bool:
        """Dispatch an ordinal against the primary inventory surface."""
        return self.dispatcher.item_action(
            ordinal, self.config.primary_surface_id, slot, item_id
        )

    # --- Equip ---

    def wield(self, item: Optional[Item]) -> bool:
        """Wield, wear or equip an item without closing an open bank view."""
        if item is None or self.config.is_placeholder(item.id):
            return False

        selection = self.selector.select(item.slot)
        if selection.widget is not None:
            return self.dispatcher.interact_widget(
                selection.widget, self.config.equip_action_labels
            )
        return self.dispatcher.item_action(
            self.config.equip_ordinal, selection.surface_id, item.slot, item.id
        )

    def wield_by_id(self, item_id: int) -> bool:
        return self.wield(self._require(self.query().with_id(item_id), item_id))

    def wield_by_name(self, name: str) -> bool:
        return self.wield(self._require(self._named(self.query(), name), name))

    # --- Use item on something ---

    def use_on(self, item: Optional[Item], target: Optional[Target]) -> bool:
        if item is None or target is None:
            return False
        return self.dispatcher.item_action(
            None, self.config.primary_surface_id, item.slot, item.id, target=target
        )

    # --- Dropping ---

    def drop_all(self, *item_ids: int) -> int:
        """
        Drop every item matching any of `item_ids`.

        Returns the estimated number of ticks the host needs to realise the
        drops. The estimate assumes a fixed batch of drops per tick; no
        pacing is enforced here.
        """
        matched = self.query().with_id(*item_ids).collect()
        for item in matched:
            self.item_action(item.slot, item.id, DROP_ORDINAL)
        return math.ceil(len(matched) / self.config.drop_batch_size)

    # --- Capacity ---

    def empty_slots(self) -> int:
        return self.config.capacity - len(self.snapshot().items)

    def is_full(self) -> bool:
        return self.empty_slots() <= 0

    def is_empty(self) -> bool:
        return self.empty_slots() == self.config.capacity

    # --- Containment and counting ---

    def contains(self, *item_ids: int) -> bool:
        """True if every id has at least one item."""
        snapshot = self.snapshot()
        return all(ItemQuery(snapshot).with_id(i).exists() for i in item_ids)

    def contains_any(self, *item_ids: int) -> bool:
        snapshot = self.snapshot()
        return any(ItemQuery(snapshot).with_id(i).exists() for i in item_ids)

    def contains_names(self, *names: str) -> bool:
        snapshot = self.snapshot()
        return all(self._named(ItemQuery(snapshot), n).exists() for n in names)

    def contains_any_names(self, *names: str) -> bool:
        snapshot = self.snapshot()
        return any(self._named(ItemQuery(snapshot), n).exists() for n in names)

    def count(self, *item_ids: int) -> int:
        return self.query().with_id(*item_ids).count()

    def canonical_count(self, *item_ids: int) -> int:
        return self.query().with_canonical_id(*item_ids).count()

    def count_names(self, *names: str) -> int:
        return self._named(self.query(), *names).count()

    def get_count(self, item_id: int, canonicalize: bool = True) -> int:
        """Count one id, collapsing noted / variant forms unless told not to."""
        if canonicalize:
            return self.canonical_count(item_id)
        return self.count(item_id)
