"""
Item Query — filterable, chainable read-only view over a Container Snapshot.

Behavioral Contract:
- Never mutates the snapshot it borrows
- Each filter narrows the candidate set and returns a new query
- Terminal operations preserve slot order
"""

from typing import Callable, List, Optional, Tuple

from inventory_kernel.boundary.interfaces import ContainerSource
from inventory_kernel.errors import ItemNotFoundError
from inventory_kernel.models.item import ContainerSnapshot, Item

ItemPredicate = Callable[[Item], bool]


class ItemQuery:
    """Composable filters over one snapshot. Safe to share across threads."""

    def __init__(
        self,
        snapshot: ContainerSnapshot,
        predicates: Tuple[ItemPredicate, ...] = (),
    ):
        self.snapshot = snapshot
        self._predicates = predicates

    @classmethod
    def from_source(cls, source: ContainerSource, container_id: int) -> "ItemQuery":
        """Start a query over a freshly captured snapshot."""
        return cls(source.snapshot(container_id))

    def keep_if(self, predicate: ItemPredicate) -> "ItemQuery":
        return ItemQuery(self.snapshot, self._predicates + (predicate,))

    def with_id(self, *ids: int) -> "ItemQuery":
        wanted = frozenset(ids)
        return self.keep_if(lambda item: item.id in wanted)

    def with_canonical_id(self, *ids: int) -> "ItemQuery":
        """Match on canonical id, falling back to the raw id when unset."""
        wanted = frozenset(ids)
        return self.keep_if(lambda item: item.canonical in wanted)

    def with_name(self, *names: str, case_sensitive: bool = True) -> "ItemQuery":
        """Exact display-name match."""
        if case_sensitive:
            wanted = frozenset(names)
            return self.keep_if(lambda item: item.name in wanted)
        folded = frozenset(n.casefold() for n in names)
        return self.keep_if(lambda item: item.name.casefold() in folded)

    def _matches(self, item: Item) -> bool:
        return all(p(item) for p in self._predicates)

    # --- Terminal operations ---

    def first(self) -> Optional[Item]:
        for item in self.snapshot.items:
            if self._matches(item):
                return item
        return None

    def require(self) -> Item:
        item = self.first()
        if item is None:
            raise ItemNotFoundError(
                f"No matching item in container {self.snapshot.container_id}"
            )
        return item

    def collect(self) -> List[Item]:
        return [item for item in self.snapshot.items if self._matches(item)]

    def count(self) -> int:
        return sum(1 for item in self.snapshot.items if self._matches(item))

    def exists(self) -> bool:
        return self.first() is not None

    def quantity(self) -> int:
        """Total stack quantity across all matches."""
        return sum(item.quantity for item in self.snapshot.items if self._matches(item))
