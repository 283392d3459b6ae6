"""Recording test doubles for the client boundary."""

from typing import Dict, List, Optional

import pytest

from inventory_kernel.boundary.interfaces import (
    ClientState,
    ContainerSource,
    InteractionBoundary,
    WidgetIntrospector,
)
from inventory_kernel.models.item import ContainerSnapshot, Item


class FakeContainerSource(ContainerSource):
    """Serves whatever items the test puts in `items`, fresh on every call."""

    def __init__(self, items: Optional[List[Item]] = None, capacity: int = 28):
        self.items = list(items or [])
        self.capacity = capacity
        self.calls = 0

    def snapshot(self, container_id: int) -> ContainerSnapshot:
        self.calls += 1
        return ContainerSnapshot(
            container_id=container_id,
            capacity=self.capacity,
            items=tuple(self.items),
        )


class FakeClientState(ClientState):
    def __init__(self, bank_open: bool = False):
        self.bank_open = bank_open
        self.polls = 0

    def secondary_surface_open(self) -> bool:
        self.polls += 1
        return self.bank_open


class FakeWidgets(WidgetIntrospector):
    """Surfaces map surface id -> number of child widgets."""

    def __init__(self, surfaces: Optional[Dict[int, int]] = None):
        self.surfaces = dict(surfaces or {})

    def is_rendered(self, surface_id: int) -> bool:
        return surface_id in self.surfaces

    def child_count(self, surface_id: int) -> int:
        return self.surfaces.get(surface_id, 0)

    def child(self, surface_id: int, index: int):
        if index >= self.surfaces.get(surface_id, 0):
            return None
        return ("widget", surface_id, index)


class RecordingBoundary(InteractionBoundary):
    """Records every call as (method, args)."""

    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def _record(self, name: str, *args) -> None:
        if self.fail:
            raise RuntimeError("client unavailable")
        self.calls.append((name, args))

    def interact(self, ordinal, surface_id, slot, item_id):
        self._record("interact", ordinal, surface_id, slot, item_id)

    def on_tile_object(self, surface_id, item_id, slot, object_id, x, y, is_widget_target):
        self._record("on_tile_object", surface_id, item_id, slot, object_id, x, y, is_widget_target)

    def on_ground_item(self, surface_id, item_id, slot, ground_item_id, x, y, is_widget_target):
        self._record("on_ground_item", surface_id, item_id, slot, ground_item_id, x, y, is_widget_target)

    def on_player(self, surface_id, item_id, slot, player_index):
        self._record("on_player", surface_id, item_id, slot, player_index)

    def on_npc(self, surface_id, item_id, slot, npc_index):
        self._record("on_npc", surface_id, item_id, slot, npc_index)

    def on_widget(self, surface_id, item_id, slot, other_surface_id, other_item_id, other_slot):
        self._record("on_widget", surface_id, item_id, slot, other_surface_id, other_item_id, other_slot)

    def interact_named(self, widget, actions):
        self._record("interact_named", widget, tuple(actions))


@pytest.fixture
def source() -> FakeContainerSource:
    return FakeContainerSource()


@pytest.fixture
def client_state() -> FakeClientState:
    return FakeClientState()


@pytest.fixture
def widgets() -> FakeWidgets:
    return FakeWidgets()


@pytest.fixture
def boundary() -> RecordingBoundary:
    return RecordingBoundary()
