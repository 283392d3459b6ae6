"""Resolved Action — what the resolver and surface selector hand to the dispatcher."""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TargetKind(str, Enum):
    WORLD_TILE = "world_tile"       # Tile object (rock, tree, range, ...)
    GROUND_ITEM = "ground_item"
    PLAYER = "player"
    NPC = "npc"
    ITEM = "item"                   # Another item on a widget surface


class WorldTileTarget(BaseModel):
    """A tile object at a world location."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["world_tile"] = "world_tile"
    object_id: int
    x: int
    y: int
    is_widget_target: bool = False


class GroundItemTarget(BaseModel):
    """An item lying on a world tile."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ground_item"] = "ground_item"
    item_id: int
    x: int
    y: int
    is_widget_target: bool = False


class PlayerTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["player"] = "player"
    index: int


class NpcTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["npc"] = "npc"
    index: int


class ItemTarget(BaseModel):
    """Another item slot, possibly on a different surface."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["item"] = "item"
    surface_id: int
    item_id: int
    slot: int = Field(ge=0)


Target = Annotated[
    Union[WorldTileTarget, GroundItemTarget, PlayerTarget, NpcTarget, ItemTarget],
    Field(discriminator="kind"),
]


class ResolvedAction(BaseModel):
    """
    A single interaction ready for dispatch.

    `ordinal` is the host menu index. Target-bearing actions ("use X on Y")
    carry a `target` and do not need an ordinal.
    """

    model_config = ConfigDict(frozen=True)

    surface_id: int
    slot: int = Field(ge=0)
    item_id: int
    ordinal: Optional[int] = None
    target: Optional[Target] = None
