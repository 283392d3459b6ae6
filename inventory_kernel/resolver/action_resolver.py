"""
Action Resolver — turns a semantic action name into a host menu ordinal.

A handful of actions sit at fixed menu positions regardless of what the
item itself advertises, so they are answered from an override table before
the item's own labels are consulted. Everything else is located in the
item's action labels and mapped from label index to ordinal.

Menu layout:
  ordinals 0-1   reserved system actions, never listed on the item
  ordinals 2-5   action labels 0-3
  ordinal  6     reserved system action
  ordinals 7+    action labels 4+
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from inventory_kernel.models.item import Item

SEMANTIC_OVERRIDES: Dict[str, int] = {
    "drop": 7,
    "examine": 10,
    "wear": 3,
    "wield": 3,
    "equip": 3,
    "rub": 6,
}

EQUIP_ACTIONS = frozenset({"wear", "wield", "equip"})

_LISTED_BEFORE_GAP = 4
UNRESOLVED_INDEX = -1


def ordinal_for_index(index: int) -> int:
    """Map an action-label index to its menu ordinal."""
    return index + 2 if index < _LISTED_BEFORE_GAP else index + 3


def is_equip_action(action_name: str) -> bool:
    return action_name.lower() in EQUIP_ACTIONS


class ActionMatcher(ABC):
    """Strategy for locating an action name among an item's labels."""

    @abstractmethod
    def find(self, labels: Sequence[Optional[str]], action_name: str) -> int:
        """Index of the first matching label, or UNRESOLVED_INDEX."""
        raise NotImplementedError


class SubstringActionMatcher(ActionMatcher):
    """First label whose lower-cased text contains the (lower-case) name."""

    def find(self, labels: Sequence[Optional[str]], action_name: str) -> int:
        for i, label in enumerate(labels):
            if label is not None and action_name in label.lower():
                return i
        return UNRESOLVED_INDEX


class ExactActionMatcher(ActionMatcher):
    def find(self, labels: Sequence[Optional[str]], action_name: str) -> int:
        for i, label in enumerate(labels):
            if label is not None and label.lower() == action_name:
                return i
        return UNRESOLVED_INDEX


class ActionResolver:
    """Pure mapping of (item, action name) to an ordinal."""

    def __init__(self, matcher: Optional[ActionMatcher] = None):
        self.matcher = matcher or SubstringActionMatcher()

    def resolve(self, item: Item, action_name: str) -> int:
        """
        Resolve an action name for an item.

        An action that neither overrides nor matches a label resolves to
        ordinal 1. Callers cannot tell this apart from a real low ordinal.
        """
        name = action_name.lower()
        override = SEMANTIC_OVERRIDES.get(name)
        if override is not None:
            return override

        index = self.matcher.find(item.action_labels, name)
        return ordinal_for_index(index)
