"""Tests for the Action Resolver."""

import pytest

from inventory_kernel.models.item import Item
from inventory_kernel.resolver.action_resolver import (
    ActionResolver,
    ExactActionMatcher,
    is_equip_action,
    ordinal_for_index,
)


def _make_item(*labels) -> Item:
    return Item(id=1, name="Thing", slot=0, action_labels=tuple(labels))


class TestOverrides:
    @pytest.mark.parametrize(
        "action,expected",
        [("drop", 7), ("examine", 10), ("rub", 6), ("wield", 3), ("wear", 3), ("equip", 3)],
    )
    def test_override_ignores_item_labels(self, action, expected):
        resolver = ActionResolver()
        item = _make_item("Drop", "Rub", "Examine", "Wield", "Eat")
        assert resolver.resolve(item, action) == expected

    def test_override_is_case_insensitive(self):
        assert ActionResolver().resolve(_make_item(), "DROP") == 7

    def test_override_without_any_labels(self):
        assert ActionResolver().resolve(_make_item(), "Examine") == 10


class TestLabelLookup:
    def test_first_four_labels_map_to_two_through_five(self):
        resolver = ActionResolver()
        item = _make_item("Eat", "Bury", "Read", "Open", "Empty")
        ordinals = [resolver.resolve(item, a) for a in ("eat", "bury", "read", "open")]
        assert ordinals == [2, 3, 4, 5]

    def test_fifth_label_skips_reserved_ordinal(self):
        item = _make_item("Eat", "Bury", "Read", "Open", "Empty")
        assert ActionResolver().resolve(item, "Empty") == 7

    def test_substring_match(self):
        item = _make_item("Break-down", None, "Check-charges", None, None)
        assert ActionResolver().resolve(item, "charges") == 4

    def test_first_match_wins(self):
        item = _make_item("Teleport", "Teleport-alt", None, None, None)
        assert ActionResolver().resolve(item, "teleport") == 2

    def test_unresolved_action_yields_ordinal_one(self):
        # Known edge case: indistinguishable from a real low ordinal.
        item = _make_item("Eat", None, None, None, None)
        assert ActionResolver().resolve(item, "fletch") == 1


class TestMatchers:
    def test_exact_matcher_rejects_substrings(self):
        resolver = ActionResolver(matcher=ExactActionMatcher())
        item = _make_item("Check-charges", "Check", None, None, None)
        assert resolver.resolve(item, "check") == 3

    def test_exact_matcher_still_honours_overrides(self):
        resolver = ActionResolver(matcher=ExactActionMatcher())
        assert resolver.resolve(_make_item("Drop-all"), "drop") == 7


class TestHelpers:
    def test_ordinal_for_index(self):
        assert [ordinal_for_index(i) for i in range(-1, 6)] == [1, 2, 3, 4, 5, 7, 8]

    def test_is_equip_action(self):
        assert is_equip_action("Wield")
        assert is_equip_action("wear")
        assert not is_equip_action("eat")
