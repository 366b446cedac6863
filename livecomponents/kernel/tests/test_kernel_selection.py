"""
livecomponents Kernel -- Selection algorithm tests

filter_items, step_highlight and toggle_with_capacity are shared by every
list-backed component.
"""

from dataclasses import dataclass

from livecomponents.kernel.selection import filter_items, step_highlight, toggle_with_capacity


@dataclass
class Entry:
    value: str
    label: str = ""
    description: str = ""
    disabled: bool = False


CITIES = [
    Entry("ny", "New York"),
    Entry("la", "Los Angeles", "West coast"),
    Entry("no", "New Orleans"),
]

# ============================================================================
# filter_items
# ============================================================================


class TestFilterItems:
    def test_case_insensitive_substring_in_original_order(self):
        result = filter_items(CITIES, "new")
        assert [e.label for e in result] == ["New York", "New Orleans"]

    def test_empty_query_returns_everything(self):
        assert filter_items(CITIES, "") == CITIES

    def test_matches_description_and_value(self):
        assert [e.value for e in filter_items(CITIES, "coast")] == ["la"]
        assert [e.value for e in filter_items(CITIES, "NY")] == ["ny"]

    def test_fields_restrict_the_search(self):
        assert filter_items(CITIES, "coast", fields=("label",)) == []

    def test_limit_applies_after_filtering(self):
        result = filter_items(CITIES, "new", limit=1)
        assert [e.label for e in result] == ["New York"]

    def test_no_match(self):
        assert filter_items(CITIES, "zzz") == []


# ============================================================================
# step_highlight
# ============================================================================


class TestStepHighlight:
    def test_forward_from_nothing_starts_at_first(self):
        assert step_highlight(CITIES, -1, 1) == 0

    def test_backward_from_nothing_starts_at_last(self):
        assert step_highlight(CITIES, -1, -1) == 2

    def test_wraps(self):
        assert step_highlight(CITIES, 2, 1) == 0
        assert step_highlight(CITIES, 0, -1) == 2

    def test_skips_disabled(self):
        items = [Entry("a"), Entry("b", disabled=True), Entry("c")]
        assert step_highlight(items, 0, 1) == 2
        assert step_highlight(items, 2, -1) == 0

    def test_all_disabled_leaves_cursor(self):
        items = [Entry("a", disabled=True), Entry("b", disabled=True)]
        assert step_highlight(items, -1, 1) == -1
        assert step_highlight(items, 1, 1) == 1

    def test_empty_list(self):
        assert step_highlight([], -1, 1) == -1


# ============================================================================
# toggle_with_capacity
# ============================================================================


class TestToggleWithCapacity:
    def test_adds_then_removes(self):
        selected = []
        assert toggle_with_capacity(selected, "a", 0)
        assert selected == ["a"]
        assert toggle_with_capacity(selected, "a", 0)
        assert selected == []

    def test_capacity_refuses_new_values(self):
        selected = []
        for value in ("a", "b"):
            assert toggle_with_capacity(selected, value, 2)
        assert toggle_with_capacity(selected, "c", 2) is False
        assert selected == ["a", "b"]

    def test_removal_allowed_at_capacity(self):
        selected = ["a", "b"]
        assert toggle_with_capacity(selected, "a", 2)
        assert selected == ["b"]

    def test_key_function(self):
        selected = [Entry("a")]
        assert toggle_with_capacity(selected, Entry("a", "other label"), 1, key=lambda e: e.value)
        assert selected == []
