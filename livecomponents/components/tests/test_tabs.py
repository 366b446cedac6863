"""
Tabs tests -- one active tab, wrapping navigation over enabled tabs.
"""

import pytest

from livecomponents.components import tabs
from livecomponents.components.tabs import Tab
from livecomponents.kernel.dispatch import dispatch


@pytest.fixture
def items():
    return [Tab("overview", "Overview"), Tab("billing", "Billing", disabled=True), Tab("team", "Team")]


class TestTabs:
    def test_first_tab_starts_active(self, items):
        t = tabs.new("settings", items)
        assert t.active_id == "overview"
        assert t.active_tab().label == "Overview"

    def test_with_active(self, items):
        assert tabs.new("settings", items, tabs.with_active("team")).active_id == "team"

    def test_disabled_tab_cannot_be_selected(self, items):
        t = tabs.new("settings", items)
        assert t.set_active("billing") is False
        assert t.set_active("nope") is False
        assert t.active_id == "overview"

    def test_next_skips_disabled_and_wraps(self, items):
        t = tabs.new("settings", items)
        t.next()
        assert t.active_id == "team"
        t.next()
        assert t.active_id == "overview"

    def test_previous_wraps(self, items):
        t = tabs.new("settings", items)
        t.previous()
        assert t.active_id == "team"

    def test_empty_tabs(self):
        t = tabs.new("settings")
        assert t.next() is False
        assert t.active_tab() is None

    def test_add_first_tab_activates_it(self):
        t = tabs.new("settings")
        t.add_tab(Tab("a"))
        assert t.active_id == "a"

    def test_removing_active_tab_moves_to_first_enabled(self, items):
        t = tabs.new("settings", items)
        assert t.remove_tab("overview")
        assert t.active_id == "team"
        assert t.tab_count() == 2
        assert t.enabled_tab_count() == 1

    def test_variants_pick_templates(self, items):
        assert tabs.new("a", items).template == "default"
        assert tabs.new_vertical("b", items).template == "vertical"
        assert tabs.new_pills("c", items).template == "pills"

    def test_select_action(self, items):
        t = tabs.new("settings", items)
        assert dispatch(t, "select_settings", {"id": "team"})
        assert not dispatch(t, "select_settings", {"id": "billing"})
        assert t.to_context()["active_id"] == "team"
