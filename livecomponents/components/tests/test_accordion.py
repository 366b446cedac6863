"""
Accordion tests -- multi/single open sections, disabled items ignored.
"""

import pytest

from livecomponents.components import accordion
from livecomponents.components.accordion import AccordionItem
from livecomponents.kernel.dispatch import dispatch


@pytest.fixture
def items():
    return [
        AccordionItem("shipping", "Shipping", "Ships in 2 days"),
        AccordionItem("returns", "Returns", "30 days"),
        AccordionItem("legacy", "Legacy", "Gone", disabled=True),
    ]


class TestMultiple:
    def test_defaults(self, items):
        acc = accordion.new("faq", items)
        assert acc.allow_multiple is True
        assert acc.open_count() == 0
        assert acc.item_count() == 3

    def test_toggle_opens_and_closes(self, items):
        acc = accordion.new("faq", items)
        assert acc.toggle("shipping")
        assert acc.is_open("shipping")
        assert acc.toggle("shipping")
        assert not acc.is_open("shipping")

    def test_several_open_at_once(self, items):
        acc = accordion.new("faq", items, accordion.with_open("shipping", "returns"))
        assert acc.open_count() == 2

    def test_disabled_item_cannot_open(self, items):
        acc = accordion.new("faq", items)
        assert acc.toggle("legacy") is False
        assert acc.open("legacy") is False
        assert not acc.is_open("legacy")

    def test_open_all_skips_disabled(self, items):
        acc = accordion.new("faq", items, accordion.with_all_open())
        assert acc.open_ids == {"shipping", "returns"}
        acc.close_all()
        assert acc.open_count() == 0


class TestSingle:
    def test_opening_closes_others(self, items):
        acc = accordion.new_single("faq", items)
        acc.open("shipping")
        acc.open("returns")
        assert acc.open_ids == {"returns"}


class TestItems:
    def test_add_and_remove(self, items):
        acc = accordion.new("faq", items, accordion.with_open("returns"))
        acc.add_item(AccordionItem("warranty", "Warranty"))
        assert acc.get_item("warranty") is not None
        assert acc.remove_item("returns")
        assert not acc.is_open("returns")
        assert acc.remove_item("returns") is False


class TestActions:
    def test_toggle_action_reads_id(self, items):
        acc = accordion.new("faq", items)
        assert dispatch(acc, "toggle_faq", {"id": "returns"})
        assert acc.is_open("returns")

    def test_disabled_toggle_is_rejected(self, items):
        acc = accordion.new("faq", items)
        assert not dispatch(acc, "toggle_faq", {"id": "legacy"})

    def test_context(self, items):
        acc = accordion.new("faq", items, accordion.with_open("shipping"))
        ctx = acc.to_context()
        assert ctx["id"] == "faq"
        assert ctx["actions"]["toggle"] == "toggle_faq"
        assert [i["is_open"] for i in ctx["items"]] == [True, False, False]
