"""
Overlay tests -- modal, confirm, sheet, drawer, popover and tooltip.
"""

from livecomponents.components import drawer, modal, popover, tooltip
from livecomponents.kernel.dispatch import dispatch
from livecomponents.kernel.types import configure


# ============================================================================
# Modal
# ============================================================================


class TestModal:
    def test_show_hide_toggle(self):
        m = modal.new("dialog")
        m.show()
        assert m.open
        m.toggle()
        assert not m.open

    def test_overlay_and_escape_close(self):
        m = modal.new("dialog")
        m.show()
        assert m.overlay_click()
        m.show()
        assert m.escape()
        assert not m.open

    def test_overlay_refused_when_disabled(self):
        m = modal.new("dialog", configure(close_on_overlay=False, close_on_escape=False))
        m.show()
        assert not dispatch(m, "overlay_dialog")
        assert not dispatch(m, "escape_dialog")
        assert m.open

    def test_header(self):
        assert modal.new("dialog", configure(show_close=False)).has_header() is False
        assert modal.new("dialog", configure(show_close=False, title="Hi")).has_header()


class TestConfirm:
    def test_confirm_sets_result(self):
        m = modal.new_confirm("delete", configure(destructive=True))
        m.show()
        assert m.confirm()
        assert m.confirmed
        assert not m.open

    def test_confirm_when_closed_is_refused(self):
        m = modal.new_confirm("delete")
        assert m.confirm() is False
        assert m.result == ""

    def test_show_resets_result(self):
        m = modal.new_confirm("delete")
        m.show()
        m.cancel()
        assert m.result == modal.RESULT_CANCELLED
        m.show()
        assert m.result == ""


class TestSheet:
    def test_orientation(self):
        assert modal.new_sheet("s").is_horizontal()
        bottom = modal.new_sheet("s", configure(position="bottom"))
        assert bottom.is_vertical()
        assert bottom.template == "sheet"


# ============================================================================
# Drawer
# ============================================================================


class TestDrawer:
    def test_toggle(self):
        d = drawer.new("nav")
        d.toggle()
        assert d.open
        d.toggle()
        assert not d.open

    def test_persistent_ignores_close(self):
        d = drawer.new("nav", configure(persistent=True))
        d.show()
        assert d.close() is False
        assert d.overlay_click() is False
        assert d.escape() is False
        assert d.open
        d.force_close()
        assert not d.open

    def test_overlay_flag(self):
        d = drawer.new("nav", configure(close_on_overlay=False))
        d.show()
        assert not dispatch(d, "overlay_nav")
        assert dispatch(d, "escape_nav")
        assert not d.open

    def test_positions(self):
        assert drawer.new("nav").is_horizontal()
        top = drawer.new("nav", configure(position="top"))
        assert top.is_top() and top.is_vertical()


# ============================================================================
# Popover / Tooltip
# ============================================================================


class TestPopover:
    def test_click_away(self):
        p = popover.new("info")
        p.show()
        assert p.click_away()
        assert not p.open

    def test_click_away_disabled(self):
        p = popover.new("info", configure(close_on_click_away=False))
        p.show()
        assert not dispatch(p, "click_away_info")
        assert p.open

    def test_side_strips_alignment(self):
        p = popover.new("info", configure(position="top-start"))
        assert p.side == "top"
        assert p.is_top()

    def test_trigger_predicates(self):
        p = popover.new("info", configure(trigger=popover.TRIGGER_HOVER))
        assert p.is_hover_trigger()
        assert not p.is_click_trigger()

    def test_context(self):
        ctx = popover.new("info", configure(title="About")).to_context()
        assert ctx["has_header"] is True
        assert ctx["actions"]["click_away"] == "click_away_info"


class TestTooltip:
    def test_visibility(self):
        t = tooltip.new("tip", "Copy to clipboard")
        t.show()
        assert t.visible
        t.toggle()
        assert not t.visible

    def test_side(self):
        t = tooltip.new("tip", "x", configure(position="left-end"))
        assert t.is_left()
        assert t.to_context()["side"] == "left"
