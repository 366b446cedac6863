"""
End-to-end scenarios -- components registered in one ComponentSet, driven
by namespaced action names the way a live-template host sends them, then
rendered.
"""

from datetime import date

import pytest

from livecomponents.components import autocomplete, datatable, datepicker, dropdown, rating, tagsinput
from livecomponents.components.autocomplete import Suggestion
from livecomponents.components.datatable import Row
from livecomponents.components.dropdown import Item
from livecomponents.kernel.actions import ActionRequest
from livecomponents.kernel.session import ComponentSet
from livecomponents.kernel.types import configure


@pytest.fixture
def page():
    return ComponentSet(
        datatable.new(
            "users",
            datatable.with_rows(*[Row(str(i), {"name": f"user {i}"}) for i in range(25)]),
            datatable.with_page_size(10),
        ),
        autocomplete.new(
            "city",
            [Suggestion("ny", "New York"), Suggestion("la", "Los Angeles"), Suggestion("no", "New Orleans")],
        ),
        tagsinput.new("labels", configure(max_tags=2)),
        datepicker.new(
            "due",
            datepicker.with_clock(lambda: date(2024, 6, 1)),
            datepicker.with_min_date(date(2024, 6, 10)),
        ),
        dropdown.new_multi(
            "langs",
            [Item("go"), Item("py"), Item("rs")],
            configure(max_selections=2),
        ),
        rating.new("score", configure(allow_half=True)),
    )


# ============================================================================
# Paging through a table
# ============================================================================


class TestTablePaging:
    def test_pages_forward_and_stops(self, page):
        table = page.get("users")
        assert table.total_pages() == 3
        assert page.handle("next_page_users")
        assert table.page == 1
        page.handle("last_page_users")
        result = page.handle("next_page_users")
        assert not result
        assert table.page == 2

    def test_rendered_page_info(self, page):
        page.handle("go_to_page_users", {"page": "2"})
        assert "Showing 21-25 of 25" in page.render("users")


# ============================================================================
# Searching
# ============================================================================


class TestSearch:
    def test_query_filters_suggestions(self, page):
        page.handle("search_city", {"query": "new"})
        city = page.get("city")
        assert [s.label for s in city.filtered] == ["New York", "New Orleans"]
        html = page.render("city")
        assert "New Orleans" in html
        assert "Los Angeles" not in html


# ============================================================================
# Tags
# ============================================================================


class TestTags:
    def test_duplicates_and_capacity(self, page):
        tags = page.get("labels")
        assert page.handle("add_labels", {"value": "go"})
        assert not page.handle("add_labels", {"value": "go"})
        assert tags.count() == 1
        assert page.handle("add_labels", {"value": "python"})
        assert not page.handle("add_labels", {"value": "rust"})
        assert tags.values() == ["go", "python"]


# ============================================================================
# Dates
# ============================================================================


class TestDates:
    def test_min_date_boundary(self, page):
        assert not page.handle("select_due", {"date": "2024-06-09"})
        assert page.handle("select_due", {"date": "2024-06-10"})
        assert page.get("due").selected == date(2024, 6, 10)


# ============================================================================
# Selection capacity and rounding
# ============================================================================


class TestCapacityAndRounding:
    def test_multi_select_capacity(self, page):
        for value in ("go", "py", "rs"):
            page.handle("toggle_item_langs", {"value": value})
        assert page.get("langs").values() == ["go", "py"]

    def test_half_star_rounding(self, page):
        page.handle_request(ActionRequest(action="set_score", data={"value": "3.7"}))
        assert page.get("score").value == 3.5
        page.handle_request(ActionRequest(action="set_score", data={"value": "3.8"}))
        assert page.get("score").value == 4.0

    def test_unknown_action_is_rejected(self, page):
        result = page.handle("explode_score")
        assert not result
        assert result.reason.startswith("UNKNOWN_ACTION")
