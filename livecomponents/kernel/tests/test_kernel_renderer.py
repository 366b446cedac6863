"""
livecomponents Kernel -- Renderer tests

Packaged templates render every kind and variant; a project template
directory overrides them by name.
"""

from datetime import date

import pytest

from livecomponents.components import (
    KINDS,
    accordion,
    autocomplete,
    breadcrumbs,
    datatable,
    datepicker,
    drawer,
    dropdown,
    menu,
    modal,
    popover,
    progress,
    rating,
    skeleton,
    tabs,
    tagsinput,
    timeline,
    timepicker,
    toast,
    toggle,
    tooltip,
)
from livecomponents.config import settings
from livecomponents.kernel.errors import TemplateNotFoundError
from livecomponents.kernel.renderer import load_template, render, template_key, template_names
from livecomponents.kernel.types import configure


@pytest.fixture(autouse=True)
def no_template_dir(monkeypatch):
    monkeypatch.setattr(settings, "TEMPLATE_DIR", "")


def fixed_clock():
    return date(2024, 6, 15)


def every_variant():
    items = [dropdown.Item("us", "United States"), dropdown.Item("fr", "France")]
    suggestions = [autocomplete.Suggestion("ny", "New York"), autocomplete.Suggestion("no", "New Orleans")]
    menu_items = [
        menu.MenuItem("edit", "Edit", shortcut="Ctrl+E"),
        menu.divider(),
        menu.MenuItem("more", "More", items=[menu.MenuItem("archive", "Archive")]),
    ]
    return [
        accordion.new("faq", [accordion.AccordionItem("q1", "Question", "Answer")], accordion.with_open("q1")),
        autocomplete.new("city", suggestions),
        autocomplete.new_multi("cities", suggestions),
        breadcrumbs.new("crumbs", [breadcrumbs.BreadcrumbItem("home", "Home", "/")]),
        datatable.new(
            "users",
            datatable.with_columns(datatable.Column("name", "Name", sortable=True)),
            datatable.with_rows(datatable.Row("1", {"name": "Ada"})),
            datatable.with_page_size(10),
            datatable.with_multi_select(),
        ),
        datepicker.new("due", datepicker.with_clock(fixed_clock), datepicker.with_selected(date(2024, 6, 10))),
        datepicker.new_inline("cal", datepicker.with_clock(fixed_clock)),
        datepicker.new_range("trip", datepicker.with_clock(fixed_clock)),
        drawer.new("nav-drawer"),
        dropdown.new("country", items),
        dropdown.new_searchable("country-search", items),
        dropdown.new_multi("countries", items),
        menu.new("actions", menu_items),
        menu.new_context("ctx", menu_items),
        menu.new_nav("site", menu_items),
        modal.new("dialog"),
        modal.new_confirm("confirm"),
        modal.new_sheet("sheet"),
        popover.new("pop"),
        progress.new("upload"),
        progress.new_circular("ring"),
        progress.new_spinner("spin"),
        rating.new("stars"),
        skeleton.new("block"),
        skeleton.new_avatar("avatar"),
        skeleton.new_card("card"),
        tabs.new("tabs", [tabs.Tab("one", "One"), tabs.Tab("two", "Two")]),
        tabs.new_vertical("vtabs", [tabs.Tab("one", "One")]),
        tabs.new_pills("pills", [tabs.Tab("one", "One")]),
        tagsinput.new("tags", tagsinput.with_tags("go", "rust")),
        timeline.new("history", [timeline.TimelineItem("e1", "Created")]),
        timepicker.new("alarm", timepicker.with_time(7, 30)),
        timepicker.new_duration("length"),
        toast.new("toasts"),
        toggle.new("dark"),
        toggle.new_checkbox("terms"),
        tooltip.new("tip", "Hello"),
    ]


# ============================================================================
# Packaged templates
# ============================================================================


class TestPackagedTemplates:
    @pytest.mark.parametrize("component", every_variant(), ids=lambda c: f"{c.kind}-{c.template}")
    def test_renders_with_id(self, component):
        html = render(component)
        assert f'id="{component.id}"' in html

    def test_every_kind_has_a_default_or_variant(self):
        names = template_names()
        for kind in KINDS:
            assert any(name.startswith(f"lvt:{kind}:") for name in names)

    def test_template_names_are_keys(self):
        names = template_names()
        assert template_key("dropdown", "searchable") in names
        assert names == sorted(names)
        assert len(names) == 37

    def test_action_names_reach_the_markup(self):
        html = render(toggle.new("dark"))
        assert 'lvt-change="toggle_dark"' in html

    def test_values_are_escaped(self):
        html = render(tooltip.new("tip", "<script>", configure(visible=True)))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_explicit_variant(self):
        html = render(progress.new("p"), variant="spinner")
        assert 'data-variant="spinner"' in html

    def test_render_does_not_mutate(self):
        table = datatable.new("t", datatable.with_page_size(5))
        before = table.to_context()
        render(table)
        assert table.to_context() == before

    def test_missing_template(self):
        with pytest.raises(TemplateNotFoundError):
            load_template("toggle", "nope")


# ============================================================================
# Override directory
# ============================================================================


class TestTemplateOverride:
    def test_override_wins(self, tmp_path):
        (tmp_path / "toggle").mkdir()
        (tmp_path / "toggle" / "default.mustache").write_text("<b>{{id}}:{{checked}}</b>")
        html = render(toggle.new("dark", toggle.with_checked()), template_dir=tmp_path)
        assert html == "<b>dark:True</b>"

    def test_falls_back_to_packaged(self, tmp_path):
        html = render(toggle.new("dark"), template_dir=tmp_path)
        assert 'data-lvt-kind="toggle"' in html

    def test_settings_template_dir(self, tmp_path, monkeypatch):
        (tmp_path / "tooltip").mkdir()
        (tmp_path / "tooltip" / "default.mustache").write_text("tip:{{content}}")
        monkeypatch.setattr(settings, "TEMPLATE_DIR", str(tmp_path))
        assert render(tooltip.new("t", "hi")) == "tip:hi"

    def test_override_adds_names(self, tmp_path):
        (tmp_path / "toggle").mkdir()
        (tmp_path / "toggle" / "fancy.mustache").write_text("{{id}}")
        assert "lvt:toggle:fancy:v1" in template_names(tmp_path)
        assert render(toggle.new("x"), variant="fancy", template_dir=tmp_path) == "x"
