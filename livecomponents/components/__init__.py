"""
livecomponents component kinds, one module each.

Each module exposes a `KIND`, its state dataclasses, `new*` constructors
and `with_*` option factories:

  from livecomponents.components import dropdown
  picker = dropdown.new("country", items, dropdown.with_selected("us"))
"""

from livecomponents.components import (
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

KINDS: tuple[str, ...] = (
    accordion.KIND,
    autocomplete.KIND,
    breadcrumbs.KIND,
    datatable.KIND,
    datepicker.KIND,
    drawer.KIND,
    dropdown.KIND,
    menu.KIND,
    modal.KIND,
    popover.KIND,
    progress.KIND,
    rating.KIND,
    skeleton.KIND,
    tabs.KIND,
    tagsinput.KIND,
    timeline.KIND,
    timepicker.KIND,
    toast.KIND,
    toggle.KIND,
    tooltip.KIND,
)

__all__ = [
    "KINDS",
    "accordion",
    "autocomplete",
    "breadcrumbs",
    "datatable",
    "datepicker",
    "drawer",
    "dropdown",
    "menu",
    "modal",
    "popover",
    "progress",
    "rating",
    "skeleton",
    "tabs",
    "tagsinput",
    "timeline",
    "timepicker",
    "toast",
    "toggle",
    "tooltip",
]
