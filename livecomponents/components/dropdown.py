"""
Dropdown — select one option from a list, with searchable and multi variants.

Selection actions never select a disabled option or act on a disabled
dropdown. The multi variant caps the selection at `max_selections`
(0 = unlimited); adds beyond it are refused without touching state.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.selection import filter_items, step_highlight, toggle_with_capacity
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "dropdown"


@dataclass
class Item:
    value: str
    label: str = ""
    disabled: bool = False
    group: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.value

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Dropdown(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    options: list[Item] = field(default_factory=list)
    selected: Item | None = None
    placeholder: str = "Select..."
    open: bool = False
    disabled: bool = False
    highlighted_index: int = -1
    styled: bool = field(default_factory=default_styled)

    # -- overlay ------------------------------------------------------------

    def toggle(self) -> bool:
        if self.disabled:
            return False
        self.open = not self.open
        self.highlighted_index = -1
        return True

    def close(self) -> None:
        self.open = False
        self.highlighted_index = -1

    # -- selection ----------------------------------------------------------

    def find(self, value: str) -> Item | None:
        for item in self.options:
            if item.value == value:
                return item
        return None

    def select(self, value: str) -> bool:
        item = self.find(value)
        if item is None or item.disabled or self.disabled:
            return False
        self.selected = item
        self.close()
        return True

    def clear(self) -> None:
        self.selected = None

    @property
    def value(self) -> str:
        return self.selected.value if self.selected else ""

    def display_text(self) -> str:
        return self.selected.label if self.selected else self.placeholder

    # -- highlight ----------------------------------------------------------

    def visible_options(self) -> list[Item]:
        return self.options

    def highlight_next(self) -> None:
        self.highlighted_index = step_highlight(self.visible_options(), self.highlighted_index, 1)

    def highlight_previous(self) -> None:
        self.highlighted_index = step_highlight(self.visible_options(), self.highlighted_index, -1)

    def select_highlighted(self) -> bool:
        visible = self.visible_options()
        if not 0 <= self.highlighted_index < len(visible):
            return False
        return self.select(visible[self.highlighted_index].value)

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda d, ctx: d.toggle(),
        "close": lambda d, ctx: d.close(),
        "select": lambda d, ctx: d.select(ctx.data("value")),
        "clear": lambda d, ctx: d.clear(),
        "highlight_next": lambda d, ctx: d.highlight_next(),
        "highlight_previous": lambda d, ctx: d.highlight_previous(),
        "select_highlighted": lambda d, ctx: d.select_highlighted(),
    }

    def _option_context(self, item: Item, index: int) -> dict[str, Any]:
        return {
            **item.to_dict(),
            "index": index,
            "is_selected": self.selected is not None and self.selected.value == item.value,
            "is_highlighted": index == self.highlighted_index,
        }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "placeholder": self.placeholder,
            "open": self.open,
            "disabled": self.disabled,
            "value": self.value,
            "display_text": self.display_text(),
            "selected": self.selected.to_dict() if self.selected else None,
            "options": [
                self._option_context(item, index)
                for index, item in enumerate(self.visible_options())
            ],
        })
        return ctx


@dataclass
class SearchableDropdown(Dropdown):
    TEMPLATE: ClassVar[str] = "searchable"

    placeholder: str = "Search..."
    query: str = ""
    min_chars: int = 1

    def search(self, query: str) -> None:
        self.query = query
        self.open = True
        self.highlighted_index = -1

    def _query_active(self) -> bool:
        return self.query != "" and len(self.query) >= self.min_chars

    def visible_options(self) -> list[Item]:
        if self._query_active():
            return filter_items(self.options, self.query, fields=("label",))
        return self.options

    def clear_search(self) -> None:
        self.query = ""
        self.highlighted_index = -1

    ACTIONS: ClassVar[dict[str, Handler]] = {
        **Dropdown.ACTIONS,
        "search": lambda d, ctx: d.search(ctx.data("query")),
        "clear_search": lambda d, ctx: d.clear_search(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = super().to_context()
        ctx.update({
            "query": self.query,
            "min_chars": self.min_chars,
            "no_results": self._query_active() and not ctx["options"],
        })
        return ctx


@dataclass
class MultiDropdown(Dropdown):
    TEMPLATE: ClassVar[str] = "multi"

    selected_items: list[Item] = field(default_factory=list)
    max_selections: int = 0

    def is_selected(self, value: str) -> bool:
        return any(item.value == value for item in self.selected_items)

    def toggle_item(self, value: str) -> bool:
        item = self.find(value)
        if self.disabled or item is None:
            return False
        if item.disabled and not self.is_selected(value):
            return False
        return toggle_with_capacity(
            self.selected_items, item, self.max_selections, key=lambda i: i.value
        )

    def select(self, value: str) -> bool:
        return self.toggle_item(value)

    def values(self) -> list[str]:
        return [item.value for item in self.selected_items]

    def can_select_more(self) -> bool:
        return self.max_selections <= 0 or len(self.selected_items) < self.max_selections

    def clear_all(self) -> None:
        self.selected_items = []

    def clear(self) -> None:
        self.clear_all()

    def select_all(self) -> None:
        self.selected_items = []
        for item in self.options:
            if item.disabled:
                continue
            if not self.can_select_more():
                break
            self.selected_items.append(item)

    def display_text(self) -> str:
        count = len(self.selected_items)
        if count == 0:
            return self.placeholder
        if count == 1:
            return self.selected_items[0].label
        return f"{self.selected_items[0].label} + {count - 1} more"

    @property
    def value(self) -> str:
        return ",".join(self.values())

    ACTIONS: ClassVar[dict[str, Handler]] = {
        **Dropdown.ACTIONS,
        "toggle_item": lambda d, ctx: d.toggle_item(ctx.data("value")),
        "select_all": lambda d, ctx: d.select_all(),
        "clear_all": lambda d, ctx: d.clear_all(),
    }

    def _option_context(self, item: Item, index: int) -> dict[str, Any]:
        ctx = super()._option_context(item, index)
        ctx["is_selected"] = self.is_selected(item.value)
        return ctx

    def to_context(self) -> dict[str, Any]:
        ctx = super().to_context()
        ctx.update({
            "selected_items": [item.to_dict() for item in self.selected_items],
            "selected_count": len(self.selected_items),
            "max_selections": self.max_selections,
            "can_select_more": self.can_select_more(),
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, options: list[Item] | None = None, *opts: Option) -> Dropdown:
    return apply_options(Dropdown(Identity(id, KIND), options=list(options or [])), opts)


def new_searchable(id: str, options: list[Item] | None = None, *opts: Option) -> SearchableDropdown:
    return apply_options(SearchableDropdown(Identity(id, KIND), options=list(options or [])), opts)


def new_multi(id: str, options: list[Item] | None = None, *opts: Option) -> MultiDropdown:
    return apply_options(MultiDropdown(Identity(id, KIND), options=list(options or [])), opts)


def with_selected(value: str) -> Option:
    """Preselect by value. Configuration may preselect a disabled option."""

    def apply(dropdown: Dropdown) -> None:
        dropdown.selected = dropdown.find(value)

    return apply


def with_selected_values(*values: str) -> Option:
    def apply(dropdown: MultiDropdown) -> None:
        wanted = set(values)
        dropdown.selected_items = [item for item in dropdown.options if item.value in wanted]

    return apply
