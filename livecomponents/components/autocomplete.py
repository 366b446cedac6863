"""
Autocomplete — free-text search over suggestions.

The suggestion list is filtered on label, value and description, capped
at `max_suggestions`, and opens only once the query reaches `min_chars`
and something matches. With `allow_custom`, selecting with nothing
highlighted accepts the typed query as a custom value.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.selection import filter_items, step_highlight
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "autocomplete"

FilterFunc = Callable[[str, list["Suggestion"]], list["Suggestion"]]


@dataclass
class Suggestion:
    value: str
    label: str = ""
    description: str = ""
    icon: str = ""
    disabled: bool = False
    data: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.value

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Autocomplete(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    suggestions: list[Suggestion] = field(default_factory=list)
    filtered: list[Suggestion] = field(default_factory=list)
    query: str = ""
    selected: Suggestion | None = None
    placeholder: str = "Type to search..."
    min_chars: int = 1
    max_suggestions: int = 10
    open: bool = False
    highlighted_index: int = -1
    loading: bool = False
    allow_custom: bool = False
    clear_on_select: bool = False
    filter_func: FilterFunc | None = None
    styled: bool = field(default_factory=default_styled)

    # -- query --------------------------------------------------------------

    def filter(self) -> None:
        if self.filter_func is not None:
            result = list(self.filter_func(self.query, self.suggestions))
            if self.max_suggestions > 0:
                result = result[: self.max_suggestions]
        else:
            result = filter_items(self.suggestions, self.query, limit=self.max_suggestions)
        self.filtered = result

    def _should_open(self) -> bool:
        return len(self.query) >= self.min_chars and bool(self.filtered)

    def set_query(self, query: str) -> None:
        self.query = query
        self.filter()
        self.highlighted_index = -1
        self.open = self._should_open()

    def set_suggestions(self, suggestions: list[Suggestion]) -> None:
        self.suggestions = list(suggestions)
        self.filter()

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def focus(self) -> None:
        self.filter()
        if self._should_open():
            self.open = True

    def blur(self) -> None:
        self.open = False
        self.highlighted_index = -1

    def clear(self) -> None:
        self.selected = None
        self.query = ""
        self.open = False
        self.highlighted_index = -1
        self.filtered = []

    # -- selection ----------------------------------------------------------

    def select(self, suggestion: Suggestion) -> bool:
        if suggestion.disabled:
            return False
        self.selected = suggestion
        self.query = "" if self.clear_on_select else suggestion.label
        self.open = False
        self.highlighted_index = -1
        return True

    def select_index(self, index: int) -> bool:
        if not 0 <= index < len(self.filtered):
            return False
        return self.select(self.filtered[index])

    def select_value(self, value: str) -> bool:
        for suggestion in [*self.filtered, *self.suggestions]:
            if suggestion.value == value:
                return self.select(suggestion)
        return False

    def select_highlighted(self) -> bool:
        if 0 <= self.highlighted_index < len(self.filtered):
            return self.select_index(self.highlighted_index)
        if self.allow_custom and self.query:
            return self.select_custom(self.query)
        return False

    def select_custom(self, text: str) -> bool:
        self.selected = Suggestion(value=text, label=text)
        self.open = False
        return True

    def highlight_next(self) -> None:
        self.highlighted_index = step_highlight(self.filtered, self.highlighted_index, 1)

    def highlight_previous(self) -> None:
        self.highlighted_index = step_highlight(self.filtered, self.highlighted_index, -1)

    def is_highlighted(self, index: int) -> bool:
        return self.highlighted_index == index

    def has_selection(self) -> bool:
        return self.selected is not None

    def display_value(self) -> str:
        return self.selected.label if self.selected else self.query

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "search": lambda a, ctx: a.set_query(ctx.data("query")),
        "focus": lambda a, ctx: a.focus(),
        "blur": lambda a, ctx: a.blur(),
        "clear": lambda a, ctx: a.clear(),
        "select": lambda a, ctx: (
            a.select_index(ctx.data_int("index")) if ctx.has_data("index")
            else a.select_value(ctx.data("value"))
        ),
        "select_highlighted": lambda a, ctx: a.select_highlighted(),
        "highlight_next": lambda a, ctx: a.highlight_next(),
        "highlight_previous": lambda a, ctx: a.highlight_previous(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "query": self.query,
            "placeholder": self.placeholder,
            "open": self.open,
            "loading": self.loading,
            "display_value": self.display_value(),
            "has_selection": self.has_selection(),
            "selected": self.selected.to_dict() if self.selected else None,
            "suggestions": [
                {**s.to_dict(), "index": i, "is_highlighted": self.is_highlighted(i)}
                for i, s in enumerate(self.filtered)
            ],
        })
        return ctx


@dataclass
class MultiAutocomplete(Autocomplete):
    TEMPLATE: ClassVar[str] = "multi"

    clear_on_select: bool = True
    selected_items: list[Suggestion] = field(default_factory=list)

    def is_selected_multi(self, value: str) -> bool:
        return any(item.value == value for item in self.selected_items)

    def select(self, suggestion: Suggestion) -> bool:
        if suggestion.disabled or self.is_selected_multi(suggestion.value):
            return False
        self.selected_items.append(suggestion)
        self.query = ""
        self.open = False
        self.highlighted_index = -1
        return True

    def select_custom(self, text: str) -> bool:
        return self.select(Suggestion(value=text, label=text))

    def remove_selected(self, value: str) -> bool:
        for position, item in enumerate(self.selected_items):
            if item.value == value:
                del self.selected_items[position]
                return True
        return False

    def clear_multi(self) -> None:
        self.selected_items = []
        self.query = ""
        self.open = False
        self.highlighted_index = -1

    def has_selected_items(self) -> bool:
        return bool(self.selected_items)

    def selected_values(self) -> list[str]:
        return [item.value for item in self.selected_items]

    def filtered_excluding_selected(self) -> list[Suggestion]:
        return [s for s in self.filtered if not self.is_selected_multi(s.value)]

    ACTIONS: ClassVar[dict[str, Handler]] = {
        **Autocomplete.ACTIONS,
        "remove": lambda a, ctx: a.remove_selected(ctx.data("value")),
        "clear_all": lambda a, ctx: a.clear_multi(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = super().to_context()
        ctx.update({
            "selected_items": [item.to_dict() for item in self.selected_items],
            "selected_values": self.selected_values(),
            "has_selected_items": self.has_selected_items(),
            "available": [s.to_dict() for s in self.filtered_excluding_selected()],
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, suggestions: list[Suggestion] | None = None, *options: Option) -> Autocomplete:
    return apply_options(
        Autocomplete(Identity(id, KIND), suggestions=list(suggestions or [])), options
    )


def new_multi(id: str, suggestions: list[Suggestion] | None = None, *options: Option) -> MultiAutocomplete:
    ac = apply_options(
        MultiAutocomplete(Identity(id, KIND), suggestions=list(suggestions or [])), options
    )
    ac.clear_on_select = True
    return ac


def with_min_chars(min_chars: int) -> Option:
    def apply(ac: Autocomplete) -> None:
        ac.min_chars = max(min_chars, 0)

    return apply


def with_filter(func: FilterFunc) -> Option:
    def apply(ac: Autocomplete) -> None:
        ac.filter_func = func

    return apply


def with_query(query: str) -> Option:
    return lambda ac: ac.set_query(query)
