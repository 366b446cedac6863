"""
Tabs — one active panel out of many.

The first tab starts active. Next/previous wrap and skip disabled tabs.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.selection import step_highlight
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "tabs"


@dataclass
class Tab:
    id: str
    label: str = ""
    icon: str = ""
    disabled: bool = False
    badge: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Tabs(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    items: list[Tab] = field(default_factory=list)
    active_id: str = ""
    variant: str = "default"
    styled: bool = field(default_factory=default_styled)

    @property
    def template(self) -> str:
        return self.variant

    def set_active(self, tab_id: str) -> bool:
        for tab in self.items:
            if tab.id == tab_id and not tab.disabled:
                self.active_id = tab_id
                return True
        return False

    def active_tab(self) -> Tab | None:
        for tab in self.items:
            if tab.id == self.active_id:
                return tab
        return None

    def is_active(self, tab_id: str) -> bool:
        return self.active_id == tab_id

    def _active_index(self) -> int:
        for position, tab in enumerate(self.items):
            if tab.id == self.active_id:
                return position
        return -1

    def _step(self, step: int) -> bool:
        position = step_highlight(self.items, self._active_index(), step)
        if not 0 <= position < len(self.items) or self.items[position].disabled:
            return False
        self.active_id = self.items[position].id
        return True

    def next(self) -> bool:
        return self._step(1)

    def previous(self) -> bool:
        return self._step(-1)

    def add_tab(self, tab: Tab) -> None:
        self.items.append(tab)
        if len(self.items) == 1:
            self.active_id = tab.id

    def remove_tab(self, tab_id: str) -> bool:
        for position, tab in enumerate(self.items):
            if tab.id == tab_id:
                del self.items[position]
                if self.active_id == tab_id:
                    self.active_id = ""
                    self.next()
                return True
        return False

    def tab_count(self) -> int:
        return len(self.items)

    def enabled_tab_count(self) -> int:
        return sum(1 for tab in self.items if not tab.disabled)

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "select": lambda t, ctx: t.set_active(ctx.data("id")),
        "next": lambda t, ctx: t.next(),
        "previous": lambda t, ctx: t.previous(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        active = self.active_tab()
        ctx.update({
            "variant": self.variant,
            "active_id": self.active_id,
            "active_tab": active.to_dict() if active else None,
            "tabs": [
                {**tab.to_dict(), "is_active": self.is_active(tab.id)}
                for tab in self.items
            ],
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, items: list[Tab] | None = None, *options: Option) -> Tabs:
    tabs = Tabs(Identity(id, KIND), items=list(items or []))
    if tabs.items:
        tabs.active_id = tabs.items[0].id
    return apply_options(tabs, options)


def new_vertical(id: str, items: list[Tab] | None = None, *options: Option) -> Tabs:
    tabs = new(id, items, *options)
    tabs.variant = "vertical"
    return tabs


def new_pills(id: str, items: list[Tab] | None = None, *options: Option) -> Tabs:
    tabs = new(id, items, *options)
    tabs.variant = "pills"
    return tabs


def with_active(tab_id: str) -> Option:
    return lambda tabs: tabs.set_active(tab_id)
