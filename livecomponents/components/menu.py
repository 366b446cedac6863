"""
Menu — dropdown action menu, context menu at a pointer position, and
navigation menu with submenus.

Only plain, enabled items are clickable; dividers, headers and submenu
parents are skipped by highlight navigation and selection. The id of the
last chosen item is kept in `last_selected` for the host to act on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.selection import step_highlight
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "menu"

ITEM_DEFAULT = "default"
ITEM_DIVIDER = "divider"
ITEM_HEADER = "header"
ITEM_SUBMENU = "submenu"


@dataclass
class MenuItem:
    id: str = ""
    label: str = ""
    type: str = ITEM_DEFAULT
    icon: str = ""
    shortcut: str = ""
    disabled: bool = False
    href: str = ""
    target: str = ""
    badge: str = ""
    badge_color: str = ""
    items: list[MenuItem] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_divider(self) -> bool:
        return self.type == ITEM_DIVIDER

    @property
    def is_header(self) -> bool:
        return self.type == ITEM_HEADER

    @property
    def is_submenu(self) -> bool:
        return self.type == ITEM_SUBMENU or bool(self.items)

    @property
    def is_clickable(self) -> bool:
        return self.type == ITEM_DEFAULT and not self.items and not self.disabled

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "icon": self.icon,
            "shortcut": self.shortcut,
            "disabled": self.disabled,
            "href": self.href,
            "target": self.target,
            "badge": self.badge,
            "badge_color": self.badge_color,
            "is_divider": self.is_divider,
            "is_header": self.is_header,
            "is_submenu": self.is_submenu,
            "is_link": bool(self.href),
            "items": [child.to_dict() for child in self.items],
        }


def divider() -> MenuItem:
    return MenuItem(type=ITEM_DIVIDER)


def header(label: str) -> MenuItem:
    return MenuItem(type=ITEM_HEADER, label=label)


@dataclass
class Menu(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    items: list[MenuItem] = field(default_factory=list)
    open: bool = False
    trigger: str = ""
    trigger_icon: str = ""
    position: str = "bottom-left"
    highlighted_index: int = -1
    last_selected: str = ""
    styled: bool = field(default_factory=default_styled)

    def toggle(self) -> None:
        self.open = not self.open
        if not self.open:
            self.highlighted_index = -1

    def show(self) -> None:
        self.open = True

    def close(self) -> None:
        self.open = False
        self.highlighted_index = -1

    def clickable_items(self) -> list[MenuItem]:
        return [item for item in self.items if item.is_clickable]

    def get_item(self, item_id: str) -> MenuItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def set_item_disabled(self, item_id: str, disabled: bool) -> None:
        item = self.get_item(item_id)
        if item is not None:
            item.disabled = disabled

    def select_index(self, index: int) -> str:
        """Choose the index-th clickable item; returns its id or ""."""
        clickable = self.clickable_items()
        if not 0 <= index < len(clickable):
            return ""
        self.last_selected = clickable[index].id
        self.close()
        return self.last_selected

    def select_item(self, item_id: str) -> bool:
        item = self.get_item(item_id)
        if item is None or not item.is_clickable:
            return False
        self.last_selected = item.id
        self.close()
        return True

    def select_highlighted(self) -> bool:
        return self.select_index(self.highlighted_index) != ""

    def highlight_next(self) -> None:
        self.highlighted_index = step_highlight(self.clickable_items(), self.highlighted_index, 1)

    def highlight_previous(self) -> None:
        self.highlighted_index = step_highlight(self.clickable_items(), self.highlighted_index, -1)

    def is_highlighted(self, item_id: str) -> bool:
        clickable = self.clickable_items()
        if not 0 <= self.highlighted_index < len(clickable):
            return False
        return clickable[self.highlighted_index].id == item_id

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda m, ctx: m.toggle(),
        "show": lambda m, ctx: m.show(),
        "close": lambda m, ctx: m.close(),
        "select": lambda m, ctx: m.select_item(ctx.data("id")),
        "highlight_next": lambda m, ctx: m.highlight_next(),
        "highlight_previous": lambda m, ctx: m.highlight_previous(),
        "select_highlighted": lambda m, ctx: m.select_highlighted(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "trigger": self.trigger,
            "trigger_icon": self.trigger_icon,
            "position": self.position,
            "items": [
                {**item.to_dict(), "is_highlighted": self.is_highlighted(item.id)}
                for item in self.items
            ],
        })
        return ctx


@dataclass
class ContextMenu(Menu):
    TEMPLATE: ClassVar[str] = "context"

    x: int = 0
    y: int = 0

    def show_at(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.open = True

    ACTIONS: ClassVar[dict[str, Handler]] = {
        **Menu.ACTIONS,
        "show": lambda m, ctx: m.show_at(ctx.data_int("x"), ctx.data_int("y")),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = super().to_context()
        ctx.update({"x": self.x, "y": self.y})
        return ctx


@dataclass
class NavMenu(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "nav"

    identity: Identity
    items: list[MenuItem] = field(default_factory=list)
    orientation: str = "horizontal"
    open_submenu_id: str = ""
    active_id: str = ""
    styled: bool = field(default_factory=default_styled)

    def toggle_submenu(self, item_id: str) -> None:
        self.open_submenu_id = "" if self.open_submenu_id == item_id else item_id

    def open_submenu(self, item_id: str) -> None:
        self.open_submenu_id = item_id

    def close_submenu(self) -> None:
        self.open_submenu_id = ""

    def is_submenu_open(self, item_id: str) -> bool:
        return self.open_submenu_id == item_id

    def set_active(self, item_id: str) -> None:
        self.active_id = item_id

    def is_active(self, item_id: str) -> bool:
        return self.active_id == item_id

    def get_item(self, item_id: str) -> MenuItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
            for child in item.items:
                if child.id == item_id:
                    return child
        return None

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle_submenu": lambda m, ctx: m.toggle_submenu(ctx.data("id")),
        "open_submenu": lambda m, ctx: m.open_submenu(ctx.data("id")),
        "close_submenu": lambda m, ctx: m.close_submenu(),
        "select": lambda m, ctx: m.set_active(ctx.data("id")),
    }

    def _item_context(self, item: MenuItem) -> dict[str, Any]:
        return {
            **item.to_dict(),
            "is_active": self.is_active(item.id),
            "is_open": self.is_submenu_open(item.id),
            "items": [self._item_context(child) for child in item.items],
        }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "orientation": self.orientation,
            "active_id": self.active_id,
            "items": [self._item_context(item) for item in self.items],
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, items: list[MenuItem] | None = None, *options: Option) -> Menu:
    return apply_options(Menu(Identity(id, KIND), items=list(items or [])), options)


def new_context(id: str, items: list[MenuItem] | None = None, *options: Option) -> ContextMenu:
    return apply_options(ContextMenu(Identity(id, KIND), items=list(items or [])), options)


def new_nav(id: str, items: list[MenuItem] | None = None, *options: Option) -> NavMenu:
    return apply_options(NavMenu(Identity(id, KIND), items=list(items or [])), options)
