"""
Breadcrumbs — navigation trail.

When collapsible and longer than `max_visible`, the trail shows the first
item, an ellipsis for the hidden middle, then the last `max_visible - 1`
items.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Identity, Option, apply_options

KIND = "breadcrumbs"

SEPARATOR_SYMBOLS: dict[str, str] = {
    "slash": "/",
    "arrow": "→",
    "dot": "•",
    "chevron": "",
}


@dataclass
class BreadcrumbItem:
    id: str
    label: str = ""
    href: str = ""
    icon: str = ""
    current: bool = False
    disabled: bool = False

    @property
    def is_clickable(self) -> bool:
        return bool(self.href) and not self.current and not self.disabled

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "is_clickable": self.is_clickable}


@dataclass
class Breadcrumbs(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    items: list[BreadcrumbItem] = field(default_factory=list)
    separator: str = "chevron"
    size: str = "md"
    show_home: bool = False
    home_href: str = "/"
    collapsible: bool = False
    max_visible: int = 3
    styled: bool = field(default_factory=default_styled)

    def add_item(self, item: BreadcrumbItem) -> None:
        self.items.append(item)

    def has_items(self) -> bool:
        return bool(self.items)

    def item_count(self) -> int:
        return len(self.items)

    def last_item(self) -> BreadcrumbItem | None:
        return self.items[-1] if self.items else None

    def is_collapsed(self) -> bool:
        return self.collapsible and len(self.items) > self.max_visible

    def visible_items(self) -> list[BreadcrumbItem]:
        if not self.is_collapsed():
            return list(self.items)
        tail = max(self.max_visible - 1, 0)
        return [self.items[0], *(self.items[len(self.items) - tail:] if tail else [])]

    def hidden_count(self) -> int:
        if not self.is_collapsed():
            return 0
        return len(self.items) - len(self.visible_items())

    def separator_symbol(self) -> str:
        return SEPARATOR_SYMBOLS.get(self.separator, "")

    def to_context(self) -> dict[str, Any]:
        visible = self.visible_items()
        ctx = self.base_context()
        ctx.update({
            "size": self.size,
            "separator": self.separator,
            "separator_symbol": self.separator_symbol(),
            "is_chevron": self.separator == "chevron",
            "show_home": self.show_home,
            "home_href": self.home_href,
            "is_collapsed": self.is_collapsed(),
            "hidden_count": self.hidden_count(),
            "items": [
                {**item.to_dict(), "is_first": i == 0, "is_last": i == len(visible) - 1,
                 "collapse_after": self.is_collapsed() and i == 0}
                for i, item in enumerate(visible)
            ],
        })
        return ctx


def new(id: str, items: list[BreadcrumbItem] | None = None, *options: Option) -> Breadcrumbs:
    return apply_options(Breadcrumbs(Identity(id, KIND), items=list(items or [])), options)


def with_collapse(max_visible: int) -> Option:
    def apply(breadcrumbs: Breadcrumbs) -> None:
        breadcrumbs.collapsible = True
        breadcrumbs.max_visible = max_visible

    return apply
