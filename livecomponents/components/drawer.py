"""
Drawer — side panel sliding in from an edge. A persistent drawer ignores
close requests; `force_close` always closes it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "drawer"


@dataclass
class Drawer(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    open: bool = False
    position: str = "left"
    size: str = "md"
    title: str = ""
    show_close: bool = True
    show_overlay: bool = True
    close_on_overlay: bool = True
    close_on_escape: bool = True
    persistent: bool = False
    styled: bool = field(default_factory=default_styled)

    def toggle(self) -> bool:
        if self.open:
            return self.close()
        self.open = True
        return True

    def show(self) -> None:
        self.open = True

    def close(self) -> bool:
        if self.persistent:
            return False
        self.open = False
        return True

    def force_close(self) -> None:
        self.open = False

    def overlay_click(self) -> bool:
        return self.close_on_overlay and self.close()

    def escape(self) -> bool:
        return self.close_on_escape and self.close()

    def is_left(self) -> bool:
        return self.position == "left"

    def is_right(self) -> bool:
        return self.position == "right"

    def is_top(self) -> bool:
        return self.position == "top"

    def is_bottom(self) -> bool:
        return self.position == "bottom"

    def is_horizontal(self) -> bool:
        return self.is_left() or self.is_right()

    def is_vertical(self) -> bool:
        return self.is_top() or self.is_bottom()

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda d, ctx: d.toggle(),
        "show": lambda d, ctx: d.show(),
        "close": lambda d, ctx: d.close(),
        "overlay": lambda d, ctx: d.overlay_click(),
        "escape": lambda d, ctx: d.escape(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "position": self.position,
            "size": self.size,
            "title": self.title,
            "show_close": self.show_close,
            "persistent": self.persistent,
            "show_overlay": self.show_overlay,
            "is_horizontal": self.is_horizontal(),
            "is_vertical": self.is_vertical(),
        })
        return ctx


def new(id: str, *options: Option) -> Drawer:
    return apply_options(Drawer(Identity(id, KIND)), options)
