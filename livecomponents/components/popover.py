"""
Popover — rich floating panel anchored to a trigger element.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "popover"

TRIGGER_CLICK = "click"
TRIGGER_HOVER = "hover"
TRIGGER_FOCUS = "focus"


@dataclass
class Popover(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    title: str = ""
    content: str = ""
    position: str = "bottom"
    trigger: str = TRIGGER_CLICK
    open: bool = False
    arrow: bool = True
    close_on_click_away: bool = True
    show_close: bool = False
    width: str = "280px"
    styled: bool = field(default_factory=default_styled)

    def show(self) -> None:
        self.open = True

    def hide(self) -> None:
        self.open = False

    def toggle(self) -> None:
        self.open = not self.open

    def click_away(self) -> bool:
        if not self.close_on_click_away:
            return False
        self.hide()
        return True

    @property
    def side(self) -> str:
        """Position without its alignment suffix: "top-start" is "top"."""
        return self.position.split("-", 1)[0]

    def is_top(self) -> bool:
        return self.side == "top"

    def is_bottom(self) -> bool:
        return self.side == "bottom"

    def is_left(self) -> bool:
        return self.side == "left"

    def is_right(self) -> bool:
        return self.side == "right"

    def is_click_trigger(self) -> bool:
        return self.trigger == TRIGGER_CLICK

    def is_hover_trigger(self) -> bool:
        return self.trigger == TRIGGER_HOVER

    def is_focus_trigger(self) -> bool:
        return self.trigger == TRIGGER_FOCUS

    def has_header(self) -> bool:
        return bool(self.title) or self.show_close

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "show": lambda p, ctx: p.show(),
        "hide": lambda p, ctx: p.hide(),
        "toggle": lambda p, ctx: p.toggle(),
        "click_away": lambda p, ctx: p.click_away(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "title": self.title,
            "content": self.content,
            "position": self.position,
            "side": self.side,
            "trigger": self.trigger,
            "open": self.open,
            "arrow": self.arrow,
            "show_close": self.show_close,
            "has_header": self.has_header(),
            "width": self.width,
            "is_click_trigger": self.is_click_trigger(),
            "is_hover_trigger": self.is_hover_trigger(),
            "is_focus_trigger": self.is_focus_trigger(),
        })
        return ctx


def new(id: str, *options: Option) -> Popover:
    return apply_options(Popover(Identity(id, KIND)), options)
