"""
Tooltip — short text shown next to an element on hover, focus or click.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "tooltip"


@dataclass
class Tooltip(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    content: str = ""
    position: str = "top"
    trigger: str = "hover"
    visible: bool = False
    delay: int = 0
    hide_delay: int = 0
    arrow: bool = True
    max_width: str = "200px"
    styled: bool = field(default_factory=default_styled)

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def toggle(self) -> None:
        self.visible = not self.visible

    @property
    def side(self) -> str:
        return self.position.split("-", 1)[0]

    def is_top(self) -> bool:
        return self.side == "top"

    def is_bottom(self) -> bool:
        return self.side == "bottom"

    def is_left(self) -> bool:
        return self.side == "left"

    def is_right(self) -> bool:
        return self.side == "right"

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "show": lambda t, ctx: t.show(),
        "hide": lambda t, ctx: t.hide(),
        "toggle": lambda t, ctx: t.toggle(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "content": self.content,
            "position": self.position,
            "side": self.side,
            "trigger": self.trigger,
            "visible": self.visible,
            "delay": self.delay,
            "hide_delay": self.hide_delay,
            "arrow": self.arrow,
            "max_width": self.max_width,
        })
        return ctx


def new(id: str, content: str = "", *options: Option) -> Tooltip:
    return apply_options(Tooltip(Identity(id, KIND), content=content), options)
