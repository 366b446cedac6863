"""
Modal — dialog overlay, confirmation dialog and edge-anchored sheet.

Overlay clicks and the escape key close a modal only when the matching
flag allows it; the handler reports a refusal otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "modal"

RESULT_CONFIRMED = "confirmed"
RESULT_CANCELLED = "cancelled"


@dataclass
class Modal(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    open: bool = False
    title: str = ""
    size: str = "md"
    show_close: bool = True
    close_on_overlay: bool = True
    close_on_escape: bool = True
    centered: bool = True
    scrollable: bool = False
    styled: bool = field(default_factory=default_styled)

    def show(self) -> None:
        self.open = True

    def hide(self) -> None:
        self.open = False

    def toggle(self) -> None:
        self.open = not self.open

    def overlay_click(self) -> bool:
        if not self.close_on_overlay:
            return False
        self.hide()
        return True

    def escape(self) -> bool:
        if not self.close_on_escape:
            return False
        self.hide()
        return True

    def has_title(self) -> bool:
        return bool(self.title)

    def has_header(self) -> bool:
        return self.has_title() or self.show_close

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "show": lambda m, ctx: m.show(),
        "hide": lambda m, ctx: m.hide(),
        "toggle": lambda m, ctx: m.toggle(),
        "overlay": lambda m, ctx: m.overlay_click(),
        "escape": lambda m, ctx: m.escape(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "title": self.title,
            "has_title": self.has_title(),
            "has_header": self.has_header(),
            "size": self.size,
            "show_close": self.show_close,
            "centered": self.centered,
            "scrollable": self.scrollable,
        })
        return ctx


@dataclass
class ConfirmModal(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "confirm"

    identity: Identity
    open: bool = False
    title: str = ""
    message: str = ""
    confirm_text: str = "Confirm"
    cancel_text: str = "Cancel"
    destructive: bool = False
    icon: str = "warning"
    result: str = ""
    styled: bool = field(default_factory=default_styled)

    def show(self) -> None:
        self.result = ""
        self.open = True

    def hide(self) -> None:
        self.open = False

    def confirm(self) -> bool:
        if not self.open:
            return False
        self.result = RESULT_CONFIRMED
        self.hide()
        return True

    def cancel(self) -> None:
        self.result = RESULT_CANCELLED
        self.hide()

    @property
    def confirmed(self) -> bool:
        return self.result == RESULT_CONFIRMED

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "show": lambda m, ctx: m.show(),
        "hide": lambda m, ctx: m.hide(),
        "confirm": lambda m, ctx: m.confirm(),
        "cancel": lambda m, ctx: m.cancel(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "title": self.title,
            "message": self.message,
            "confirm_text": self.confirm_text,
            "cancel_text": self.cancel_text,
            "destructive": self.destructive,
            "icon": self.icon,
        })
        return ctx


@dataclass
class SheetModal(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "sheet"

    identity: Identity
    open: bool = False
    title: str = ""
    position: str = "right"
    size: str = "md"
    show_close: bool = True
    close_on_overlay: bool = True
    styled: bool = field(default_factory=default_styled)

    def show(self) -> None:
        self.open = True

    def hide(self) -> None:
        self.open = False

    def toggle(self) -> None:
        self.open = not self.open

    def overlay_click(self) -> bool:
        if not self.close_on_overlay:
            return False
        self.hide()
        return True

    def is_horizontal(self) -> bool:
        return self.position in ("left", "right")

    def is_vertical(self) -> bool:
        return self.position in ("top", "bottom")

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "show": lambda m, ctx: m.show(),
        "hide": lambda m, ctx: m.hide(),
        "toggle": lambda m, ctx: m.toggle(),
        "overlay": lambda m, ctx: m.overlay_click(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "title": self.title,
            "position": self.position,
            "size": self.size,
            "show_close": self.show_close,
            "is_horizontal": self.is_horizontal(),
            "is_vertical": self.is_vertical(),
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def new(id: str, *options: Option) -> Modal:
    return apply_options(Modal(Identity(id, KIND)), options)


def new_confirm(id: str, *options: Option) -> ConfirmModal:
    return apply_options(ConfirmModal(Identity(id, KIND)), options)


def new_sheet(id: str, *options: Option) -> SheetModal:
    return apply_options(SheetModal(Identity(id, KIND)), options)
