"""
Toggle — on/off switch and checkbox with an indeterminate state.

Every state change is refused while the control is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "toggle"


@dataclass
class Toggle(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    checked: bool = False
    disabled: bool = False
    label: str = ""
    label_position: str = "right"
    size: str = "md"
    name: str = ""
    value: str = "on"
    required: bool = False
    description: str = ""
    styled: bool = field(default_factory=default_styled)

    def toggle(self) -> bool:
        if self.disabled:
            return False
        self.checked = not self.checked
        return True

    def check(self) -> bool:
        return self.set_checked(True)

    def uncheck(self) -> bool:
        return self.set_checked(False)

    def set_checked(self, checked: bool) -> bool:
        if self.disabled:
            return False
        self.checked = checked
        return True

    def is_on(self) -> bool:
        return self.checked

    def is_off(self) -> bool:
        return not self.checked

    def is_label_left(self) -> bool:
        return self.label_position == "left"

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda t, ctx: t.toggle(),
        "check": lambda t, ctx: t.check(),
        "uncheck": lambda t, ctx: t.uncheck(),
        "set": lambda t, ctx: t.set_checked(ctx.data_bool("checked")),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "checked": self.checked,
            "disabled": self.disabled,
            "label": self.label,
            "has_label": bool(self.label),
            "label_position": self.label_position,
            "is_label_left": self.is_label_left(),
            "size": self.size,
            "name": self.name or self.id,
            "value": self.value,
            "required": self.required,
            "description": self.description,
            "has_description": bool(self.description),
        })
        return ctx


@dataclass
class Checkbox(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "checkbox"

    identity: Identity
    checked: bool = False
    indeterminate: bool = False
    disabled: bool = False
    label: str = ""
    name: str = ""
    value: str = "on"
    required: bool = False
    description: str = ""
    styled: bool = field(default_factory=default_styled)

    def toggle(self) -> bool:
        return self.set_checked(not self.checked)

    def check(self) -> bool:
        return self.set_checked(True)

    def uncheck(self) -> bool:
        return self.set_checked(False)

    def set_checked(self, checked: bool) -> bool:
        if self.disabled:
            return False
        self.checked = checked
        self.indeterminate = False
        return True

    def set_indeterminate(self, indeterminate: bool) -> None:
        self.indeterminate = indeterminate
        if indeterminate:
            self.checked = False

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda c, ctx: c.toggle(),
        "check": lambda c, ctx: c.check(),
        "uncheck": lambda c, ctx: c.uncheck(),
        "set": lambda c, ctx: c.set_checked(ctx.data_bool("checked")),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "checked": self.checked,
            "indeterminate": self.indeterminate,
            "disabled": self.disabled,
            "label": self.label,
            "has_label": bool(self.label),
            "name": self.name or self.id,
            "value": self.value,
            "required": self.required,
            "description": self.description,
            "has_description": bool(self.description),
        })
        return ctx


def new(id: str, *options: Option) -> Toggle:
    return apply_options(Toggle(Identity(id, KIND)), options)


def new_checkbox(id: str, *options: Option) -> Checkbox:
    return apply_options(Checkbox(Identity(id, KIND)), options)


def with_checked(checked: bool = True) -> Option:
    def apply(control: Toggle | Checkbox) -> None:
        control.checked = checked

    return apply


def with_label(label: str) -> Option:
    def apply(control: Toggle | Checkbox) -> None:
        control.label = label

    return apply
