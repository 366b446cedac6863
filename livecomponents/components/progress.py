"""
Progress — linear bar, circular ring and indeterminate spinner.

The displayed percentage is clamped to [0, 100] and is 0 when `max` is not
positive. Increment and decrement keep `value` inside [0, max] and refuse
non-finite amounts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "progress"


@dataclass
class Progress(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    value: float = 0.0
    max: float = 100.0
    size: str = "md"
    color: str = "primary"
    show_label: bool = False
    label: str = ""
    striped: bool = False
    animated: bool = False
    indeterminate: bool = False
    styled: bool = field(default_factory=default_styled)

    def percentage(self) -> float:
        if self.max <= 0:
            return 0.0
        return min(max(self.value / self.max * 100, 0.0), 100.0)

    def percentage_str(self) -> str:
        return f"{self.percentage():.0f}%"

    def display_label(self) -> str:
        return self.label or self.percentage_str()

    def set_value(self, value: float) -> bool:
        if math.isnan(value):
            return False
        self.value = value
        return True

    def increment(self, amount: float = 1.0) -> bool:
        if not math.isfinite(amount):
            return False
        self.value = min(self.value + amount, self.max)
        return True

    def decrement(self, amount: float = 1.0) -> bool:
        if not math.isfinite(amount):
            return False
        self.value = max(self.value - amount, 0.0)
        return True

    def reset(self) -> None:
        self.value = 0.0

    def complete(self) -> None:
        self.value = self.max

    def is_complete(self) -> bool:
        return self.value >= self.max

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "set": lambda p, ctx: p.set_value(ctx.data_float("value")),
        "increment": lambda p, ctx: p.increment(ctx.data_float("amount") if ctx.has_data("amount") else 1.0),
        "decrement": lambda p, ctx: p.decrement(ctx.data_float("amount") if ctx.has_data("amount") else 1.0),
        "reset": lambda p, ctx: p.reset(),
        "complete": lambda p, ctx: p.complete(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "value": self.value,
            "max": self.max,
            "size": self.size,
            "color": self.color,
            "percentage": self.percentage(),
            "percentage_str": self.percentage_str(),
            "show_label": self.show_label,
            "display_label": self.display_label(),
            "striped": self.striped,
            "animated": self.animated,
            "indeterminate": self.indeterminate,
            "is_complete": self.is_complete(),
        })
        return ctx


@dataclass
class CircularProgress(Progress):
    TEMPLATE: ClassVar[str] = "circular"

    size: int = 48
    stroke_width: int = 4

    def radius(self) -> int:
        return (self.size - self.stroke_width) // 2

    def circumference(self) -> float:
        return 2 * math.pi * self.radius()

    def dash_offset(self) -> float:
        return self.circumference() * (1 - self.percentage() / 100)

    def center(self) -> int:
        return self.size // 2

    def to_context(self) -> dict[str, Any]:
        ctx = super().to_context()
        ctx.update({
            "stroke_width": self.stroke_width,
            "radius": self.radius(),
            "center": self.center(),
            "circumference": round(self.circumference(), 2),
            "dash_offset": round(self.dash_offset(), 2),
        })
        return ctx


@dataclass
class Spinner(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "spinner"

    identity: Identity
    size: str = "md"
    color: str = "primary"
    label: str = "Loading..."
    styled: bool = field(default_factory=default_styled)

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({"size": self.size, "color": self.color, "label": self.label})
        return ctx


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def new(id: str, *options: Option) -> Progress:
    return apply_options(Progress(Identity(id, KIND)), options)


def new_circular(id: str, *options: Option) -> CircularProgress:
    return apply_options(CircularProgress(Identity(id, KIND)), options)


def new_spinner(id: str, *options: Option) -> Spinner:
    return apply_options(Spinner(Identity(id, KIND)), options)
