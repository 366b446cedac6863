"""
Rating — star rating with optional half stars.

`set_value` clamps to [0, max_stars] and rounds half away from zero to a
whole star, or to the nearest half star when `allow_half` is set.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "rating"

STAR_FULL = "full"
STAR_HALF = "half"
STAR_EMPTY = "empty"


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def _format_number(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


@dataclass
class Rating(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    value: float = 0.0
    max_stars: int = 5
    allow_half: bool = False
    allow_clear: bool = False
    readonly: bool = False
    size: str = "md"
    color: str = "yellow"
    empty_color: str = "gray"
    hover_value: float = -1.0
    show_value: bool = False
    show_count: bool = False
    count: int = 0
    label: str = ""
    character: str = "★"
    styled: bool = field(default_factory=default_styled)

    def set_value(self, value: float) -> bool:
        if math.isnan(value):
            return False
        value = min(max(value, 0.0), float(self.max_stars))
        if self.allow_half:
            self.value = _round_half_up(value * 2) / 2
        else:
            self.value = _round_half_up(value)
        return True

    def clear(self) -> None:
        self.value = 0.0

    def click(self, star: int) -> bool:
        if self.readonly:
            return False
        if self.allow_clear and self.value == float(star):
            self.clear()
            return True
        return self.set_value(float(star))

    def click_half(self, star: int, first_half: bool) -> bool:
        if self.readonly:
            return False
        target = star - 0.5 if self.allow_half and first_half else float(star)
        if self.allow_clear and self.value == target:
            self.clear()
            return True
        return self.set_value(target)

    def hover(self, star: int, first_half: bool = False) -> bool:
        if self.readonly:
            return False
        self.hover_value = star - 0.5 if self.allow_half and first_half else float(star)
        return True

    def leave(self) -> None:
        self.hover_value = -1.0

    def display_value(self) -> float:
        return self.hover_value if self.hover_value >= 0 else self.value

    def star_state(self, star: int) -> str:
        shown = self.display_value()
        if shown >= star:
            return STAR_FULL
        if shown >= star - 0.5:
            return STAR_HALF
        return STAR_EMPTY

    def stars(self) -> list[int]:
        return list(range(1, self.max_stars + 1))

    def percentage(self) -> float:
        if self.max_stars <= 0:
            return 0.0
        return self.value / self.max_stars * 100

    def format_value(self) -> str:
        if self.allow_half and self.value != math.floor(self.value):
            return _format_number(self.value, 1)
        return _format_number(self.value, 0)

    def format_value_with_max(self) -> str:
        return f"{self.format_value()}/{self.max_stars}"

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "click": lambda r, ctx: (
            r.click_half(ctx.data_int("star"), ctx.data_bool("half")) if ctx.has_data("half")
            else r.click(ctx.data_int("star"))
        ),
        "hover": lambda r, ctx: r.hover(ctx.data_int("star"), ctx.data_bool("half")),
        "leave": lambda r, ctx: r.leave(),
        "clear": lambda r, ctx: r.clear() if not r.readonly else False,
        "set": lambda r, ctx: r.set_value(ctx.data_float("value")) if not r.readonly else False,
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "value": self.value,
            "max_stars": self.max_stars,
            "readonly": self.readonly,
            "size": self.size,
            "color": self.color,
            "character": self.character,
            "label": self.label,
            "show_value": self.show_value,
            "show_count": self.show_count,
            "count": self.count,
            "formatted_value": self.format_value(),
            "formatted_value_with_max": self.format_value_with_max(),
            "percentage": self.percentage(),
            "stars": [
                {"index": star, "state": self.star_state(star),
                 "is_full": self.star_state(star) == STAR_FULL,
                 "is_half": self.star_state(star) == STAR_HALF}
                for star in self.stars()
            ],
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, *options: Option) -> Rating:
    return apply_options(Rating(Identity(id, KIND)), options)


def new_readonly(id: str, value: float, *options: Option) -> Rating:
    rating = new(id, *options)
    rating.set_value(value)
    rating.readonly = True
    return rating


def with_value(value: float) -> Option:
    return lambda rating: rating.set_value(value)


def with_max_stars(max_stars: int) -> Option:
    def apply(rating: Rating) -> None:
        if max_stars > 0:
            rating.max_stars = max_stars
            rating.value = min(rating.value, float(max_stars))

    return apply
