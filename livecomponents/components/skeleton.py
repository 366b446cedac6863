"""
Skeleton — loading placeholders: generic block or text lines, avatar, card.
No actions; these only render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Identity, Option, apply_options

KIND = "skeleton"

SHAPE_RECTANGLE = "rectangle"
SHAPE_CIRCLE = "circle"
SHAPE_ROUNDED = "rounded"


@dataclass
class Skeleton(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    width: str = "100%"
    height: str = "16px"
    shape: str = SHAPE_RECTANGLE
    animation: str = "pulse"
    lines: int = 1
    line_height: str = "24px"
    styled: bool = field(default_factory=default_styled)

    def is_circle(self) -> bool:
        return self.shape == SHAPE_CIRCLE

    def is_rounded(self) -> bool:
        return self.shape == SHAPE_ROUNDED

    def is_multi_line(self) -> bool:
        return self.lines > 1

    def line_indices(self) -> list[int]:
        return list(range(max(self.lines, 0)))

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "width": self.width,
            "height": self.height,
            "shape": self.shape,
            "animation": self.animation,
            "is_circle": self.is_circle(),
            "is_multi_line": self.is_multi_line(),
            "line_height": self.line_height,
            # The last line of a paragraph placeholder is drawn shorter.
            "lines": [
                {"index": i, "is_last": i == self.lines - 1}
                for i in self.line_indices()
            ],
        })
        return ctx


@dataclass
class AvatarSkeleton(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "avatar"

    identity: Identity
    size: str = "md"
    show_badge: bool = False
    styled: bool = field(default_factory=default_styled)

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({"size": self.size, "show_badge": self.show_badge})
        return ctx


@dataclass
class CardSkeleton(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "card"

    identity: Identity
    show_image: bool = True
    image_height: str = "200px"
    show_title: bool = True
    show_description: bool = True
    description_lines: int = 3
    show_footer: bool = False
    styled: bool = field(default_factory=default_styled)

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "show_image": self.show_image,
            "image_height": self.image_height,
            "show_title": self.show_title,
            "show_description": self.show_description,
            "description_lines": [{"index": i} for i in range(max(self.description_lines, 0))],
            "show_footer": self.show_footer,
        })
        return ctx


def new(id: str, *options: Option) -> Skeleton:
    return apply_options(Skeleton(Identity(id, KIND)), options)


def new_avatar(id: str, *options: Option) -> AvatarSkeleton:
    return apply_options(AvatarSkeleton(Identity(id, KIND)), options)


def new_card(id: str, *options: Option) -> CardSkeleton:
    return apply_options(CardSkeleton(Identity(id, KIND)), options)
