"""
Timeline — ordered list of events with a status per entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Identity, Option, apply_options

KIND = "timeline"

STATUS_DEFAULT = "default"
STATUS_PENDING = "pending"
STATUS_ACTIVE = "active"
STATUS_COMPLETE = "complete"
STATUS_ERROR = "error"


@dataclass
class TimelineItem:
    id: str
    title: str = ""
    description: str = ""
    time: str = ""
    icon: str = ""
    status: str = STATUS_DEFAULT
    color: str = "gray"

    def is_pending(self) -> bool:
        return self.status == STATUS_PENDING

    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    def is_complete(self) -> bool:
        return self.status == STATUS_COMPLETE

    def is_error(self) -> bool:
        return self.status == STATUS_ERROR

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "time": self.time,
            "icon": self.icon,
            "status": self.status,
            "color": self.color,
            "is_pending": self.is_pending(),
            "is_active": self.is_active(),
            "is_complete": self.is_complete(),
            "is_error": self.is_error(),
        }


@dataclass
class Timeline(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    items: list[TimelineItem] = field(default_factory=list)
    orientation: str = "vertical"
    position: str = "left"
    show_connectors: bool = True
    reverse: bool = False
    styled: bool = field(default_factory=default_styled)

    def add_item(self, item: TimelineItem) -> None:
        self.items.append(item)

    def remove_item(self, item_id: str) -> bool:
        before = len(self.items)
        self.items = [item for item in self.items if item.id != item_id]
        return len(self.items) != before

    def get_item(self, item_id: str) -> TimelineItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def has_items(self) -> bool:
        return bool(self.items)

    def item_count(self) -> int:
        return len(self.items)

    def is_vertical(self) -> bool:
        return self.orientation == "vertical"

    def is_alternate(self) -> bool:
        return self.position == "alternate"

    def ordered_items(self) -> list[TimelineItem]:
        return list(reversed(self.items)) if self.reverse else list(self.items)

    def to_context(self) -> dict[str, Any]:
        ordered = self.ordered_items()
        ctx = self.base_context()
        ctx.update({
            "orientation": self.orientation,
            "is_vertical": self.is_vertical(),
            "position": self.position,
            "show_connectors": self.show_connectors,
            "items": [
                {
                    **item.to_dict(),
                    "side": ("left" if i % 2 == 0 else "right") if self.is_alternate() else self.position,
                    "has_connector": self.show_connectors and i < len(ordered) - 1,
                }
                for i, item in enumerate(ordered)
            ],
        })
        return ctx


def new(id: str, items: list[TimelineItem] | None = None, *options: Option) -> Timeline:
    return apply_options(Timeline(Identity(id, KIND), items=list(items or [])), options)
