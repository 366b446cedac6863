"""
Accordion — collapsible sections.

Multi-open by default; `new_single` keeps at most one section open.
Disabled sections ignore toggle and open.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "accordion"


@dataclass
class AccordionItem:
    id: str
    title: str = ""
    content: str = ""
    disabled: bool = False
    icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Accordion(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    items: list[AccordionItem] = field(default_factory=list)
    open_ids: set[str] = field(default_factory=set)
    allow_multiple: bool = True
    styled: bool = field(default_factory=default_styled)

    def get_item(self, item_id: str) -> AccordionItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def _is_disabled(self, item_id: str) -> bool:
        item = self.get_item(item_id)
        return item is not None and item.disabled

    def is_open(self, item_id: str) -> bool:
        return item_id in self.open_ids

    def toggle(self, item_id: str) -> bool:
        if self._is_disabled(item_id):
            return False
        if self.is_open(item_id):
            self.open_ids.discard(item_id)
        else:
            self.open(item_id)
        return True

    def open(self, item_id: str) -> bool:
        if self._is_disabled(item_id):
            return False
        if not self.allow_multiple:
            self.open_ids.clear()
        self.open_ids.add(item_id)
        return True

    def close(self, item_id: str) -> None:
        self.open_ids.discard(item_id)

    def open_all(self) -> None:
        for item in self.items:
            if not item.disabled:
                self.open_ids.add(item.id)

    def close_all(self) -> None:
        self.open_ids.clear()

    def open_count(self) -> int:
        return len(self.open_ids)

    def item_count(self) -> int:
        return len(self.items)

    def add_item(self, item: AccordionItem) -> None:
        self.items.append(item)

    def remove_item(self, item_id: str) -> bool:
        for position, item in enumerate(self.items):
            if item.id == item_id:
                del self.items[position]
                self.open_ids.discard(item_id)
                return True
        return False

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda a, ctx: a.toggle(ctx.data("id")),
        "open": lambda a, ctx: a.open(ctx.data("id")),
        "close": lambda a, ctx: a.close(ctx.data("id")),
        "open_all": lambda a, ctx: a.open_all(),
        "close_all": lambda a, ctx: a.close_all(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "allow_multiple": self.allow_multiple,
            "open_count": self.open_count(),
            "items": [
                {**item.to_dict(), "is_open": self.is_open(item.id)}
                for item in self.items
            ],
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, items: list[AccordionItem] | None = None, *options: Option) -> Accordion:
    return apply_options(Accordion(Identity(id, KIND), items=list(items or [])), options)


def new_single(id: str, items: list[AccordionItem] | None = None, *options: Option) -> Accordion:
    accordion = new(id, items, *options)
    accordion.allow_multiple = False
    return accordion


def with_open(*item_ids: str) -> Option:
    def apply(accordion: Accordion) -> None:
        for item_id in item_ids:
            accordion.open(item_id)

    return apply


def with_all_open() -> Option:
    return lambda accordion: accordion.open_all()
