"""
TagsInput — free-text chips with a capacity and duplicate control.

Tags are trimmed before adding; blanks, duplicates (unless allowed) and
adds beyond `max_tags` (0 = unlimited) are refused. Typing a separator
commits every piece of the input as a tag.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "tagsinput"


@dataclass
class Tag:
    value: str
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.value

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class TagsInput(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    tags: list[Tag] = field(default_factory=list)
    input: str = ""
    placeholder: str = "Add tag..."
    max_tags: int = 0
    allow_duplicates: bool = False
    separators: list[str] = field(default_factory=lambda: [","])
    suggestions: list[str] = field(default_factory=list)
    show_suggestions: bool = False
    styled: bool = field(default_factory=default_styled)

    def has_tag(self, value: str) -> bool:
        return any(tag.value == value for tag in self.tags)

    def can_add_more(self) -> bool:
        return self.max_tags <= 0 or len(self.tags) < self.max_tags

    def add_tag(self, value: str) -> bool:
        value = value.strip()
        if not value or not self.can_add_more():
            return False
        if not self.allow_duplicates and self.has_tag(value):
            return False
        self.tags.append(Tag(value=value))
        self.input = ""
        return True

    def remove_tag(self, value: str) -> bool:
        for position, tag in enumerate(self.tags):
            if tag.value == value:
                del self.tags[position]
                return True
        return False

    def remove_tag_at(self, index: int) -> bool:
        if not 0 <= index < len(self.tags):
            return False
        del self.tags[index]
        return True

    def remove_last(self) -> bool:
        if not self.tags:
            return False
        self.tags.pop()
        return True

    def clear(self) -> None:
        self.tags = []
        self.input = ""

    def set_input(self, value: str) -> None:
        self.input = value
        for separator in self.separators:
            if separator and separator in value:
                for part in value.split(separator):
                    self.add_tag(part)
                return

    def values(self) -> list[str]:
        return [tag.value for tag in self.tags]

    def count(self) -> int:
        return len(self.tags)

    def is_empty(self) -> bool:
        return not self.tags

    def filtered_suggestions(self) -> list[str]:
        """Suggestions starting with the current input, minus existing tags."""
        if not self.input or not self.suggestions:
            return []
        prefix = self.input.lower()
        return [
            s for s in self.suggestions
            if not self.has_tag(s) and s.lower().startswith(prefix)
        ]

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "add": lambda t, ctx: t.add_tag(ctx.data("value") if ctx.has_data("value") else t.input),
        "remove": lambda t, ctx: t.remove_tag(ctx.data("value")),
        "remove_at": lambda t, ctx: t.remove_tag_at(ctx.data_int("index")),
        "remove_last": lambda t, ctx: t.remove_last(),
        "clear": lambda t, ctx: t.clear(),
        "input": lambda t, ctx: t.set_input(ctx.data("value")),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        suggestions = self.filtered_suggestions()
        ctx.update({
            "tags": [{**tag.to_dict(), "index": i} for i, tag in enumerate(self.tags)],
            "input": self.input,
            "placeholder": self.placeholder,
            "count": self.count(),
            "max_tags": self.max_tags,
            "can_add_more": self.can_add_more(),
            "suggestions": suggestions,
            "show_suggestions": self.show_suggestions and bool(suggestions),
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, *options: Option) -> TagsInput:
    return apply_options(TagsInput(Identity(id, KIND)), options)


def with_tags(*values: str) -> Option:
    """Seed tags directly; capacity and duplicate checks do not apply."""

    def apply(tags: TagsInput) -> None:
        tags.tags.extend(Tag(value=value) for value in values)

    return apply


def with_separators(*separators: str) -> Option:
    def apply(tags: TagsInput) -> None:
        tags.separators = list(separators)

    return apply


def with_suggestions(*suggestions: str) -> Option:
    def apply(tags: TagsInput) -> None:
        tags.suggestions = list(suggestions)
        tags.show_suggestions = True

    return apply
