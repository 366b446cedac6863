"""
livecomponents Kernel — Searchable selection

Shared list algorithms for dropdown, autocomplete, menu and tags:
case-insensitive filtering, highlight stepping over disabled entries, and
multi-select toggling bounded by a capacity.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_FIELDS: tuple[str, ...] = ("label", "value", "description")


def matches(item: Any, query: str, fields: Sequence[str] = DEFAULT_FIELDS) -> bool:
    needle = query.lower()
    for name in fields:
        text = getattr(item, name, "") or ""
        if needle in str(text).lower():
            return True
    return False


def filter_items(
    items: Sequence[T],
    query: str,
    fields: Sequence[str] = DEFAULT_FIELDS,
    limit: int = 0,
) -> list[T]:
    """
    Items whose fields contain `query`, in original order.
    Empty query returns every item. `limit > 0` caps the result.
    """
    if query:
        result = [item for item in items if matches(item, query, fields)]
    else:
        result = list(items)
    if limit > 0:
        return result[:limit]
    return result


def step_highlight(
    items: Sequence[Any],
    index: int,
    step: int,
    is_disabled: Callable[[Any], bool] = lambda item: bool(getattr(item, "disabled", False)),
) -> int:
    """
    Move a highlight cursor by `step` (±1), wrapping and skipping disabled
    items. The search is bounded by the list length; if nothing is enabled
    the cursor stays where it was.
    """
    count = len(items)
    if count == 0:
        return index
    current = index
    if current < 0 or current >= count:
        current = -1 if step > 0 else count
    for _ in range(count):
        current = (current + step) % count
        if not is_disabled(items[current]):
            return current
    return index


def toggle_with_capacity(
    selected: list[T],
    item: T,
    max_selections: int,
    key: Callable[[T], Any] = lambda item: item,
) -> bool:
    """
    Remove `item` if present, otherwise append it when capacity allows.
    Returns False only when the add was refused for capacity.
    """
    wanted = key(item)
    for position, existing in enumerate(selected):
        if key(existing) == wanted:
            del selected[position]
            return True
    if max_selections > 0 and len(selected) >= max_selections:
        return False
    selected.append(item)
    return True
