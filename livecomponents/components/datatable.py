"""
DataTable — sortable, filterable, paginated rows with optional selection.

Derived rows are computed in one place, `filtered_rows()`: filter first,
then sort. The result is cached until a mutation changes the filter, the
sort or the data. Every mutation that can shrink the row count clamps the
page so `page < total_pages()` always holds.

Pages are 0-based internally. `start_index()`/`end_index()` are the
1-based display bounds of the current page.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from numbers import Number
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.pagination import clamp_page, page_bounds, total_pages
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "datatable"

SORT_NONE = "none"
SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_DIRECTIONS: set[str] = {SORT_NONE, SORT_ASC, SORT_DESC}

FORMAT_NUMBER = "number"
FORMAT_CURRENCY = "currency"
FORMAT_DATE = "date"


@dataclass
class Column:
    id: str
    label: str = ""
    sortable: bool = False
    filterable: bool = False
    width: str = ""
    align: str = ""
    hidden: bool = False
    format: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.id

    def display(self, value: Any) -> str:
        """
        Cell text. `format` is a hint ("number", "currency", "date") or a
        str.format pattern; values it does not fit are shown as plain text.
        """
        if value is None:
            return ""
        if self.format == FORMAT_NUMBER and _is_number(value):
            return f"{value:,}"
        if self.format == FORMAT_CURRENCY and _is_number(value):
            return f"{value:,.2f}"
        if self.format == FORMAT_DATE and isinstance(value, (date, datetime)):
            return value.strftime("%Y-%m-%d")
        if "{" in self.format:
            try:
                return self.format.format(value)
            except (ValueError, TypeError, IndexError, KeyError):
                return str(value)
        return str(value)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Row:
    id: str
    data: dict[str, Any] = field(default_factory=dict)
    disabled: bool = False

    def cell(self, column_id: str) -> Any:
        return self.data.get(column_id)

    def cell_string(self, column_id: str) -> str:
        value = self.cell(column_id)
        return "" if value is None else str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, (bool, complex))


def _sort_key(value: Any) -> tuple[int, Any]:
    # Numbers sort before text; text compares case-insensitively.
    if isinstance(value, Number) and not isinstance(value, complex):
        return (0, value)
    return (1, str(value).lower())


@dataclass
class DataTable(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    columns: list[Column] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)
    sort_column: str = ""
    sort_direction: str = SORT_NONE
    filter_value: str = ""
    filter_column: str = ""
    page: int = 0
    page_size: int = 0
    selectable: bool = False
    multi_select: bool = False
    selected_ids: set[str] = field(default_factory=set)
    striped: bool = True
    hoverable: bool = True
    bordered: bool = False
    compact: bool = False
    loading: bool = False
    empty_message: str = "No data available"
    styled: bool = field(default_factory=default_styled)
    _rows_cache: list[Row] | None = field(default=None, init=False, repr=False, compare=False)

    def _invalidate(self) -> None:
        self._rows_cache = None

    def _clamp(self) -> None:
        self.page = clamp_page(self.page, self.total_pages())

    # -- columns ------------------------------------------------------------

    def get_column(self, column_id: str) -> Column | None:
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def visible_columns(self) -> list[Column]:
        return [column for column in self.columns if not column.hidden]

    def show_column(self, column_id: str) -> bool:
        column = self.get_column(column_id)
        if column is None:
            return False
        column.hidden = False
        self._invalidate()
        self._clamp()
        return True

    def hide_column(self, column_id: str) -> bool:
        column = self.get_column(column_id)
        if column is None:
            return False
        column.hidden = True
        self._invalidate()
        self._clamp()
        return True

    # -- sort ---------------------------------------------------------------

    def sort(self, column_id: str) -> None:
        if self.sort_column == column_id and self.sort_direction == SORT_ASC:
            self.sort_direction = SORT_DESC
        else:
            self.sort_column = column_id
            self.sort_direction = SORT_ASC
        self._invalidate()

    def clear_sort(self) -> None:
        self.sort_column = ""
        self.sort_direction = SORT_NONE
        self._invalidate()

    def is_sorted_by(self, column_id: str) -> bool:
        return self.sort_column == column_id and self.sort_direction != SORT_NONE

    def is_sorted_asc(self, column_id: str) -> bool:
        return self.sort_column == column_id and self.sort_direction == SORT_ASC

    def is_sorted_desc(self, column_id: str) -> bool:
        return self.sort_column == column_id and self.sort_direction == SORT_DESC

    # -- filter -------------------------------------------------------------

    def set_filter(self, value: str, column_id: str | None = None) -> None:
        self.filter_value = value
        if column_id is not None:
            self.filter_column = column_id
        self.page = 0
        self._invalidate()

    def clear_filter(self) -> None:
        self.filter_value = ""
        self.filter_column = ""
        self.page = 0
        self._invalidate()

    def _filter_columns(self) -> list[str] | None:
        if self.filter_column:
            return [self.filter_column]
        visible = self.visible_columns()
        if not visible:
            return None
        filterable = [column.id for column in visible if column.filterable]
        return filterable or [column.id for column in visible]

    def _matches(self, row: Row, needle: str, column_ids: list[str] | None) -> bool:
        if column_ids is None:
            values = [v for v in row.data.values() if v is not None]
            return any(needle in str(v).lower() for v in values)
        return any(needle in row.cell_string(column_id).lower() for column_id in column_ids)

    # -- derived rows -------------------------------------------------------

    def filtered_rows(self) -> list[Row]:
        if self._rows_cache is not None:
            return self._rows_cache

        rows = list(self.rows)
        if self.filter_value:
            needle = self.filter_value.lower()
            column_ids = self._filter_columns()
            rows = [row for row in rows if self._matches(row, needle, column_ids)]

        if self.sort_column and self.sort_direction != SORT_NONE:
            present = [row for row in rows if row.cell(self.sort_column) is not None]
            missing = [row for row in rows if row.cell(self.sort_column) is None]
            present.sort(
                key=lambda row: _sort_key(row.cell(self.sort_column)),
                reverse=self.sort_direction == SORT_DESC,
            )
            rows = present + missing

        self._rows_cache = rows
        return rows

    def total_rows(self) -> int:
        return len(self.filtered_rows())

    def is_empty(self) -> bool:
        return self.total_rows() == 0

    def page_rows(self) -> list[Row]:
        rows = self.filtered_rows()
        start, end = page_bounds(self.page, self.page_size, len(rows))
        return rows[start:end]

    # -- pagination ---------------------------------------------------------

    def total_pages(self) -> int:
        return total_pages(self.total_rows(), self.page_size)

    def has_next_page(self) -> bool:
        return self.page < self.total_pages() - 1

    def has_previous_page(self) -> bool:
        return self.page > 0

    def next_page(self) -> bool:
        if not self.has_next_page():
            return False
        self.page += 1
        return True

    def previous_page(self) -> bool:
        if not self.has_previous_page():
            return False
        self.page -= 1
        return True

    def go_to_page(self, page: int) -> bool:
        if not 0 <= page < self.total_pages():
            return False
        self.page = page
        return True

    def first_page(self) -> None:
        self.page = 0

    def last_page(self) -> None:
        self.page = max(self.total_pages() - 1, 0)

    def set_page_size(self, size: int) -> None:
        self.page_size = max(size, 0)
        self._clamp()

    def start_index(self) -> int:
        if self.page_size <= 0:
            return 1
        return self.page * self.page_size + 1

    def end_index(self) -> int:
        total = self.total_rows()
        if self.page_size <= 0:
            return total
        return min((self.page + 1) * self.page_size, total)

    def page_info(self) -> str:
        total = self.total_rows()
        if total == 0:
            return "No results"
        if self.page_size <= 0:
            return ""
        return f"Showing {self.start_index()}-{self.end_index()} of {total}"

    def page_numbers(self) -> list[int]:
        return list(range(self.total_pages()))

    # -- selection ----------------------------------------------------------

    def get_row(self, row_id: str) -> Row | None:
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    def select_row(self, row_id: str) -> bool:
        row = self.get_row(row_id)
        if not self.selectable or row is None or row.disabled:
            return False
        if not self.multi_select:
            self.selected_ids.clear()
        self.selected_ids.add(row_id)
        return True

    def deselect_row(self, row_id: str) -> None:
        self.selected_ids.discard(row_id)

    def toggle_row_selection(self, row_id: str) -> bool:
        if row_id in self.selected_ids:
            self.deselect_row(row_id)
            return True
        return self.select_row(row_id)

    def select_all(self) -> bool:
        if not self.selectable or not self.multi_select:
            return False
        for row in self.rows:
            if not row.disabled:
                self.selected_ids.add(row.id)
        return True

    def deselect_all(self) -> None:
        self.selected_ids.clear()

    def is_row_selected(self, row_id: str) -> bool:
        return row_id in self.selected_ids

    def selected_count(self) -> int:
        return len(self.selected_ids)

    def has_selection(self) -> bool:
        return bool(self.selected_ids)

    def all_selected(self) -> bool:
        if not self.rows:
            return False
        selectable = {row.id for row in self.rows if not row.disabled}
        return bool(selectable) and selectable <= self.selected_ids

    def selected_rows(self) -> list[Row]:
        return [row for row in self.rows if row.id in self.selected_ids]

    # -- data ---------------------------------------------------------------

    def set_data(self, rows: list[Row]) -> None:
        self.rows = list(rows)
        self.selected_ids.clear()
        self._invalidate()
        self._clamp()

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "sort": lambda t, ctx: t.sort(ctx.data("column")),
        "clear_sort": lambda t, ctx: t.clear_sort(),
        "filter": lambda t, ctx: t.set_filter(
            ctx.data("value"), ctx.data("column") if ctx.has_data("column") else None
        ),
        "clear_filter": lambda t, ctx: t.clear_filter(),
        "next_page": lambda t, ctx: t.next_page(),
        "previous_page": lambda t, ctx: t.previous_page(),
        "go_to_page": lambda t, ctx: t.go_to_page(ctx.data_int("page")),
        "first_page": lambda t, ctx: t.first_page(),
        "last_page": lambda t, ctx: t.last_page(),
        "set_page_size": lambda t, ctx: t.set_page_size(ctx.data_int("size")),
        "select_row": lambda t, ctx: t.select_row(ctx.data("id")),
        "deselect_row": lambda t, ctx: t.deselect_row(ctx.data("id")),
        "toggle_row": lambda t, ctx: t.toggle_row_selection(ctx.data("id")),
        "select_all": lambda t, ctx: t.select_all(),
        "deselect_all": lambda t, ctx: t.deselect_all(),
        "show_column": lambda t, ctx: t.show_column(ctx.data("column")),
        "hide_column": lambda t, ctx: t.hide_column(ctx.data("column")),
    }

    def to_context(self) -> dict[str, Any]:
        visible = self.visible_columns()
        ctx = self.base_context()
        ctx.update({
            "columns": [
                {
                    **column.to_dict(),
                    "is_sorted": self.is_sorted_by(column.id),
                    "is_sorted_asc": self.is_sorted_asc(column.id),
                    "is_sorted_desc": self.is_sorted_desc(column.id),
                }
                for column in visible
            ],
            "rows": [
                {
                    "id": row.id,
                    "disabled": row.disabled,
                    "is_selected": self.is_row_selected(row.id),
                    "cells": [
                        {"column": column.id, "align": column.align, "value": column.display(row.cell(column.id))}
                        for column in visible
                    ],
                }
                for row in self.page_rows()
            ],
            "sort_column": self.sort_column,
            "sort_direction": self.sort_direction,
            "filter_value": self.filter_value,
            "page": self.page,
            "page_number": self.page + 1,
            "page_size": self.page_size,
            "paginated": self.page_size > 0,
            "total_pages": self.total_pages(),
            "pages": [
                {"index": p, "number": p + 1, "is_current": p == self.page}
                for p in self.page_numbers()
            ],
            "total_rows": self.total_rows(),
            "has_next_page": self.has_next_page(),
            "has_previous_page": self.has_previous_page(),
            "page_info": self.page_info(),
            "is_empty": self.is_empty(),
            "empty_message": self.empty_message,
            "selectable": self.selectable,
            "multi_select": self.multi_select,
            "selected_count": self.selected_count(),
            "all_selected": self.all_selected(),
            "striped": self.striped,
            "hoverable": self.hoverable,
            "bordered": self.bordered,
            "compact": self.compact,
            "loading": self.loading,
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, *options: Option) -> DataTable:
    table = apply_options(DataTable(Identity(id, KIND)), options)
    table._clamp()
    return table


def with_columns(*columns: Column) -> Option:
    def apply(table: DataTable) -> None:
        table.columns = list(columns)
        table._invalidate()

    return apply


def with_rows(*rows: Row) -> Option:
    def apply(table: DataTable) -> None:
        table.rows = list(rows)
        table._invalidate()

    return apply


def with_page_size(size: int) -> Option:
    def apply(table: DataTable) -> None:
        table.page_size = max(size, 0)

    return apply


def with_selectable(selectable: bool = True) -> Option:
    def apply(table: DataTable) -> None:
        table.selectable = selectable

    return apply


def with_multi_select(multi_select: bool = True) -> Option:
    def apply(table: DataTable) -> None:
        table.multi_select = multi_select
        if multi_select:
            table.selectable = True

    return apply


def with_sort(column_id: str, direction: str = SORT_ASC) -> Option:
    def apply(table: DataTable) -> None:
        table.sort_column = column_id
        table.sort_direction = direction if direction in SORT_DIRECTIONS else SORT_ASC
        table._invalidate()

    return apply


def with_filter(value: str, column_id: str = "") -> Option:
    def apply(table: DataTable) -> None:
        table.filter_value = value
        table.filter_column = column_id
        table._invalidate()

    return apply
