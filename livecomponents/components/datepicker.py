"""
DatePicker — month calendar overlay for picking a date or a date range.

A date is selectable only if it is within [min_date, max_date] (inclusive),
not on a disabled weekday (Sunday = 0) and not a disabled date. All
comparisons are by calendar day. "Today" comes from the injectable
`clock`, which defaults to `date.today`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.calendar_grid import (
    MONTH_NAMES,
    CalendarDay,
    add_months,
    calendar_weeks,
    format_date,
    same_day,
    to_date,
    weekday,
    weekday_names,
)
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "datepicker"

DEFAULT_FORMAT = "%b %-d, %Y"


@dataclass
class DatePicker(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    selected: date | None = None
    view_date: date | None = None
    placeholder: str = "Select date..."
    open: bool = False
    inline: bool = False
    min_date: date | None = None
    max_date: date | None = None
    disabled_dates: list[date] = field(default_factory=list)
    disabled_weekdays: set[int] = field(default_factory=set)
    format: str = DEFAULT_FORMAT
    first_day_of_week: int = 0
    clock: Callable[[], date] = field(default=date.today, repr=False, compare=False)
    styled: bool = field(default_factory=default_styled)

    def __post_init__(self) -> None:
        if self.view_date is None:
            self.view_date = self.today()

    @property
    def template(self) -> str:
        return "inline" if self.inline else "default"

    def today(self) -> date:
        return to_date(self.clock())

    # -- overlay ------------------------------------------------------------

    def toggle(self) -> None:
        self.open = not self.open

    def close(self) -> None:
        if not self.inline:
            self.open = False

    # -- selection ----------------------------------------------------------

    def is_date_selectable(self, value: date | datetime) -> bool:
        day = to_date(value)
        if self.min_date is not None and day < to_date(self.min_date):
            return False
        if self.max_date is not None and day > to_date(self.max_date):
            return False
        if weekday(day) in self.disabled_weekdays:
            return False
        return not any(same_day(day, disabled) for disabled in self.disabled_dates)

    def select_date(self, value: date | datetime | None) -> bool:
        if value is None or not self.is_date_selectable(value):
            return False
        self.selected = to_date(value)
        self.close()
        return True

    def clear(self) -> None:
        self.selected = None

    def is_selected(self, value: date) -> bool:
        return same_day(self.selected, value)

    def is_today(self, value: date) -> bool:
        return same_day(value, self.today())

    def display_value(self) -> str:
        if self.selected is None:
            return self.placeholder
        return format_date(self.selected, self.format)

    # -- navigation ---------------------------------------------------------

    def previous_month(self) -> None:
        self.view_date = add_months(self.view_date, -1)

    def next_month(self) -> None:
        self.view_date = add_months(self.view_date, 1)

    def previous_year(self) -> None:
        self.view_date = add_months(self.view_date, -12)

    def next_year(self) -> None:
        self.view_date = add_months(self.view_date, 12)

    def go_to_today(self) -> None:
        self.view_date = self.today()

    def view_month(self) -> str:
        return MONTH_NAMES[self.view_date.month - 1]

    def view_year(self) -> int:
        return self.view_date.year

    # -- grid ---------------------------------------------------------------

    def in_range(self, value: date) -> bool:
        return False

    def calendar_weeks(self) -> list[list[CalendarDay]]:
        return calendar_weeks(
            self.view_date,
            self.first_day_of_week,
            is_today=self.is_today,
            is_selected=self.is_selected,
            is_disabled=lambda day: not self.is_date_selectable(day),
            in_range=self.in_range,
        )

    def weekday_names(self) -> list[str]:
        return weekday_names(self.first_day_of_week)

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda d, ctx: d.toggle(),
        "close": lambda d, ctx: d.close(),
        "select": lambda d, ctx: d.select_date(ctx.data_date("date")),
        "clear": lambda d, ctx: d.clear(),
        "previous_month": lambda d, ctx: d.previous_month(),
        "next_month": lambda d, ctx: d.next_month(),
        "previous_year": lambda d, ctx: d.previous_year(),
        "next_year": lambda d, ctx: d.next_year(),
        "today": lambda d, ctx: d.go_to_today(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "inline": self.inline,
            "placeholder": self.placeholder,
            "display_value": self.display_value(),
            "has_value": self.selected is not None,
            "value": self.selected.isoformat() if self.selected else "",
            "view_month": self.view_month(),
            "view_year": self.view_year(),
            "weekday_names": self.weekday_names(),
            "weeks": [
                {"days": [day.to_dict() for day in week]}
                for week in self.calendar_weeks()
            ],
        })
        return ctx


@dataclass
class RangePicker(DatePicker):
    TEMPLATE: ClassVar[str] = "range"

    start_date: date | None = None
    end_date: date | None = None
    selecting_end: bool = False

    @property
    def template(self) -> str:
        return self.TEMPLATE

    def select_range_date(self, value: date | datetime | None) -> bool:
        if value is None or not self.is_date_selectable(value):
            return False
        day = to_date(value)
        if not self.selecting_end or self.start_date is None:
            self.start_date = day
            self.end_date = None
            self.selecting_end = True
            return True
        if day < self.start_date:
            self.start_date, self.end_date = day, self.start_date
        else:
            self.end_date = day
        self.selecting_end = False
        self.close()
        return True

    def clear_range(self) -> None:
        self.start_date = None
        self.end_date = None
        self.selecting_end = False

    def is_selected(self, value: date) -> bool:
        return same_day(self.start_date, value) or same_day(self.end_date, value)

    def in_range(self, value: date) -> bool:
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= to_date(value) <= self.end_date

    def display_range_value(self) -> str:
        if self.start_date is None:
            return self.placeholder
        start = format_date(self.start_date, self.format)
        if self.end_date is None:
            return f"{start} - ..."
        return f"{start} - {format_date(self.end_date, self.format)}"

    def display_value(self) -> str:
        return self.display_range_value()

    ACTIONS: ClassVar[dict[str, Handler]] = {
        **DatePicker.ACTIONS,
        "select": lambda d, ctx: d.select_range_date(ctx.data_date("date")),
        "clear": lambda d, ctx: d.clear_range(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = super().to_context()
        ctx.update({
            "has_value": self.start_date is not None,
            "start_date": self.start_date.isoformat() if self.start_date else "",
            "end_date": self.end_date.isoformat() if self.end_date else "",
            "selecting_end": self.selecting_end,
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, *options: Option) -> DatePicker:
    return apply_options(DatePicker(Identity(id, KIND)), options)


def new_range(id: str, *options: Option) -> RangePicker:
    return apply_options(RangePicker(Identity(id, KIND)), options)


def new_inline(id: str, *options: Option) -> DatePicker:
    picker = new(id, *options)
    picker.inline = True
    picker.open = True
    return picker


def with_selected(value: date | datetime) -> Option:
    def apply(picker: DatePicker) -> None:
        picker.selected = to_date(value)
        picker.view_date = to_date(value)

    return apply


def with_view_date(value: date | datetime) -> Option:
    def apply(picker: DatePicker) -> None:
        picker.view_date = to_date(value)

    return apply


def with_min_date(value: date | datetime) -> Option:
    def apply(picker: DatePicker) -> None:
        picker.min_date = to_date(value)

    return apply


def with_max_date(value: date | datetime) -> Option:
    def apply(picker: DatePicker) -> None:
        picker.max_date = to_date(value)

    return apply


def with_disabled_dates(*values: date | datetime) -> Option:
    def apply(picker: DatePicker) -> None:
        picker.disabled_dates = [to_date(value) for value in values]

    return apply


def with_disabled_weekdays(*weekdays: int) -> Option:
    def apply(picker: DatePicker) -> None:
        picker.disabled_weekdays = {day % 7 for day in weekdays}

    return apply


def with_first_day_of_week(day: int) -> Option:
    def apply(picker: DatePicker) -> None:
        picker.first_day_of_week = day % 7

    return apply


def with_clock(clock: Callable[[], date]) -> Option:
    """Replace the source of "today". A view still anchored on the old today moves too."""

    def apply(picker: DatePicker) -> None:
        anchored = picker.view_date == picker.today()
        picker.clock = clock
        if anchored:
            picker.view_date = picker.today()

    return apply
