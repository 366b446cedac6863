"""
livecomponents Kernel — Calendar grid

Month grids for date pickers. Weekdays are numbered Sunday = 0 through
Saturday = 6. All comparisons are by calendar day: datetimes are truncated
to their date and timezone offsets are ignored.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Callable

WEEKDAY_NAMES: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MIN_WEEKS = 4
MAX_WEEKS = 6

DayPredicate = Callable[[date], bool]


def to_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def same_day(a: date | datetime | None, b: date | datetime | None) -> bool:
    if a is None or b is None:
        return False
    return to_date(a) == to_date(b)


def weekday(value: date) -> int:
    """Sunday-based weekday number."""
    return (value.weekday() + 1) % 7


def add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def first_of_month(value: date) -> date:
    return value.replace(day=1)


def last_of_month(value: date) -> date:
    return value.replace(day=calendar.monthrange(value.year, value.month)[1])


def format_date(value: date | datetime, fmt: str) -> str:
    """strftime with the "%-d" and "%-m" unpadded directives on every platform."""
    value = to_date(value)
    fmt = fmt.replace("%-d", str(value.day)).replace("%-m", str(value.month))
    return value.strftime(fmt)


def weekday_names(first_day_of_week: int = 0) -> list[str]:
    return [WEEKDAY_NAMES[(first_day_of_week + i) % 7] for i in range(7)]


@dataclass
class CalendarDay:
    date: date
    day: int
    in_month: bool
    is_today: bool = False
    is_selected: bool = False
    is_disabled: bool = False
    in_range: bool = False

    @property
    def date_string(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date_string,
            "day": self.day,
            "in_month": self.in_month,
            "is_today": self.is_today,
            "is_selected": self.is_selected,
            "is_disabled": self.is_disabled,
            "in_range": self.in_range,
        }


def _never(_: date) -> bool:
    return False


def calendar_weeks(
    view_date: date | datetime,
    first_day_of_week: int = 0,
    *,
    is_today: DayPredicate = _never,
    is_selected: DayPredicate = _never,
    is_disabled: DayPredicate = _never,
    in_range: DayPredicate = _never,
) -> list[list[CalendarDay]]:
    """
    Weeks of 7 days covering the month of `view_date`.

    The grid starts on `first_day_of_week` (possibly in the previous month)
    and continues until the month's last day is covered and at least four
    weeks exist, never more than six.
    """
    first = first_of_month(to_date(view_date))
    last = last_of_month(first)
    offset = (weekday(first) - first_day_of_week % 7 + 7) % 7
    current = first - timedelta(days=offset)

    weeks: list[list[CalendarDay]] = []
    while True:
        week: list[CalendarDay] = []
        for _ in range(7):
            week.append(CalendarDay(
                date=current,
                day=current.day,
                in_month=current.month == first.month,
                is_today=is_today(current),
                is_selected=is_selected(current),
                is_disabled=is_disabled(current),
                in_range=in_range(current),
            ))
            current += timedelta(days=1)
        weeks.append(week)
        if current > last and len(weeks) >= MIN_WEEKS:
            break
        if len(weeks) >= MAX_WEEKS:
            break
    return weeks
