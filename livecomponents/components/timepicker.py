"""
TimePicker — time-of-day picker (12- or 24-hour) and duration picker.

In 12-hour mode the hour is stored as 1..12 with an AM/PM period;
`set_time` accepts a 24-hour clock value and normalizes it. Optional
`min_time`/`max_time` bounds are inclusive and compared on the 24-hour
clock. Every setter and stepper refuses a change that would leave them.
Times carry no date and no timezone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Any, ClassVar

from livecomponents.config import default_styled
from livecomponents.kernel.actions import ActionContext
from livecomponents.kernel.types import Component, Handler, Identity, Option, apply_options

KIND = "timepicker"

AM = "AM"
PM = "PM"


def parse_time(value: str | time | None) -> time | None:
    """Parse "HH:MM" or "HH:MM:SS"; None when missing or malformed."""
    if value is None or isinstance(value, time):
        return value
    try:
        return time.fromisoformat(value.strip())
    except ValueError:
        return None


@dataclass
class TimePicker(Component):
    KIND: ClassVar[str] = KIND

    identity: Identity
    hour: int = 12
    minute: int = 0
    second: int = 0
    period: str = AM
    has_value: bool = False
    open: bool = False
    placeholder: str = "Select time..."
    use_24_hour: bool = False
    show_seconds: bool = False
    minute_step: int = 1
    min_time: time | None = None
    max_time: time | None = None
    styled: bool = field(default_factory=default_styled)

    # -- overlay ------------------------------------------------------------

    def toggle(self) -> None:
        self.open = not self.open

    def close(self) -> None:
        self.open = False

    # -- value --------------------------------------------------------------

    def get_24_hour(self) -> int:
        return self._hour_24(self.hour, self.period)

    def as_time(self) -> time:
        return time(self.get_24_hour(), self.minute, self.second)

    def is_time_allowed(self, hour: int, minute: int, second: int = 0) -> bool:
        candidate = time(hour, minute, second)
        if self.min_time is not None and candidate < self.min_time:
            return False
        if self.max_time is not None and candidate > self.max_time:
            return False
        return True

    def set_time(self, hour: int, minute: int, second: int | None = None) -> bool:
        """Set from a 24-hour clock value; refuses out-of-range or out-of-bounds times."""
        sec = self.second if second is None else second
        if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= sec <= 59):
            return False
        if not self.is_time_allowed(hour, minute, sec):
            return False
        self.minute = minute
        self.second = sec
        self.has_value = True
        self.open = False
        if self.use_24_hour:
            self.hour = hour
        elif hour == 0:
            self.hour, self.period = 12, AM
        elif hour < 12:
            self.hour, self.period = hour, AM
        elif hour == 12:
            self.hour, self.period = 12, PM
        else:
            self.hour, self.period = hour - 12, PM
        return True

    def clear(self) -> None:
        self.has_value = False
        self.hour = 12
        self.minute = 0
        self.second = 0
        self.period = AM

    def _hour_24(self, hour: int, period: str) -> int:
        if self.use_24_hour:
            return hour
        if period == AM:
            return 0 if hour == 12 else hour
        return 12 if hour == 12 else hour + 12

    def _set_fields(self, hour: int, minute: int, second: int, period: str) -> bool:
        if not self.is_time_allowed(self._hour_24(hour, period), minute, second):
            return False
        self.hour, self.minute, self.second, self.period = hour, minute, second, period
        self.has_value = True
        return True

    def set_hour(self, hour: int) -> bool:
        low, high = (0, 23) if self.use_24_hour else (1, 12)
        if not low <= hour <= high:
            return False
        return self._set_fields(hour, self.minute, self.second, self.period)

    def set_minute(self, minute: int) -> bool:
        if not 0 <= minute <= 59:
            return False
        return self._set_fields(self.hour, minute, self.second, self.period)

    def set_second(self, second: int) -> bool:
        if not 0 <= second <= 59:
            return False
        return self._set_fields(self.hour, self.minute, second, self.period)

    def set_period(self, period: str) -> bool:
        if period not in (AM, PM):
            return False
        return self._set_fields(self.hour, self.minute, self.second, period)

    def toggle_period(self) -> bool:
        return self.set_period(PM if self.period == AM else AM)

    def increment_hour(self) -> bool:
        hour = (self.hour + 1) % 24 if self.use_24_hour else self.hour % 12 + 1
        return self._set_fields(hour, self.minute, self.second, self.period)

    def decrement_hour(self) -> bool:
        hour = (self.hour - 1) % 24 if self.use_24_hour else (self.hour - 2) % 12 + 1
        return self._set_fields(hour, self.minute, self.second, self.period)

    def increment_minute(self) -> bool:
        minute = (self.minute + self.minute_step) % 60
        return self._set_fields(self.hour, minute, self.second, self.period)

    def decrement_minute(self) -> bool:
        minute = (self.minute - self.minute_step) % 60
        return self._set_fields(self.hour, minute, self.second, self.period)

    # -- display ------------------------------------------------------------

    def format_time(self) -> str:
        if self.use_24_hour:
            text = f"{self.hour:02d}:{self.minute:02d}"
            return f"{text}:{self.second:02d}" if self.show_seconds else text
        text = f"{self.hour}:{self.minute:02d}"
        if self.show_seconds:
            text = f"{text}:{self.second:02d}"
        return f"{text} {self.period}"

    def display_value(self) -> str:
        return self.format_time() if self.has_value else self.placeholder

    def hour_options(self) -> list[int]:
        return list(range(24)) if self.use_24_hour else list(range(1, 13))

    def minute_options(self) -> list[int]:
        return list(range(0, 60, max(self.minute_step, 1)))

    def second_options(self) -> list[int]:
        return list(range(60))

    def _set_from_payload(self, ctx: ActionContext) -> bool:
        if ctx.has_data("time"):
            parsed = parse_time(ctx.data("time"))
            if parsed is None:
                return False
            return self.set_time(parsed.hour, parsed.minute, parsed.second)
        second = ctx.data_int("second") if ctx.has_data("second") else None
        return self.set_time(ctx.data_int("hour"), ctx.data_int("minute"), second)

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda t, ctx: t.toggle(),
        "close": lambda t, ctx: t.close(),
        "set": lambda t, ctx: t._set_from_payload(ctx),
        "set_hour": lambda t, ctx: t.set_hour(ctx.data_int("hour")),
        "set_minute": lambda t, ctx: t.set_minute(ctx.data_int("minute")),
        "set_second": lambda t, ctx: t.set_second(ctx.data_int("second")),
        "set_period": lambda t, ctx: t.set_period(ctx.data("period").upper()),
        "toggle_period": lambda t, ctx: t.toggle_period(),
        "increment_hour": lambda t, ctx: t.increment_hour(),
        "decrement_hour": lambda t, ctx: t.decrement_hour(),
        "increment_minute": lambda t, ctx: t.increment_minute(),
        "decrement_minute": lambda t, ctx: t.decrement_minute(),
        "clear": lambda t, ctx: t.clear(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "has_value": self.has_value,
            "display_value": self.display_value(),
            "value": self.as_time().isoformat(timespec="seconds" if self.show_seconds else "minutes")
            if self.has_value else "",
            "placeholder": self.placeholder,
            "use_24_hour": self.use_24_hour,
            "show_seconds": self.show_seconds,
            "period": self.period,
            "is_pm": self.period == PM,
            "hours": [{"value": h, "is_selected": h == self.hour} for h in self.hour_options()],
            "minutes": [
                {"value": m, "label": f"{m:02d}", "is_selected": m == self.minute}
                for m in self.minute_options()
            ],
            "seconds": [
                {"value": s, "label": f"{s:02d}", "is_selected": s == self.second}
                for s in self.second_options()
            ] if self.show_seconds else [],
        })
        return ctx


@dataclass
class DurationPicker(Component):
    KIND: ClassVar[str] = KIND
    TEMPLATE: ClassVar[str] = "duration"

    identity: Identity
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    has_value: bool = False
    open: bool = False
    placeholder: str = "Select duration..."
    show_seconds: bool = False
    max_hours: int = 24
    styled: bool = field(default_factory=default_styled)

    def toggle(self) -> None:
        self.open = not self.open

    def close(self) -> None:
        self.open = False

    def set_duration(self, hours: int, minutes: int, seconds: int | None = None) -> bool:
        sec = self.seconds if seconds is None else seconds
        if not (0 <= hours <= self.max_hours and 0 <= minutes <= 59 and 0 <= sec <= 59):
            return False
        self.hours = hours
        self.minutes = minutes
        self.seconds = sec
        self.has_value = True
        self.open = False
        return True

    def clear(self) -> None:
        self.hours = 0
        self.minutes = 0
        self.seconds = 0
        self.has_value = False

    def set_hours(self, hours: int) -> bool:
        if not 0 <= hours <= self.max_hours:
            return False
        self.hours = hours
        self.has_value = True
        return True

    def set_minutes(self, minutes: int) -> bool:
        if not 0 <= minutes <= 59:
            return False
        self.minutes = minutes
        self.has_value = True
        return True

    def set_seconds(self, seconds: int) -> bool:
        if not 0 <= seconds <= 59:
            return False
        self.seconds = seconds
        return True

    def increment_hours(self) -> bool:
        if self.hours >= self.max_hours:
            return False
        self.hours += 1
        self.has_value = True
        return True

    def decrement_hours(self) -> bool:
        if self.hours <= 0:
            return False
        self.hours -= 1
        self.has_value = True
        return True

    def increment_minutes(self) -> None:
        self.minutes = (self.minutes + 1) % 60
        self.has_value = True

    def decrement_minutes(self) -> None:
        self.minutes = (self.minutes - 1) % 60
        self.has_value = True

    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def format_duration(self) -> str:
        if self.show_seconds:
            return f"{self.hours}h {self.minutes}m {self.seconds}s"
        return f"{self.hours}h {self.minutes}m"

    def display_value(self) -> str:
        return self.format_duration() if self.has_value else self.placeholder

    ACTIONS: ClassVar[dict[str, Handler]] = {
        "toggle": lambda d, ctx: d.toggle(),
        "close": lambda d, ctx: d.close(),
        "set": lambda d, ctx: d.set_duration(
            ctx.data_int("hours"),
            ctx.data_int("minutes"),
            ctx.data_int("seconds") if ctx.has_data("seconds") else None,
        ),
        "set_hours": lambda d, ctx: d.set_hours(ctx.data_int("hours")),
        "set_minutes": lambda d, ctx: d.set_minutes(ctx.data_int("minutes")),
        "set_seconds": lambda d, ctx: d.set_seconds(ctx.data_int("seconds")),
        "increment_hours": lambda d, ctx: d.increment_hours(),
        "decrement_hours": lambda d, ctx: d.decrement_hours(),
        "increment_minutes": lambda d, ctx: d.increment_minutes(),
        "decrement_minutes": lambda d, ctx: d.decrement_minutes(),
        "clear": lambda d, ctx: d.clear(),
    }

    def to_context(self) -> dict[str, Any]:
        ctx = self.base_context()
        ctx.update({
            "open": self.open,
            "has_value": self.has_value,
            "display_value": self.display_value(),
            "placeholder": self.placeholder,
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "show_seconds": self.show_seconds,
            "max_hours": self.max_hours,
            "total_minutes": self.total_minutes(),
            "total_seconds": self.total_seconds(),
        })
        return ctx


# ---------------------------------------------------------------------------
# Constructors and options
# ---------------------------------------------------------------------------


def new(id: str, *options: Option) -> TimePicker:
    return apply_options(TimePicker(Identity(id, KIND)), options)


def new_duration(id: str, *options: Option) -> DurationPicker:
    return apply_options(DurationPicker(Identity(id, KIND)), options)


def with_time(hour: int, minute: int) -> Option:
    return lambda picker: picker.set_time(hour, minute)


def with_minute_step(step: int) -> Option:
    def apply(picker: TimePicker) -> None:
        if 0 < step <= 60:
            picker.minute_step = step

    return apply


def with_min_time(value: str | time) -> Option:
    def apply(picker: TimePicker) -> None:
        picker.min_time = parse_time(value)

    return apply


def with_max_time(value: str | time) -> Option:
    def apply(picker: TimePicker) -> None:
        picker.max_time = parse_time(value)

    return apply


def with_duration(hours: int, minutes: int) -> Option:
    return lambda picker: picker.set_duration(hours, minutes)
