"""
TimePicker tests -- 12/24-hour normalisation, bounds, stepping, durations.
"""

from datetime import time

import pytest

from livecomponents.components import timepicker
from livecomponents.components.timepicker import AM, PM
from livecomponents.kernel.dispatch import dispatch
from livecomponents.kernel.types import configure


# ============================================================================
# Time of day
# ============================================================================


class TestSetTime:
    @pytest.mark.parametrize(
        "hour,expected",
        [(0, (12, AM)), (9, (9, AM)), (12, (12, PM)), (23, (11, PM))],
    )
    def test_twelve_hour_normalisation(self, hour, expected):
        t = timepicker.new("alarm")
        assert t.set_time(hour, 30)
        assert (t.hour, t.period) == expected
        assert t.get_24_hour() == hour

    def test_twenty_four_hour_keeps_hour(self):
        t = timepicker.new("alarm", configure(use_24_hour=True), timepicker.with_time(18, 5))
        assert t.hour == 18
        assert t.format_time() == "18:05"

    @pytest.mark.parametrize("hour,minute", [(24, 0), (-1, 0), (10, 60)])
    def test_out_of_range_refused(self, hour, minute):
        t = timepicker.new("alarm")
        assert t.set_time(hour, minute) is False
        assert t.has_value is False

    def test_bounds_are_inclusive(self):
        t = timepicker.new(
            "alarm", timepicker.with_min_time("09:00"), timepicker.with_max_time(time(17, 0))
        )
        assert t.set_time(8, 59) is False
        assert t.set_time(9, 0)
        assert t.set_time(17, 0)
        assert t.set_time(17, 1) is False

    def test_set_closes_and_marks_value(self):
        t = timepicker.new("alarm")
        t.toggle()
        t.set_time(7, 15)
        assert t.open is False
        assert t.display_value() == "7:15 AM"

    def test_clear(self):
        t = timepicker.new("alarm", timepicker.with_time(15, 45))
        t.clear()
        assert t.display_value() == "Select time..."
        assert t.to_context()["value"] == ""


class TestFields:
    def test_set_hour_range_depends_on_mode(self):
        t = timepicker.new("alarm")
        assert t.set_hour(0) is False
        assert t.set_hour(12)
        t.use_24_hour = True
        assert t.set_hour(0)

    def test_set_period(self):
        t = timepicker.new("alarm")
        assert t.set_period(PM)
        assert t.set_period("noon") is False
        t.toggle_period()
        assert t.period == AM

    def test_hour_wraps_in_twelve_hour_mode(self):
        t = timepicker.new("alarm", configure(hour=12))
        t.increment_hour()
        assert t.hour == 1
        t.decrement_hour()
        t.decrement_hour()
        assert t.hour == 11

    def test_hour_wraps_in_twenty_four_hour_mode(self):
        t = timepicker.new("alarm", configure(use_24_hour=True, hour=23))
        t.increment_hour()
        assert t.hour == 0
        t.decrement_hour()
        assert t.hour == 23

    def test_minute_step(self):
        t = timepicker.new("alarm", timepicker.with_minute_step(15))
        t.decrement_minute()
        assert t.minute == 45
        t.increment_minute()
        assert t.minute == 0
        assert t.minute_options() == [0, 15, 30, 45]

    def test_invalid_minute_step_ignored(self):
        assert timepicker.new("alarm", timepicker.with_minute_step(0)).minute_step == 1

    def test_seconds_in_format(self):
        t = timepicker.new("alarm", configure(show_seconds=True))
        t.set_time(13, 4, 9)
        assert t.format_time() == "1:04:09 PM"
        assert t.to_context()["value"] == "13:04:09"


class TestActions:
    def test_set_from_iso_time(self):
        t = timepicker.new("alarm")
        assert dispatch(t, "set_alarm", {"time": "21:30"})
        assert t.as_time() == time(21, 30)

    def test_set_from_fields(self):
        t = timepicker.new("alarm")
        assert dispatch(t, "set_alarm", {"hour": "6", "minute": "45"})
        assert t.format_time() == "6:45 AM"

    def test_malformed_time_rejected(self):
        t = timepicker.new("alarm")
        assert not dispatch(t, "set_alarm", {"time": "quarter past"})

    def test_set_period_action_is_case_insensitive(self):
        t = timepicker.new("alarm")
        assert dispatch(t, "set_period_alarm", {"period": "pm"})
        assert t.period == PM


class TestParseTime:
    def test_parse(self):
        assert timepicker.parse_time("08:15") == time(8, 15)
        assert timepicker.parse_time("08:15:30") == time(8, 15, 30)
        assert timepicker.parse_time("8am") is None
        assert timepicker.parse_time(None) is None


# ============================================================================
# Duration
# ============================================================================


class TestDuration:
    def test_set_and_totals(self):
        d = timepicker.new_duration("eta", timepicker.with_duration(1, 30))
        assert d.total_minutes() == 90
        assert d.total_seconds() == 5400
        assert d.display_value() == "1h 30m"

    def test_hours_bounded_by_max(self):
        d = timepicker.new_duration("eta", configure(max_hours=2))
        assert d.set_duration(3, 0) is False
        d.set_hours(2)
        assert d.increment_hours() is False
        d.set_hours(0)
        assert d.decrement_hours() is False

    def test_minutes_wrap(self):
        d = timepicker.new_duration("eta")
        d.decrement_minutes()
        assert d.minutes == 59
        d.increment_minutes()
        assert d.minutes == 0

    def test_seconds_format(self):
        d = timepicker.new_duration("eta", configure(show_seconds=True))
        d.set_duration(0, 2, 5)
        assert d.format_duration() == "0h 2m 5s"

    def test_actions(self):
        d = timepicker.new_duration("eta")
        assert dispatch(d, "set_eta", {"hours": "2", "minutes": "15"})
        assert not dispatch(d, "set_minutes_eta", {"minutes": "75"})
        assert d.template == "duration"
        assert d.to_context()["total_minutes"] == 135


# ============================================================================
# Bounds across setters
# ============================================================================


class TestBoundsOnEveryChange:
    @pytest.fixture
    def office_hours(self):
        return timepicker.new(
            "meeting",
            timepicker.with_min_time("09:00"),
            timepicker.with_max_time("17:00"),
            timepicker.with_time(9, 0),
        )

    def test_set_hour_outside_bounds_refused(self, office_hours):
        assert office_hours.set_hour(8) is False
        assert office_hours.as_time() == time(9, 0)
        assert office_hours.set_hour(11)

    def test_set_minute_past_max_refused(self, office_hours):
        office_hours.set_time(17, 0)
        assert office_hours.set_minute(30) is False
        assert office_hours.as_time() == time(17, 0)

    def test_steppers_stop_at_bounds(self, office_hours):
        assert office_hours.decrement_hour() is False
        assert office_hours.as_time() == time(9, 0)
        office_hours.set_time(17, 0)
        assert office_hours.increment_minute() is False
        assert office_hours.increment_hour() is False
        # minutes wrap within the hour: 17:00 would step to 17:59
        assert office_hours.decrement_minute() is False
        assert office_hours.as_time() == time(17, 0)

    def test_period_change_checked(self, office_hours):
        assert office_hours.toggle_period() is False
        assert office_hours.period == AM

    def test_refused_step_is_a_rejected_action(self, office_hours):
        assert not dispatch(office_hours, "decrement_hour_meeting")
