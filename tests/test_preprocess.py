"""Tests for the per-flight calculations."""

from flightstats.preprocess import (
    actual_duration_minutes,
    arrival_delay_minutes,
    has_overnight_stay,
    is_landing_missed,
)


class TestActualDuration:
    def test_half_hour_same_day(self, make_flight):
        flight = make_flight(actual_start="2023-01-01T10:00:00+00:00", actual_end="2023-01-01T10:30:00+00:00")
        assert actual_duration_minutes(flight) == 30

    def test_two_hours(self, make_flight):
        flight = make_flight(actual_start="2023-01-01T10:30:00+00:00", actual_end="2023-01-01T12:30:00+00:00")
        assert actual_duration_minutes(flight) == 120

    def test_counts_whole_days(self, make_flight):
        flight = make_flight(actual_start="2023-01-01T10:00:00+00:00", actual_end="2023-01-02T11:05:00+00:00")
        assert actual_duration_minutes(flight) == 24 * 60 + 65

    def test_partial_minute_is_floored(self, make_flight):
        flight = make_flight(actual_start="2023-01-01T10:00:00+00:00", actual_end="2023-01-01T10:10:59+00:00")
        assert actual_duration_minutes(flight) == 10

    def test_different_offsets(self, make_flight):
        # 09:00Z -> 13:00Z
        flight = make_flight(actual_start="2023-01-01T10:00:00+01:00", actual_end="2023-01-01T08:00:00-05:00")
        assert actual_duration_minutes(flight) == 240


class TestLandingMissed:
    def test_ten_minutes_late(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-01T12:00:00+00:00", actual_end="2023-01-01T12:10:00+00:00")
        assert is_landing_missed(flight)

    def test_early_arrival(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-01T12:00:00+00:00", actual_end="2023-01-01T11:55:00+00:00")
        assert arrival_delay_minutes(flight) == -5
        assert not is_landing_missed(flight)

    def test_exactly_on_threshold(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-01T12:00:00+00:00", actual_end="2023-01-01T12:05:00+00:00")
        assert not is_landing_missed(flight)

    def test_six_minutes_late(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-01T12:00:00+00:00", actual_end="2023-01-01T12:06:00+00:00")
        assert is_landing_missed(flight)

    def test_multi_hour_delay_uses_total_elapsed(self, make_flight):
        # Two hours and three minutes late: the minute part alone would be under the threshold.
        flight = make_flight(scheduled_end="2023-01-01T12:00:00+00:00", actual_end="2023-01-01T14:03:00+00:00")
        assert arrival_delay_minutes(flight) == 123
        assert is_landing_missed(flight)


class TestOvernightStay:
    def test_same_day_hours_later(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-01T08:00:00+00:00", actual_end="2023-01-01T23:30:00+00:00")
        assert not has_overnight_stay(flight)

    def test_next_calendar_day(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-01T23:50:00+00:00", actual_end="2023-01-02T01:50:00+00:00")
        assert has_overnight_stay(flight)

    def test_two_minutes_across_midnight(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-01T23:59:00+00:00", actual_end="2023-01-02T00:01:00+00:00")
        assert has_overnight_stay(flight)

    def test_date_taken_in_own_offset(self, make_flight):
        # Same instant as 2023-01-02T00:30Z, but still January 1st locally.
        flight = make_flight(scheduled_end="2023-01-01T18:00:00-05:00", actual_end="2023-01-01T19:30:00-05:00")
        assert not has_overnight_stay(flight)

    def test_early_arrival_previous_day(self, make_flight):
        flight = make_flight(scheduled_end="2023-01-02T00:10:00+00:00", actual_end="2023-01-01T23:55:00+00:00")
        assert not has_overnight_stay(flight)
