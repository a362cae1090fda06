"""Tests for the bookable window and time slot tools."""

from datetime import date

from therapy_booking.tools.availability import (
    get_bookable_range,
    get_time_slots,
    is_bookable_date,
    is_offered_time,
)


class TestTimeSlots:
    def test_default_slots(self):
        assert get_time_slots() == [
            "9:00 AM", "10:00 AM", "11:00 AM",
            "1:00 PM", "2:00 PM", "3:00 PM", "4:00 PM",
        ]

    def test_returns_a_copy(self):
        slots = get_time_slots()
        slots.clear()
        assert get_time_slots()

    def test_is_offered_time(self):
        assert is_offered_time("9:00 AM")
        assert not is_offered_time("9:00")


class TestBookableRange:
    def test_three_months_ahead(self):
        assert get_bookable_range(date(2024, 5, 20)) == (date(2024, 5, 20), date(2024, 8, 20))

    def test_clamps_to_month_end(self):
        assert get_bookable_range(date(2024, 1, 31))[1] == date(2024, 4, 30)

    def test_crosses_year_into_leap_february(self):
        assert get_bookable_range(date(2023, 11, 30))[1] == date(2024, 2, 29)

    def test_defaults_to_today(self):
        start, end = get_bookable_range()
        assert start == date.today()
        assert end > start

    def test_window_edges_inclusive(self):
        today = date(2024, 5, 20)
        assert is_bookable_date(date(2024, 5, 20), today)
        assert is_bookable_date(date(2024, 8, 20), today)
        assert not is_bookable_date(date(2024, 8, 21), today)
        assert not is_bookable_date(date(2024, 5, 19), today)
