from datetime import date, datetime, timedelta

import pytest

from app.services.window_service import date_label, generate_window, in_window, same_day


@pytest.mark.parametrize(
    "anchor",
    [
        datetime(2024, 3, 5, 14, 30),
        datetime(2024, 2, 26, 23, 59, 59),  # crosses Feb 29 in a leap year
        datetime(2023, 12, 28, 0, 0),  # crosses the year boundary
        date(2024, 10, 27),
    ],
)
def test_window_is_seven_consecutive_days_from_anchor(anchor):
    window = generate_window(anchor)
    start = anchor.date() if isinstance(anchor, datetime) else anchor
    assert len(window) == 7
    assert window[0] == start
    for earlier, later in zip(window, window[1:]):
        assert later - earlier == timedelta(days=1)


def test_window_crossing_leap_day():
    window = generate_window(datetime(2024, 2, 27, 9, 0))
    assert date(2024, 2, 29) in window
    assert window[-1] == date(2024, 3, 4)


def test_same_day_ignores_time_of_day():
    assert same_day(datetime(2024, 3, 5, 0, 1), date(2024, 3, 5))
    assert same_day(datetime(2024, 3, 5, 23, 59), datetime(2024, 3, 5, 0, 0))
    # Same day-of-month in another month is a different date.
    assert not same_day(date(2024, 3, 5), date(2024, 4, 5))


def test_in_window():
    window = generate_window(date(2024, 3, 5))
    assert in_window(window, date(2024, 3, 11))
    assert not in_window(window, date(2024, 3, 12))
    assert not in_window(window, date(2024, 3, 4))


def test_date_label():
    assert date_label(date(2024, 3, 5)) == "Tue Mar 05 2024"


def test_date_label_is_english_for_any_day():
    assert date_label(date(2023, 12, 31)) == "Sun Dec 31 2023"
    assert date_label(date(2024, 7, 1)) == "Mon Jul 01 2024"
