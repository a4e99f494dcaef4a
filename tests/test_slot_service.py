from datetime import date, datetime

import pytest

from app.services.slot_service import filter_available, parse_slot_label, slot_start


@pytest.mark.parametrize(
    "label, expected",
    [
        ("12:00 AM", (0, 0)),
        ("12:00 PM", (12, 0)),
        ("11:59 PM", (23, 59)),
        ("1:00 AM", (1, 0)),
        ("9:05 AM", (9, 5)),
        ("12:30 PM", (12, 30)),
        ("3:15PM", (15, 15)),
    ],
)
def test_parse_slot_label_converts_to_24_hour(label, expected):
    assert parse_slot_label(label) == expected


@pytest.mark.parametrize(
    "label",
    ["", "10:00", "10:0 AM", "10:00 am", "10:00 XM", "13:00 PM", "0:30 AM", "10:60 AM",
     "10:00 AM - 11:00 AM", "ten AM", "10:0a PM"],
)
def test_parse_slot_label_rejects_malformed(label):
    assert parse_slot_label(label) is None


def test_slot_start_zeroes_seconds():
    assert slot_start("2:30 PM", date(2024, 1, 1)) == datetime(2024, 1, 1, 14, 30, 0, 0)


def test_today_keeps_only_labels_strictly_after_now():
    now = datetime(2024, 1, 1, 14, 30)
    labels = ["2:00 PM", "2:29 PM", "2:30 PM", "2:31 PM"]
    assert filter_available(labels, date(2024, 1, 1), now) == ["2:31 PM"]


def test_exact_minute_is_excluded_even_with_seconds_elapsed():
    now = datetime(2024, 1, 1, 14, 30, 0, 1)
    assert filter_available(["2:30 PM"], date(2024, 1, 1), now) == []


def test_future_date_returns_all_labels_in_order():
    now = datetime(2024, 1, 1, 23, 59)
    labels = ["5:00 PM", "9:00 AM", "12:00 AM", "11:30 AM"]
    assert filter_available(labels, date(2024, 1, 2), now) == labels


def test_today_order_preserved_and_malformed_dropped():
    now = datetime(2024, 1, 1, 8, 0)
    labels = ["5:00 PM", "garbage", "7:00 AM", "9:00 AM", "10:00"]
    assert filter_available(labels, date(2024, 1, 1), now) == ["5:00 PM", "9:00 AM"]


def test_selected_date_may_be_a_datetime():
    now = datetime(2024, 1, 1, 14, 30)
    assert filter_available(["3:00 PM"], datetime(2024, 1, 1, 0, 0), now) == ["3:00 PM"]


def test_past_date_has_nothing_left():
    now = datetime(2024, 1, 2, 0, 5)
    assert filter_available(["11:59 PM"], date(2024, 1, 1), now) == []


def test_empty_labels():
    assert filter_available([], date(2024, 1, 1), datetime(2024, 1, 1)) == []
