"""
Tests for engines.kiosk.messages — Danish display labels.
"""

from datetime import datetime, timedelta

import pytest

from core.time.clock import FixedClock
from core.time.temporal import CivilTime
from engines.kiosk.messages import (
    EXPIRED,
    UNKNOWN_DATE,
    format_civil_time,
    full_date_label,
    humanize_seconds,
    opening_message,
    relative_date_label,
    time_since,
    time_until,
)

NOW = datetime(2026, 1, 14, 10, 0, 0)  # Wednesday
CLOCK = FixedClock(NOW)


class TestFormatCivilTime:
    @pytest.mark.parametrize("hour,minute,expected", [
        (8, 5, "08:05"),
        (0, 0, "00:00"),
        (23, 59, "23:59"),
    ])
    def test_zero_padded(self, hour, minute, expected):
        assert format_civil_time(CivilTime(hour, minute)) == expected


class TestHumanizeSeconds:
    @pytest.mark.parametrize("seconds,expected", [
        (0, "0 sekunder"),
        (1, "1 sekund"),
        (45, "45 sekunder"),
        (60, "1 minut"),
        (300, "5 minutter"),
        (3600, "1 time"),
        (9000, "2 timer og 30 minutter"),
        (86400, "1 dag"),
        (2 * 86400 + 4 * 3600, "2 dage og 4 timer"),
        (69 * 86400, "2 måneder og 9 dage"),
        (31536000, "1 år"),
        (31536000 + 2 * 2592000, "1 år og 2 måneder"),
    ])
    def test_labels(self, seconds, expected):
        assert humanize_seconds(seconds) == expected


class TestTimeSince:
    def test_seconds(self):
        assert time_since(NOW - timedelta(seconds=30), clock=CLOCK) == "30 sekunder siden"

    def test_hours_and_minutes(self):
        at = NOW - timedelta(hours=2, minutes=30)
        assert time_since(at, clock=CLOCK) == "2 timer og 30 minutter siden"

    def test_iso_string(self):
        assert time_since("2026-01-14T09:55:00", clock=CLOCK) == "5 minutter siden"

    def test_future_clamps_to_zero(self):
        assert time_since(NOW + timedelta(hours=1), clock=CLOCK) == "0 sekunder siden"


class TestTimeUntil:
    def test_future(self):
        at = NOW + timedelta(days=2, hours=4)
        assert time_until(at, clock=CLOCK) == "om 2 dage og 4 timer"

    def test_past_is_expired(self):
        assert time_until(NOW - timedelta(minutes=1), clock=CLOCK) == EXPIRED

    def test_now_is_expired(self):
        assert time_until(NOW, clock=CLOCK) == "Udløbet"

    def test_sub_second_remaining_is_expired(self):
        assert time_until(NOW + timedelta(milliseconds=500), clock=CLOCK) == EXPIRED


class TestDateLabels:
    def test_full_label(self):
        assert full_date_label(datetime(2026, 1, 14, 14, 30)) == "Onsdag d. 14/01 kl. 14:30"

    def test_today(self):
        assert relative_date_label(datetime(2026, 1, 14, 14, 30), clock=CLOCK) == "i dag kl. 14:30"

    def test_tomorrow(self):
        assert relative_date_label(datetime(2026, 1, 15, 8, 0), clock=CLOCK) == "i morgen kl. 08:00"

    def test_later(self):
        label = relative_date_label("2026-01-17T09:15:00", clock=CLOCK)
        assert label == "Lørdag d. 17/01 kl. 09:15"

    def test_missing(self):
        assert relative_date_label(None, clock=CLOCK) == UNKNOWN_DATE


class TestOpeningMessage:
    def test_later_today(self):
        msg = opening_message(datetime(2026, 1, 14, 14, 30), clock=CLOCK)
        assert msg == "Kiosken åbner igen kl. 14:30"

    def test_tomorrow(self):
        msg = opening_message(datetime(2026, 1, 15, 8, 0), clock=CLOCK)
        assert msg == "Kiosken åbner igen i morgen kl. 08:00"

    def test_later_in_week(self):
        msg = opening_message(datetime(2026, 1, 19, 8, 0), clock=CLOCK)
        assert msg == "Kiosken åbner igen Mandag d. 19/01 kl. 08:00"


class TestMissingInstant:
    @pytest.mark.parametrize("label", [time_since, time_until, relative_date_label])
    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_instant_is_unknown_date(self, label, value):
        assert label(value, clock=CLOCK) == UNKNOWN_DATE
