from datetime import date, datetime, timedelta, timezone

import pytest

from app.core.config import settings
from app.core.date_utils import parse_date, to_iso_date, to_local_datetime, utcnow
from app.schemas.hike import HikeCreate


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-03-01", date(2024, 3, 1)),
        ("2024-03-01T00:00:00.000Z", date(2024, 3, 1)),
        ("2024-03-01T22:15:00+10:00", date(2024, 3, 1)),
        (" 2024-03-01 ", date(2024, 3, 1)),
        (date(2024, 3, 1), date(2024, 3, 1)),
        (datetime(2024, 3, 1, 23, 59), date(2024, 3, 1)),
        (None, None),
        ("", None),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("value", ["yesterday", "2024-13-01", 20240301])
def test_parse_date_rejects(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_utc_timestamp_lands_on_sydney_day():
    # Sydney midnight on 1 March, as toISOString() writes it
    assert parse_date("2024-02-29T13:00:00.000Z", tz_name="Australia/Sydney") == date(2024, 3, 1)
    assert parse_date("2024-02-29T13:00:00.000Z", tz_name="UTC") == date(2024, 2, 29)


def test_aware_datetime_uses_configured_timezone(monkeypatch):
    monkeypatch.setattr(settings, "timezone", "Australia/Sydney")
    picked = datetime(2024, 2, 29, 13, 0, tzinfo=timezone.utc)

    assert parse_date(picked) == date(2024, 3, 1)
    assert parse_date("2024-02-29T13:00:00.000Z") == date(2024, 3, 1)
    # Plain days are never shifted
    assert parse_date("2024-02-29") == date(2024, 2, 29)


def test_schema_dates_follow_configured_timezone(monkeypatch):
    monkeypatch.setattr(settings, "timezone", "Australia/Sydney")
    hike = HikeCreate.model_validate(
        {
            "name": "Ridge Trail",
            "location": "Blue Mountains",
            "date": "2024-02-29T13:00:00.000Z",
            "parking": "Yes",
            "length": 5.2,
            "difficulty": "Moderate",
        }
    )
    assert hike.date == date(2024, 3, 1)


def test_to_local_datetime():
    dt = datetime(2024, 2, 29, 13, 0)
    local = to_local_datetime(dt, "Australia/Sydney")
    assert local.utcoffset() == timedelta(hours=11)
    assert (local.year, local.month, local.day, local.hour) == (2024, 3, 1, 0)


def test_to_local_datetime_unknown_zone_falls_back_to_system():
    dt = datetime(2024, 2, 29, 13, 0, tzinfo=timezone.utc)
    assert to_local_datetime(dt, "Not/AZone") == dt.astimezone()


def test_to_iso_date():
    assert to_iso_date(date(2024, 6, 5)) == "2024-06-05"
    assert to_iso_date(None) is None


def test_utcnow_is_aware():
    assert utcnow().tzinfo is timezone.utc
