import time
from datetime import date, datetime, timezone

import pytest

from app.utils.dates import format_date, format_date_fields, to_storage_date


def test_to_storage_date_pins_midnight() -> None:
    assert to_storage_date(date(2024, 3, 15)) == datetime(2024, 3, 15)
    assert to_storage_date("2024-03-15") == datetime(2024, 3, 15)
    assert to_storage_date(datetime(2024, 3, 15, 23, 30)) == datetime(2024, 3, 15)
    assert to_storage_date(None) is None
    assert to_storage_date("") is None


def test_format_date_variants() -> None:
    assert format_date(datetime(2024, 3, 15)) == "2024-03-15"
    assert format_date(date(2024, 3, 15)) == "2024-03-15"
    assert format_date("2024-03-15T00:00:00") == "2024-03-15"
    assert format_date(datetime(2024, 3, 15, 0, 0, tzinfo=timezone.utc)) == "2024-03-15"
    assert format_date(None) is None


def test_format_date_fields_only_touches_named_fields() -> None:
    row = {"join_date": datetime(2024, 3, 15), "created_at": datetime(2024, 1, 1, 10)}
    format_date_fields(row, "join_date", "last_working_date")
    assert row == {"join_date": "2024-03-15", "created_at": datetime(2024, 1, 1, 10)}


@pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
@pytest.mark.parametrize("tz", ["UTC", "America/Los_Angeles", "Asia/Kolkata", "Pacific/Kiritimati"])
def test_round_trip_independent_of_process_timezone(monkeypatch, tz) -> None:
    monkeypatch.setenv("TZ", tz)
    time.tzset()
    try:
        assert format_date(to_storage_date(date(2024, 3, 15))) == "2024-03-15"
    finally:
        monkeypatch.undo()
        time.tzset()
