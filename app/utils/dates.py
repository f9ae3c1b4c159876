from datetime import date, datetime, time
from typing import Optional, Union


def to_storage_date(value: Optional[Union[date, datetime, str]]) -> Optional[datetime]:
    """Convert a calendar date to the UTC-midnight datetime stored in MongoDB.

    BSON has no date-only type, so every calendar date is pinned to 00:00 UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    if isinstance(value, datetime):
        value = value.date()
    return datetime.combine(value, time.min)


def format_date(value) -> Optional[str]:
    """Return the stored calendar date as YYYY-MM-DD.

    The result depends only on the stored value, never on the timezone of
    the process reading it.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return date.fromisoformat(value[:10]).isoformat()
    if isinstance(value, datetime):
        # naive values come back from the driver as UTC wall-clock time
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Cannot format {type(value).__name__} as a date")


def format_date_fields(row: dict, *fields: str) -> dict:
    for field in fields:
        if field in row:
            row[field] = format_date(row[field])
    return row
