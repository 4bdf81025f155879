# daily_report/core/clock.py
# Report dates are plain YYYY-MM-DD strings; every comparison relies on that fixed width.
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from daily_report.core.config import settings

DATE_FORMAT = "%Y-%m-%d"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def today_str(now: datetime | None = None, tz_name: str | None = None) -> str:
    """Calendar date of `now` in the report timezone."""
    now = now or utcnow()
    return now.astimezone(ZoneInfo(tz_name or settings.REPORT_TIMEZONE)).strftime(DATE_FORMAT)


def get_today() -> str:
    """
    Request dependency: evaluated once per request and handed to the services,
    so a single request never sees two different days.
    """
    return today_str()


def month_prefix(today: str) -> str:
    return today[:7]


def is_report_date(value: str) -> bool:
    try:
        return datetime.strptime(value, DATE_FORMAT).strftime(DATE_FORMAT) == value
    except ValueError:
        return False


def as_utc(value: datetime) -> datetime:
    """SQLite hands timestamps back naive; they were always written as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
