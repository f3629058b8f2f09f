from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..core.constants import DATE_FORMAT, DATETIME_FORMAT
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ParsedTimestamp:
    """Result of parsing operator input for a timestamp.

    `defaulted` is True whenever `value` is the supplied "now" instead of the
    operator's text; `error` holds the parse failure when the text was given
    but could not be read.
    """

    value: datetime
    defaulted: bool = False
    error: Optional[str] = None


def parse_datetime_input(text: Optional[str], *, now: datetime, fmt: str = DATETIME_FORMAT) -> ParsedTimestamp:
    """Parse `yyyy-MM-dd HH:mm`; blank or invalid input falls back to `now`."""
    raw = (text or "").strip()
    if not raw:
        return ParsedTimestamp(value=now, defaulted=True)
    try:
        return ParsedTimestamp(value=datetime.strptime(raw, fmt))
    except ValueError as exc:
        return ParsedTimestamp(value=now, defaulted=True, error=str(exc))


def parse_iso_date(value: str, fmt: str = DATE_FORMAT) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), fmt).date()
    except ValueError as exc:
        raise ValidationError(f"Invalid date '{value}', expected yyyy-MM-dd") from exc


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()


def truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def format_datetime(value: Optional[datetime], fmt: str = DATETIME_FORMAT) -> str:
    return value.strftime(fmt) if value else "-"


def format_duration(value: timedelta) -> str:
    total_minutes = int(value.total_seconds() // 60)
    return f"{total_minutes // 60}h {total_minutes % 60}m"
