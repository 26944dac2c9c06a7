# cdjkit/dates.py

"""
Calendar-accurate differences between milestone dates and today.

Month and year arithmetic (varying month lengths, leap days) is left to
dateutil's relativedelta.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Mapping

from dateutil import tz
from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from .errors import ConfigError

DEFAULT_TIMEZONE = "Europe/Amsterdam"

DEFAULT_MILESTONES: Dict[str, date] = {
    "First gig": date(2012, 6, 15),
    "Bought first CDJs": date(2014, 2, 28),
    "Residency started": date(2016, 2, 29),
    "Label launched": date(2019, 10, 31),
}


@dataclass(frozen=True)
class Period:
    years: int
    months: int
    days: int


def today_in(tz_name: str) -> date:
    """Return the current calendar date in the given IANA zone."""
    zone = tz.gettz(tz_name)
    if zone is None:
        raise ConfigError(f"Unknown time zone: {tz_name}")
    return datetime.now(zone).date()


def period_between(start: date, end: date) -> Period:
    """Years, months and days from `start` to `end`, never negative."""
    if start > end:
        start, end = end, start
    delta = relativedelta(end, start)
    return Period(years=delta.years, months=delta.months, days=delta.days)


def format_line(label: str, period: Period) -> str:
    return f"{label}: {period.years} year(s), {period.months} month(s), {period.days} day(s)."


def milestone_lines(milestones: Mapping[str, date], today: date) -> List[str]:
    """One formatted line per milestone, in mapping order."""
    return [format_line(label, period_between(when, today)) for label, when in milestones.items()]


def parse_date(value: str) -> date:
    if not isinstance(value, str):
        raise ConfigError(f"Invalid date {value!r}: expected YYYY-MM-DD")
    try:
        return isoparse(value).date()
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid date {value!r}: {exc}") from exc


def parse_milestones(raw: Mapping[str, Any]) -> Dict[str, date]:
    """Convert a label -> ISO date string mapping, keeping its order."""
    if not isinstance(raw, Mapping):
        raise ConfigError("'milestones' must be an object of label -> YYYY-MM-DD")
    return {str(label): parse_date(value) for label, value in raw.items()}
