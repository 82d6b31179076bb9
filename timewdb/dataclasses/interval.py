#!/usr/bin/env python3
"""
interval.py
-------------------

Defines the Interval dataclass: a span of time with a start instant and an
optional end instant. An interval without an end is "open" (the entry is
still being tracked).

Both bounds are stored as aware datetimes normalized to UTC, and a closed
interval always lasts at least one second.

It supports:
- construction from instants, calendar periods (day/week/month) and text
- intersection, duration, day enumeration and splitting
- serialization back to the timewarrior literal form

Every operation that depends on the current time or the local time zone
accepts `now` and `tz` keyword arguments. When omitted, the wall clock is
sampled once per call and the zone is detected with tzlocal.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import List, Optional, Tuple

# ---- Third party ----
import tzlocal

# ---- Local imports ----
from timewdb.core.exceptions import (
    AmbiguousLocalTimeError,
    ParseError,
    ValidationError,
)
from timewdb.utils.durations import pretty_duration


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Constants -----
DATETIME_FORMAT = "%Y%m%dT%H%M%SZ"
"""Literal timestamp format of the database, e.g. 20220711T133312Z."""

MIN_DURATION = timedelta(seconds=1)
START_OF_DAY = time(0, 0, 0)
END_OF_DAY = time(23, 59, 59)

PERIODS = ("today", "yesterday", "week", "lastweek", "month", "lastmonth")
"""Named periods accepted after ':' in a range."""


# ----- Clock & zone helpers -----
def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_timezone() -> tzinfo:
    """Return the local IANA time zone as detected by tzlocal."""
    return tzlocal.get_localzone()


def local_today(tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> date:
    """Return the current calendar date in the given (or local) zone."""
    tz = tz if tz is not None else local_timezone()
    current = now if now is not None else utc_now()
    return current.astimezone(tz).date()


def to_utc(day: date, wall_time: time, tz: tzinfo) -> datetime:
    """
    Convert a local wall-clock time to its UTC instant.

    The local time must map to exactly one instant. Times falling into a
    daylight saving gap (no mapping) or fold (two mappings) are rejected.

    Raises:
        AmbiguousLocalTimeError: If the mapping is not unique
    """
    naive = datetime.combine(day, wall_time)
    earlier = naive.replace(tzinfo=tz, fold=0)
    later = naive.replace(tzinfo=tz, fold=1)

    if earlier.utcoffset() != later.utcoffset():
        logger.debug(f"Local time {naive} has offsets {earlier.utcoffset()} / {later.utcoffset()}")
        raise AmbiguousLocalTimeError(
            f"Cannot determine a unique UTC time for {naive.isoformat()} in {tz}"
        )

    return earlier.astimezone(timezone.utc)


def format_datetime(value: datetime) -> str:
    """Render an instant in the database literal format (UTC)."""
    return value.astimezone(timezone.utc).strftime(DATETIME_FORMAT)


def _normalize(value: datetime, name: str) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"{name} must be a datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError(f"{name} must be timezone-aware: {value.isoformat()}")
    return value.astimezone(timezone.utc)


def _resolve_tz(tz: Optional[tzinfo]) -> tzinfo:
    return tz if tz is not None else local_timezone()


def _as_local_date(day: date, tz: tzinfo) -> date:
    # datetime is a date subclass: aware values are read in the target zone
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            return day.astimezone(tz).date()
        return day.date()
    return day


# ----- Dataclass -----
@dataclass(frozen=True)
class Interval:
    """
    A contiguous span of time, optionally open on the end.

    Attributes:
        start (datetime): Start instant, UTC.
        end (Optional[datetime]): End instant, UTC. None while still open.

    Two intervals are equal when both bounds are equal. Ordering compares
    start instants only.
    """

    # ---- Attributes ----
    start: datetime
    end: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", _normalize(self.start, "start"))
        if self.end is None:
            return

        object.__setattr__(self, "end", _normalize(self.end, "end"))
        if self.start + MIN_DURATION > self.end:
            raise ValidationError(
                f"Interval is invalid: start ({format_datetime(self.start)}) must be "
                f"at least 1s before end ({format_datetime(self.end)})"
            )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.start < other.start

    # ---- Calendar constructors ----
    @classmethod
    def day(cls, day: date, tz: Optional[tzinfo] = None) -> Interval:
        """
        Interval covering a local calendar day, 00:00:00 to 23:59:59.

        Args:
            day: Local date (aware datetimes are converted to `tz` first)
            tz: Local zone, detected with tzlocal when omitted

        Raises:
            AmbiguousLocalTimeError: If midnight or 23:59:59 hits a DST transition
        """
        tz = _resolve_tz(tz)
        day = _as_local_date(day, tz)
        return cls(to_utc(day, START_OF_DAY, tz), to_utc(day, END_OF_DAY, tz))

    @classmethod
    def today(cls, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Interval:
        tz = _resolve_tz(tz)
        return cls.day(local_today(tz, now), tz)

    @classmethod
    def yesterday(cls, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Interval:
        tz = _resolve_tz(tz)
        return cls.day(local_today(tz, now) - timedelta(days=1), tz)

    @classmethod
    def week(cls, day: date, tz: Optional[tzinfo] = None) -> Interval:
        """Interval from the Monday on or before `day` to the following Sunday."""
        tz = _resolve_tz(tz)
        day = _as_local_date(day, tz)
        monday = day - timedelta(days=day.weekday())
        sunday = monday + timedelta(days=6)
        return cls(to_utc(monday, START_OF_DAY, tz), to_utc(sunday, END_OF_DAY, tz))

    @classmethod
    def current_week(cls, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Interval:
        tz = _resolve_tz(tz)
        return cls.week(local_today(tz, now), tz)

    @classmethod
    def last_week(cls, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Interval:
        tz = _resolve_tz(tz)
        return cls.week(local_today(tz, now) - timedelta(days=7), tz)

    @classmethod
    def month(cls, day: date, tz: Optional[tzinfo] = None) -> Interval:
        """Interval from the first to the last day of the month containing `day`."""
        tz = _resolve_tz(tz)
        day = _as_local_date(day, tz)
        first = day.replace(day=1)
        last = day.replace(day=calendar.monthrange(day.year, day.month)[1])
        return cls(to_utc(first, START_OF_DAY, tz), to_utc(last, END_OF_DAY, tz))

    @classmethod
    def current_month(cls, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Interval:
        tz = _resolve_tz(tz)
        return cls.month(local_today(tz, now), tz)

    @classmethod
    def last_month(cls, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> Interval:
        tz = _resolve_tz(tz)
        first_of_month = local_today(tz, now).replace(day=1)
        return cls.month(first_of_month - timedelta(days=1), tz)

    @classmethod
    def from_period(
        cls,
        period: str,
        tz: Optional[tzinfo] = None,
        now: Optional[datetime] = None,
    ) -> Interval:
        """
        Resolve a named period relative to the current local date.

        Raises:
            ParseError: If `period` is not one of PERIODS
        """
        factories = {
            "today": cls.today,
            "yesterday": cls.yesterday,
            "week": cls.current_week,
            "lastweek": cls.last_week,
            "month": cls.current_month,
            "lastmonth": cls.last_month,
        }
        factory = factories.get(period)
        if factory is None:
            raise ParseError(
                f"Unknown period '{period}': expected one of {', '.join(PERIODS)}",
                text=period,
            )
        return factory(tz=tz, now=now)

    # ---- Text constructor ----
    @classmethod
    def parse(
        cls,
        text: str,
        tz: Optional[tzinfo] = None,
        now: Optional[datetime] = None,
    ) -> Interval:
        """
        Parse a standalone range.

        Accepted forms, tried in order:
            <datetime> - <datetime>
            <datetime>
            :<period>

        The whole text must be consumed. An open interval must start at
        least one second before `now`.

        Raises:
            ParseError: If the text does not match any form
            ValidationError: If an open interval does not start in the past
        """
        from timewdb.utils.parsers import parse_range

        current = now if now is not None else utc_now()
        interval, rest = parse_range(text, tz=tz, now=current)
        if rest:
            raise ParseError(f"Cannot parse range '{text}'", text=text)

        if interval.is_open and current - interval.start < MIN_DURATION:
            raise ValidationError(
                f"Open interval must start at least 1s before now: '{text}'"
            )

        return interval

    # ---- Queries ----
    @property
    def is_open(self) -> bool:
        return self.end is None

    def _end_or_now(self, now: Optional[datetime]) -> datetime:
        if self.end is not None:
            return self.end
        return _normalize(now, "now") if now is not None else utc_now()

    def duration(self, now: Optional[datetime] = None) -> timedelta:
        """Length of the interval; open intervals run until `now`."""
        return self._end_or_now(now) - self.start

    def days(self, now: Optional[datetime] = None) -> List[datetime]:
        """
        Every instant `start + k days` up to and including the end (or `now`).

        The start is always included, even for an open interval that
        starts after `now`.
        """
        end = self._end_or_now(now)
        days: List[datetime] = [self.start]
        current = self.start + timedelta(days=1)
        while current <= end:
            days.append(current)
            current += timedelta(days=1)
        return days

    def intersection(self, other: Interval) -> Optional[Interval]:
        """
        Return the overlap with another interval, if any.

        Open bounds are treated as unbounded. Intervals sharing only a
        boundary instant do not intersect, since the result would be
        shorter than one second.
        """
        start = max(self.start, other.start)

        if self.end is None and other.end is None:
            end = None
        elif self.end is None:
            end = other.end
        elif other.end is None:
            end = self.end
        else:
            if other.start > self.end or self.start > other.end:
                return None
            end = min(self.end, other.end)

        try:
            return Interval(start, end)
        except ValidationError:
            return None

    # ---- Splitting ----
    def split_at(
        self,
        instant: datetime,
        now: Optional[datetime] = None,
    ) -> Tuple[Interval, Interval]:
        """
        Split into [start, instant] and [instant, end].

        The second half of an open interval stays open.

        Raises:
            ValidationError: If `instant` lies outside the interval or a
                half would be shorter than one second
        """
        instant = _normalize(instant, "instant")
        end = self._end_or_now(now)

        if not self.start <= instant <= end:
            raise ValidationError(
                f"Cannot split at {format_datetime(instant)}: outside of "
                f"{format_datetime(self.start)} - {format_datetime(end)}"
            )

        first = Interval(self.start, self.start + (instant - self.start))
        second = Interval(end - (end - instant), self.end)
        return first, second

    def split(self, now: Optional[datetime] = None) -> Tuple[Interval, Interval]:
        """Split in the middle."""
        end = self._end_or_now(now)
        return self.split_at(self.start + (end - self.start) / 2, now=end)

    # ---- Serialization ----
    def to_text(self) -> str:
        """Render in the database literal form."""
        if self.end is None:
            return format_datetime(self.start)
        return f"{format_datetime(self.start)} - {format_datetime(self.end)}"

    def format(self, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> str:
        """Render in local time: '<start> - <end|...> [HH:MM:SS]'."""
        tz = _resolve_tz(tz)
        start = self.start.astimezone(tz).isoformat(sep=" ", timespec="seconds")
        if self.end is None:
            end = "..."
        else:
            end = self.end.astimezone(tz).isoformat(sep=" ", timespec="seconds")
        return f"{start} - {end} [{pretty_duration(self.duration(now))}]"

    def __str__(self) -> str:
        return self.format()
