#!/usr/bin/env python3
"""
time_entry.py
-------------------

Defines the TimeEntry dataclass representing a single line of a timewarrior
data file:

    inc 20220101T120000Z - 20220101T124500Z # tag1 "tag 2" tag3

Each TimeEntry instance contains:
- the tracked interval (open while the entry is still running)
- the tags, in the order they appear on the line
- a display id, assigned by the loader

Display ids are not stored in the database. They count up from 1 starting
at the most recent entry and are recomputed on every load.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import json
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Optional, Tuple

# ---- Local imports ----
from timewdb.core.exceptions import EntryParseError, ParseError, ValidationError
from timewdb.dataclasses.interval import Interval, local_timezone
from timewdb.utils import parsers


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Constants -----
UNASSIGNED_ID = 0
"""Display id of an entry that has not been through the loader."""


# ----- Dataclass -----
@dataclass
class TimeEntry:
    """
    Represents a single tracked time entry.

    Attributes:
        interval (Interval): Tracked time span.
        tags (Tuple[str, ...]): Tags in source order, duplicates kept.
        display_id (int): Position in the loaded collection (1 = most recent).
            Not part of the entry's identity.
    """

    # ---- Attributes ----
    interval: Interval
    tags: Tuple[str, ...] = ()
    display_id: int = field(default=UNASSIGNED_ID, compare=False)

    def __post_init__(self) -> None:
        self.tags = tuple(self.tags)

    # ---- Public constructors ----
    @classmethod
    def from_line(
        cls,
        line: str,
        tz: Optional[tzinfo] = None,
        now: Optional[datetime] = None,
    ) -> TimeEntry:
        """
        Parse one data file line.

        Args:
            line: Line content without the trailing newline
            tz: Local zone for named-period ranges
            now: Reference time for named-period ranges

        Raises:
            EntryParseError: If the line does not follow the entry grammar
        """
        try:
            interval, tags = parsers.parse_entry(line, tz=tz, now=now)
        except (ParseError, ValidationError) as e:
            logger.debug(f"Rejected line {line!r}: {e}")
            raise EntryParseError(f'Cannot parse "{line}"', text=line) from e

        return cls(interval=interval, tags=tuple(tags))

    # ---- Queries ----
    def day(self, tz: Optional[tzinfo] = None) -> date:
        """Local calendar date on which the entry started."""
        tz = tz if tz is not None else local_timezone()
        return self.interval.start.astimezone(tz).date()

    @property
    def is_open(self) -> bool:
        return self.interval.is_open

    # ---- Serialization ----
    def format(self, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> str:
        """Render as '<interval>: ["tag", ...]'."""
        tags = json.dumps(list(self.tags), ensure_ascii=False)
        return f"{self.interval.format(tz=tz, now=now)}: {tags}"

    def __str__(self) -> str:
        return self.format()
