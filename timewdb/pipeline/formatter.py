#!/usr/bin/env python3
"""
formatter.py
-------------------
Shape loaded entries for display.

Only the raw view exists: the entries of an optional range, as stored.
Summaries by day/week/month and tag totals are not implemented.

Programmatic API:
    from timewdb.dataclasses.interval import Interval
    from timewdb.pipeline.formatter import raw
    from timewdb.utils.durations import pretty_duration

    work = raw(Interval.today())
    print(pretty_duration(work.duration()))
    for entry in work.entries:
        print(entry)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Local imports ---
from timewdb.core.logging_manager import TimewLogger
from timewdb.core.paths import default_data_dir
from timewdb.dataclasses.interval import Interval
from timewdb.database.work import Work, load_range


def raw(
    interval: Optional[Interval] = None,
    data_dir: Optional[Path] = None,
    logger: Optional[TimewLogger] = None,
) -> Work:
    """
    Get the raw entries for the given range.

    If no range is given the whole database is loaded. Without `data_dir`
    the default database location is used ($TIMEWARRIORDB/data, or
    ~/.timewarrior/data).

    Raises:
        DatabaseError: If the database cannot be read
        EntryParseError: If a data file contains a malformed line
    """
    if data_dir is None:
        data_dir = default_data_dir()
    return load_range(Path(data_dir), interval, logger)
