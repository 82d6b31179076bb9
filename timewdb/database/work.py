#!/usr/bin/env python3
"""
work.py
-------------------
Load a timewarrior database into an ordered collection of time entries.

A database is a directory of monthly data files, one entry per line:

    data/
    ├── 2022-06.data
    │     inc 20220601T080000Z - 20220601T120000Z # work
    └── 2022-07.data
          inc 20220701T080000Z # work "code review"

Loading is fail-fast: an unreadable file or a single malformed line aborts
the load and nothing is returned. Entries are ordered most recent first and
numbered from 1 in that order. Filtering by a range happens after numbering,
so filtered entries keep the id they have in the full database.

Programmatic API:
    from timewdb.database.work import load_all, load_range
    work = load_all(data_dir)
    work = load_range(data_dir, Interval.current_week(), logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timedelta, tzinfo
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

# --- Local imports ---
from timewdb.core.exceptions import DatabaseError, EntryParseError
from timewdb.core.logging_manager import TimewLogger, safe_logger
from timewdb.dataclasses.interval import Interval, utc_now
from timewdb.dataclasses.time_entry import TimeEntry
from timewdb.utils.fs import find_data_files


class Work:
    """
    The entries of a database, most recent first.

    Attributes:
        entries: Read-only view of the loaded entries
    """

    def __init__(self, entries: Iterable[TimeEntry]) -> None:
        self._entries: Tuple[TimeEntry, ...] = tuple(entries)

    @property
    def entries(self) -> Tuple[TimeEntry, ...]:
        return self._entries

    def duration(self, now: Optional[datetime] = None) -> timedelta:
        """
        Total tracked time; open entries count until `now`.

        An open entry starting after `now` adds nothing to the total.
        """
        now = now if now is not None else utc_now()
        return sum(
            (max(entry.interval.duration(now), timedelta()) for entry in self._entries),
            timedelta(),
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TimeEntry]:
        return iter(self._entries)

    def __str__(self) -> str:
        return f"{len(self._entries)} entries loaded"


# --- Loading ---
def load_entries_from_file(
    path: Path,
    tz: Optional[tzinfo] = None,
    now: Optional[datetime] = None,
) -> List[TimeEntry]:
    """
    Parse every non-blank line of a data file.

    Args:
        path: Monthly data file
        tz: Local zone for named-period ranges
        now: Reference time for named-period ranges

    Returns:
        Entries in file order, ids unassigned

    Raises:
        DatabaseError: If the file cannot be read or decoded
        EntryParseError: On the first malformed line
    """
    entries: List[TimeEntry] = []

    try:
        with path.open("r", encoding="utf-8") as handle:
            for line_number, raw_line in enumerate(handle, start=1):
                line = raw_line.rstrip("\r\n")
                if not line.strip():
                    continue

                try:
                    entries.append(TimeEntry.from_line(line, tz=tz, now=now))
                except EntryParseError as e:
                    raise EntryParseError(
                        f'{path.name}:{line_number}: Cannot parse "{line}"',
                        text=line,
                        path=path,
                        line_number=line_number,
                    ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DatabaseError(f"Cannot read data file: {path} ({e})") from e

    return entries


def load_range(
    data_dir: Path,
    interval: Optional[Interval] = None,
    logger: Optional[TimewLogger] = None,
) -> Work:
    """
    Load a database, optionally keeping only entries overlapping `interval`.

    Processing Flow:
    1. Finds YYYY-MM.data files in `data_dir` (other files are ignored)
    2. Parses every non-blank line of every file
    3. Sorts entries by start, most recent first
    4. Assigns display ids 1..N in that order
    5. Drops entries that do not intersect `interval` (ids are kept)

    Args:
        data_dir: timewarrior data directory
        interval: Optional filter range
        logger: Optional logger for operation tracking

    Returns:
        Work with the retained entries

    Raises:
        DatabaseError: If the directory or a data file cannot be read
        EntryParseError: If any line is malformed
    """
    data_dir = Path(data_dir)
    log = safe_logger(logger)

    log.log_operation(
        "load_range_start",
        {
            "data_dir": str(data_dir),
            "range": interval.to_text() if interval is not None else None,
        },
    )

    try:
        files = find_data_files(data_dir)
        entries: List[TimeEntry] = []
        for path in files:
            file_entries = load_entries_from_file(path)
            log.log_info("Loaded data file", {"file": path.name, "entries": len(file_entries)})
            entries.extend(file_entries)
    except (DatabaseError, EntryParseError) as e:
        log.log_error(e, {"operation": "load_range", "data_dir": str(data_dir)})
        raise

    now = utc_now()
    for entry in entries:
        if entry.is_open and entry.interval.start > now:
            log.log_warning(
                "Open entry starts in the future",
                {"start": entry.interval.to_text(), "tags": list(entry.tags)},
            )

    entries.sort(key=lambda entry: entry.interval.start, reverse=True)
    for display_id, entry in enumerate(entries, start=1):
        entry.display_id = display_id

    total = len(entries)
    if interval is not None:
        entries = [e for e in entries if e.interval.intersection(interval) is not None]

    log.log_operation(
        "load_range_complete",
        {"files": len(files), "entries": total, "retained": len(entries)},
    )

    return Work(entries)


def load_all(data_dir: Path, logger: Optional[TimewLogger] = None) -> Work:
    """Load every entry of the database at `data_dir`."""
    return load_range(data_dir, None, logger)
