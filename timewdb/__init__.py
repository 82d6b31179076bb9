"""
timewdb
=======

Read-only access to a timewarrior time-tracking database.

timewarrior stores its entries as append-only monthly flat files
(`YYYY-MM.data`), one interval plus tags per line. This package parses
those lines, orders them and numbers them the way `timew` does, and
offers the interval algebra needed to query them.

Main Components:
    - dataclasses: Interval (time span algebra) and TimeEntry
    - utils: Data file grammar, file discovery, duration formatting
    - database: Work collection and the load_all/load_range loaders
    - pipeline: raw() convenience and the command-line interface
    - core: Exceptions, logging, default paths

Example Usage:
    >>> from pathlib import Path
    >>> from timewdb import Interval, load_range
    >>> work = load_range(Path.home() / ".timewarrior" / "data", Interval.current_week())
    >>> for entry in work.entries:
    ...     print(entry.display_id, entry)

License: MIT
"""

__version__ = "0.1.0"

# Expose primary interfaces for convenience
from timewdb.dataclasses.interval import Interval
from timewdb.dataclasses.time_entry import TimeEntry
from timewdb.database.work import Work, load_all, load_range

__all__ = [
    "Interval",
    "TimeEntry",
    "Work",
    "load_all",
    "load_range",
]
