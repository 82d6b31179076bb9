"""
dataclasses package
-------------------
Dataclass definitions for timewarrior data.

This package provides:
- Interval: A time span with an optional (open) end and its algebra
- TimeEntry: One parsed data file line (interval + tags + display id)
"""
from timewdb.dataclasses.interval import Interval
from timewdb.dataclasses.time_entry import TimeEntry

__all__ = ["Interval", "TimeEntry"]
