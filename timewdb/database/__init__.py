#!/usr/bin/env python3
"""
timewdb Database Package
------------------------
Read access to a timewarrior database directory.

The database is a directory of monthly YYYY-MM.data files; this package
loads them into an ordered, id-numbered Work collection.
"""

from .work import Work, load_all, load_range, load_entries_from_file
from timewdb.core.exceptions import DatabaseError, EntryParseError

__all__ = [
    # Loader
    "Work",
    "load_all",
    "load_range",
    "load_entries_from_file",
    # Exceptions
    "DatabaseError",
    "EntryParseError",
]
