#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for timewdb.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions while reading a timewarrior database.

Exception Hierarchy:
    Exception (built-in)
    ├── ValidationError - Interval invariant violations
    │   └── AmbiguousLocalTimeError - Local wall-clock time with no unique UTC instant
    ├── ParseError - Text that does not match the range/entry grammar
    │   └── EntryParseError - A data file line that cannot be parsed
    └── DatabaseError - Data directory or data file cannot be read

Usage:
    from timewdb.core.exceptions import DatabaseError, EntryParseError

    try:
        work = load_all(data_dir)
    except EntryParseError as e:
        logger.error(f"Malformed entry: {e}")
    except DatabaseError as e:
        logger.error(f"Cannot read database: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional


class ValidationError(Exception):
    """
    Exception for interval validation failures.

    Raised when an interval cannot be built from the given bounds:
    - End is less than one second after the start
    - Naive (timezone-less) datetimes
    - Split points outside of the interval
    - Open intervals starting in the future

    Examples:
        >>> raise ValidationError("Interval is invalid: start must be at least 1s before end")
        >>> raise ValidationError("Datetime must be timezone-aware")
    """

    pass


class AmbiguousLocalTimeError(ValidationError):
    """
    Exception for local times without a single UTC equivalent.

    Raised by the calendar helpers (day, week, month) when a local
    wall-clock bound falls into a daylight saving time transition:
    - Gap: the local time never happens (zero mappings)
    - Fold: the local time happens twice (two mappings)

    No candidate is picked on the caller's behalf.

    Examples:
        >>> raise AmbiguousLocalTimeError("Cannot determine start of 2024-09-08 in America/Santiago")
    """

    pass


class ParseError(Exception):
    """
    Exception for range and entry grammar failures.

    Raised when text does not follow the database grammar:
    - Malformed or invalid YYYYMMDDThhmmssZ timestamps
    - Unknown or empty period keywords
    - Unconsumed trailing input

    Attributes:
        text: The literal text that failed to parse

    Examples:
        >>> raise ParseError("Cannot parse range", text="2022-01-01")
    """

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.text = text


class EntryParseError(ParseError):
    """
    Exception for data file lines that cannot be parsed.

    Raised while loading a database when a line is not a valid entry:
    - Missing "inc " prefix
    - Missing " # " tag separator
    - Invalid range
    - Unterminated quoted tag

    One malformed line aborts the whole load.

    Attributes:
        text: Content of the offending line
        path: Data file containing the line (if known)
        line_number: 1-based line number in that file (if known)

    Examples:
        >>> raise EntryParseError('Cannot parse "inc 2022 # x"', text="inc 2022 # x")
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        path: Optional[Path] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message, text=text)
        self.path = path
        self.line_number = line_number


class DatabaseError(Exception):
    """
    Exception for database read failures.

    Raised when the timewarrior data directory or one of its monthly
    data files cannot be read:
    - Directory not found or not a directory
    - Permission issues
    - Encoding issues

    Examples:
        >>> raise DatabaseError("Cannot read data directory: /home/me/.timewarrior/data")
        >>> raise DatabaseError("Cannot read data file: 2022-07.data")
    """

    pass
