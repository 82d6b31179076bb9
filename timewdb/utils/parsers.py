#!/usr/bin/env python3
"""
parsers.py
--------------------
Parsing utilities for the timewarrior data file grammar.

Each parser takes the remaining input and returns a `(value, rest)` pair,
so parsers compose by feeding `rest` into the next one. Alternatives are
tried in order and backtrack on failure.

Grammar:
    entry    := "inc " range " # " tags
    range    := datetime " - " datetime | datetime | ":" period
    datetime := YYYYMMDDThhmmssZ
    tags     := (tag (" " tag)*)?
    tag      := '"' [^"]+ '"' | [^ "]+

Functions:
    parse_datetime: Parse one YYYYMMDDThhmmssZ timestamp
    parse_range: Parse a closed, open or named-period range
    parse_tags: Parse space-separated, optionally quoted tags
    parse_entry: Parse a full "inc ..." line
    format_datetime: Render an instant as YYYYMMDDThhmmssZ

Usage:
    from timewdb.utils.parsers import parse_entry

    interval, tags = parse_entry('inc 20220101T120000Z # work "deep focus"')
    # tags == ["work", "deep focus"]
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import datetime, timezone, tzinfo
from typing import Callable, List, Optional, Tuple

# --- Local imports ---
from timewdb.core.exceptions import ParseError, ValidationError
from timewdb.dataclasses.interval import DATETIME_FORMAT, Interval, format_datetime


# ----- Constants -----
ENTRY_PREFIX = "inc "
RANGE_SEPARATOR = " - "
TAGS_SEPARATOR = " # "
TAG_SEPARATOR = " "
PERIOD_MARKER = ":"

_TOKEN = re.compile(r"[^ ]+")
_DATETIME = re.compile(r"[0-9]{8}T[0-9]{6}Z")
_PERIOD = re.compile(r"[A-Za-z0-9]*")
_QUOTED_TAG = re.compile(r'"([^"]+)"')
_BARE_TAG = re.compile(r'[^ "]+')

RangeParser = Callable[[str, Optional[tzinfo], Optional[datetime]], Tuple[Interval, str]]

__all__ = [
    "DATETIME_FORMAT",
    "format_datetime",
    "parse_datetime",
    "parse_range",
    "parse_tags",
    "parse_entry",
]


def _expect(text: str, literal: str) -> str:
    """Consume `literal` at the start of `text` and return the rest."""
    if not text.startswith(literal):
        raise ParseError(f"Expected '{literal}' at '{text}'", text=text)
    return text[len(literal):]


def parse_datetime(text: str) -> Tuple[datetime, str]:
    """
    Parse a timestamp at the start of `text`.

    The timestamp runs up to the next space and must be exactly
    YYYYMMDDThhmmssZ with a valid calendar date and time.

    Examples:
        >>> parse_datetime("20220711T133312Z - 20220711T140000Z")
        (datetime(2022, 7, 11, 13, 33, 12, tzinfo=timezone.utc), ' - 20220711T140000Z')

    Raises:
        ParseError: If the token is missing, malformed or not a real date
    """
    match = _TOKEN.match(text)
    if match is None:
        raise ParseError(f"Expected a datetime at '{text}'", text=text)

    token = match.group(0)
    if not _DATETIME.fullmatch(token):
        raise ParseError(f"Invalid datetime '{token}': expected YYYYMMDDThhmmssZ", text=token)

    try:
        value = datetime.strptime(token, DATETIME_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as e:
        raise ParseError(f"Invalid datetime '{token}': {e}", text=token) from e

    return value, text[match.end():]


# ---- Range alternatives ----
def _closed_range(
    text: str, tz: Optional[tzinfo], now: Optional[datetime]
) -> Tuple[Interval, str]:
    start, rest = parse_datetime(text)
    rest = _expect(rest, RANGE_SEPARATOR)
    end, rest = parse_datetime(rest)
    return Interval(start, end), rest


def _open_range(
    text: str, tz: Optional[tzinfo], now: Optional[datetime]
) -> Tuple[Interval, str]:
    start, rest = parse_datetime(text)
    return Interval(start), rest


def _named_period(
    text: str, tz: Optional[tzinfo], now: Optional[datetime]
) -> Tuple[Interval, str]:
    rest = _expect(text, PERIOD_MARKER)
    match = _PERIOD.match(rest)
    period = match.group(0) if match else ""
    return Interval.from_period(period, tz=tz, now=now), rest[len(period):]


RANGE_ALTERNATIVES: Tuple[RangeParser, ...] = (_closed_range, _open_range, _named_period)


def parse_range(
    text: str,
    tz: Optional[tzinfo] = None,
    now: Optional[datetime] = None,
) -> Tuple[Interval, str]:
    """
    Parse a range at the start of `text`.

    Tries, in order, "<datetime> - <datetime>", "<datetime>" and
    ":<period>". A branch that fails to parse or yields an invalid
    interval falls through to the next one, so "B - A" with B after A
    parses as the open range "B" followed by unconsumed input.

    Args:
        text: Input starting with a range
        tz: Local zone for named periods
        now: Reference time for named periods

    Returns:
        Tuple of (interval, unconsumed input)

    Raises:
        ParseError: If no alternative matches
    """
    last_error: Optional[Exception] = None
    for alternative in RANGE_ALTERNATIVES:
        try:
            return alternative(text, tz, now)
        except (ParseError, ValidationError) as e:
            last_error = e

    raise ParseError(f"Cannot parse range '{text}'", text=text) from last_error


# ---- Tags ----
def _match_tag(text: str) -> Optional[Tuple[str, str]]:
    quoted = _QUOTED_TAG.match(text)
    if quoted:
        return quoted.group(1), text[quoted.end():]

    bare = _BARE_TAG.match(text)
    if bare:
        return bare.group(0), text[bare.end():]

    return None


def parse_tags(text: str) -> Tuple[List[str], str]:
    """
    Parse space-separated tags.

    Quoted tags keep their inner spaces verbatim. Order and duplicates are
    preserved. Parsing stops at the first position that is not a tag; the
    remaining input is returned to the caller.

    Examples:
        >>> parse_tags('tag1 "tag 2" tag3')
        (['tag1', 'tag 2', 'tag3'], '')
        >>> parse_tags('')
        ([], '')
    """
    tags: List[str] = []

    matched = _match_tag(text)
    if matched is None:
        return tags, text

    tag, rest = matched
    tags.append(tag)

    while rest.startswith(TAG_SEPARATOR):
        matched = _match_tag(rest[len(TAG_SEPARATOR):])
        if matched is None:
            break
        tag, rest = matched
        tags.append(tag)

    return tags, rest


# ---- Entry ----
def parse_entry(
    line: str,
    tz: Optional[tzinfo] = None,
    now: Optional[datetime] = None,
) -> Tuple[Interval, List[str]]:
    """
    Parse a complete data file line.

    Examples:
        >>> interval, tags = parse_entry("inc 20220101T120000Z - 20220101T124500Z # a b")
        >>> tags
        ['a', 'b']

    Raises:
        ParseError: On any deviation from the grammar, including trailing input
    """
    rest = _expect(line, ENTRY_PREFIX)
    interval, rest = parse_range(rest, tz=tz, now=now)
    rest = _expect(rest, TAGS_SEPARATOR)
    tags, rest = parse_tags(rest)

    if rest:
        raise ParseError(f"Unexpected trailing input '{rest}'", text=rest)

    return interval, tags
