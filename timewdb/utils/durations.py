#!/usr/bin/env python3
"""
durations.py
-------------------
Duration formatting helpers.

Functions:
    pretty_duration: Render a timedelta as HH:MM:SS

Usage:
    from timewdb.utils.durations import pretty_duration

    pretty_duration(timedelta(minutes=45))  # "00:45:00"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import timedelta


def pretty_duration(duration: timedelta) -> str:
    """
    Render a duration as HH:MM:SS.

    Hours are not wrapped at 24, so long totals stay readable.
    Sub-second precision is truncated.

    Examples:
        >>> pretty_duration(timedelta(hours=1, minutes=2, seconds=3))
        '01:02:03'
        >>> pretty_duration(timedelta(days=2))
        '48:00:00'
        >>> pretty_duration(timedelta(seconds=-90))
        '-00:01:30'
    """
    seconds = int(duration.total_seconds())
    sign = "-" if seconds < 0 else ""
    h, rem = divmod(abs(seconds), 3600)
    m, s = divmod(rem, 60)
    return f"{sign}{h:02d}:{m:02d}:{s:02d}"
